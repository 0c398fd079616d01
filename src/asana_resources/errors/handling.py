"""Error handling configuration for AsanaAPIErrors."""

from __future__ import annotations

from typing import Literal

import requests

from asana_resources.errors.api import (
    ForbiddenError,
    InvalidRequestError,
    NotAuthorizedError,
    NotFoundError,
    PaymentRequiredError,
    RateLimitEnforcedError,
    ServerError,
)
from asana_resources.errors.meta import AsanaAPIError

DEFAULT_ERROR_MAPPING: dict[int, type[AsanaAPIError]] = {
    400: InvalidRequestError,
    401: NotAuthorizedError,
    402: PaymentRequiredError,
    403: ForbiddenError,
    404: NotFoundError,
    429: RateLimitEnforcedError,
}
"""This mapping maps the HTTP status codes returned by the API to the asana-resources classes."""


class ErrorHandlingConfig:
    """Configuration for Asana API error handling."""

    def __init__(
        self,
        api_error_mapping: dict[int, type[AsanaAPIError]] | type[AsanaAPIError] | None = None,
        info: str | None = None,
        **kwargs,
    ):
        """Configuration for Asana API error handling.

        Args:
            api_error_mapping: Either a dictionary which maps status codes to python Exception classes,
                or just a python exception class to use it for every HTTP Error.
                Status codes that are not above 400, which do not raise an HTTP Error, will be raised too
                if they are present in the dictionary
            info: additionial information about the error, passed to the constructor of the Exception
            kwargs: will be passed to the constructor of the Exception
        """
        self.api_error_mapping = api_error_mapping
        self.kwargs = kwargs
        self.info = info

    @staticmethod
    def _error_messages(response: requests.Response) -> list[str]:
        try:
            error_response = response.json()
        except requests.exceptions.JSONDecodeError:
            return []
        if not isinstance(error_response, dict) or not isinstance(errors := error_response.get("errors"), list):
            return []
        return [e.get("message", str(e)) if isinstance(e, dict) else str(e) for e in errors]

    def get_exception_class(self, response: requests.Response) -> type[AsanaAPIError] | None:
        """Returns the python exception class for the response."""
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError:
            if self.api_error_mapping is not None:
                if isinstance(self.api_error_mapping, dict):
                    if status_exception := self.api_error_mapping.get(response.status_code):
                        return status_exception
                else:
                    return self.api_error_mapping
            if exc := DEFAULT_ERROR_MAPPING.get(response.status_code):
                return exc
            if response.status_code >= 500:  # noqa: PLR2004
                return ServerError
            return AsanaAPIError
        else:
            if isinstance(self.api_error_mapping, dict) and (exc := self.api_error_mapping.get(response.status_code)):
                return exc
        return None

    def get_exception(self, response: requests.Response) -> AsanaAPIError | None:
        """Returns exception determined by :py:meth:`ErrorHandlingConfig.get_exception_class` filled out with the response and kwargs."""  # noqa: E501
        if exc := self.get_exception_class(response):
            # self.kwargs stays the same for every response
            kwargs = dict(self.kwargs)
            if errors := self._error_messages(response):
                kwargs["errors"] = errors
            return exc(response=response, info=self.info, **kwargs)
        return None


def raise_asana_api_error(
    response: requests.Response,
    error_handling: ErrorHandlingConfig | Literal[False] | None = None,
):
    """Raise an Asana API error through the ErrorHandlingConfig.

    Convenience function around ErrorHandlingConfig.get_exception.
    """
    if error_handling is not False and (exc := (error_handling or ErrorHandlingConfig()).get_exception(response)):
        raise exc
