"""Errors for the HTTP status codes returned by the Asana API."""

from __future__ import annotations

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import TYPE_CHECKING

from asana_resources.errors.meta import AsanaAPIError

if TYPE_CHECKING:
    import requests


def parse_retry_after(value: str | None) -> float | None:
    """Returns the seconds to wait from a ``Retry-After`` header value.

    The value is either a number of seconds or an HTTP-date, a date in the past gives 0.
    None is returned for a missing or unreadable value.
    """
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        pass
    try:
        retry_at = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if retry_at.tzinfo is None:
        # "-0000" dates are UTC without a zone
        retry_at = retry_at.replace(tzinfo=timezone.utc)
    return max(0.0, (retry_at - datetime.now(timezone.utc)).total_seconds())


class InvalidRequestError(AsanaAPIError):
    """Raised for 400 responses, e.g. a missing or malformed parameter."""

    message = "The request was invalid."


class NotAuthorizedError(AsanaAPIError):
    """Raised for 401 responses, the token is missing, expired or revoked."""

    message = "A valid authentication token was not provided with the request."


class PaymentRequiredError(AsanaAPIError):
    """Raised for 402 responses, the feature is only available to premium organizations."""

    message = "The requested feature requires a premium account."


class ForbiddenError(AsanaAPIError):
    """Raised for 403 responses."""

    message = "The authorized user does not have access to this resource."


class NotFoundError(AsanaAPIError):
    """Raised for 404 responses."""

    message = "The requested resource was not found."


class RateLimitEnforcedError(AsanaAPIError):
    """Raised for 429 responses.

    :py:attr:`retry_after` holds the seconds the server asked to wait, if it sent a ``Retry-After`` header.
    """

    message = "The rate limit was exceeded."

    def __init__(self, response: requests.Response | None = None, info: str | None = None, **kwargs) -> None:
        self.retry_after = parse_retry_after(response.headers.get("Retry-After") if response is not None else None)
        super().__init__(response=response, info=info, **kwargs)


class ServerError(AsanaAPIError):
    """Raised for 5xx responses."""

    message = "The Asana API had an internal error."


class MalformedResponseError(AsanaAPIError):
    """The response body could not be unwrapped into the expected shape."""

    message = "The response body could not be parsed."
