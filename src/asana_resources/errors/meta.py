"""Base classes for all asana-resources exceptions/errors."""

from __future__ import annotations

import shutil
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import requests


class AsanaResourcesError(Exception):
    """Base class for every error raised by asana-resources.

    Catch all asana_resources errors:

    .. code-block:: python

        try:
            section.update(name="Done")  # raise NotFoundError or any other
        except AsanaResourcesError:
            print("Some asana_resources error")

    """


class AsanaAPIError(AsanaResourcesError):
    """Parent class for all errors returned by the Asana API.

    All "child" errors can be caught with this parent class e.g.:

    .. code-block:: python

        try:
            Section.find_by_id(ctx.api, "1234")  # could raise NotFoundError or ForbiddenError
        except AsanaAPIError as e:
            print(e.status_code, e.errors)

    """

    message = "Details about the Asana API error:\n"

    def __init__(self, response: requests.Response | None = None, info: str | None = None, **kwargs) -> None:
        """Initialize an Asana API error.

        Args:
            response: requests Response where the API error occured
            info: add additional information to this error
            kwargs: error specific parameters which may contain more information about the error
        """
        self.response = response
        self.kwargs = kwargs
        self.info = info
        if api_message := self.kwargs.get("message"):
            # don't show in the list of parameters anymore
            # otherwise this message will be shown twice
            self.message = api_message
            del self.kwargs["message"]
        term_size = shutil.get_terminal_size().columns
        msg = self.message
        if self.info:
            msg += f"\n{self.info}\n"
        else:
            msg += "\n"
        request_sep = "-" * int((term_size - 7) / 2)
        msg += request_sep + "REQUEST" + request_sep + "\n"
        if self.response is not None and self.response.request is not None:
            if self.response.request.method:
                msg += "METHOD = " + self.response.request.method + "\n"
            msg += "ENDPOINT = " + self.response.request.path_url + "\n"

        if len(self.kwargs) > 0:
            param_sep = "-" * int((term_size - 10) / 2)
            msg += param_sep + "PARAMETERS" + param_sep + "\n"
            for k, v in self.kwargs.items():
                msg += str(k) + " = " + str(v) + "\n"

        response_sep = "-" * int((term_size - 8) / 2)
        msg += response_sep + "RESPONSE" + response_sep + "\n"

        for error_message in self.errors:
            msg += f"ERROR = {error_message}\n"

        if self.response is not None:
            msg += f"STATUS = {self.response.status_code}\n"

        super().__init__(msg)

    @property
    def status_code(self) -> int | None:
        """The HTTP status code of the response, if there was one."""
        return self.response.status_code if self.response is not None else None

    @property
    def errors(self) -> list[str]:
        """The error messages sent by the server in the ``errors`` array."""
        return self.kwargs.get("errors") or []

    def __dir__(self):
        yield from super().__dir__()
        yield from self.kwargs.keys()

    def __getattr__(self, name: str):
        if name == "kwargs":
            raise AttributeError(name)
        return self.kwargs.get(name) or super().__getattribute__(name)
