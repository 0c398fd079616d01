"""HTTP session used by the context and the API client."""

from __future__ import annotations

import functools
import logging
import numbers
import os
import time
from pathlib import Path
from typing import TYPE_CHECKING, Any

import requests

if TYPE_CHECKING:
    from collections.abc import Callable
    from os import PathLike

    from requests import Response


DEFAULT_TIMEOUT = (60, None)
"""(connect timeout, read timeout) used when a request does not set one."""
CONNECTION_RETRIES = 3
LOGGER = logging.getLogger(__name__)


def retry(times: int, exceptions: type[Exception] | tuple[type[Exception], ...]) -> Callable:
    """Retries the decorated function `times` times if one of ``exceptions`` is raised.

    The last attempt is made outside of the loop, so its exception reaches the caller.

    Args:
        times: how often the call is retried
        exceptions: the exception class(es) that trigger a retry
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def newfn(*args, **kwargs) -> Any:  # noqa: ANN401
            for attempt in range(times):
                try:
                    return func(*args, **kwargs)
                except exceptions:  # noqa: PERF203
                    LOGGER.debug("Exception thrown when attempting to run %s, attempt %d of %d", func, attempt, times)
                    time.sleep(0.1)
            return func(*args, **kwargs)

        return newfn

    return decorator


class ContextHTTPClient(requests.Session):
    """Requests Session with config and authentication applied."""

    def __init__(self, debug: bool = False, requests_ca_bundle: PathLike[str] | str | None = None) -> None:
        self.debug = debug
        super().__init__()
        if requests_ca_bundle is not None and Path(requests_ca_bundle).is_file():
            self.verify = os.fspath(requests_ca_bundle)

        self._counter = 0

    @retry(times=CONNECTION_RETRIES, exceptions=requests.exceptions.ConnectionError)
    def request(self, method: str | bytes, url: str | bytes, *args, timeout: Any = None, **kwargs) -> Response:  # noqa: ANN401
        """Make an HTTP request, see :py:meth:`requests.Session.request` for the arguments.

        A number as ``timeout`` is used as the read timeout, the connect timeout is always set.
        Connection errors are retried :py:data:`CONNECTION_RETRIES` times.
        """
        if self.debug:
            self._counter = count = self._counter + 1
            LOGGER.debug("(r%d) Making %s request to %s", count, method, url)

        if isinstance(timeout, numbers.Number):
            # add default connect timeout if timeout is a number
            timeout = (DEFAULT_TIMEOUT[0], timeout)
        elif timeout is None:
            timeout = DEFAULT_TIMEOUT

        response = super().request(method, url, *args, timeout=timeout, **kwargs)
        if self.debug:
            LOGGER.debug(
                "(r%d) Got response status=%s, content_type=%s, content_length=%s",
                count,
                response.status_code,
                response.headers.get("content-type"),
                response.headers.get("content-length"),
            )
        return response
