"""Lazy paginated collection of resources."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Generic, TypeVar

from asana_resources.resources.response import parse_page

if TYPE_CHECKING:
    from asana_resources.resources.resource import Resource
    from asana_resources.utils.api_types import RequestOptions, Transport

LOGGER = logging.getLogger(__name__)

ResourceT = TypeVar("ResourceT", bound="Resource")


class Collection(Generic[ResourceT]):
    """A forward-only iterator over all the objects of a list endpoint.

    The first page is the response of the request that created the collection.
    Iterating past the last object of the held page fetches the next page synchronously,
    so ``next()`` can block on the network and raise any
    :py:class:`~asana_resources.errors.meta.AsanaAPIError` of that request.
    Objects that were already returned stay valid in that case.

    A collection can be iterated only once, make the list request again to start over:

    .. code-block:: python

        for section in Section.find_by_project(ctx.api, project="1234", per_page=50):
            print(section.name)

    """

    def __init__(
        self,
        body: dict,
        resource_type: type[ResourceT],
        client: Transport,
        path: str,
        params: dict | None = None,
        options: RequestOptions | None = None,
    ) -> None:
        """Wraps the first page of a list response.

        Args:
            body: the decoded response body of the first page
            resource_type: the class the records are wrapped in
            client: the transport that is used to fetch the next pages
            path: the path of the list endpoint
            params: the query parameters of the first request, sent again with every page
            options: the options of the first request, sent again with every page
        """
        self.resource_type = resource_type
        self._client = client
        self._path = path
        self._params = dict(params or {})
        self._options = options
        self._page: deque[ResourceT] = deque()
        self.next_page_token: str | None = None
        self._load_page(body)

    def _load_page(self, body: dict) -> None:
        records, self.next_page_token = parse_page(body)
        self._page = deque(self.resource_type.from_record(record, self._client) for record in records)

    def _fetch(self, offset: str) -> dict:
        LOGGER.debug("Fetching next page of %s with offset %s", self._path, offset)
        return self._client.get(self._path, params={**self._params, "offset": offset}, options=self._options)

    @property
    def page(self) -> list[ResourceT]:
        """The objects of the held page that were not returned yet."""
        return list(self._page)

    def next_page(self) -> Collection[ResourceT] | None:
        """Fetches the page after the held one as a new collection, or returns None on the last page.

        This collection is not advanced.
        """
        if self.next_page_token is None:
            return None
        return Collection(
            self._fetch(self.next_page_token),
            self.resource_type,
            self._client,
            self._path,
            params=self._params,
            options=self._options,
        )

    def __iter__(self) -> Collection[ResourceT]:
        return self

    def __next__(self) -> ResourceT:
        # a page can be empty while still having a successor
        while not self._page:
            if self.next_page_token is None:
                raise StopIteration
            self._load_page(self._fetch(self.next_page_token))
        return self._page.popleft()

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__}(resource_type={self.resource_type.__name__}, "
            f"path={self._path!r}, held={len(self._page)}, next_page_token={self.next_page_token!r})>"
        )
