"""Resource base class."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from asana_resources.resources.collection import Collection
from asana_resources.resources.response import parse_record
from asana_resources.utils.params import filter_params

if TYPE_CHECKING:
    import sys
    from collections.abc import Iterator

    from asana_resources.utils import api_types

    if sys.version_info < (3, 11):
        from typing_extensions import Self
    else:
        from typing import Self

DEFAULT_PAGE_SIZE = 20
"""The number of records requested per page by the list methods."""


class Resource:
    """Wraps one record returned by the Asana API.

    Every key of the record can be read as an attribute, e.g. ``section.name``.
    The attributes are exactly the keys the server returned, a field that was not returned
    raises an :py:class:`AttributeError` instead of defaulting to None.
    Fields whose names are not valid identifiers can be read with ``resource["name"]`` or :py:meth:`get`.

    The attributes are read-only, they change only when :py:meth:`refresh` replaces the whole record,
    which the mutating methods like :py:meth:`update` do with the record the server returns.
    Related objects are referenced by gid (``section.project["gid"]``) and are not fetched automatically.

    Subclasses describe one resource type through the class variables
    :py:attr:`plural_name` (the path segment) and :py:attr:`type_name` (the ``resource_type`` of its records).
    """

    plural_name: ClassVar[str] = ""
    type_name: ClassVar[str] = ""

    _client: api_types.Transport
    _record: api_types.Record

    # present in every hydrated record
    gid: api_types.Gid
    resource_type: str

    def __init__(self, record: api_types.Record, client: api_types.Transport) -> None:
        """Wraps ``record``.

        Args:
            record: the record, it is copied
            client: the transport that fetched the record, used by the methods of this object
        """
        object.__setattr__(self, "_client", client)
        self.refresh(record)

    @classmethod
    def from_record(cls, record: api_types.Record, client: api_types.Transport) -> Resource:
        """Wraps a record in the class registered for its ``resource_type``.

        On a subclass the subclass is always used.
        """
        if cls is Resource:
            cls = RESOURCE_TYPE_REGISTRY.get(record.get("resource_type"), Resource)  # noqa: PLW0642
        return cls(record, client)

    @property
    def client(self) -> api_types.Transport:
        """The transport this object uses for its requests."""
        return self._client

    def refresh(self, record: api_types.Record) -> Self:
        """Replaces all attributes with the fields of ``record``.

        Fields of the old record that are missing in ``record`` are gone afterwards.
        """
        object.__setattr__(self, "_record", dict(record))
        return self

    def to_dict(self) -> api_types.Record:
        """Returns a copy of the record."""
        return dict(self._record)

    def get(self, key: str, default: Any = None) -> Any:  # noqa: ANN401
        """Returns the field ``key`` or ``default`` if the record has no such field."""
        return self._record.get(key, default)

    def __getattr__(self, name: str) -> Any:  # noqa: ANN401
        record = self.__dict__.get("_record")
        if not name.startswith("_") and record is not None and name in record:
            return record[name]
        msg = f"{self.__class__.__name__!r} object has no attribute {name!r}"
        raise AttributeError(msg)

    def __setattr__(self, name: str, value: Any) -> None:  # noqa: ANN401
        if not name.startswith("_"):
            msg = f"{name!r} is read-only, use update() to change it on the server"
            raise AttributeError(msg)
        object.__setattr__(self, name, value)

    def __getitem__(self, key: str) -> Any:  # noqa: ANN401
        return self._record[key]

    def __contains__(self, key: object) -> bool:
        return key in self._record

    def __dir__(self) -> Iterator[str]:
        yield from super().__dir__()
        yield from self._record.keys()

    def _identity(self) -> tuple[Any, Any]:
        return self._record.get("resource_type"), self._record.get("gid")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Resource):
            return NotImplemented
        if self._record.get("gid") is None:
            return self is other
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        if self._record.get("gid") is None:
            return id(self)
        return hash(self._identity())

    def __repr__(self) -> str:
        d = {k: self._record[k] for k in ("gid", "name") if k in self._record}
        return f"<{self.__class__.__name__}({d!s})>"

    @property
    def _path(self) -> str:
        return f"/{self.plural_name}/{self.gid}"

    @classmethod
    def find_by_id(
        cls,
        client: api_types.Transport,
        gid: api_types.Gid,
        options: api_types.RequestOptions | None = None,
    ) -> Self:
        """Returns the complete record of a single object.

        Args:
            client: the transport, e.g. :py:attr:`asana_resources.AsanaContext.api`
            gid: the gid of the object
            options: the request options, e.g. ``{"fields": ["name"]}``
        """
        return cls(parse_record(client.get(f"/{cls.plural_name}/{gid}", options=options)), client)

    @classmethod
    def _create(
        cls,
        client: api_types.Transport,
        path: str,
        data: dict[str, Any],
        options: api_types.RequestOptions | None = None,
    ) -> Self:
        body = client.post(path, body=filter_params(data), options=options)
        return cls(parse_record(body), client)

    @classmethod
    def _find_all(
        cls,
        client: api_types.Transport,
        path: str,
        params: dict[str, Any],
        options: api_types.RequestOptions | None = None,
    ) -> Collection[Self]:
        params = filter_params(params)
        body = client.get(path, params=params, options=options)
        return Collection(body, cls, client, path, params=params, options=options)

    def _post_action(
        self,
        path: str,
        data: dict[str, Any],
        options: api_types.RequestOptions | None = None,
    ) -> bool:
        self._client.post(path, body=filter_params(data), options=options)
        return True

    def update(self, options: api_types.RequestOptions | None = None, **data) -> Self:
        """Updates the fields given as keyword arguments and refreshes this object with the returned record.

        Only the given fields are sent, all others stay unchanged on the server.
        Specify only the fields you want to change: changes that other users made since this object
        was fetched are not detected and would be overwritten for every field that is sent.

        Args:
            options: the request options
            **data: the fields to update, None is sent as null and clears the field
        """
        return self.refresh(parse_record(self._client.put(self._path, body=data, options=options)))

    def delete(self) -> bool:
        """Deletes this object on the server.

        Returns:
            bool: True, failures raise an :py:class:`~asana_resources.errors.meta.AsanaAPIError`
        """
        self._client.delete(self._path)
        return True

    def sync(self, options: api_types.RequestOptions | None = None) -> Self:
        """Fetches the record again and refreshes this object with it."""
        return self.refresh(parse_record(self._client.get(self._path, options=options)))


RESOURCE_TYPE_REGISTRY: dict[str, type[Resource]] = {}
"""Maps the ``resource_type`` of a record to the class used by :py:meth:`Resource.from_record`."""
