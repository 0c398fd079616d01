"""Request parameter helpers shared by all resource methods."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from asana_resources.errors.config import MissingArgumentError


def _is_empty(value: Any) -> bool:  # noqa: ANN401
    if value is None:
        return True
    if isinstance(value, (str, bytes, Mapping, list, tuple, set, frozenset)):
        return len(value) == 0
    return False


def filter_params(params: Mapping[str, Any]) -> dict[str, Any]:
    """Returns a new dict without the entries that are ``None`` or empty.

    Strings, lists, tuples, sets and mappings count as empty when they have no items.
    Falsy scalars like ``False`` and ``0`` are kept. The passed mapping is not modified.
    """
    return {k: v for k, v in params.items() if not _is_empty(v)}


def check_required(**arguments: Any) -> None:  # noqa: ANN401
    """Raises :py:class:`MissingArgumentError` for the first argument that is ``None``.

    Call this before any request is made:

    .. code-block:: python

        check_required(project=project, name=name)
    """
    for name, value in arguments.items():
        if value is None:
            raise MissingArgumentError(name)
