"""asana-resources version."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("asana-resources")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "unknown"
