from __future__ import annotations

from typing import TYPE_CHECKING
from unittest import mock

import pytest

from asana_resources.config.config import Config
from asana_resources.utils.config import CFG_FILE_NAME
from tests.unit.mocks import AsanaMockContext, MockTokenProvider, RecordingTransport

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path


@pytest.fixture()
def asana_token(request):
    """Generates a fake token that is the name of the test function + '_token'.

    This is useful to trace back a token to a test function.
    """
    return request.node.name + "_token"


@pytest.fixture()
def test_context_mock(asana_token) -> AsanaMockContext:
    """This fixture provides a context with default config, a :py:class:`~tests.unit.mocks.MockTokenProvider` and a :py:class:`requests_mock.Adapter`.

    Useful for mocking API responses. see :py:class:`~tests.unit.mocks.AsanaMockContext`.
    """  # noqa: E501
    return AsanaMockContext(Config(), MockTokenProvider(asana_token))


@pytest.fixture()
def transport() -> RecordingTransport:
    """A transport stub without queued responses, queue them with ``transport.responses.append``."""
    return RecordingTransport()


@pytest.fixture()
def mock_config_location(tmp_path_factory, request) -> Generator[dict[Path, None], None, None]:
    """Mocks the locations where the config files are read and returns them.

    Can be used in tests like this:
    .. code-block:: python

       from asana_resources.config import config


       def test_xyz(mock_config_location):
           assert mock_config_location == config.cfg_files()  # true

    """
    paths = dict.fromkeys(
        [
            tmp_path_factory.mktemp(f"{request.node.name}_site_cfg").joinpath(CFG_FILE_NAME),
            tmp_path_factory.mktemp(f"{request.node.name}_user_cfg").joinpath(CFG_FILE_NAME),
        ],
    )
    with mock.patch("asana_resources.config.config.cfg_files", return_value=paths):
        yield paths
