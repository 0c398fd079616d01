from __future__ import annotations

import os
from typing import TYPE_CHECKING
from unittest import mock

import pytest

from asana_resources.config import config
from asana_resources.config.config_types import DEFAULT_DOMAIN, Host
from asana_resources.config.token_provider import PersonalAccessTokenProvider
from asana_resources.errors.config import (
    AsanaConfigError,
    MissingAsanaHostError,
    MissingCredentialsConfigError,
    TokenProviderConfigError,
)
from asana_resources.utils.config import get_environment_variable_config, merge_dicts

if TYPE_CHECKING:
    from pathlib import Path

# ruff: noqa: S105


def test_get_config_dict(mock_config_location: dict[Path, None]):
    """Tests that the files are read in the correct order and that the merge happens correctly."""
    path_list = list(mock_config_location)
    site_config = path_list[0]
    user_config = path_list[1]
    site_config.write_text(
        """
[config]
rich_traceback = true

[credentials]
token = "will_be_overriden_by_user_config"
""",
    )
    user_config.write_text(
        """
[credentials]
domain = "asana.example.com"
scheme = "http"
token = "user_config_token"
""",
    )
    with mock.patch.dict(os.environ, {}, clear=True):
        assert config.get_config_dict() == {
            "config": {
                "rich_traceback": True,
            },
            "credentials": {
                "domain": "asana.example.com",
                "scheme": "http",
                "token": "user_config_token",
            },
        }
        with pytest.raises(AsanaConfigError, match="Profile name can't be credentials"):
            config.get_config_dict("credentials")

        with pytest.raises(AsanaConfigError, match="Profile name can't be config"):
            config.get_config_dict("config")

    with mock.patch.dict(os.environ, {"ASANA_RESOURCES_CONFIG__RICH_TRACEBACK": "false"}, clear=True):
        assert config.get_config_dict()["config"]["rich_traceback"] is False

    with mock.patch.dict(os.environ, {"ASANA_RESOURCES_CREDENTIALS__TOKEN": "env_token"}, clear=True):
        assert config.get_config_dict()["credentials"]["token"] == "env_token"
        assert config.get_config_dict(env=False)["credentials"]["token"] == "user_config_token"


def test_get_config_dict_defaults(mock_config_location: dict[Path, None]):
    with mock.patch.dict(os.environ, {}, clear=True):
        assert config.get_config_dict() is None

        list(mock_config_location)[1].write_text('[credentials]\ntoken = "only_a_token"\n')
        assert config.get_config_dict() == {"credentials": {"domain": DEFAULT_DOMAIN, "token": "only_a_token"}}


def test_profiles(mock_config_location: dict[Path, None]):
    list(mock_config_location)[1].write_text(
        """
[config]
debug = false

[credentials]
token = "default_token"

[work.config]
debug = true

[work.credentials]
domain = "work.example.com"
token = "work_token"
""",
    )
    with mock.patch.dict(os.environ, {}, clear=True):
        assert config.get_config_dict() == {
            "config": {"debug": False},
            "credentials": {"domain": DEFAULT_DOMAIN, "token": "default_token"},
        }
        assert config.get_config_dict("work") == {
            "config": {"debug": True},
            "credentials": {"domain": "work.example.com", "token": "work_token"},
        }

    with mock.patch.dict(os.environ, {"ASANA_RESOURCES_PROFILE": "work"}, clear=True):
        assert config.get_config_dict()["credentials"]["token"] == "work_token"


def test_parse_credentials_config(mock_config_location: dict[Path, None]):
    user_config = list(mock_config_location)[1]

    with mock.patch.dict(os.environ, {}, clear=True):
        user_config.write_text("")
        with pytest.raises(MissingCredentialsConfigError):
            config.parse_credentials_config(config.get_config_dict())

        user_config.write_text("""
                               [credentials]
                               domain = "asana.example.com"
                               """)
        with pytest.raises(MissingCredentialsConfigError):
            config.parse_credentials_config(config.get_config_dict())

        user_config.write_text("""
                               [credentials]
                               domain = "asana.example.com"
                               token = "pat"
                               """)
        tp = config.parse_credentials_config(config.get_config_dict())
        assert isinstance(tp, PersonalAccessTokenProvider)
        assert tp.token == "pat"
        assert tp.host == Host("asana.example.com")

        user_config.write_text("""
                               [credentials]
                               token = { token = "pat_in_table" }
                               """)
        tp = config.parse_credentials_config(config.get_config_dict())
        assert tp.token == "pat_in_table"
        assert tp.host == Host()

    with pytest.raises(MissingAsanaHostError):
        config.parse_credentials_config({"credentials": {"domain": "", "token": "pat"}})

    with pytest.raises(TokenProviderConfigError, match="oauth does not exist"):
        config.parse_credentials_config({"credentials": {"domain": DEFAULT_DOMAIN, "oauth": {"client_id": "x"}}})

    with pytest.raises(MissingCredentialsConfigError):
        config.parse_credentials_config({"config": {"debug": True}})


def test_parse_general_config():
    assert config.parse_general_config(None).__dict__ == config.Config().__dict__
    cfg = config.parse_general_config({"config": {"debug": True, "requests_ca_bundle": "/tmp/ca.pem"}})  # noqa: S108
    assert cfg.debug is True
    assert cfg.requests_ca_bundle == "/tmp/ca.pem"  # noqa: S108
    assert cfg.rich_traceback is False

    with pytest.warns(UserWarning, match="config.unknown_option is not a valid config option"):
        config.parse_general_config({"config": {"unknown_option": 1}})


def test_missing_token_provider_argument():
    with pytest.raises(AsanaConfigError, match="credentials.token is required"):
        config.parse_credentials_config({"credentials": {"domain": DEFAULT_DOMAIN, "token": {}}})


def test_flags_must_be_booleans(mock_config_location: dict[Path, None]):
    user_config = list(mock_config_location)[1]
    user_config.write_text('[config]\ndebug = "no"\n')
    with mock.patch.dict(os.environ, {}, clear=True), pytest.raises(AsanaConfigError, match="config.debug"):
        config.parse_general_config(config.get_config_dict())

    # environment variables are strings, true and false are converted before Config is created
    user_config.write_text("")
    with mock.patch.dict(os.environ, {"ASANA_RESOURCES_CONFIG__DEBUG": "False"}, clear=True):
        assert config.parse_general_config(config.get_config_dict()).debug is False
    with mock.patch.dict(os.environ, {"ASANA_RESOURCES_CONFIG__RICH_TRACEBACK": "true"}, clear=True):
        assert config.parse_general_config(config.get_config_dict()).rich_traceback is True


def test_invalid_toml(mock_config_location: dict[Path, None]):
    list(mock_config_location)[0].write_text("[credentials\ntoken = ")
    with mock.patch.dict(os.environ, {}, clear=True), pytest.raises(AsanaConfigError, match="not valid TOML"):
        config.get_config_dict()


def test_environment_variable_config():
    env = {
        "ASANA_RESOURCES_CONFIG__DEBUG": "TRUE",
        "ASANA_RESOURCES_CREDENTIALS__DOMAIN": "asana.example.com",
        "ASANA_RESOURCES_PROFILE": "",
        "UNRELATED": "1",
    }
    with mock.patch.dict(os.environ, env, clear=True):
        assert get_environment_variable_config() == {
            "config": {"debug": True},
            "credentials": {"domain": "asana.example.com"},
            "profile": None,
        }

    with mock.patch.dict(os.environ, {"ASANA_RESOURCES_DEBUG": "true"}, clear=True), pytest.warns(UserWarning):
        assert get_environment_variable_config() == {}


def test_merge_dicts():
    assert merge_dicts({"a": {"b": 1, "c": 2}}, {"a": {"c": 3}, "d": 4}) == {"a": {"b": 1, "c": 3}, "d": 4}
    assert merge_dicts({"a": 1}, None) == {"a": 1}
    assert merge_dicts("a", "b") == "b"

    base = {"credentials": {"token": "a"}}
    merge_dicts(base, {"credentials": {"token": "b"}})
    assert base == {"credentials": {"token": "a"}}
