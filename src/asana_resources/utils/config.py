"""Where the configuration comes from: config file locations and ``ASANA_RESOURCES_*`` environment variables.

Also holds :py:func:`accepted_kwargs`, which checks a config section against the constructor
of the class it configures, :py:class:`asana_resources.config.config.Config` or a token provider.
"""

from __future__ import annotations

import inspect
import os
import warnings
from functools import cache
from pathlib import Path
from typing import Any

import platformdirs

from asana_resources.errors.config import AsanaConfigError

ENVIRONMENT_VARIABLE_PREFIX = "ASANA_RESOURCES_"
"""Prefix of the configuration environment variables, ``__`` separates the section from the key."""
CFG_FILE_NAME = "config.toml"
PROJECT_CFG_FILE_NAME = ".asana_resources.toml"


@cache
def _dirs() -> platformdirs.PlatformDirs:
    return platformdirs.PlatformDirs("asana-resources")


@cache
def site_cfg_file() -> Path:
    """The system wide config file, e.g. ``/etc/xdg/asana-resources/config.toml`` on linux."""
    return _dirs().site_config_path / CFG_FILE_NAME


@cache
def user_cfg_files() -> dict[Path, None]:
    """The config files of the current user, in merge order.

    A dict is used as an ordered set, locations that are the same path on a platform appear once.
    """
    home = Path.home()
    return dict.fromkeys(
        (
            home / ".asana-resources" / CFG_FILE_NAME,
            home / ".config" / "asana-resources" / CFG_FILE_NAME,
            _dirs().user_config_path / CFG_FILE_NAME,
        )
    )


def project_cfg_file() -> Path:
    """The project config file in the current working directory."""
    return Path.cwd() / PROJECT_CFG_FILE_NAME


def cfg_files(use_project_config: bool = True) -> dict[Path, None]:
    """All config file locations in merge order, values of later files win.

    Args:
        use_project_config: whether the project config file of the working directory is included (last)
    """
    files = {site_cfg_file(): None, **user_cfg_files()}
    if use_project_config:
        files[project_cfg_file()] = None
    return files


def merge_dicts(base: Any, override: Any) -> Any:  # noqa: ANN401
    """Merges ``override`` over ``base`` recursively and returns the result, neither argument is modified.

    Nested dicts are merged key by key, for every other value ``override`` wins unless it is None.
    """
    if override is None:
        return base
    if not isinstance(base, dict) or not isinstance(override, dict):
        return override
    merged = dict(base)
    for key, value in override.items():
        merged[key] = merge_dicts(merged.get(key), value)
    return merged


def _parse_env_value(value: str) -> str | bool:
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    return value


def get_environment_variable_config() -> dict:
    """Returns the ``ASANA_RESOURCES_*`` environment variables as a config dict.

    ``ASANA_RESOURCES_CREDENTIALS__TOKEN=xyz`` becomes ``{"credentials": {"token": "xyz"}}``,
    ``true`` and ``false`` (any case) become booleans.
    ``ASANA_RESOURCES_PROFILE`` selects the profile, an empty value is read as None and selects nothing.
    """
    env_config: dict = {}
    for name, value in os.environ.items():
        if not name.startswith(ENVIRONMENT_VARIABLE_PREFIX):
            continue
        *sections, key = name[len(ENVIRONMENT_VARIABLE_PREFIX) :].lower().split("__")
        if not sections:
            if key == "profile":
                env_config["profile"] = value or None
            else:
                warnings.warn(f"{name} is not a valid asana-resources configuration environment variable.")
            continue
        target = env_config
        for section in sections:
            if not isinstance(target.get(section), dict):
                target[section] = {}
            target = target[section]
        target[key] = _parse_env_value(value)
    return env_config


def accepted_kwargs(init_class: type, section: str, options: dict[str, Any]) -> dict[str, Any]:
    """Returns the entries of the config section ``options`` that ``init_class`` accepts as keyword arguments.

    Unknown keys are dropped with a warning. Values are not converted, the TOML files and
    :py:func:`get_environment_variable_config` already produce strings, numbers and booleans.

    Args:
        init_class: the class that is created with the returned kwargs
        section: name of the config section, used in the messages as ``section.key``
        options: the config section

    Raises:
        AsanaConfigError: if a parameter without default value is missing in ``options``
    """
    parameters = {
        name: parameter
        for name, parameter in inspect.signature(init_class).parameters.items()
        if parameter.kind in (parameter.POSITIONAL_OR_KEYWORD, parameter.KEYWORD_ONLY)
    }
    for name in options:
        if name not in parameters:
            warnings.warn(f"{section}.{name} is not a valid config option for {init_class.__name__}")
    for name, parameter in parameters.items():
        if parameter.default is parameter.empty and name not in options:
            msg = f"The config option {section}.{name} is required to create {init_class.__name__}."
            raise AsanaConfigError(msg)
    return {name: value for name, value in options.items() if name in parameters}
