"""asana-resources configuration custom exceptions."""

from __future__ import annotations

from asana_resources.errors.meta import AsanaResourcesError


class AsanaConfigError(AsanaResourcesError):
    """Error meta class for all config related Errors."""


class MissingArgumentError(AsanaConfigError):
    """Raised before any request is made, when a required keyword argument was not supplied."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"The required argument {name!r} was not supplied.")


class MissingCredentialsConfigError(AsanaConfigError):
    """Error if no credentials config is available."""

    def __init__(self) -> None:
        super().__init__(
            "To create an AsanaContext you need to provide a credentials config.\n"
            "Either through the token_provider parameter or through the config file.",
        )


class TokenProviderConfigError(AsanaConfigError):
    """Error if the credentials config is invalid."""


class MissingAsanaHostError(TokenProviderConfigError):
    """Raised when the domain in the credentials config is empty."""

    def __init__(self) -> None:
        super().__init__("The domain in your credentials configuration is empty.")
