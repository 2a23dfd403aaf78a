"""Config DI providers (non-mockable)."""

from dishka import Scope, provide

from quill.config import AuthSettings, Settings
from quill.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings provider.

    ``Settings`` reads the environment and ``.env`` once per container;
    tests set the environment in conftest.py before the container is built.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Signing secret, token lifetime and bcrypt work factor."""
        return settings.auth
