"""Identity provider reading the current user from the environment."""

from src.application.ports.identity import IdentityPort
from src.infrastructure.settings import FinanceSettings


class EnvironmentIdentityProvider(IdentityPort):
    """IdentityPort implementation for single-user deployments."""

    def __init__(self, settings: FinanceSettings | None = None) -> None:
        self._settings = settings

    def current_user_id(self) -> str:
        """Return the configured user identifier.

        Raises:
            RuntimeError: If ``FINANCE_USER_ID`` is not configured.
        """
        settings = self._settings or FinanceSettings.from_env()
        if not settings.user_id:
            raise RuntimeError("Missing environment variable: FINANCE_USER_ID")
        return settings.user_id


__all__ = ["EnvironmentIdentityProvider"]
