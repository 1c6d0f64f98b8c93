import asyncio
from typing import Callable, Optional

from loguru import logger

from src.core.authentication_provider import AuthenticationProvider
from src.models.credentials_model import CredentialsModel

RefreshCallback = Callable[..., None]


class CredentialRefresher:
    """Renews one credential snapshot in place.

    Whoever holds the snapshot keeps seeing the same object after a refresh,
    so the fields are overwritten rather than the snapshot replaced.
    """

    def __init__(
        self, credentials: CredentialsModel, provider: AuthenticationProvider
    ) -> None:
        self._credentials = credentials
        self._provider = provider

    @property
    def credentials(self) -> CredentialsModel:
        return self._credentials

    async def refresh(self) -> CredentialsModel:
        logger.info("Refreshing AWS credentials")

        details = await self._provider.get_authentication_details()
        self._credentials.update_from(details.credentials.to_model())

        logger.debug(f"AWS credentials valid until {self._credentials.expiration}")
        return self._credentials

    def __call__(self, callback: RefreshCallback) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(self.refresh())

        def _done(finished: asyncio.Task) -> None:
            if finished.cancelled():
                callback(asyncio.CancelledError())
                return

            error: Optional[BaseException] = finished.exception()
            if error is not None:
                logger.error(f"Credential refresh failed: {error}")
                callback(error)
            else:
                callback()

        task.add_done_callback(_done)
        return task
