import asyncio
from dataclasses import replace
from datetime import timedelta
from typing import Any, Dict, Optional

from loguru import logger

from src.models.aws_config import AwsConfig
from src.models.credentials_model import CredentialsModel


class AwsSessionManager:
    def __init__(
        self, aws_config: AwsConfig, expiry_buffer: timedelta = timedelta(minutes=5)
    ):
        self._config = aws_config
        self._expiry_buffer = expiry_buffer
        self._credentials: Optional[CredentialsModel] = None
        self._clients: Dict[str, Any] = {}

    @property
    def config(self) -> AwsConfig:
        return self._config

    async def _ensure_fresh(self) -> None:
        refresh = self._config.refresh
        if refresh is None or not self._config.credentials.is_expired(
            self._expiry_buffer
        ):
            return

        done: asyncio.Future = asyncio.get_running_loop().create_future()

        def _on_refreshed(error: Optional[BaseException] = None) -> None:
            if done.done():
                return
            if error is not None:
                done.set_exception(error)
            else:
                done.set_result(None)

        task = refresh(_on_refreshed)
        await done
        logger.debug(f"Credential refresh finished: {task.get_name()}")

    async def client(self, service_name: str):
        await self._ensure_fresh()

        current_creds = self._config.credentials
        if self._credentials != current_creds:
            logger.debug("AWS credentials changed, dropping cached clients")
            self._credentials = replace(current_creds)
            self._clients.clear()

        if service_name not in self._clients:
            session = self._config.create_session()
            self._clients[service_name] = session.client(
                service_name, config=self._config.client_config()
            )

        return self._clients[service_name]
