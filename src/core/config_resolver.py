import os
from typing import Mapping, Optional

from dotenv import dotenv_values
from loguru import logger

from src.constants import PRODUCTION_HTTP_TIMEOUT_MS
from src.core.authentication_provider import AuthenticationProvider
from src.core.credential_refresher import CredentialRefresher
from src.enums.runtime_mode import RuntimeMode
from src.exceptions.config_exceptions import MissingDevCredentialsException
from src.models.aws_config import AwsConfig
from src.models.credentials_model import CredentialsModel

DEV_ACCESS_KEY = "DEVELOPMENT_AWS_ACCESS_KEY"
DEV_SECRET_KEY = "DEVELOPMENT_AWS_SECRET_KEY"
DEV_REGION = "AWS_REGION"


class AwsConfigResolver:
    def __init__(
        self,
        mode: RuntimeMode,
        authentication_provider: Optional[AuthenticationProvider] = None,
        dev_credentials_path: Optional[str] = None,
    ) -> None:
        self._mode = mode
        self._provider = authentication_provider
        self._dev_credentials_path = dev_credentials_path

    async def resolve(self) -> AwsConfig:
        if self._mode == RuntimeMode.PRODUCTION:
            return await self._resolve_production()
        return self._resolve_development()

    async def _resolve_production(self) -> AwsConfig:
        if self._provider is None:
            raise ValueError("Production mode requires an authentication provider")

        details = await self._provider.get_authentication_details()
        credentials = details.credentials.to_model()

        logger.debug(
            f"Resolved production AWS config for {details.aws_region}, "
            f"credentials valid until {credentials.expiration}"
        )

        return AwsConfig(
            region=details.aws_region,
            credentials=credentials,
            http_timeout_ms=PRODUCTION_HTTP_TIMEOUT_MS,
            refresh=CredentialRefresher(credentials, self._provider),
        )

    def _load_dev_credentials(self) -> Mapping[str, Optional[str]]:
        if self._dev_credentials_path:
            return dotenv_values(self._dev_credentials_path)
        return os.environ

    def _resolve_development(self) -> AwsConfig:
        raw = self._load_dev_credentials()

        access_key = raw.get(DEV_ACCESS_KEY)
        secret_key = raw.get(DEV_SECRET_KEY)
        if not access_key or not secret_key:
            raise MissingDevCredentialsException(DEV_ACCESS_KEY, DEV_SECRET_KEY)

        logger.debug("Resolved development AWS config from static keys")

        return AwsConfig(
            region=raw.get(DEV_REGION),
            credentials=CredentialsModel(
                access_key_id=access_key, secret_access_key=secret_key
            ),
        )


async def get_aws_config(
    mode: RuntimeMode,
    authentication_provider: Optional[AuthenticationProvider] = None,
    dev_credentials_path: Optional[str] = None,
) -> AwsConfig:
    resolver = AwsConfigResolver(mode, authentication_provider, dev_credentials_path)
    return await resolver.resolve()
