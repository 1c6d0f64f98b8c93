from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import boto3
from botocore.config import Config as BotocoreConfig

from src.models.credentials_model import CredentialsModel

if TYPE_CHECKING:
    from src.core.credential_refresher import CredentialRefresher


@dataclass
class AwsConfig:
    region: str
    credentials: CredentialsModel
    http_timeout_ms: Optional[int] = None
    refresh: Optional["CredentialRefresher"] = None

    def client_config(self) -> BotocoreConfig:
        if self.http_timeout_ms is None:
            return BotocoreConfig(region_name=self.region)

        timeout_s = self.http_timeout_ms / 1000
        return BotocoreConfig(
            region_name=self.region,
            connect_timeout=timeout_s,
            read_timeout=timeout_s,
        )

    def create_session(self) -> boto3.Session:
        return boto3.Session(
            aws_access_key_id=self.credentials.access_key_id,
            aws_secret_access_key=self.credentials.secret_access_key,
            aws_session_token=self.credentials.session_token,
            region_name=self.region,
        )
