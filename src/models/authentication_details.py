from datetime import datetime, timezone

from pydantic import AliasChoices, BaseModel, Field, field_validator

from src.models.credentials_model import CredentialsModel


class TemporaryCredentials(BaseModel):
    AccessKeyId: str
    SecretAccessKey: str
    SessionToken: str
    Expiration: datetime

    @field_validator("Expiration")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    def to_model(self) -> CredentialsModel:
        return CredentialsModel(
            access_key_id=self.AccessKeyId,
            secret_access_key=self.SecretAccessKey,
            session_token=self.SessionToken,
            expiration=self.Expiration,
        )


class AuthenticationDetails(BaseModel):
    credentials: TemporaryCredentials = Field(
        validation_alias=AliasChoices("credentials", "Credentials")
    )
    aws_region: str
