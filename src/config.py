import os.path
from os import _Environ
from typing import Optional

from dotenv import dotenv_values

from src.enums.runtime_mode import RuntimeMode
from src.exceptions.config_exceptions import ConfigValueException, ConfigTypeException


class Config:
    def __init__(self, config_file: Optional[str] = None):
        if config_file:
            raw: dict[str, str | None] = dotenv_values(config_file)
        else:
            raw: _Environ[str] = os.environ

        self.verbose: bool = self._optional_bool(raw, "VERBOSE")
        self.runtime_mode: RuntimeMode = self._require_enum(
            raw, "RUNTIME_MODE", RuntimeMode
        )
        self.region: Optional[str] = raw.get("AWS_REGION")
        self.dev_credentials_filepath: Optional[str] = None
        if raw.get("DEV_CREDENTIALS_FILEPATH"):
            self.dev_credentials_filepath = self._require_path(
                raw, "DEV_CREDENTIALS_FILEPATH"
            )

        self.thing_name: Optional[str] = None
        self.role_alias: Optional[str] = None
        self.cert_filepath: Optional[str] = None
        self.pri_key_filepath: Optional[str] = None
        self.ca_filepath: Optional[str] = None
        self.credential_endpoint: Optional[str] = raw.get("IOT_CREDENTIAL_ENDPOINT")

        if self.runtime_mode == RuntimeMode.PRODUCTION:
            self.region = self._require(raw, "AWS_REGION")
            self.thing_name = self._require(raw, "IOT_THING_NAME")
            self.role_alias = self._require(raw, "IOT_ROLE_ALIAS")
            self.cert_filepath = self._require_path(raw, "CERT_FILEPATH")
            self.pri_key_filepath = self._require_path(raw, "PRIVATE_KEY_FILEPATH")
            self.ca_filepath = self._require_path(raw, "CA_FILEPATH")

    @property
    def is_production(self) -> bool:
        return self.runtime_mode == RuntimeMode.PRODUCTION

    def _require(self, config: dict | _Environ[str], key: str) -> str:
        value = config.get(key)
        if value is None:
            raise ConfigValueException(f"{key} not set")
        return value

    def _require_path(self, config: dict | _Environ[str], key: str) -> str:
        value = self._require(config, key)

        if os.path.exists(value) and os.path.isfile(value):
            return value
        else:
            raise ConfigTypeException(f"{key} not a file")

    def _optional_bool(self, config: dict | _Environ[str], key: str) -> bool:
        value = config.get(key)
        if value is None:
            return False
        return value.strip().lower() in ("1", "true", "yes", "on")

    def _require_enum(self, config: dict | _Environ[str], key: str, enum_type):
        value = self._require(config, key)
        try:
            return enum_type(value)
        except ValueError:
            raise ConfigTypeException(f"{key} must be valid {enum_type.__name__}")
