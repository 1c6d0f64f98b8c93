import asyncio
from typing import Optional, Protocol

import boto3
import requests
from loguru import logger

from src.exceptions.auth_exceptions import AuthenticationDetailsException
from src.models.authentication_details import AuthenticationDetails


class AuthenticationProvider(Protocol):
    async def get_authentication_details(self) -> AuthenticationDetails: ...


class IotAuthenticationProvider:
    """Exchanges the device certificate for temporary role credentials.

    Calls the AWS IoT credential provider endpoint over mutual TLS. The
    endpoint is looked up through the IoT control plane when not given.
    """

    def __init__(
        self,
        cert_path: str,
        key_path: str,
        ca_path: str,
        role_alias: str,
        thing_name: str,
        region: str,
        endpoint: Optional[str] = None,
        timeout: int = 10,
    ) -> None:
        self._cert_path = cert_path
        self._key_path = key_path
        self._ca_path = ca_path
        self._role_alias = role_alias
        self._thing_name = thing_name
        self._region = region
        self._timeout = timeout
        self._credentials_endpoint = endpoint

    def _get_endpoint(self) -> str:
        if self._credentials_endpoint is None:
            client = boto3.client("iot", region_name=self._region)
            response = client.describe_endpoint(endpointType="iot:CredentialProvider")
            self._credentials_endpoint = response["endpointAddress"]
            logger.debug(f"Using credential endpoint {self._credentials_endpoint}")

        return self._credentials_endpoint

    def _fetch(self) -> AuthenticationDetails:
        url = f"https://{self._get_endpoint()}/role-aliases/{self._role_alias}/credentials"

        response = requests.get(
            url,
            cert=(self._cert_path, self._key_path),
            verify=self._ca_path,
            headers={"x-amzn-iot-thingname": self._thing_name},
            timeout=self._timeout,
        )

        if response.status_code != 200:
            raise AuthenticationDetailsException(response.status_code, response.text)

        data = response.json()["credentials"]
        return AuthenticationDetails(
            credentials={
                "AccessKeyId": data["accessKeyId"],
                "SecretAccessKey": data["secretAccessKey"],
                "SessionToken": data["sessionToken"],
                "Expiration": data["expiration"],
            },
            aws_region=self._region,
        )

    async def get_authentication_details(self) -> AuthenticationDetails:
        return await asyncio.to_thread(self._fetch)
