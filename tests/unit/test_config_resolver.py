from datetime import datetime, timezone
from unittest.mock import AsyncMock, Mock, patch

import pytest

from src.core.config_resolver import AwsConfigResolver, get_aws_config
from src.core.credential_refresher import CredentialRefresher
from src.enums.runtime_mode import RuntimeMode
from src.exceptions.auth_exceptions import AuthenticationDetailsException
from src.exceptions.config_exceptions import MissingDevCredentialsException
from src.models.authentication_details import AuthenticationDetails


def make_details(suffix: str = "1", region: str = "eu-north-1"):
    return AuthenticationDetails(
        credentials={
            "AccessKeyId": f"AKIA{suffix}",
            "SecretAccessKey": f"secret{suffix}",
            "SessionToken": f"token{suffix}",
            "Expiration": "2030-01-01T12:00:00Z",
        },
        aws_region=region,
    )


@pytest.fixture
def mock_provider():
    provider = Mock()
    provider.get_authentication_details = AsyncMock(return_value=make_details())
    return provider


@pytest.mark.asyncio
async def test_production_config_from_provider(mock_provider):
    aws_config = await get_aws_config(RuntimeMode.PRODUCTION, mock_provider)

    assert aws_config.region == "eu-north-1"
    assert aws_config.credentials.access_key_id == "AKIA1"
    assert aws_config.credentials.secret_access_key == "secret1"
    assert aws_config.credentials.session_token == "token1"
    assert aws_config.credentials.expiration == datetime(
        2030, 1, 1, 12, 0, tzinfo=timezone.utc
    )
    assert aws_config.http_timeout_ms == 5000
    assert isinstance(aws_config.refresh, CredentialRefresher)
    assert aws_config.refresh.credentials is aws_config.credentials
    mock_provider.get_authentication_details.assert_awaited_once()


@pytest.mark.asyncio
async def test_production_provider_failure_propagates(mock_provider):
    error = AuthenticationDetailsException(403, "Forbidden")
    mock_provider.get_authentication_details.side_effect = error

    with pytest.raises(AuthenticationDetailsException) as ctx:
        await get_aws_config(RuntimeMode.PRODUCTION, mock_provider)

    assert ctx.value is error


@pytest.mark.asyncio
async def test_production_resolutions_are_independent(mock_provider):
    mock_provider.get_authentication_details.side_effect = [
        make_details("1"),
        make_details("2"),
        make_details("3"),
    ]
    resolver = AwsConfigResolver(RuntimeMode.PRODUCTION, mock_provider)

    first = await resolver.resolve()
    second = await resolver.resolve()

    assert first.credentials is not second.credentials
    assert first.refresh is not second.refresh

    await first.refresh.refresh()

    assert first.credentials.access_key_id == "AKIA3"
    assert second.credentials.access_key_id == "AKIA2"


@pytest.mark.asyncio
@patch.dict(
    "os.environ",
    {
        "DEVELOPMENT_AWS_ACCESS_KEY": "AKIADEV",
        "DEVELOPMENT_AWS_SECRET_KEY": "devsecret",
        "AWS_REGION": "us-east-1",
    },
    clear=True,
)
async def test_development_config_from_environment(mock_provider):
    aws_config = await get_aws_config(RuntimeMode.DEVELOPMENT, mock_provider)

    assert aws_config.region == "us-east-1"
    assert aws_config.credentials.access_key_id == "AKIADEV"
    assert aws_config.credentials.secret_access_key == "devsecret"
    assert aws_config.credentials.session_token is None
    assert aws_config.credentials.expiration is None
    assert aws_config.http_timeout_ms is None
    assert aws_config.refresh is None
    mock_provider.get_authentication_details.assert_not_called()


@pytest.mark.asyncio
async def test_development_config_from_file(tmp_path):
    dev_file = tmp_path / "dev_credentials.env"
    dev_file.write_text(
        "DEVELOPMENT_AWS_ACCESS_KEY=AKIAFILE\n"
        "DEVELOPMENT_AWS_SECRET_KEY=filesecret\n"
        "AWS_REGION=eu-west-1\n"
    )

    aws_config = await get_aws_config(
        RuntimeMode.DEVELOPMENT, dev_credentials_path=str(dev_file)
    )

    assert aws_config.region == "eu-west-1"
    assert aws_config.credentials.access_key_id == "AKIAFILE"
    assert aws_config.credentials.secret_access_key == "filesecret"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "env",
    [
        {"DEVELOPMENT_AWS_SECRET_KEY": "devsecret"},
        {"DEVELOPMENT_AWS_ACCESS_KEY": "AKIADEV"},
        {"DEVELOPMENT_AWS_ACCESS_KEY": "", "DEVELOPMENT_AWS_SECRET_KEY": "devsecret"},
    ],
)
async def test_development_missing_keys(env, mock_provider):
    with patch.dict("os.environ", env, clear=True):
        with pytest.raises(MissingDevCredentialsException) as ctx:
            await get_aws_config(RuntimeMode.DEVELOPMENT, mock_provider)

    assert "DEVELOPMENT_AWS_ACCESS_KEY" in str(ctx.value)
    assert "DEVELOPMENT_AWS_SECRET_KEY" in str(ctx.value)
    mock_provider.get_authentication_details.assert_not_called()


@pytest.mark.asyncio
async def test_production_requires_provider():
    with pytest.raises(ValueError):
        await get_aws_config(RuntimeMode.PRODUCTION)
