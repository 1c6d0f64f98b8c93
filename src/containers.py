from dependency_injector import containers, providers

from src.config import Config
from src.core.authentication_provider import IotAuthenticationProvider
from src.core.config_resolver import AwsConfigResolver
from src.core.session_manager import AwsSessionManager


class ApplicationContainer(containers.DeclarativeContainer):
    config_path = providers.Dependency()

    config = providers.Singleton(Config, config_file=config_path)

    authentication_provider = providers.Selector(
        config.provided.runtime_mode.value,
        production=providers.Singleton(
            IotAuthenticationProvider,
            cert_path=config.provided.cert_filepath,
            key_path=config.provided.pri_key_filepath,
            ca_path=config.provided.ca_filepath,
            role_alias=config.provided.role_alias,
            thing_name=config.provided.thing_name,
            region=config.provided.region,
            endpoint=config.provided.credential_endpoint,
        ),
        development=providers.Object(None),
    )

    config_resolver = providers.Singleton(
        AwsConfigResolver,
        mode=config.provided.runtime_mode,
        authentication_provider=authentication_provider,
        dev_credentials_path=config.provided.dev_credentials_filepath,
    )

    session_manager_factory = providers.Factory(AwsSessionManager)
