import argparse
import asyncio
import sys
from typing import Optional

from loguru import logger

from src.containers import ApplicationContainer
from src.core.session_manager import AwsSessionManager
from src.exceptions.auth_exceptions import AuthenticationException
from src.exceptions.config_exceptions import ConfigException


async def run(container: ApplicationContainer, verify: bool) -> None:
    aws_config = await container.config_resolver().resolve()
    logger.info(
        f"AWS config resolved for region {aws_config.region} "
        f"(credentials expire: {aws_config.credentials.expiration or 'never'})"
    )

    if verify:
        manager: AwsSessionManager = container.session_manager_factory(aws_config)
        sts = await manager.client("sts")
        identity = await asyncio.to_thread(sts.get_caller_identity)
        logger.info(f"Authenticated as {identity['Arn']}")


def main(config_path: Optional[str] = None, verify: bool = False):
    container = ApplicationContainer(config_path=config_path)

    try:
        config = container.config()
        if config.verbose:
            logger.remove()
            logger.add(sys.stdout, level="DEBUG")
    except ConfigException as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    try:
        asyncio.run(run(container, verify))
    except ConfigException as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)
    except AuthenticationException as e:
        logger.error(f"Authentication error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Shutdown requested")
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "config",
        help="The .config.env configuration file",
        type=str,
        default=None,
        nargs="?",
    )
    parser.add_argument(
        "--verify",
        help="Call STS GetCallerIdentity with the resolved credentials",
        action="store_true",
    )
    args = parser.parse_args()

    env_file: Optional[str] = args.config

    main(env_file, args.verify)
    sys.exit(0)
