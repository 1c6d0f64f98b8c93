class ConfigException(Exception):
    """Base for all configuration failures"""

    pass


class ConfigValueException(ConfigException):
    pass


class ConfigTypeException(ConfigException):
    pass


class MissingDevCredentialsException(ConfigException):
    def __init__(self, access_key_name: str, secret_key_name: str):
        self.required_keys = (access_key_name, secret_key_name)

        message: str = (
            "Development AWS keys must be set in the development credentials "
            f"source. Define 2 keys: {access_key_name} & {secret_key_name}"
        )
        super().__init__(message)
