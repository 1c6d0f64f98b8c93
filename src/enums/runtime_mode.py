from enum import Enum


class RuntimeMode(Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
