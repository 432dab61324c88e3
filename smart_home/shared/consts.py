from enum import Enum


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class EnumLogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class EnumDeviceKind(str, Enum):
    LIGHT_BULB = "light_bulb"
    THERMOSTAT = "thermostat"
    SMART_OUTLET = "smart_outlet"


SECONDS_PER_HOUR = 3600.0
