from enum import Enum


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARNING"
    ERROR = "ERROR"


DEFAULT_SERVICE_NAME = "content-repository"
DEFAULT_LEVEL = LogLevel.INFO
DEFAULT_ENABLE_CONSOLE = True
DEFAULT_COLORIZE = True

LOG_FORMAT_TIME = "<green>{time:YYYY-MM-DD HH:mm:ss}</green>"
LOG_FORMAT_LEVEL = "<level>{level: <7}</level>"
LOG_FORMAT_SERVICE = "<magenta>{extra[service]}</magenta>"
LOG_FORMAT_TRACE = "<cyan>{extra[trace_id]: <16}</cyan>"
LOG_FORMAT_LOCATION = "<cyan>{name}</cyan>:<cyan>{line}</cyan>"
LOG_FORMAT_MESSAGE = "<level>{message}</level>"

SERVICE_KEY = "service"
TRACE_ID_KEY = "trace_id"
REQUEST_ID_KEY = "request_id"
