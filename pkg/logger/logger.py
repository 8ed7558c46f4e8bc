import sys
from typing import Optional, Iterator, Protocol, runtime_checkable
from contextvars import ContextVar
from contextlib import contextmanager
from loguru import logger as _loguru_logger  # type: ignore

from .constant import *
from .type import LoggerConfig

# Per-request identifiers, isolated across asyncio tasks
_trace_id_var: ContextVar[Optional[str]] = ContextVar(TRACE_ID_KEY, default=None)
_request_id_var: ContextVar[Optional[str]] = ContextVar(REQUEST_ID_KEY, default=None)


@runtime_checkable
class ILogger(Protocol):
    """Protocol defining the Logger interface."""

    def trace_context(
        self, trace_id: Optional[str] = None, request_id: Optional[str] = None
    ) -> Iterator[None]: ...

    def get_trace_id(self) -> Optional[str]: ...

    def get_request_id(self) -> Optional[str]: ...

    def debug(self, message: str, *args, **kwargs) -> None: ...

    def info(self, message: str, *args, **kwargs) -> None: ...

    def warning(self, message: str, *args, **kwargs) -> None: ...

    def error(self, message: str, *args, **kwargs) -> None: ...

    def exception(self, message: str, *args, **kwargs) -> None: ...


class Logger(ILogger):
    """Logger wrapper with trace ID support.

    Usage:
        logger = Logger(LoggerConfig(level="INFO"))

        with logger.trace_context(trace_id="req_123"):
            logger.info("Fetching posts")
    """

    def __init__(self, config: LoggerConfig):
        self.config = config
        self._loguru = _loguru_logger.bind(**{SERVICE_KEY: config.service_name})

        # Remove default handler
        _loguru_logger.remove()

        if self.config.enable_console:
            self._add_console_handler()

    def _add_console_handler(self) -> None:
        def format_record(record):
            record["extra"][TRACE_ID_KEY] = _trace_id_var.get() or ""
            record["extra"].setdefault(SERVICE_KEY, self.config.service_name)
            request_id = _request_id_var.get()
            if request_id:
                record["extra"][REQUEST_ID_KEY] = request_id
            return True

        format_str = (
            f"{LOG_FORMAT_TIME} | {LOG_FORMAT_LEVEL} | {LOG_FORMAT_SERVICE} | "
            f"{LOG_FORMAT_TRACE} | {LOG_FORMAT_LOCATION} - {LOG_FORMAT_MESSAGE}"
        )

        _loguru_logger.add(
            sys.stdout,
            colorize=self.config.colorize,
            format=format_str,
            level=self.config.level.value,
            filter=format_record,
        )

    @contextmanager
    def trace_context(
        self, trace_id: Optional[str] = None, request_id: Optional[str] = None
    ):
        """Bind trace/request ids to every record logged inside the block."""
        trace_token = _trace_id_var.set(trace_id) if trace_id else None
        request_token = _request_id_var.set(request_id) if request_id else None

        try:
            yield
        finally:
            if trace_token is not None:
                _trace_id_var.reset(trace_token)
            if request_token is not None:
                _request_id_var.reset(request_token)

    def get_trace_id(self) -> Optional[str]:
        return _trace_id_var.get()

    def get_request_id(self) -> Optional[str]:
        return _request_id_var.get()

    def debug(self, message: str, *args, **kwargs) -> None:
        self._loguru.opt(depth=1).debug(message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs) -> None:
        self._loguru.opt(depth=1).info(message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs) -> None:
        self._loguru.opt(depth=1).warning(message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs) -> None:
        self._loguru.opt(depth=1).error(message, *args, **kwargs)

    def exception(self, message: str, *args, **kwargs) -> None:
        self._loguru.opt(depth=1).exception(message, *args, **kwargs)


__all__ = [
    "Logger",
    "ILogger",
    "LoggerConfig",
]
