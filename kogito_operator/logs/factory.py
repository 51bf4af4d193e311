"""
Process-wide structured logging setup.

get_logger installs a logger configured for the current profile as the sink of
the root logger (so libraries that log through the standard logging module
share it) and returns a channel logger scoped to the given name. The profile is
re-derived from the environment on every call, so changing DEBUG takes effect
on the next call without a restart.
"""

# Standard
from typing import IO, Optional
import logging
import threading

# First Party
import alog

# Local
from .. import config, constants
from .formatters import KogitoJsonFormatter, KogitoPrettyFormatter
from .profile import LoggerProfile
from .sampling import LogSampler
from .stacktrace import StacktraceFilter

log = alog.use_channel("LOGS")

# Serializes replacement of the root handler
_configure_lock = threading.Lock()


def flush_handlers():
    """Synchronously flush every handler attached to the root logger"""
    for handler in logging.getLogger().handlers:
        handler.flush()


def _make_handler(profile: LoggerProfile, stream: Optional[IO]) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    if profile.stacktrace_on_error:
        handler.addFilter(StacktraceFilter(logging.ERROR))
    if profile.sampling:
        handler.addFilter(
            LogSampler(
                window_seconds=config.log_sampling.window_seconds,
                first=config.log_sampling.first,
                thereafter=config.log_sampling.thereafter,
            )
        )
    return handler


def _make_formatter(profile: LoggerProfile) -> logging.Formatter:
    if profile.encoding == constants.ENCODING_JSON:
        return KogitoJsonFormatter()
    return KogitoPrettyFormatter()


def configure_logging(
    profile: Optional[LoggerProfile] = None,
    stream: Optional[IO] = None,
) -> LoggerProfile:
    """Install the process-wide log sink. This is the init path at process
    start; calling it again replaces the sink.

    Args:
        profile:  Optional[LoggerProfile]
            The profile to configure. If None, it is derived from the
            environment.
        stream:  Optional[IO]
            The stream to write to. Defaults to stderr.

    Returns:
        profile:  LoggerProfile
            The profile that was installed
    """
    if profile is None:
        profile = LoggerProfile.from_env()

    with _configure_lock:
        root_logger = logging.getLogger()
        flush_handlers()
        for old_handler in list(root_logger.handlers):
            root_logger.removeHandler(old_handler)

        handler = _make_handler(profile, stream)
        alog.configure(
            default_level=profile.level,
            filters=config.log_filters,
            formatter=_make_formatter(profile),
            thread_id=config.log_thread_id,
            handler_generator=lambda: handler,
        )
        flush_handlers()

    log.debug("Configured %s logging", profile.name)
    return profile


def get_logger(name: str):
    """Configure the process-wide sink for the current environment and get a
    logger whose records are tagged with the given name

    Args:
        name:  str
            The name of the component acquiring the logger

    Returns:
        logger:  alog channel logger
            The named logger
    """
    configure_logging()
    return alog.use_channel(name)
