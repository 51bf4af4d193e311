"""
The logger profile derived from the debug toggle in the environment
"""

# Standard
from dataclasses import dataclass
import os

# Local
from .. import config, constants

# Literals parsed as true for the boolean env toggle
_TRUE_VALUES = {"1", "t", "T", "TRUE", "true", "True"}


def get_env(key: str, fallback: str) -> str:
    """Get an env variable, falling back when it is not set"""
    return os.environ.get(key, fallback)


def get_bool_env(key: str) -> bool:
    """Get an env variable as a boolean. Absent or unparseable values are
    False.
    """
    return get_env(key, "false") in _TRUE_VALUES


@dataclass(frozen=True)
class LoggerProfile:
    """How the process-wide logger encodes, filters and samples records"""

    encoding: str
    level: str
    stacktrace_on_error: bool
    sampling: bool

    @property
    def name(self) -> str:
        if self.encoding == constants.ENCODING_CONSOLE:
            return constants.PROFILE_DEVELOPMENT
        return constants.PROFILE_PRODUCTION

    @classmethod
    def from_debug(cls, debug: bool) -> "LoggerProfile":
        if debug:
            return DEVELOPMENT
        return PRODUCTION

    @classmethod
    def from_env(cls) -> "LoggerProfile":
        """Read the debug toggle from the environment. This is not cached, so a
        changed value is picked up on the next call.
        """
        return cls.from_debug(get_bool_env(config.debug_env_var))


DEVELOPMENT = LoggerProfile(
    encoding=constants.ENCODING_CONSOLE,
    level="debug",
    stacktrace_on_error=True,
    sampling=False,
)

PRODUCTION = LoggerProfile(
    encoding=constants.ENCODING_JSON,
    level="info",
    stacktrace_on_error=False,
    sampling=True,
)
