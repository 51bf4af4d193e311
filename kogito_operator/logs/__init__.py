"""
Structured logging for the operator process
"""

# Local
from .factory import configure_logging, flush_handlers, get_logger
from .formatters import KogitoJsonFormatter, KogitoPrettyFormatter
from .profile import DEVELOPMENT, PRODUCTION, LoggerProfile, get_bool_env, get_env
from .sampling import LogSampler
from .stacktrace import StacktraceFilter
