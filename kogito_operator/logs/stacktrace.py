"""
Attach the caller's stack to high severity records
"""

# Standard
import inspect
import logging
import os
import traceback

# First Party
import alog

# Frames inside these directories belong to the logging machinery
_LOGGING_DIRS = tuple(
    os.path.join(os.path.normcase(os.path.dirname(mod.__file__)), "")
    for mod in (logging, alog)
)
_THIS_FILE = os.path.normcase(__file__)

STACK_HEADER = "Stack (most recent call last):\n"


def _is_logging_frame(frame) -> bool:
    filename = os.path.normcase(frame.f_code.co_filename)
    return filename == _THIS_FILE or filename.startswith(_LOGGING_DIRS)


class StacktraceFilter(logging.Filter):
    """Filter that stores the stack of the logging call on every record at or
    above the given level. Records that already carry a stack are untouched.
    """

    def __init__(self, level: int = logging.ERROR):
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno >= self.level and not record.stack_info:
            frame = inspect.currentframe()
            while frame is not None and _is_logging_frame(frame):
                frame = frame.f_back
            record.stack_info = STACK_HEADER + "".join(
                traceback.format_stack(frame)
            ).rstrip("\n")
        return True
