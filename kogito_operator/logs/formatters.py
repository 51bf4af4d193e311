"""
Formatters for the two logger profiles
"""

# Standard
import logging

# First Party
from alog import AlogJsonFormatter, AlogPrettyFormatter


class KogitoJsonFormatter(AlogJsonFormatter):
    """One JSON object per record. Extends AlogJsonFormatter with the logger
    name and process/thread information.
    """

    _FIELDS_TO_PRINT = AlogJsonFormatter._FIELDS_TO_PRINT + [
        "logger",
        "process",
        "threadName",
    ]

    def format(self, record: logging.LogRecord) -> str:
        record.logger = record.name
        record.message = record.getMessage()
        return super().format(record)


class KogitoPrettyFormatter(AlogPrettyFormatter):
    """Human readable lines. Any stack stored on the record is printed below
    the message.
    """

    def format(self, record: logging.LogRecord) -> str:
        stack_info = record.stack_info
        record.stack_info = None
        try:
            formatted = super().format(record)
        finally:
            record.stack_info = stack_info
        if stack_info:
            formatted = f"{formatted}\n{self.formatStack(stack_info)}"
        return formatted
