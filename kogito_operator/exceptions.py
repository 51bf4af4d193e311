"""
This module implements custom exceptions
"""

## Base Error ##################################################################


class KogitoError(Exception):
    """Base class for all kogito_operator exceptions"""

    def __init__(self, message: str, is_fatal_error: bool):
        """Construct with a flag indicating whether this is a fatal error. This
        will be a static property of all children.
        """
        super().__init__(message)
        self._is_fatal_error = is_fatal_error

    @property
    def is_fatal_error(self):
        """Property indicating whether or not this error should abort the
        current reconciliation rather than be retried
        """
        return self._is_fatal_error


## Fatal Errors ################################################################


class KogitoFatalError(KogitoError):
    """A KogitoFatalError indicates a programming or configuration mistake that
    will not resolve by retrying
    """

    def __init__(self, message: str = ""):
        super().__init__(message=message, is_fatal_error=True)


class ConfigError(KogitoFatalError):
    """Exception caused by invalid library configuration"""


class ManifestError(KogitoFatalError):
    """Exception caused by a custom resource manifest missing required fields"""


class UnknownKindError(KogitoFatalError):
    """Exception caused by looking up a resource kind that is not part of the
    closed kind catalog
    """

    def __init__(self, kind_name: str = ""):
        self.kind_name = kind_name
        super().__init__(f"Unknown resource kind [{kind_name}]")


## Assertions ##################################################################


def assert_config(condition: bool, message: str = ""):
    """Replacement for assert() which will throw a ConfigError. This should be
    used when the library config holds values that can't be used.
    """
    if not condition:
        raise ConfigError(message)


def assert_manifest(condition: bool, message: str = ""):
    """Replacement for assert() which will throw a ManifestError. This should
    be used when reading required fields from a custom resource manifest.
    """
    if not condition:
        raise ManifestError(message)
