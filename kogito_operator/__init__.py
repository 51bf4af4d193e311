"""
Package exports
"""

# Local
from . import config, constants, definitions, logs
from .definitions import (
    DefinitionKind,
    KogitoAppDescriptor,
    add_default_identity,
    add_default_meta,
    lookup,
    set_group_version_kind,
)
from .exceptions import (
    ConfigError,
    KogitoError,
    ManifestError,
    UnknownKindError,
    assert_config,
    assert_manifest,
)
from .logs import configure_logging, get_logger
