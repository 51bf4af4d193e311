"""
Resource kind catalog and default resource identity helpers
"""

# Local
from .kinds import (
    DefinitionKind,
    GroupVersion,
    GroupVersionKind,
    lookup,
    parse_api_version,
    supported_kinds,
)
from .meta import (
    KogitoAppDescriptor,
    add_default_identity,
    add_default_labels,
    add_default_meta,
    get_group_version_kind,
    set_group_version_kind,
)
