"""
Helpers that give every resource the operator emits a consistent identity:
ownership annotations, the application label and the apiVersion/kind fields.

Resources and metadata blocks may be plain dicts (as produced by the resource
builders) or kubernetes client models such as V1Service / V1ObjectMeta.
"""

# Standard
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

# Third Party
from kubernetes.client import V1ObjectMeta

# First Party
import alog

# Local
from .. import constants
from ..exceptions import assert_manifest
from ..utils import nested_get
from .kinds import DefinitionKind, GroupVersionKind, parse_api_version

log = alog.use_channel("META")

# A metadata block is either a dict or a kubernetes client model
METADATA_TYPE = Union[Dict[str, Any], V1ObjectMeta]

## Descriptor ##################################################################


@dataclass(frozen=True)
class KogitoAppDescriptor:
    """The identity of the KogitoApp on whose behalf resources are created"""

    name: str

    @classmethod
    def from_manifest(cls, kogito_app: dict) -> "KogitoAppDescriptor":
        """Build the descriptor from a KogitoApp CR manifest (spec.name)"""
        name = nested_get(kogito_app, "spec.name")
        assert_manifest(name, "KogitoApp manifest has no spec.name")
        return cls(name=name)


## Field access ################################################################


def _get_field(obj: Any, dict_key: str, attr_name: str) -> Any:
    if isinstance(obj, dict):
        return obj.get(dict_key)
    return getattr(obj, attr_name)


def _set_field(obj: Any, dict_key: str, attr_name: str, value: Any):
    if isinstance(obj, dict):
        obj[dict_key] = value
    else:
        setattr(obj, attr_name, value)


## Metadata ####################################################################


def add_default_labels(
    labels: Optional[Dict[str, str]],
    kogito_app: KogitoAppDescriptor,
) -> Dict[str, str]:
    """Overlay the application label onto a label map

    Args:
        labels:  Optional[Dict[str, str]]
            The label map to update in place. A new map is created if None.
        kogito_app:  KogitoAppDescriptor
            The owning application

    Returns:
        labels:  Dict[str, str]
            The updated label map
    """
    if labels is None:
        labels = {}
    labels[constants.LABEL_KEY_APP_NAME] = kogito_app.name
    return labels


def add_default_meta(
    metadata: Optional[METADATA_TYPE],
    kogito_app: KogitoAppDescriptor,
):
    """Overlay the ownership annotations and the application label onto a
    resource's metadata block. Applying this more than once is the same as
    applying it once.

    Args:
        metadata:  Optional[METADATA_TYPE]
            The metadata block to update in place. If None, nothing is done.
        kogito_app:  KogitoAppDescriptor
            The owning application
    """
    if metadata is None:
        log.debug2("No metadata given. Skipping default metadata.")
        return
    assert kogito_app is not None, "add_default_meta requires a KogitoApp"

    # Client models copy dicts on assignment, so both maps are built first and
    # assigned last
    annotations = dict(_get_field(metadata, "annotations", "annotations") or {})
    annotations.update(constants.DEFAULT_ANNOTATIONS)
    _set_field(metadata, "annotations", "annotations", annotations)

    labels = _get_field(metadata, "labels", "labels")
    _set_field(
        metadata,
        "labels",
        "labels",
        add_default_labels(labels, kogito_app),
    )
    log.debug3("Added default metadata for app [%s]", kogito_app.name)


## Type identity ###############################################################


def set_group_version_kind(type_meta: Any, kind: DefinitionKind):
    """Set the apiVersion and kind of a resource from its catalog entry

    Args:
        type_meta:  Any
            The resource dict (apiVersion/kind keys) or client model
            (api_version/kind attributes) to update in place
        kind:  DefinitionKind
            The catalog entry for the resource
    """
    _set_field(type_meta, "apiVersion", "api_version", kind.api_version)
    _set_field(type_meta, "kind", "kind", kind.kind_name)


def get_group_version_kind(type_meta: Any) -> GroupVersionKind:
    """Read back the group, version and kind of a resource"""
    group_version = parse_api_version(
        _get_field(type_meta, "apiVersion", "api_version") or ""
    )
    return GroupVersionKind(
        group_version.group,
        group_version.version,
        _get_field(type_meta, "kind", "kind"),
    )


def add_default_identity(
    resource: Any,
    kogito_app: KogitoAppDescriptor,
    kind: DefinitionKind,
) -> Any:
    """Apply the default metadata and the apiVersion/kind to a whole resource

    Args:
        resource:  Any
            The resource dict or client model to update in place. A dict
            resource without a metadata block gets an empty one.
        kogito_app:  KogitoAppDescriptor
            The owning application
        kind:  DefinitionKind
            The catalog entry for the resource

    Returns:
        resource:  Any
            The updated resource
    """
    if isinstance(resource, dict):
        metadata = resource.setdefault("metadata", {})
    else:
        metadata = resource.metadata
    add_default_meta(metadata, kogito_app)
    set_group_version_kind(resource, kind)
    log.debug("Applied default identity to %s", kind)
    return resource
