"""
The closed catalog of resource kinds the operator emits. Each kind carries the
API group/version it belongs to and whether it is only served by OpenShift.
"""

# Standard
from enum import Enum
from typing import List, NamedTuple

# First Party
import alog

# Local
from ..constants import API_VERSION_DELIM
from ..exceptions import UnknownKindError

log = alog.use_channel("KINDS")

## Identity tuples #############################################################


class GroupVersion(NamedTuple):
    """The API coordinate a kind belongs to. The core group is the empty
    string.
    """

    group: str
    version: str

    @property
    def api_version(self) -> str:
        """Render as the apiVersion field of a resource"""
        if not self.group:
            return self.version
        return f"{self.group}{API_VERSION_DELIM}{self.version}"


class GroupVersionKind(NamedTuple):
    """Full type identity of a resource"""

    group: str
    version: str
    kind: str

    @property
    def group_version(self) -> GroupVersion:
        return GroupVersion(self.group, self.version)


def parse_api_version(api_version: str) -> GroupVersion:
    """Parse an apiVersion string into its group and version

    Args:
        api_version:  str
            Either "<version>" for the core group or "<group>/<version>"

    Returns:
        group_version:  GroupVersion
            The parsed pair
    """
    group, delim, version = api_version.rpartition(API_VERSION_DELIM)
    if not delim:
        return GroupVersion("", version)
    return GroupVersion(group, version)


## Catalog groups ##############################################################

CORE_V1 = GroupVersion("", "v1")
RBAC_V1 = GroupVersion("rbac.authorization.k8s.io", "v1")
BUILD_V1 = GroupVersion("build.openshift.io", "v1")
APPS_V1 = GroupVersion("apps.openshift.io", "v1")
ROUTE_V1 = GroupVersion("route.openshift.io", "v1")
IMAGE_V1 = GroupVersion("image.openshift.io", "v1")

## Catalog #####################################################################


class DefinitionKind(Enum):
    """A resource kind the operator creates on a Kubernetes/OpenShift cluster.

    Adding a new kind of resource to the operator requires adding a member
    here.
    """

    SERVICE = ("Service", False, CORE_V1)
    BUILD_CONFIG = ("BuildConfig", True, BUILD_V1)
    DEPLOYMENT_CONFIG = ("DeploymentConfig", True, APPS_V1)
    ROLE_BINDING = ("RoleBinding", False, RBAC_V1)
    SERVICE_ACCOUNT = ("ServiceAccount", False, CORE_V1)
    ROUTE = ("Route", True, ROUTE_V1)
    IMAGE_STREAM_TAG = ("ImageStreamTag", True, IMAGE_V1)
    BUILD_REQUEST = ("BuildRequest", True, BUILD_V1)

    def __init__(self, kind_name: str, is_openshift_only: bool, group_version):
        self.kind_name = kind_name
        self.is_openshift_only = is_openshift_only
        self.group_version = group_version

    # NOTE: Enum reserves the "name" attribute for the member name
    #   (e.g. BUILD_CONFIG), so the kind string lives on kind_name

    @property
    def api_version(self) -> str:
        return self.group_version.api_version

    @property
    def group_version_kind(self) -> GroupVersionKind:
        return GroupVersionKind(
            self.group_version.group,
            self.group_version.version,
            self.kind_name,
        )

    def is_available(self, openshift: bool) -> bool:
        """Whether this kind can be created on a cluster

        Args:
            openshift:  bool
                True if the cluster serves the OpenShift extension APIs

        Returns:
            available:  bool
                False only for OpenShift-only kinds on a vanilla cluster
        """
        return openshift or not self.is_openshift_only

    def __str__(self):
        return f"{self.api_version}/{self.kind_name}"


# Index of the catalog by kind name. Built once at import and never mutated.
_KINDS_BY_NAME = {kind.kind_name: kind for kind in DefinitionKind}
assert len(_KINDS_BY_NAME) == len(DefinitionKind), "Duplicate kind names found"


def lookup(kind_name: str) -> DefinitionKind:
    """Get the catalog entry for a kind name

    Args:
        kind_name:  str
            The resource kind (e.g. "Route")

    Returns:
        kind:  DefinitionKind
            The matching catalog entry

    Raises:
        UnknownKindError: The name is not in the catalog
    """
    kind = _KINDS_BY_NAME.get(kind_name)
    if kind is None:
        log.debug("No catalog entry for kind [%s]", kind_name)
        raise UnknownKindError(kind_name)
    return kind


def supported_kinds(openshift: bool) -> List[DefinitionKind]:
    """Get the catalog entries that can be created on a cluster

    Args:
        openshift:  bool
            True if the cluster serves the OpenShift extension APIs

    Returns:
        kinds:  List[DefinitionKind]
            The available kinds in catalog order
    """
    kinds = [kind for kind in DefinitionKind if kind.is_available(openshift)]
    log.debug2("Supported kinds (openshift=%s): %s", openshift, kinds)
    return kinds
