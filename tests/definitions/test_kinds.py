"""
Tests for the resource kind catalog
"""

# Third Party
import pytest

# Local
from kogito_operator.definitions import kinds
from kogito_operator.definitions.kinds import DefinitionKind, GroupVersion
from kogito_operator.exceptions import UnknownKindError

# Expected (group, version, openshift only) per kind name
EXPECTED_CATALOG = {
    "Service": ("", "v1", False),
    "BuildConfig": ("build.openshift.io", "v1", True),
    "DeploymentConfig": ("apps.openshift.io", "v1", True),
    "RoleBinding": ("rbac.authorization.k8s.io", "v1", False),
    "ServiceAccount": ("", "v1", False),
    "Route": ("route.openshift.io", "v1", True),
    "ImageStreamTag": ("image.openshift.io", "v1", True),
    "BuildRequest": ("build.openshift.io", "v1", True),
}


## lookup ######################################################################


def test_catalog_contents():
    """Make sure the catalog holds exactly the expected kinds"""
    assert {
        kind.kind_name: (
            kind.group_version.group,
            kind.group_version.version,
            kind.is_openshift_only,
        )
        for kind in DefinitionKind
    } == EXPECTED_CATALOG


def test_kind_names_unique():
    """Make sure no kind name is used twice"""
    names = [kind.kind_name for kind in DefinitionKind]
    assert len(names) == len(set(names))


@pytest.mark.parametrize("kind", list(DefinitionKind))
def test_lookup_all_kinds(kind):
    """Make sure every catalog entry can be looked up by its name"""
    assert kinds.lookup(kind.kind_name) is kind


def test_lookup_unknown_kind():
    """Make sure an unknown name raises a fatal error"""
    with pytest.raises(UnknownKindError) as exc_info:
        kinds.lookup("Deployment")
    assert exc_info.value.is_fatal_error
    assert exc_info.value.kind_name == "Deployment"


def test_lookup_is_case_sensitive():
    """Make sure lookups match the exact kind name"""
    with pytest.raises(UnknownKindError):
        kinds.lookup("service")


## availability ################################################################


def test_is_available():
    """Make sure OpenShift only kinds are unavailable on vanilla clusters"""
    assert DefinitionKind.ROUTE.is_available(openshift=True)
    assert not DefinitionKind.ROUTE.is_available(openshift=False)
    assert DefinitionKind.SERVICE.is_available(openshift=True)
    assert DefinitionKind.SERVICE.is_available(openshift=False)


def test_supported_kinds():
    """Make sure supported_kinds filters on the OpenShift flag in catalog
    order
    """
    assert kinds.supported_kinds(openshift=False) == [
        DefinitionKind.SERVICE,
        DefinitionKind.ROLE_BINDING,
        DefinitionKind.SERVICE_ACCOUNT,
    ]
    assert kinds.supported_kinds(openshift=True) == list(DefinitionKind)


## api versions ################################################################


def test_api_version():
    """Make sure the core group renders without a group prefix"""
    assert DefinitionKind.SERVICE.api_version == "v1"
    assert DefinitionKind.ROUTE.api_version == "route.openshift.io/v1"
    assert DefinitionKind.ROLE_BINDING.api_version == "rbac.authorization.k8s.io/v1"
    assert str(DefinitionKind.BUILD_CONFIG) == "build.openshift.io/v1/BuildConfig"


def test_group_version_kind():
    """Make sure the full identity triple is exposed"""
    gvk = DefinitionKind.IMAGE_STREAM_TAG.group_version_kind
    assert gvk == ("image.openshift.io", "v1", "ImageStreamTag")
    assert gvk.group_version == GroupVersion("image.openshift.io", "v1")


@pytest.mark.parametrize(
    ["api_version", "expected"],
    [
        ("v1", GroupVersion("", "v1")),
        ("route.openshift.io/v1", GroupVersion("route.openshift.io", "v1")),
        ("app.kiegroup.org/v1alpha1", GroupVersion("app.kiegroup.org", "v1alpha1")),
    ],
)
def test_parse_api_version(api_version, expected):
    """Make sure apiVersion strings parse into group and version"""
    assert kinds.parse_api_version(api_version) == expected
    assert expected.api_version == api_version
