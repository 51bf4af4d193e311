"""
This module holds common helper functions for making testing easy
"""

# Standard
from contextlib import contextmanager
import copy
import os

# First Party
import alog

# Local
from kogito_operator.config import library_config as config_detail_dict
from kogito_operator.definitions import KogitoAppDescriptor
from kogito_operator.utils import merge_configs

log = alog.use_channel("TEST")

TEST_APP_NAME = "test-app"
TEST_NAMESPACE = "test"


def configure_logging():
    alog.configure(
        os.environ.get("LOG_LEVEL", "off"),
        os.environ.get("LOG_FILTERS", ""),
        formatter="json"
        if os.environ.get("LOG_JSON", "").lower() == "true"
        else "pretty",
        thread_id=os.environ.get("LOG_THREAD_ID", "").lower() == "true",
    )


configure_logging()


def setup_kogito_app(name=TEST_APP_NAME, namespace=TEST_NAMESPACE, **kwargs):
    """Create a KogitoApp CR manifest with the given application name"""
    return merge_configs(
        {
            "apiVersion": "app.kiegroup.org/v1alpha1",
            "kind": "KogitoApp",
            "metadata": {"name": name, "namespace": namespace},
            "spec": {"name": name},
        },
        kwargs,
    )


def setup_descriptor(name=TEST_APP_NAME):
    return KogitoAppDescriptor.from_manifest(setup_kogito_app(name=name))


def setup_resource(name="test-resource", namespace=TEST_NAMESPACE, metadata=None):
    """Create a bare resource dict as a resource builder would before the
    default identity is applied
    """
    resource_metadata = {"name": name, "namespace": namespace}
    resource_metadata.update(copy.deepcopy(metadata or {}))
    return {"metadata": resource_metadata, "spec": {}}


@contextmanager
def library_config(**config_overrides):
    """This context manager sets library config values temporarily and reverts
    them on completion
    """
    old_vals = {}
    for key, val in config_overrides.items():
        if key in config_detail_dict:
            old_vals[key] = config_detail_dict[key]
        config_detail_dict[key] = val

    try:
        yield
    finally:
        for key in config_overrides:
            if key in old_vals:
                config_detail_dict[key] = old_vals[key]
            else:
                del config_detail_dict[key]


class FakeClock:
    """Manually advanced clock for time based filters"""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        log.debug3("Advancing fake clock by %s", seconds)
        self.now += seconds
