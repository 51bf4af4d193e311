"""
Shared module to hold constant values for the library
"""

# Ownership annotations stamped onto every resource the operator emits
MANAGED_BY_ANNOTATION_NAME = "org.kie.kogito/managed-by"
OPERATOR_CRD_ANNOTATION_NAME = "org.kie.kogito/operator-crd"

# Identity values for the ownership annotations
OPERATOR_NAME = "Kogito Operator"
OPERATOR_CRD_KIND = "KogitoApp"

# Annotations overlaid by add_default_meta. Any caller-supplied value under one
# of these keys is replaced.
DEFAULT_ANNOTATIONS = {
    MANAGED_BY_ANNOTATION_NAME: OPERATOR_NAME,
    OPERATOR_CRD_ANNOTATION_NAME: OPERATOR_CRD_KIND,
}

# The default label added to all resources. Its value is the application name.
LABEL_KEY_APP_NAME = "app"

# Delimiter used for nested dict keys
NESTED_DICT_DELIM = "."

# Delimiter between the group and version in an apiVersion string
API_VERSION_DELIM = "/"

# Logger profile names
PROFILE_DEVELOPMENT = "development"
PROFILE_PRODUCTION = "production"

# Log encodings
ENCODING_CONSOLE = "console"
ENCODING_JSON = "json"
