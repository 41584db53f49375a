"""
Constants used throughout the SSP operator.

This module defines all constant values used by the operator including:
- SSP custom resource coordinates
- Well-known namespaces
- Admission error message templates
"""

# SSP custom resource coordinates
SSP_GROUP = "ssp.kubevirt.io"
SSP_VERSION = "v1beta2"
SSP_PLURAL = "ssps"
SSP_KIND = "SSP"

# Namespace where golden images are imported by default
GOLDEN_IMAGES_NAMESPACE = "kubevirt-os-images"

# Remote kustomize target rules for commonInstancetypes.url
REMOTE_SOURCE_SCHEMES = ("https://", "ssh://")
REMOTE_SOURCE_PIN_PARAMETERS = ("ref", "version")

# Admission operations
OPERATION_CREATE = "CREATE"
OPERATION_UPDATE = "UPDATE"
OPERATION_DELETE = "DELETE"

# Error message templates (user facing, keep stable)
ERROR_SSP_ALREADY_EXISTS = (
    "creation failed, an SSP CR already exists in namespace {}: {}"
)
ERROR_TEMPLATES_NAMESPACE_MISSING = (
    "creation failed, the configured namespace for common templates does not exist: {}"
)
ERROR_DATA_IMPORT_CRON_TEMPLATE_NAME = (
    "invalid dataImportCronTemplates[{}]: name is required (namespace: {})"
)
ERROR_REMOTE_SOURCE_SCHEME = (
    "only remote kustomize targets that use the https:// or ssh:// schemes are supported"
)
ERROR_REMOTE_SOURCE_PIN = (
    "the remote kustomize target must pin a revision with a ?ref= or ?version= "
    "query parameter"
)
ERROR_INVALID_SPEC = "Invalid SSP specification: {}"

