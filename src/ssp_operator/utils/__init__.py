"""
Utils package - Utility modules for SSP operator functionality.

Contains helper modules for:
- Read-only Kubernetes cluster access
- Cluster-independent resource validation
"""

from ssp_operator.utils.kubernetes import ClusterReader, KubernetesClusterReader
from ssp_operator.utils.validation import (
    validate_common_instancetypes,
    validate_data_import_cron_templates,
    validate_remote_source_url,
)

__all__ = [
    "ClusterReader",
    "KubernetesClusterReader",
    "validate_common_instancetypes",
    "validate_data_import_cron_templates",
    "validate_remote_source_url",
]
