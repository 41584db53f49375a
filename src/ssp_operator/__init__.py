"""
SSP Operator - admission control for the KubeVirt SSP custom resource.

This package provides a Kopf-based validating admission webhook that:
- Keeps the SSP resource a cluster-wide singleton
- Verifies the common templates namespace exists on creation
- Validates DataImportCron templates and common instancetype sources
"""

__version__ = "0.1.0"
