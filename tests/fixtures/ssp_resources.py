"""
Test fixtures for SSP resources.

This module provides sample SSP custom resources for testing
purposes, including valid and invalid configurations.
"""

import copy
from typing import Any

TEMPLATES_NAMESPACE = "test-templates-ns"

# Minimal valid SSP
MINIMAL_SSP = {
    "apiVersion": "ssp.kubevirt.io/v1beta2",
    "kind": "SSP",
    "metadata": {"name": "test-ssp", "namespace": "test-ns"},
    "spec": {
        "commonTemplates": {"namespace": TEMPLATES_NAMESPACE},
    },
}

# SSP with all validated sections populated
COMPLETE_SSP = {
    "apiVersion": "ssp.kubevirt.io/v1beta2",
    "kind": "SSP",
    "metadata": {
        "name": "ssp-kubevirt-hyperconverged",
        "namespace": "kubevirt-hyperconverged",
        "labels": {"app": "kubevirt-hyperconverged"},
        "resourceVersion": "12345",
    },
    "spec": {
        "commonTemplates": {
            "namespace": "openshift",
            "dataImportCronTemplates": [
                {
                    "metadata": {"name": "centos-stream9-image-cron"},
                    "spec": {
                        "schedule": "0 */12 * * *",
                        "managedDataSource": "centos-stream9",
                        "template": {
                            "spec": {
                                "source": {
                                    "registry": {
                                        "url": "docker://quay.io/containerdisks/centos-stream:9"
                                    }
                                }
                            }
                        },
                    },
                },
                {
                    "metadata": {
                        "name": "fedora-image-cron",
                        "namespace": "custom-images",
                    },
                    "spec": {"managedDataSource": "fedora"},
                },
            ],
        },
        "commonInstancetypes": {
            "url": "https://github.com/kubevirt/common-instancetypes/VirtualMachineClusterInstancetypes?ref=v1.0.0"
        },
        "templateValidator": {"replicas": 2},
    },
}

# SSP missing the required commonTemplates section
INVALID_SSP_NO_COMMON_TEMPLATES = {
    "apiVersion": "ssp.kubevirt.io/v1beta2",
    "kind": "SSP",
    "metadata": {"name": "broken-ssp", "namespace": "test-ns"},
    "spec": {},
}


def make_ssp(
    name: str = "test-ssp",
    namespace: str = "test-ns",
    templates_namespace: str = TEMPLATES_NAMESPACE,
    data_import_cron_templates: list[dict[str, Any]] | None = None,
    common_instancetypes: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build an SSP resource dictionary."""
    ssp = copy.deepcopy(MINIMAL_SSP)
    ssp["metadata"] = {"name": name, "namespace": namespace}
    ssp["spec"]["commonTemplates"]["namespace"] = templates_namespace
    if data_import_cron_templates is not None:
        ssp["spec"]["commonTemplates"]["dataImportCronTemplates"] = (
            data_import_cron_templates
        )
    if common_instancetypes is not None:
        ssp["spec"]["commonInstancetypes"] = common_instancetypes
    return ssp
