"""
Kubernetes utilities for the SSP operator.

This module provides the read-only view of cluster state that the admission
validator consults:
- Kubernetes client configuration
- Cluster-wide listing of SSP resources
- Namespace lookup with a distinguishable "not found" result

All reads go through the synchronous kubernetes client and are pushed to a
worker thread so the kopf event loop is never blocked.
"""

import asyncio
import logging
from typing import Any, Protocol

from kubernetes import client, config
from kubernetes.client.rest import ApiException

from ssp_operator.constants import SSP_GROUP, SSP_PLURAL, SSP_VERSION
from ssp_operator.errors import ConfigurationError, KubernetesAPIError

logger = logging.getLogger(__name__)


class ClusterReader(Protocol):
    """Read-only access to the cluster objects the validator needs."""

    async def list_ssps(self) -> list[dict[str, Any]]:
        """Return every SSP resource across all namespaces."""
        ...

    async def get_namespace(self, name: str) -> dict[str, Any] | None:
        """Return the namespace object, or None if it does not exist."""
        ...


def load_kubernetes_config() -> None:
    """
    Load Kubernetes configuration.

    Tries in-cluster configuration first and falls back to the local
    kubeconfig for development.

    Raises:
        ConfigurationError: If neither configuration source is available
    """
    try:
        config.load_incluster_config()
        logger.debug("Loaded in-cluster Kubernetes configuration")
    except config.ConfigException:
        try:
            config.load_kube_config()
            logger.debug("Loaded kubeconfig from local environment")
        except config.ConfigException as e:
            logger.error(f"Failed to load Kubernetes configuration: {e}")
            raise ConfigurationError(
                f"Failed to load Kubernetes configuration: {e}",
                user_action="Run inside a cluster or provide a valid kubeconfig",
            ) from e


def _api_error(action: str, e: ApiException) -> KubernetesAPIError:
    return KubernetesAPIError(
        f"Failed to {action}: {e.status} {e.reason}",
        reason=e.reason,
        status=e.status,
        cause=e,
    )


class KubernetesClusterReader:
    """ClusterReader backed by the official kubernetes client."""

    def __init__(self, api_client: client.ApiClient | None = None):
        self.api_client = api_client

    def _sync_list_ssps(self) -> dict[str, Any]:
        """Synchronous helper to list SSPs (runs in thread pool)."""
        api = client.CustomObjectsApi(self.api_client)
        return api.list_cluster_custom_object(
            group=SSP_GROUP,
            version=SSP_VERSION,
            plural=SSP_PLURAL,
        )

    def _sync_read_namespace(self, name: str) -> Any:
        """Synchronous helper to read a namespace (runs in thread pool)."""
        api = client.CoreV1Api(self.api_client)
        return api.read_namespace(name=name)

    async def list_ssps(self) -> list[dict[str, Any]]:
        """
        List SSP resources across all namespaces.

        Returns:
            List of SSP resource dictionaries

        Raises:
            KubernetesAPIError: If the list call fails
        """
        try:
            response = await asyncio.to_thread(self._sync_list_ssps)
        except ApiException as e:
            logger.error(f"Failed to list SSP resources: {e.status} {e.reason}")
            raise _api_error("list SSP resources", e) from e

        items = response.get("items", [])
        logger.debug(f"Found {len(items)} SSP resources")
        return items

    async def get_namespace(self, name: str) -> dict[str, Any] | None:
        """
        Get a namespace by name.

        Args:
            name: Namespace name

        Returns:
            Namespace as a dictionary, or None if it does not exist

        Raises:
            KubernetesAPIError: If the read fails for any reason other than 404
        """
        try:
            namespace = await asyncio.to_thread(self._sync_read_namespace, name)
        except ApiException as e:
            if e.status == 404:
                logger.debug(f"Namespace {name} not found")
                return None
            logger.error(f"Failed to read namespace {name}: {e.status} {e.reason}")
            raise _api_error(f"read namespace {name}", e) from e

        if hasattr(namespace, "to_dict"):
            return namespace.to_dict()
        return namespace
