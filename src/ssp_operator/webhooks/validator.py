"""
Admission validator for SSP resources.

The validator runs an ordered, fail-fast chain of checks:

CREATE: singleton, common templates namespace, DataImportCron templates,
        common instancetypes URL
UPDATE: DataImportCron templates, common instancetypes URL
DELETE: always allowed

Cluster state is read through a ClusterReader on every call; nothing is
cached between calls or between checks.
"""

import logging

from ssp_operator.constants import (
    ERROR_SSP_ALREADY_EXISTS,
    ERROR_TEMPLATES_NAMESPACE_MISSING,
)
from ssp_operator.errors import ValidationError
from ssp_operator.models.ssp import SSP
from ssp_operator.utils.kubernetes import ClusterReader
from ssp_operator.utils.validation import (
    validate_common_instancetypes,
    validate_data_import_cron_templates,
)

logger = logging.getLogger(__name__)


class SSPValidator:
    """Validates SSP resources against cluster state."""

    def __init__(self, reader: ClusterReader):
        self.reader = reader

    async def validate_create(self, ssp: SSP) -> None:
        """
        Validate creation of an SSP resource.

        Raises:
            ValidationError: If the resource violates a constraint
            KubernetesAPIError: If cluster state cannot be read
        """
        await self._check_singleton()
        await self._check_templates_namespace(ssp.templates_namespace)
        self._check_spec(ssp)

    async def validate_update(self, old: SSP | None, new: SSP) -> None:
        """
        Validate an update of an SSP resource.

        The singleton and namespace existence checks only apply on creation,
        so a changed commonTemplates.namespace is accepted as is. The previous
        state is only logged and may be None when it could not be read.

        Raises:
            ValidationError: If the new resource violates a constraint
        """
        if old is not None and old.templates_namespace != new.templates_namespace:
            logger.info(
                f"SSP {new.name} changes common templates namespace from "
                f"{old.templates_namespace} to {new.templates_namespace}"
            )
        self._check_spec(new)

    async def validate_delete(self, name: str | None) -> None:
        """Deletion of an SSP resource is always allowed."""
        logger.debug(f"Allowing deletion of SSP {name}")

    async def _check_singleton(self) -> None:
        existing = await self.reader.list_ssps()
        if existing:
            metadata = existing[0].get("metadata") or {}
            raise ValidationError(
                ERROR_SSP_ALREADY_EXISTS.format(
                    metadata.get("namespace") or "", metadata.get("name") or ""
                )
            )

    async def _check_templates_namespace(self, namespace: str) -> None:
        if await self.reader.get_namespace(namespace) is None:
            raise ValidationError(
                ERROR_TEMPLATES_NAMESPACE_MISSING.format(namespace),
                field="spec.commonTemplates.namespace",
            )

    @staticmethod
    def _check_spec(ssp: SSP) -> None:
        validate_data_import_cron_templates(
            ssp.spec.common_templates.data_import_cron_templates
        )
        validate_common_instancetypes(ssp.spec.common_instancetypes)
