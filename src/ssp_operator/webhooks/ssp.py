"""
Validating admission webhook for SSP resources.

This webhook validates SSP configurations before they are accepted by
Kubernetes, enforcing:
- One SSP per cluster
- Existing namespace for common templates (on creation)
- Named DataImportCron templates
- Pinned https:// or ssh:// sources for common instancetypes
"""

import logging
from typing import Any

import kopf
from pydantic import ValidationError as PydanticValidationError

from ssp_operator.constants import (
    ERROR_INVALID_SPEC,
    OPERATION_CREATE,
    OPERATION_DELETE,
    OPERATION_UPDATE,
    SSP_GROUP,
    SSP_KIND,
    SSP_PLURAL,
    SSP_VERSION,
)
from ssp_operator.errors import OperatorError
from ssp_operator.models.ssp import SSP
from ssp_operator.observability.logging import OperatorLogger
from ssp_operator.utils.kubernetes import ClusterReader, KubernetesClusterReader
from ssp_operator.webhooks.validator import SSPValidator

logger = logging.getLogger(__name__)
operator_logger = OperatorLogger(__name__)


def get_cluster_reader() -> ClusterReader:
    """Return the reader used to look up cluster state for admission."""
    return KubernetesClusterReader()


def parse_ssp(obj: Any, name: str | None) -> SSP:
    """
    Deserialize an admission object into the SSP model.

    Raises:
        kopf.AdmissionError: If the object is not a valid SSP
    """
    try:
        return SSP.model_validate(dict(obj))
    except PydanticValidationError as e:
        error_msg = ERROR_INVALID_SPEC.format(e)
        logger.warning(f"SSP {name} validation failed: {error_msg}")
        raise kopf.AdmissionError(error_msg, code=400) from e


def parse_previous_ssp(obj: Any, name: str | None) -> SSP | None:
    """
    Deserialize the stored object of an UPDATE request.

    The stored object is informational only. A missing or unparseable one
    yields None so that an update can still repair it.
    """
    if obj is None:
        return None
    try:
        return SSP.model_validate(dict(obj))
    except PydanticValidationError as e:
        logger.warning(f"Ignoring unparseable stored state of SSP {name}: {e}")
        return None


@kopf.on.validate(SSP_GROUP, SSP_VERSION, SSP_PLURAL, id="validate-ssp")
async def validate_ssp(
    body: Any,
    name: str | None,
    namespace: str | None,
    operation: str,
    dryrun: bool,
    old: Any = None,
    **kwargs,
) -> dict:
    """
    Validate SSP resource before admission.

    Args:
        body: Admitted object (the new state)
        name: Resource name
        namespace: Resource namespace
        operation: CREATE, UPDATE or DELETE
        dryrun: Whether this is a dry-run request
        old: Previous state of the object on UPDATE

    Returns:
        Empty dict when the request is allowed

    Raises:
        kopf.AdmissionError: If validation fails
    """
    operator_logger.log_admission_start(SSP_KIND, name, namespace, operation, dryrun)

    validator = SSPValidator(get_cluster_reader())

    try:
        if operation == OPERATION_CREATE:
            await validator.validate_create(parse_ssp(body, name))
        elif operation == OPERATION_UPDATE:
            await validator.validate_update(
                parse_previous_ssp(old, name),
                parse_ssp(body, name),
            )
        elif operation == OPERATION_DELETE:
            await validator.validate_delete(name)
        else:
            logger.debug(f"No validation for operation {operation} on SSP {name}")
    except OperatorError as e:
        operator_logger.log_admission_decision(
            SSP_KIND, name, namespace, operation, allowed=False, reason=e.message
        )
        raise e.as_admission_error() from e

    operator_logger.log_admission_decision(
        SSP_KIND, name, namespace, operation, allowed=True
    )

    # Return empty dict = allowed (Kopf handles response format)
    return {}
