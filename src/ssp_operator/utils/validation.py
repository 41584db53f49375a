"""
Validation utilities for SSP resources.

This module provides the individual admission checks that do not need
cluster access:
- DataImportCron template validation
- Remote kustomize target URL validation

Each check raises ValidationError on the first problem it finds.
"""

import logging
from urllib.parse import parse_qs, urlsplit

from ssp_operator.constants import (
    ERROR_DATA_IMPORT_CRON_TEMPLATE_NAME,
    ERROR_REMOTE_SOURCE_PIN,
    ERROR_REMOTE_SOURCE_SCHEME,
    GOLDEN_IMAGES_NAMESPACE,
    REMOTE_SOURCE_PIN_PARAMETERS,
    REMOTE_SOURCE_SCHEMES,
)
from ssp_operator.errors import ValidationError
from ssp_operator.models.ssp import CommonInstancetypes, DataImportCronTemplate

logger = logging.getLogger(__name__)


def validate_data_import_cron_templates(
    templates: list[DataImportCronTemplate],
) -> None:
    """
    Validate the dataImportCronTemplates list.

    Every template must carry a name. Templates without a namespace are
    imported into the golden images namespace.

    Args:
        templates: DataImportCron templates in declaration order

    Raises:
        ValidationError: On the first template without a name
    """
    for index, template in enumerate(templates):
        namespace = template.effective_namespace
        if not template.name:
            raise ValidationError(
                ERROR_DATA_IMPORT_CRON_TEMPLATE_NAME.format(index, namespace),
                field=f"spec.commonTemplates.dataImportCronTemplates[{index}].metadata.name",
            )
        if namespace == GOLDEN_IMAGES_NAMESPACE:
            logger.debug(
                f"DataImportCron template {template.name} targets the golden "
                f"images namespace {namespace}"
            )

    logger.debug(f"Validated {len(templates)} DataImportCron templates")


def validate_remote_source_url(url: str) -> None:
    """
    Validate a remote kustomize target URL.

    The URL must use the https:// or ssh:// scheme and pin a revision with a
    non-empty ref or version query parameter. No network access is made.

    Args:
        url: Remote kustomize target

    Raises:
        ValidationError: If the scheme or the revision pin is missing
    """
    field = "spec.commonInstancetypes.url"

    if not url.startswith(REMOTE_SOURCE_SCHEMES):
        raise ValidationError(ERROR_REMOTE_SOURCE_SCHEME, field=field)

    query = parse_qs(urlsplit(url).query)
    if not any(param in query for param in REMOTE_SOURCE_PIN_PARAMETERS):
        raise ValidationError(ERROR_REMOTE_SOURCE_PIN, field=field)

    logger.debug(f"Validated remote kustomize target: {url}")


def validate_common_instancetypes(
    common_instancetypes: CommonInstancetypes | None,
) -> None:
    """
    Validate the commonInstancetypes section.

    Absence of the section, or of its url, is valid.

    Raises:
        ValidationError: If the url is set and malformed
    """
    if common_instancetypes is None or common_instancetypes.url is None:
        return

    validate_remote_source_url(common_instancetypes.url)
