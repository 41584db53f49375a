#!/usr/bin/env python3
"""
SSP Operator - Main entry point for the Kopf-based SSP admission webhook.

The operator serves a validating admission webhook for SSP resources that
keeps the resource a cluster-wide singleton and rejects invalid
configurations before they are stored.

Usage:
    python -m ssp_operator.operator
    # Or with kopf directly:
    kopf run -m ssp_operator.operator --all-namespaces

Environment Variables:
    LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
    ENABLE_WEBHOOKS: Set to 'false' to disable the admission webhook
"""

import logging
import sys

import kopf

from ssp_operator.errors import ConfigurationError
from ssp_operator.observability.logging import setup_structured_logging
from ssp_operator.settings import settings as operator_settings
from ssp_operator.utils.kubernetes import load_kubernetes_config

# Import webhook modules to register admission webhooks ONLY if webhooks are enabled
# Note: Kopf throws an error if admission handlers are registered but no
# admission server is configured.
if operator_settings.enable_webhooks:
    from ssp_operator.webhooks import ssp as ssp_webhook  # noqa: F401


def configure_logging() -> None:
    """Configure structured logging for the operator based on operator_settings."""
    setup_structured_logging(
        log_level=operator_settings.log_level.upper(),
        enable_json_formatting=operator_settings.json_logs,
        correlation_id_enabled=operator_settings.correlation_ids,
        log_health_probes=operator_settings.log_health_probes,
        webhook_log_level=operator_settings.webhook_log_level,
    )


def build_operator_settings() -> kopf.OperatorSettings:
    """
    Build kopf settings with the admission webhook server configured.

    Webhook configurations are managed outside the operator (Helm or
    cert-manager), so kopf's auto-management stays disabled.
    """
    settings_obj = kopf.OperatorSettings()
    settings_obj.admission.managed = None

    if operator_settings.enable_webhooks:
        cert_dir = operator_settings.webhook_cert_dir
        settings_obj.admission.server = kopf.WebhookServer(
            port=operator_settings.webhook_port,
            host=operator_settings.webhook_host,
            certfile=f"{cert_dir}/tls.crt",
            pkeyfile=f"{cert_dir}/tls.key",
        )
        logging.info(
            f"Admission webhooks ENABLED on port {operator_settings.webhook_port} "
            f"using certificates from {cert_dir}"
        )
    else:
        settings_obj.admission.server = None
        logging.info("Admission webhooks DISABLED")

    return settings_obj


@kopf.on.startup()
async def startup_handler(settings: kopf.OperatorSettings, **_) -> None:
    """
    Operator startup configuration.

    Loads the Kubernetes configuration used by the admission webhook to read
    SSP resources and namespaces.
    """
    logging.info(
        f"Starting {operator_settings.operator_name} in namespace "
        f"{operator_settings.operator_namespace}..."
    )
    settings.watching.reconnect_backoff = 1.0

    try:
        load_kubernetes_config()
    except ConfigurationError as e:
        raise kopf.PermanentError(str(e)) from e


@kopf.on.cleanup()
async def cleanup_handler(**_) -> None:
    """Operator cleanup handler."""
    logging.info("Shutting down SSP Operator...")


def main() -> None:
    """
    Main entry point for the operator.

    This function:
    1. Configures logging
    2. Configures admission webhooks (must be before kopf.run())
    3. Runs the kopf operator cluster-wide
    """
    configure_logging()

    settings_obj = build_operator_settings()

    try:
        kopf.run(
            clusterwide=True,
            liveness_endpoint="http://0.0.0.0:8080/healthz",
            settings=settings_obj,
        )
    except KeyboardInterrupt:
        logging.info("Received shutdown signal")
        sys.exit(0)
    except Exception as e:
        logging.error(f"Operator failed with error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
