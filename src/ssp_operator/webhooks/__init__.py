"""
Admission webhooks for the SSP operator.

This module provides the validating admission webhook for SSP custom
resources. The webhook validates resources before they are accepted by
Kubernetes, providing immediate feedback and preventing invalid
configurations from being stored.

Webhooks are served by Kopf's built-in HTTPS server.
"""
