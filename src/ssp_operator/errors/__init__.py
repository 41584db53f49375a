"""
Error handling module for the SSP operator.

This module provides an error hierarchy that separates constraint violations
from infrastructure failures and converts both into kopf admission errors.
"""

from .operator_errors import (
    ConfigurationError,
    ExternalServiceError,
    KubernetesAPIError,
    OperatorError,
    ValidationError,
)

__all__ = [
    "OperatorError",
    "ValidationError",
    "ExternalServiceError",
    "KubernetesAPIError",
    "ConfigurationError",
]
