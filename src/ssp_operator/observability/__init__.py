"""
Observability utilities for the SSP operator.

This module provides structured logging with correlation IDs for
admission decisions.
"""

from .logging import OperatorLogger, setup_structured_logging

__all__ = [
    "OperatorLogger",
    "setup_structured_logging",
]
