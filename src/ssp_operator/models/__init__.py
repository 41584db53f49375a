"""
Models package - Pydantic models for type-safe resource handling.

Defines data models for:
- SSP custom resource specifications
- DataImportCron templates and common instancetype sources
"""

from .ssp import (
    SSP,
    CommonInstancetypes,
    CommonTemplates,
    DataImportCronTemplate,
    ObjectMeta,
    SSPSpec,
)

__all__ = [
    "SSP",
    "SSPSpec",
    "CommonTemplates",
    "CommonInstancetypes",
    "DataImportCronTemplate",
    "ObjectMeta",
]
