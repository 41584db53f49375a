"""
Pydantic models for SSP resources.

This module defines type-safe data models for the SSP custom resource.
Only the fields consulted during admission are modelled; other spec fields
are accepted and ignored.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from ssp_operator.constants import GOLDEN_IMAGES_NAMESPACE, SSP_KIND


class ObjectMeta(BaseModel):
    """Subset of Kubernetes object metadata."""

    model_config = {"populate_by_name": True}

    name: str | None = Field(None, description="Object name")
    namespace: str | None = Field(None, description="Object namespace")
    labels: dict[str, str] = Field(default_factory=dict, description="Labels")
    annotations: dict[str, str] = Field(
        default_factory=dict, description="Annotations"
    )
    resource_version: str | None = Field(
        None, alias="resourceVersion", description="Resource version"
    )


class DataImportCronTemplate(BaseModel):
    """
    Template for a DataImportCron created in the golden images namespace.

    Templates without an explicit namespace are imported into the golden
    images namespace.
    """

    model_config = {"populate_by_name": True}

    metadata: ObjectMeta = Field(
        default_factory=ObjectMeta, description="DataImportCron metadata"
    )
    spec: dict[str, Any] = Field(
        default_factory=dict, description="DataImportCron specification"
    )

    @property
    def name(self) -> str | None:
        return self.metadata.name

    @property
    def namespace(self) -> str | None:
        return self.metadata.namespace

    @property
    def effective_namespace(self) -> str:
        """Namespace the DataImportCron ends up in."""
        return self.metadata.namespace or GOLDEN_IMAGES_NAMESPACE


class CommonTemplates(BaseModel):
    """Configuration of the common VM templates."""

    model_config = {"populate_by_name": True}

    namespace: str = Field(
        ..., description="Namespace where common templates are deployed"
    )
    data_import_cron_templates: list[DataImportCronTemplate] = Field(
        default_factory=list,
        alias="dataImportCronTemplates",
        description="DataImportCron templates for golden images",
    )

    @field_validator("data_import_cron_templates", mode="before")
    @classmethod
    def null_templates_as_empty(cls, v):
        return [] if v is None else v


class CommonInstancetypes(BaseModel):
    """Configuration of the common instancetypes and preferences."""

    model_config = {"populate_by_name": True}

    url: str | None = Field(
        None, description="Remote kustomize target for instancetype resources"
    )


class SSPSpec(BaseModel):
    """SSP specification."""

    model_config = {"populate_by_name": True}

    common_templates: CommonTemplates = Field(
        ..., alias="commonTemplates", description="Common templates configuration"
    )
    common_instancetypes: CommonInstancetypes | None = Field(
        None,
        alias="commonInstancetypes",
        description="Common instancetypes configuration",
    )


class SSP(BaseModel):
    """
    Complete SSP custom resource model.

    This represents the full Kubernetes custom resource including
    metadata, spec, and status sections.
    """

    model_config = {"populate_by_name": True}

    api_version: str = Field("ssp.kubevirt.io/v1beta2", alias="apiVersion")
    kind: str = Field(SSP_KIND)
    metadata: ObjectMeta = Field(
        default_factory=ObjectMeta, description="Kubernetes metadata"
    )
    spec: SSPSpec = Field(..., description="SSP specification")
    status: dict[str, Any] | None = Field(
        None, description="SSP status (managed by operator)"
    )

    @property
    def name(self) -> str | None:
        return self.metadata.name

    @property
    def namespace(self) -> str | None:
        return self.metadata.namespace

    @property
    def templates_namespace(self) -> str:
        return self.spec.common_templates.namespace
