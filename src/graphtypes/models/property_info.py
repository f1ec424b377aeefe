from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from graphtypes.core.exceptions import PropertyRecordError


class PropertyTypeInfo(BaseModel):
    """One row of Neo4j schema information for a single property.

    Mirrors the columns of ``db.schema.nodeTypeProperties()`` and
    ``db.schema.relTypeProperties()``. Type tags are kept as raw strings;
    unknown tags are resolved to ``String`` later, not rejected here.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    property_name: Optional[str] = Field(default=None, alias="propertyName")
    property_types: Optional[List[Optional[str]]] = Field(default=None, alias="propertyTypes")
    mandatory: bool = False

    node_type: Optional[str] = Field(default=None, alias="nodeType")
    node_labels: List[str] = Field(default_factory=list, alias="nodeLabels")
    rel_type: Optional[str] = Field(default=None, alias="relType")

    @field_validator("mandatory", mode="before")
    @classmethod
    def _null_mandatory_is_false(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("node_labels", mode="before")
    @classmethod
    def _null_labels_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class PropertySchemaInput(BaseModel):
    properties: List[PropertyTypeInfo] = Field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Any) -> "PropertySchemaInput":
        """Accept either a bare list of records or ``{"properties": [...]}``."""
        if isinstance(payload, list):
            return cls.model_validate({"properties": payload})
        if isinstance(payload, dict) and "properties" in payload:
            return cls.model_validate(payload)
        raise PropertyRecordError(
            reason="Expected a list of property records or an object with a 'properties' key",
            details={"type": type(payload).__name__},
        )
