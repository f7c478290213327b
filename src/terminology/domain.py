from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

# This code defines the typed records for the rows of an RF2 terminology snapshot using Pydantic.
# Only the columns the translation needs are kept; the remaining columns are ignored.


def _parse_active(value) -> bool:
    # RF2 encodes the active flag as "1" / "0"
    if isinstance(value, bool):
        return value
    return str(value).strip() == "1"


class ConceptRecord(BaseModel):
    # A row of the concepts table: the identifier and its definition status.
    id: str = Field(..., description="Concept identifier")
    active: bool = Field(True, description="Whether the row is active")
    definition_status_id: str = Field(..., description="Definition status (primitive or fully defined)")

    @field_validator("active", mode="before")
    @classmethod
    def parse_active(cls, value):
        return _parse_active(value)

    @classmethod
    def from_row(cls, values: List[str]) -> "ConceptRecord":
        """
        Build a record from the split columns of a concepts row.

        :param values: id, effectiveTime, active, moduleId, definitionStatusId
        """
        return cls(id=values[0], active=values[2], definition_status_id=values[4])


class DescriptionRecord(BaseModel):
    # A row of the descriptions table. Only the type and term matter for labelling.
    id: str = Field(..., description="Description identifier")
    active: bool = Field(True, description="Whether the row is active")
    concept_id: str = Field(..., description="Concept the description belongs to")
    type_id: str = Field(..., description="Description type (e.g. fully specified name)")
    term: str = Field("", description="Description text")

    @field_validator("active", mode="before")
    @classmethod
    def parse_active(cls, value):
        return _parse_active(value)

    @classmethod
    def from_row(cls, values: List[str]) -> "DescriptionRecord":
        """
        Build a record from the split columns of a descriptions row.

        :param values: id, effectiveTime, active, moduleId, conceptId, languageCode, typeId, term, caseSignificanceId
        """
        return cls(id=values[0], active=values[2], concept_id=values[4], type_id=values[6], term=values[7])


class RelationshipRecord(BaseModel):
    # A row of the stated relationships table. IS-A edges and attribute relationships share this shape.
    id: str = Field(..., description="Relationship identifier")
    active: bool = Field(True, description="Whether the row is active")
    source_id: str = Field(..., description="Source concept")
    destination_id: str = Field(..., description="Destination (value) concept")
    group: int = Field(0, description="Relationship group number, 0 means ungrouped")
    type_id: str = Field(..., description="Relationship type (IS-A or an attribute)")
    characteristic_type_id: Optional[str] = Field(None, description="Characteristic type")

    @field_validator("active", mode="before")
    @classmethod
    def parse_active(cls, value):
        return _parse_active(value)

    @classmethod
    def from_row(cls, values: List[str]) -> "RelationshipRecord":
        """
        Build a record from the split columns of a relationships row.

        :param values: id, effectiveTime, active, moduleId, sourceId, destinationId, relationshipGroup, typeId, characteristicTypeId, modifierId
        """
        return cls(
            id=values[0],
            active=values[2],
            source_id=values[4],
            destination_id=values[5],
            group=values[6],
            type_id=values[7],
            characteristic_type_id=values[8] if len(values) > 8 else None,
        )


class ConcreteDomainRecord(BaseModel):
    # A row of the concrete domain reference set. The reference set id names the feature.
    active: bool = Field(True, description="Whether the row is active")
    refset_id: str = Field(..., description="Reference set id, used as the feature")
    referenced_component_id: str = Field(..., description="Concept or relationship the value is attached to")
    unit_id: str = Field(..., description="Unit concept")
    operator_id: str = Field(..., description="Comparison operator concept")
    value: str = Field(..., description="Literal value")

    @field_validator("active", mode="before")
    @classmethod
    def parse_active(cls, value):
        return _parse_active(value)

    @classmethod
    def from_row(cls, values: List[str]) -> "ConcreteDomainRecord":
        """
        Build a record from the split columns of a concrete domain row.

        :param values: id, effectiveTime, active, moduleId, refsetId, referencedComponentId, unitId, operatorId, value
        """
        return cls(
            active=values[2],
            refset_id=values[4],
            referenced_component_id=values[5],
            unit_id=values[6],
            operator_id=values[7],
            value=values[8],
        )
