"""
Domain models for the ontology module.

These models represent the concepts, roles and concrete domain values of a
terminology after ingestion, and the read-only model handed to the axiom
assembler and serializers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Mapping, Optional, Tuple


class Datatype(str, Enum):
    """XML Schema datatype of a concrete domain feature."""
    DECIMAL = "decimal"
    INTEGER = "integer"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Relationship:
    """An attribute-value relationship of a concept, as read from the stated relationships."""

    component_id: str   # relationship row id
    attribute_id: str   # relationship type
    value_id: str       # destination concept
    group: int          # 0 means the relationship is not grouped with any other


@dataclass(frozen=True)
class GroupedTriple:
    """A relationship inside a role group, with the group number removed."""

    attribute_id: str
    value_id: str
    component_id: str


# A role group is one or more triples that hold jointly on the same sub-individual
RoleGroup = Tuple[GroupedTriple, ...]


@dataclass(frozen=True)
class ConcreteDomainFact:
    """A literal value bound to a feature of a component."""

    feature_id: str
    operator_id: str
    value: str
    unit_id: str


@dataclass(frozen=True)
class Concept:
    """Represents a concept with its definition status and defining elements."""

    id: str
    label: Optional[str] = None
    is_primitive: bool = True
    parents: Tuple[str, ...] = ()                                    # IS-A targets, input order
    relationships: Tuple[Relationship, ...] = ()                     # non IS-A attribute relationships
    concrete_domain_facts: Tuple[ConcreteDomainFact, ...] = ()


@dataclass(frozen=True)
class Role:
    """A concept from the attribute hierarchy used as an object property."""

    id: str
    parent_role: Optional[str] = None
    right_identity: Optional[str] = None


@dataclass(frozen=True)
class OntologyModel:
    """
    The fully built model.

    The builder hands over read-only mapping views of its own tables, and
    concepts, roles and facts are frozen, so the assembler and serializers
    cannot change what they are given.
    """

    concepts: Mapping[str, Concept]
    roles: Mapping[str, Role]
    labels: Mapping[str, str]
    facts_by_component: Mapping[str, Tuple[ConcreteDomainFact, ...]]   # keyed by concept or relationship id
    features: Mapping[str, Datatype]
    never_grouped: FrozenSet[str]

    def label(self, concept_id: str) -> Optional[str]:
        return self.labels.get(concept_id)

    def facts_for(self, component_id: str) -> Tuple[ConcreteDomainFact, ...]:
        return tuple(self.facts_by_component.get(component_id, ()))

    def is_role(self, concept_id: str) -> bool:
        return concept_id in self.roles
