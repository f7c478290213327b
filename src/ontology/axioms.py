"""
Axiom assembly.

Builds a syntax independent description of every role, feature and concept
definition from an OntologyModel. Serializers only render what is assembled
here, so every output syntax carries the same logical content.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from .config import TranslationConfig
from .domain import Concept, ConcreteDomainFact, Datatype, GroupedTriple, OntologyModel, RoleGroup
from .errors import DefinitionIssue
from .grouping import group_relationships

logger = logging.getLogger(__name__)

ROLE_GROUP = "RoleGroup"


# Class expressions

@dataclass(frozen=True)
class ClassRef:
    concept_id: str


@dataclass(frozen=True)
class SomeValuesFrom:
    """Existential restriction on a role. role_id may be ROLE_GROUP."""
    role_id: str
    filler: "Expression"


@dataclass(frozen=True)
class Intersection:
    operands: Tuple["Expression", ...]


@dataclass(frozen=True)
class DataHasValue:
    feature_id: str
    value: str
    datatype: Datatype


Expression = Union[ClassRef, SomeValuesFrom, Intersection, DataHasValue]


# Concept definitions

@dataclass(frozen=True)
class Unconditioned:
    """Top level concept: declaration and label only."""


@dataclass(frozen=True)
class SingleParent:
    parent_id: str


@dataclass(frozen=True)
class Composite:
    """Intersection of parents, concrete domain values and role groups."""
    parents: Tuple[str, ...]
    concrete_facts: Tuple[Expression, ...]
    relation_groups: Tuple[Expression, ...]
    primitive: bool

    @property
    def operands(self) -> Tuple[Expression, ...]:
        return tuple(ClassRef(parent) for parent in self.parents) + self.concrete_facts + self.relation_groups

    @property
    def expression(self) -> Expression:
        operands = self.operands
        if len(operands) == 1:
            return operands[0]
        return Intersection(operands)


@dataclass(frozen=True)
class Inconsistent:
    reason: str


Definition = Union[Unconditioned, SingleParent, Composite, Inconsistent]


@dataclass(frozen=True)
class ConceptAxiom:
    concept_id: str
    label: Optional[str]
    primitive: bool
    definition: Definition


@dataclass(frozen=True)
class RoleAxiom:
    role_id: str
    label: Optional[str]
    parent_role: Optional[str]
    right_identity: Optional[str]


@dataclass(frozen=True)
class FeatureAxiom:
    feature_id: str
    label: Optional[str]
    datatype: Datatype


@dataclass
class AssembledOntology:
    """Everything a serializer needs, already in output order."""
    roles: List[RoleAxiom] = field(default_factory=list)
    features: List[FeatureAxiom] = field(default_factory=list)
    concepts: List[ConceptAxiom] = field(default_factory=list)
    issues: List[DefinitionIssue] = field(default_factory=list)
    unit_role_id: Optional[str] = None   # set when any concrete domain value is rendered


class AxiomAssembler:
    """Classifies concepts and builds their defining expressions."""

    def __init__(self, model: OntologyModel, config: Optional[TranslationConfig] = None):
        self.model = model
        self.config = config or TranslationConfig()

    def assemble(self) -> AssembledOntology:
        assembled = AssembledOntology()

        for role_id in sorted(self.model.roles):
            role = self.model.roles[role_id]
            assembled.roles.append(RoleAxiom(
                role_id=role.id,
                label=self.model.label(role.id),
                parent_role=role.parent_role,
                right_identity=role.right_identity,
            ))

        for feature_id in sorted(self.model.features):
            assembled.features.append(FeatureAxiom(
                feature_id=feature_id,
                label=self.model.label(feature_id),
                datatype=self.model.features[feature_id],
            ))

        for concept_id in sorted(self.model.concepts):
            if self.model.is_role(concept_id):
                continue
            concept = self.model.concepts[concept_id]
            definition = self.classify(concept)
            if isinstance(definition, Inconsistent):
                issue = DefinitionIssue(concept_id, concept.label, definition.reason)
                logger.warning(f"Inconsistent definition: {issue}")
                assembled.issues.append(issue)
            assembled.concepts.append(ConceptAxiom(
                concept_id=concept_id,
                label=concept.label,
                primitive=concept.is_primitive,
                definition=definition,
            ))

        if self.model.facts_by_component:
            assembled.unit_role_id = self.config.unit_role_id

        logger.info(f"Assembled {len(assembled.roles)} roles, {len(assembled.features)} features, "
                    f"{len(assembled.concepts)} concepts ({len(assembled.issues)} inconsistent)")
        return assembled

    def classify(self, concept: Concept) -> Definition:
        """Choose the definition variant of a concept.

        Relations count as one defining unit however many role groups they form,
        and so do concrete domain values.
        """
        n_parents = len(concept.parents)
        has_relations = bool(concept.relationships)
        has_concrete_domains = bool(concept.concrete_domain_facts)
        total = n_parents + int(has_relations) + int(has_concrete_domains)

        if total == 0:
            return Unconditioned()
        if total == 1 and n_parents == 1:
            return SingleParent(concept.parents[0])
        if total == 1 and not concept.is_primitive:
            # a fully defined concept needs at least two defining units
            unit = "relationships" if has_relations else "concrete domain values"
            return Inconsistent(f"fully defined concept has only {unit} and no parents")

        return Composite(
            parents=tuple(concept.parents),
            concrete_facts=tuple(self.concrete_domain_expression(fact) for fact in concept.concrete_domain_facts),
            relation_groups=tuple(self.role_group_expression(group)
                                  for group in group_relationships(concept.relationships)),
            primitive=concept.is_primitive,
        )

    def concrete_domain_expression(self, fact: ConcreteDomainFact) -> Expression:
        """RoleGroup some (unit-role some unit and feature value literal)."""
        return SomeValuesFrom(ROLE_GROUP, Intersection((
            SomeValuesFrom(self.config.unit_role_id, ClassRef(fact.unit_id)),
            DataHasValue(fact.feature_id, fact.value,
                         self.model.features.get(fact.feature_id, Datatype.UNKNOWN)),
        )))

    def role_group_expression(self, group: RoleGroup) -> Expression:
        if len(group) > 1:
            return SomeValuesFrom(ROLE_GROUP, Intersection(tuple(self.triple_expression(t) for t in group)))

        triple = group[0]
        if triple.attribute_id in self.model.never_grouped:
            return self.triple_expression(triple)
        return SomeValuesFrom(ROLE_GROUP, self.triple_expression(triple))

    def triple_expression(self, triple: GroupedTriple) -> Expression:
        return SomeValuesFrom(triple.attribute_id, self.value_expression(triple))

    def value_expression(self, triple: GroupedTriple) -> Expression:
        """The value class, narrowed by any values attached to the triple's component."""
        facts = self.model.facts_for(triple.component_id)
        if not facts:
            return ClassRef(triple.value_id)
        return Intersection((ClassRef(triple.value_id),)
                            + tuple(self.concrete_domain_expression(fact) for fact in facts))
