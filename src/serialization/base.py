"""
Serializer interface shared by all output syntaxes.

A serializer walks an AssembledOntology in a fixed order and renders every
item through syntax specific hooks. The walk is the same for every syntax;
only the concrete tokens differ.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, TextIO

from ontology.axioms import (
    AssembledOntology, ConceptAxiom, Expression, FeatureAxiom, RoleAxiom, ROLE_GROUP,
)
from ontology.config import TranslationConfig

from .metadata import OntologyHeader


class OntologySerializer(ABC):
    """Abstract base class for ontology serializers."""

    #: Mode flag selecting this serializer
    format_name: str = ""
    #: Human readable syntax name used in the header comment
    syntax_name: str = ""

    def __init__(self, config: Optional[TranslationConfig] = None):
        self.config = config or TranslationConfig()

    def name(self, entity_id: str) -> str:
        """Local name of a concept, role or feature."""
        if entity_id == ROLE_GROUP:
            return ROLE_GROUP
        return f"{self.config.id_prefix}{entity_id}"

    def iri(self, entity_id: str) -> str:
        """Absolute IRI of a concept, role or feature."""
        return f"{self.config.base_iri}{self.name(entity_id)}"

    def render(self, ontology: AssembledOntology, header: Optional[OntologyHeader] = None) -> str:
        """
        Render the whole ontology as a string.

        Args:
            ontology: Assembled axioms
            header: Ontology metadata; defaults to the configured one without source names

        Returns:
            The serialized ontology
        """
        return "".join(f"{line}\n" for line in self.lines(ontology, header))

    def write(self, ontology: AssembledOntology, stream: TextIO, header: Optional[OntologyHeader] = None) -> None:
        """Write the serialized ontology to an open text stream."""
        for line in self.lines(ontology, header):
            stream.write(line)
            stream.write("\n")

    def lines(self, ontology: AssembledOntology, header: Optional[OntologyHeader] = None) -> Iterator[str]:
        header = header or OntologyHeader.from_config(self.config)
        yield from self.header_lines(header)
        yield from self.object_property_lines(ROLE_GROUP, ROLE_GROUP)
        if ontology.unit_role_id:
            yield from self.object_property_lines(ontology.unit_role_id, None)
        for role in ontology.roles:
            yield from self.role_lines(role)
        for feature in ontology.features:
            yield from self.feature_lines(feature)
        for concept in ontology.concepts:
            yield from self.concept_lines(concept)
        yield from self.footer_lines()

    def header_lines(self, header: OntologyHeader) -> List[str]:
        return []

    def footer_lines(self) -> List[str]:
        return []

    @abstractmethod
    def object_property_lines(self, role_id: str, label: Optional[str]) -> List[str]:
        """Declare a plain object property (RoleGroup, unit role)."""

    @abstractmethod
    def role_lines(self, role: RoleAxiom) -> List[str]:
        """Declare a role with its optional parent role and right identity chain."""

    @abstractmethod
    def feature_lines(self, feature: FeatureAxiom) -> List[str]:
        """Declare a concrete domain feature."""

    @abstractmethod
    def concept_lines(self, concept: ConceptAxiom) -> List[str]:
        """Declare a concept and its definition."""

    @abstractmethod
    def expression(self, expression: Expression) -> str:
        """Render a class expression."""
