"""
OWL 2 Functional Syntax serializer.

The output is OWL 2 EL and parsable by the OWL API. This is the only syntax
that declares an explicit DataPropertyRange for features with a resolved
datatype.
"""

from typing import List, Optional

from rdflib.namespace import OWL, RDF, RDFS, XMLNS, XSD

from ontology.axioms import (
    ClassRef, Composite, ConceptAxiom, DataHasValue, Expression, FeatureAxiom,
    Intersection, RoleAxiom, SingleParent, SomeValuesFrom,
)
from ontology.domain import Datatype

from .base import OntologySerializer
from .metadata import OntologyHeader


def escape_label(label: str) -> str:
    # double quotes cannot appear in a label literal
    return label.replace("\\", "\\\\").replace('"', "'")


def escape_literal(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


class FunctionalSyntaxSerializer(OntologySerializer):
    format_name = "OWLF"
    syntax_name = "OWL Functional Syntax"

    def header_lines(self, header: OntologyHeader) -> List[str]:
        comment = "\n".join(escape_literal(line) for line in header.comment_lines(self.syntax_name))
        return [
            f"Prefix(xsd:=<{XSD}>)",
            f"Prefix(owl:=<{OWL}>)",
            f"Prefix(:=<{self.config.base_iri}>)",
            f"Prefix(xml:=<{XMLNS}>)",
            f"Prefix(rdf:=<{RDF}>)",
            f"Prefix(rdfs:=<{RDFS}>)",
            "",
            "",
            f"Ontology(<{header.ontology_iri}>",
            f'Annotation(rdfs:label "{escape_literal(header.label)} in {self.syntax_name}")',
            f'Annotation(owl:versionInfo "{escape_literal(header.version_info)}")',
            f'Annotation(rdfs:comment "{comment}")',
        ]

    def footer_lines(self) -> List[str]:
        return [")"]

    def object_property_lines(self, role_id: str, label: Optional[str]) -> List[str]:
        lines = [f"Declaration(ObjectProperty({self.ref(role_id)}))"]
        lines.extend(self._label(role_id, label))
        return lines

    def role_lines(self, role: RoleAxiom) -> List[str]:
        ref = self.ref(role.role_id)
        lines = [f"Declaration(ObjectProperty({ref}))"]
        lines.extend(self._label(role.role_id, role.label))
        if role.parent_role:
            lines.append(f"SubObjectPropertyOf({ref} {self.ref(role.parent_role)})")
        if role.right_identity:
            lines.append(f"SubObjectPropertyOf(ObjectPropertyChain({ref} {self.ref(role.right_identity)}) {ref})")
        return lines

    def feature_lines(self, feature: FeatureAxiom) -> List[str]:
        ref = self.ref(feature.feature_id)
        lines = [f"Declaration(DataProperty({ref}))"]
        lines.extend(self._label(feature.feature_id, feature.label))
        if feature.datatype != Datatype.UNKNOWN:
            lines.append(f"DataPropertyRange({ref} xsd:{feature.datatype.value})")
        return lines

    def concept_lines(self, concept: ConceptAxiom) -> List[str]:
        ref = self.ref(concept.concept_id)
        lines = [f"Declaration(Class({ref}))"]
        lines.extend(self._label(concept.concept_id, concept.label))

        definition = concept.definition
        if isinstance(definition, SingleParent):
            lines.append(f"SubClassOf({ref} {self.ref(definition.parent_id)})")
        elif isinstance(definition, Composite):
            axiom = "SubClassOf" if definition.primitive else "EquivalentClasses"
            lines.append(f"{axiom}({ref} {self.expression(definition.expression)})")
        return lines

    def expression(self, expression: Expression) -> str:
        if isinstance(expression, ClassRef):
            return self.ref(expression.concept_id)
        if isinstance(expression, SomeValuesFrom):
            return f"ObjectSomeValuesFrom({self.ref(expression.role_id)} {self.expression(expression.filler)})"
        if isinstance(expression, Intersection):
            return "ObjectIntersectionOf(" + " ".join(self.expression(o) for o in expression.operands) + ")"
        if isinstance(expression, DataHasValue):
            return f"DataHasValue({self.ref(expression.feature_id)} {self._literal(expression)})"
        raise TypeError(f"Unsupported expression: {expression!r}")

    def ref(self, entity_id: str) -> str:
        return f":{self.name(entity_id)}"

    def _label(self, entity_id: str, label: Optional[str]) -> List[str]:
        if label is None:
            return []
        return [f'AnnotationAssertion(rdfs:label {self.ref(entity_id)} "{escape_label(label)}")']

    def _literal(self, expression: DataHasValue) -> str:
        literal = f'"{escape_literal(expression.value)}"'
        if expression.datatype != Datatype.UNKNOWN:
            literal += f"^^xsd:{expression.datatype.value}"
        return literal
