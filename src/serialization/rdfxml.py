"""
OWL RDF/XML serializer.

Every rdf:about and rdf:resource carries the absolute IRI, base IRI plus
local name, so "SCT_123" denotes the same entity as ":SCT_123" in the
functional syntax whatever the base IRI ends with. Restrictions are nested
inline; intersections use rdf:parseType="Collection".
"""

from typing import List, Optional
from xml.sax.saxutils import escape

from rdflib.namespace import OWL, RDF, RDFS, XSD

from ontology.axioms import (
    ClassRef, Composite, ConceptAxiom, DataHasValue, Expression, FeatureAxiom,
    Intersection, RoleAxiom, SingleParent, SomeValuesFrom,
)
from ontology.domain import Datatype

from .base import OntologySerializer
from .metadata import OntologyHeader

INDENT = "    "


def escape_text(text: str) -> str:
    return escape(text)


def escape_attribute(text: str) -> str:
    return escape(text, {'"': "&quot;"})


class RDFXMLSerializer(OntologySerializer):
    format_name = "OWL"
    syntax_name = "OWL RDF/XML"

    def header_lines(self, header: OntologyHeader) -> List[str]:
        base = escape_attribute(self.config.base_iri)
        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<rdf:RDF xmlns:rdf="{RDF}"',
            f'         xmlns:rdfs="{RDFS}"',
            f'         xmlns:xsd="{XSD}"',
            f'         xmlns:owl="{OWL}"',
            f'         xmlns="{base}">',
            "",
            f'{INDENT}<owl:Ontology rdf:about="{escape_attribute(header.ontology_iri)}">',
            f"{INDENT * 2}<rdfs:label>{escape_text(header.label)} in {self.syntax_name}</rdfs:label>",
            f"{INDENT * 2}<owl:versionInfo>{escape_text(header.version_info)}</owl:versionInfo>",
            f"{INDENT * 2}<rdfs:comment>",
        ]
        lines.extend(escape_text(line) for line in header.comment_lines(self.syntax_name))
        lines.extend([
            f"{INDENT * 2}</rdfs:comment>",
            f"{INDENT}</owl:Ontology>",
        ])
        return lines

    def footer_lines(self) -> List[str]:
        return ["</rdf:RDF>"]

    def object_property_lines(self, role_id: str, label: Optional[str]) -> List[str]:
        lines = [f'<owl:ObjectProperty rdf:about="{self.about(role_id)}">']
        lines.extend(self._label(label))
        lines.append("</owl:ObjectProperty>")
        return lines

    def role_lines(self, role: RoleAxiom) -> List[str]:
        lines = [f'<owl:ObjectProperty rdf:about="{self.about(role.role_id)}">']
        lines.extend(self._label(role.label))
        if role.parent_role:
            lines.append(f'{INDENT}<rdfs:subPropertyOf rdf:resource="{self.about(role.parent_role)}"/>')
        if role.right_identity:
            # role o right identity -> role
            lines.extend([
                f'{INDENT}<owl:propertyChainAxiom rdf:parseType="Collection">',
                f'{INDENT * 2}<rdf:Description rdf:about="{self.about(role.role_id)}"/>',
                f'{INDENT * 2}<rdf:Description rdf:about="{self.about(role.right_identity)}"/>',
                f"{INDENT}</owl:propertyChainAxiom>",
            ])
        lines.append("</owl:ObjectProperty>")
        return lines

    def feature_lines(self, feature: FeatureAxiom) -> List[str]:
        lines = [f'<owl:DatatypeProperty rdf:about="{self.about(feature.feature_id)}">']
        lines.extend(self._label(feature.label))
        lines.append("</owl:DatatypeProperty>")
        return lines

    def concept_lines(self, concept: ConceptAxiom) -> List[str]:
        lines = [f'<owl:Class rdf:about="{self.about(concept.concept_id)}">']
        lines.extend(self._label(concept.label))

        definition = concept.definition
        if isinstance(definition, SingleParent):
            lines.append(f'{INDENT}<rdfs:subClassOf rdf:resource="{self.about(definition.parent_id)}"/>')
        elif isinstance(definition, Composite):
            tag = "rdfs:subClassOf" if definition.primitive else "owl:equivalentClass"
            lines.extend(self._object(tag, definition.expression, 1))
        lines.append("</owl:Class>")
        return lines

    def expression(self, expression: Expression) -> str:
        return "\n".join(self._element(expression, 0))

    def about(self, entity_id: str) -> str:
        return escape_attribute(self.iri(entity_id))

    def _label(self, label: Optional[str]) -> List[str]:
        if label is None:
            return []
        return [f'{INDENT}<rdfs:label xml:lang="en">{escape_text(label)}</rdfs:label>']

    def _object(self, tag: str, expression: Expression, depth: int) -> List[str]:
        """A property element whose object is a class expression."""
        pad = INDENT * depth
        if isinstance(expression, ClassRef):
            return [f'{pad}<{tag} rdf:resource="{self.about(expression.concept_id)}"/>']
        return [f"{pad}<{tag}>"] + self._element(expression, depth + 1) + [f"{pad}</{tag}>"]

    def _element(self, expression: Expression, depth: int) -> List[str]:
        """A node element describing a class expression."""
        pad = INDENT * depth
        if isinstance(expression, ClassRef):
            return [f'{pad}<owl:Class rdf:about="{self.about(expression.concept_id)}"/>']

        if isinstance(expression, Intersection):
            lines = [f"{pad}<owl:Class>", f'{pad}{INDENT}<owl:intersectionOf rdf:parseType="Collection">']
            for operand in expression.operands:
                lines.extend(self._element(operand, depth + 2))
            lines.extend([f"{pad}{INDENT}</owl:intersectionOf>", f"{pad}</owl:Class>"])
            return lines

        if isinstance(expression, SomeValuesFrom):
            lines = [f"{pad}<owl:Restriction>",
                     f'{pad}{INDENT}<owl:onProperty rdf:resource="{self.about(expression.role_id)}"/>']
            lines.extend(self._object("owl:someValuesFrom", expression.filler, depth + 1))
            lines.append(f"{pad}</owl:Restriction>")
            return lines

        if isinstance(expression, DataHasValue):
            value = escape_text(expression.value)
            if expression.datatype == Datatype.UNKNOWN:
                has_value = f"<owl:hasValue>{value}</owl:hasValue>"
            else:
                datatype = escape_attribute(str(XSD[expression.datatype.value]))
                has_value = f'<owl:hasValue rdf:datatype="{datatype}">{value}</owl:hasValue>'
            return [f"{pad}<owl:Restriction>",
                    f'{pad}{INDENT}<owl:onProperty rdf:resource="{self.about(expression.feature_id)}"/>',
                    f"{pad}{INDENT}{has_value}",
                    f"{pad}</owl:Restriction>"]

        raise TypeError(f"Unsupported expression: {expression!r}")
