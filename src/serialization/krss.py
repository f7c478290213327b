"""
KRSS serializer.

Produces KRSS2 as accepted by the OWL API and by classifiers such as CEL. The
long forms "define-primitive-concept", "define-concept" and
"define-primitive-role" are used instead of the contracted ones. Right
identities use the ":right-identity" extension understood by CEL. KRSS has no
labels and no ontology header.
"""

from typing import List, Optional

from ontology.axioms import (
    ClassRef, Composite, ConceptAxiom, DataHasValue, Expression, FeatureAxiom,
    Intersection, RoleAxiom, SingleParent, SomeValuesFrom,
)
from ontology.domain import Datatype

from .base import OntologySerializer


class KRSSSerializer(OntologySerializer):
    format_name = "KRSS"
    syntax_name = "KRSS2"

    def object_property_lines(self, role_id: str, label: Optional[str]) -> List[str]:
        return [f"(define-primitive-role {self.name(role_id)})"]

    def role_lines(self, role: RoleAxiom) -> List[str]:
        line = f"(define-primitive-role {self.name(role.role_id)}"
        if role.parent_role:
            line += f" :parent {self.name(role.parent_role)}"
        if role.right_identity:
            line += f" :right-identity {self.name(role.right_identity)}"
        return [line + ")"]

    def feature_lines(self, feature: FeatureAxiom) -> List[str]:
        return [f"(define-primitive-attribute {self.name(feature.feature_id)})"]

    def concept_lines(self, concept: ConceptAxiom) -> List[str]:
        name = self.name(concept.concept_id)
        definition = concept.definition

        if isinstance(definition, SingleParent):
            return [f"(define-primitive-concept {name} {self.name(definition.parent_id)})"]
        if not isinstance(definition, Composite):
            # top level concepts and concepts whose definition could not be built
            return [f"(define-primitive-concept {name})"]

        keyword = "define-primitive-concept" if definition.primitive else "define-concept"
        operands = definition.operands
        if len(operands) == 1:
            return [f"({keyword} {name} {self.expression(operands[0])})"]
        lines = [f"({keyword} {name} (and"]
        lines.extend(f"   {self.expression(operand)}" for operand in operands)
        lines.append("))")
        return lines

    def expression(self, expression: Expression) -> str:
        if isinstance(expression, ClassRef):
            return self.name(expression.concept_id)
        if isinstance(expression, SomeValuesFrom):
            return f"(some {self.name(expression.role_id)} {self.expression(expression.filler)})"
        if isinstance(expression, Intersection):
            return "(and " + " ".join(self.expression(operand) for operand in expression.operands) + ")"
        if isinstance(expression, DataHasValue):
            return f"(= {self.name(expression.feature_id)} {self._literal(expression)})"
        raise TypeError(f"Unsupported expression: {expression!r}")

    def _literal(self, expression: DataHasValue) -> str:
        if expression.datatype == Datatype.UNKNOWN:
            escaped = expression.value.replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return expression.value
