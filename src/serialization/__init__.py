"""
Serialization module rendering assembled ontologies in concrete syntaxes.

Supported formats (mode flag -> syntax):
- KRSS: KRSS2 role and concept definitions
- OWL:  OWL RDF/XML
- OWLF: OWL 2 Functional Syntax

All serializers consume the same AssembledOntology and differ only in syntax.
"""

from .base import OntologySerializer
from .metadata import OntologyHeader
from .registry import SerializerRegistry

__all__ = ["OntologySerializer", "OntologyHeader", "SerializerRegistry"]
