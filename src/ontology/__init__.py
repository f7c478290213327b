"""
Ontology model and axiom assembly module.

This module builds a description logic model from terminology records: the
IS-A hierarchy, the role hierarchy under the attribute root, role groups and
concrete domain values, and assembles a syntax independent definition for
every role and concept.

Public Interface:
- OntologyModelBuilder: Builds the OntologyModel from a terminology data source
- AxiomAssembler: Classifies concepts and assembles their definitions
- TranslationConfig: Release dependent identifiers and output settings
"""

from .axioms import AxiomAssembler, AssembledOntology
from .builder import OntologyModelBuilder
from .config import TranslationConfig
from .domain import OntologyModel

__all__ = ["OntologyModelBuilder", "AxiomAssembler", "AssembledOntology", "TranslationConfig", "OntologyModel"]
