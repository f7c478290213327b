"""
Ontology header metadata for the OWL output formats.
"""

from dataclasses import dataclass
from typing import List, Optional

from ontology.config import TranslationConfig


@dataclass(frozen=True)
class OntologyHeader:
    """Static boilerplate placed before the generated axioms."""

    ontology_iri: str
    label: str
    version_info: str
    concepts_source: str = ""
    relationships_source: str = ""

    @classmethod
    def from_config(cls, config: TranslationConfig, concepts_source: str = "",
                    relationships_source: str = "") -> "OntologyHeader":
        return cls(
            ontology_iri=config.ontology_iri,
            label=config.ontology_label,
            version_info=config.version_info,
            concepts_source=concepts_source,
            relationships_source=relationships_source,
        )

    def comment_lines(self, syntax_name: Optional[str] = None) -> List[str]:
        """Lines of the descriptive comment naming the source files."""
        generated = "Generated from terminology release files"
        if syntax_name:
            generated = f"Generated as {syntax_name} from terminology release files"
        return [
            generated,
            f"Input concepts file was             {self.concepts_source}",
            f"Input stated relationships file was {self.relationships_source}",
        ]
