"""
Domain models for the translation module.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ontology.errors import DefinitionIssue, InconsistentDefinitionError


@dataclass
class TranslationReport:
    """Outcome of one translation run."""

    output_format: str
    output_path: Optional[str]
    roles: int = 0
    features: int = 0
    concepts: int = 0
    issues: List[DefinitionIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues

    def raise_for_issues(self) -> None:
        """Raise InconsistentDefinitionError summarizing every offending concept."""
        if self.issues:
            raise InconsistentDefinitionError(self.issues)

    def summary(self) -> str:
        text = (f"{self.output_format}: {self.roles} roles, {self.features} features, "
                f"{self.concepts} concepts")
        if self.issues:
            text += f", {len(self.issues)} inconsistent definitions"
        return text
