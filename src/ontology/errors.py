"""
Errors raised while translating a terminology into an ontology.

Fatal errors abort the run. Structural inconsistencies are collected as
DefinitionIssue records and only turned into an exception on request.
"""

from dataclasses import dataclass
from typing import List, Optional


class TranslationError(Exception):
    """Base class for all translation errors."""


class UnsupportedOperatorError(TranslationError):
    """A concrete domain value uses an operator other than equality."""

    def __init__(self, operator_id: str, feature_id: str, component_id: str):
        super().__init__(
            f"Unexpected operator {operator_id} for feature {feature_id} on component {component_id}"
        )
        self.operator_id = operator_id
        self.feature_id = feature_id
        self.component_id = component_id


class UnsupportedFormatError(TranslationError):
    """The requested output format is not one of the registered serializers."""

    def __init__(self, output_format: str, available: List[str]):
        super().__init__(
            f"I don't recognize {output_format}. Valid formats are {', '.join(available)}."
        )
        self.output_format = output_format
        self.available = available


class RoleHierarchyError(TranslationError):
    """The attribute hierarchy cannot be turned into a role hierarchy."""


class RoleHierarchyConflictError(RoleHierarchyError):
    """A role was reached under two different parent roles."""

    def __init__(self, role_id: str, first_parent: Optional[str], second_parent: Optional[str]):
        super().__init__(
            f"Role {role_id} has conflicting parent roles: {first_parent or '<none>'} and {second_parent or '<none>'}"
        )
        self.role_id = role_id
        self.first_parent = first_parent
        self.second_parent = second_parent


class RoleHierarchyCycleError(RoleHierarchyError):
    """The attribute hierarchy contains a cycle."""

    def __init__(self, path: List[str]):
        super().__init__(f"Cycle in attribute hierarchy: {' -> '.join(path)}")
        self.path = path


@dataclass(frozen=True)
class DefinitionIssue:
    """A concept whose definition could not be rendered."""

    concept_id: str
    label: Optional[str]
    reason: str

    def __str__(self) -> str:
        return f"{self.concept_id} | {self.label or ''} | {self.reason}"


class InconsistentDefinitionError(TranslationError):
    """One or more concepts have structurally inconsistent definitions."""

    def __init__(self, issues: List[DefinitionIssue]):
        lines = "\n".join(f"  {issue}" for issue in issues)
        super().__init__(f"{len(issues)} concept(s) with inconsistent definitions:\n{lines}")
        self.issues = issues
