"""
Translation module.

This module provides a unified interface for translating a terminology
snapshot into an ontology through TranslationService. All end-to-end runs
should go through this service.
"""

# Main public interface
from .service import TranslationService
from .domain import TranslationReport

__all__ = ["TranslationService", "TranslationReport"]
