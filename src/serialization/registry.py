"""
Serializer registry for the supported output formats.

This module maps mode flags to serializer classes, enabling a pluggable set of
output syntaxes that all render the same assembled ontology.
"""

from typing import Dict, List, Optional, Type

from ontology.config import TranslationConfig
from ontology.errors import UnsupportedFormatError

from .base import OntologySerializer
from .functional import FunctionalSyntaxSerializer
from .krss import KRSSSerializer
from .rdfxml import RDFXMLSerializer


class SerializerRegistry:
    """
    Registry for available output formats and their serializers.

    Provides a pluggable architecture for different syntaxes while keeping one
    consistent interface for rendering.
    """

    def __init__(self, config: Optional[TranslationConfig] = None):
        """Initialize the registry with the KRSS, OWL and OWLF serializers."""
        self.config = config or TranslationConfig()
        self._serializers: Dict[str, Type[OntologySerializer]] = {}
        for serializer_class in (KRSSSerializer, RDFXMLSerializer, FunctionalSyntaxSerializer):
            self.register_serializer(serializer_class)

    def register_serializer(self, serializer_class: Type[OntologySerializer]) -> None:
        """
        Register a serializer under its format name.

        Args:
            serializer_class: OntologySerializer subclass with a format_name
        """
        self._serializers[serializer_class.format_name] = serializer_class

    def get_serializer(self, output_format: str) -> OntologySerializer:
        """
        Get a serializer for the requested format.

        Args:
            output_format: Mode flag, e.g. "KRSS", "OWL" or "OWLF"

        Returns:
            A serializer instance bound to the registry's config

        Raises:
            UnsupportedFormatError: If no serializer is registered for the format
        """
        serializer_class = self._serializers.get(output_format)
        if serializer_class is None:
            raise UnsupportedFormatError(output_format, self.get_available_formats())
        return serializer_class(self.config)

    def get_available_formats(self) -> List[str]:
        return list(self._serializers.keys())

    def has_serializer(self, output_format: str) -> bool:
        return output_format in self._serializers
