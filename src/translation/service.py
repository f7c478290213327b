"""
Translation service providing the public interface for turning a terminology
snapshot into an ontology file.

It coordinates the model builder, the axiom assembler and the serializer
registry: data source -> OntologyModel -> AssembledOntology -> rendered text.
"""

import logging
import os
from typing import Optional, TextIO

from ontology.axioms import AssembledOntology, AxiomAssembler
from ontology.builder import OntologyModelBuilder
from ontology.config import TranslationConfig
from ontology.domain import OntologyModel
from ontology.errors import UnsupportedFormatError
from serialization.metadata import OntologyHeader
from serialization.registry import SerializerRegistry
from terminology.datasource import TerminologyDataSource

from .domain import TranslationReport

logger = logging.getLogger(__name__)


class TranslationService:
    """High-level interface for terminology to ontology translation."""

    def __init__(self, config: Optional[TranslationConfig] = None,
                 registry: Optional[SerializerRegistry] = None):
        """Initialize the translation service.

        Args:
            config: Optional translation config. If None, the release defaults are used.
            registry: Optional serializer registry. If None, creates one for the config.
        """
        self.config = config or TranslationConfig()
        self.registry = registry if registry is not None else SerializerRegistry(self.config)

    def build_model(self, datasource: TerminologyDataSource) -> OntologyModel:
        """Read every record of the data source and build the ontology model."""
        return OntologyModelBuilder(self.config).load(datasource)

    def assemble(self, model: OntologyModel) -> AssembledOntology:
        """Assemble the definitions of all roles, features and concepts."""
        return AxiomAssembler(model, self.config).assemble()

    def header_for(self, datasource: TerminologyDataSource) -> OntologyHeader:
        sources = datasource.describe()
        return OntologyHeader.from_config(
            self.config,
            concepts_source=sources.get("concepts", ""),
            relationships_source=sources.get("relationships", ""),
        )

    def render(self, ontology: AssembledOntology, output_format: str,
               header: Optional[OntologyHeader] = None) -> str:
        """Render an assembled ontology in the requested format.

        Raises:
            UnsupportedFormatError: If the format is not registered
        """
        return self.registry.get_serializer(output_format).render(ontology, header)

    def translate(self, datasource: TerminologyDataSource, output_format: str,
                  output: TextIO, output_path: Optional[str] = None) -> TranslationReport:
        """Translate a data source and write the result to an open stream.

        The format is checked before any input is read. Inconsistent concept
        definitions do not stop the run; they are listed in the report.

        Args:
            datasource: Terminology records
            output_format: Mode flag of the serializer
            output: Text stream receiving the ontology
            output_path: Path of the stream, for the report only

        Returns:
            TranslationReport with counts and inconsistent definitions
        """
        serializer = self.registry.get_serializer(output_format)
        model = self.build_model(datasource)
        ontology = self.assemble(model)
        serializer.write(ontology, output, self.header_for(datasource))

        report = TranslationReport(
            output_format=output_format,
            output_path=output_path,
            roles=len(ontology.roles),
            features=len(ontology.features),
            concepts=len(ontology.concepts),
            issues=list(ontology.issues),
        )
        logger.info(f"Wrote {report.summary()}")
        return report

    def translate_to_file(self, datasource: TerminologyDataSource, output_format: str,
                          output_path: str) -> TranslationReport:
        """Translate a data source into a file.

        The file is written to a temporary name and moved into place only when
        rendering finished, so a fatal error never leaves a partial output.
        """
        # fail on an unknown format before touching the file system
        if not self.registry.has_serializer(output_format):
            raise UnsupportedFormatError(output_format, self.registry.get_available_formats())

        temporary_path = f"{output_path}.partial"
        try:
            with open(temporary_path, "w", encoding="utf-8", newline="\n") as output:
                report = self.translate(datasource, output_format, output, output_path)
        except Exception:
            if os.path.exists(temporary_path):
                os.remove(temporary_path)
            raise
        os.replace(temporary_path, output_path)
        return report
