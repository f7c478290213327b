"""
Ontology model builder.

Consumes the four record streams of a terminology source and produces the
read-only OntologyModel. Ingestion of the streams must be complete before
build() runs the hierarchy, role and concrete domain stages.
"""

import logging
from dataclasses import replace
from types import MappingProxyType
from typing import Dict, List, Optional

from terminology.datasource import TerminologyDataSource
from terminology.domain import ConceptRecord, DescriptionRecord, RelationshipRecord, ConcreteDomainRecord

from .concrete import ConcreteDomainResolver
from .config import TranslationConfig
from .domain import Concept, OntologyModel, Relationship
from .hierarchy import AncestorIndex, Hierarchy, RoleHierarchyResolver

logger = logging.getLogger(__name__)


class OntologyModelBuilder:
    """Single-writer builder accumulating concepts, labels, relationships and values."""

    def __init__(self, config: Optional[TranslationConfig] = None):
        self.config = config or TranslationConfig()
        self.concepts: Dict[str, Concept] = {}
        self.labels: Dict[str, str] = {}
        self.hierarchy = Hierarchy()
        self.relationships: Dict[str, List[Relationship]] = {}
        self.concrete_domains = ConcreteDomainResolver(self.config)

    def load(self, datasource: TerminologyDataSource) -> OntologyModel:
        """Drain all four streams of a data source, then build the model."""
        for record in datasource.concepts():
            self.add_concept(record)
        for record in datasource.descriptions():
            self.add_description(record)
        for record in datasource.relationships():
            self.add_relationship(record)
        for record in datasource.concrete_domains():
            self.add_concrete_domain(record)

        logger.info(f"Ingested {len(self.concepts)} concepts, {len(self.labels)} labels, "
                    f"{len(self.hierarchy)} IS-A edges, "
                    f"{sum(len(rels) for rels in self.relationships.values())} attribute relationships")
        return self.build()

    def add_concept(self, record: ConceptRecord) -> None:
        if not record.active:
            return
        self.concepts[record.id] = Concept(
            id=record.id,
            is_primitive=record.definition_status_id != self.config.defined_status_id,
        )

    def add_description(self, record: DescriptionRecord) -> None:
        # Only fully specified names are used as labels
        if not record.active or record.type_id != self.config.fsn_type_id:
            return
        self.labels[record.concept_id] = record.term

    def add_relationship(self, record: RelationshipRecord) -> None:
        if not record.active:
            return
        if record.type_id == self.config.is_a_id:
            self.hierarchy.add_is_a(record.source_id, record.destination_id)
        else:
            self.relationships.setdefault(record.source_id, []).append(Relationship(
                component_id=record.id,
                attribute_id=record.type_id,
                value_id=record.destination_id,
                group=record.group,
            ))

    def add_concrete_domain(self, record: ConcreteDomainRecord) -> None:
        if not record.active:
            return
        self.concrete_domains.add(
            component_id=record.referenced_component_id,
            feature_id=record.refset_id,
            operator_id=record.operator_id,
            value=record.value,
            unit_id=record.unit_id,
        )

    def build(self) -> OntologyModel:
        """Run the hierarchy, role and concrete domain stages over the ingested tables."""
        facts_by_component = {component_id: tuple(facts)
                              for component_id, facts in self.concrete_domains.facts_by_component.items()}
        concepts = {
            concept_id: replace(
                concept,
                label=self.labels.get(concept_id),
                parents=tuple(self.hierarchy.parents_of(concept_id)),
                relationships=tuple(self.relationships.get(concept_id, ())),
                concrete_domain_facts=facts_by_component.get(concept_id, ()),
            )
            for concept_id, concept in self.concepts.items()
        }

        orphans = [source for source in self.relationships if source not in self.concepts]
        if orphans:
            logger.debug(f"{len(orphans)} relationship sources are not active concepts")

        roles = RoleHierarchyResolver(self.hierarchy, self.config.right_identities).resolve(
            self.config.attribute_root_id)
        features = self.concrete_domains.resolve_datatypes(AncestorIndex(self.hierarchy), self.labels)

        return OntologyModel(
            concepts=MappingProxyType(concepts),
            roles=MappingProxyType(roles),
            labels=MappingProxyType(dict(self.labels)),
            facts_by_component=MappingProxyType(facts_by_component),
            features=MappingProxyType(features),
            never_grouped=frozenset(self.config.never_grouped),
        )
