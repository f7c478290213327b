"""
Terminology input module.

This module reads the tables of a terminology snapshot (concepts, descriptions,
stated relationships and concrete domain values) and yields typed, already
active-filtered records.

Public Interface:
- TerminologyDataSource: Interface implemented by all sources
- RF2SnapshotDataSource: Reads tab delimited RF2 snapshot files
- InMemoryDataSource: Serves records that are already in memory
"""

from .datasource import TerminologyDataSource, InMemoryDataSource, TerminologySourceError
from .datasource_rf2 import RF2SnapshotDataSource
from .domain import ConceptRecord, DescriptionRecord, RelationshipRecord, ConcreteDomainRecord

__all__ = [
    "TerminologyDataSource",
    "InMemoryDataSource",
    "RF2SnapshotDataSource",
    "TerminologySourceError",
    "ConceptRecord",
    "DescriptionRecord",
    "RelationshipRecord",
    "ConcreteDomainRecord",
]
