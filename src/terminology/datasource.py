from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Optional

from .domain import ConceptRecord, DescriptionRecord, RelationshipRecord, ConcreteDomainRecord


class TerminologySourceError(Exception):
    """Raised when a terminology input cannot be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"can't read {path}: {reason}")
        self.path = path
        self.reason = reason


class TerminologyDataSource(ABC):
    """
    This class serves as an interface for reading the four tables of a terminology snapshot.
    Implementations yield only active rows; header and blank rows never reach the caller.
    """

    @abstractmethod
    def concepts(self) -> Iterator[ConceptRecord]:
        """
        Iterate over the active concepts.

        :return: iterator of ConceptRecord objects
        """

    @abstractmethod
    def descriptions(self) -> Iterator[DescriptionRecord]:
        """
        Iterate over the active descriptions.

        :return: iterator of DescriptionRecord objects
        """

    @abstractmethod
    def relationships(self) -> Iterator[RelationshipRecord]:
        """
        Iterate over the active stated relationships, IS-A edges included.

        :return: iterator of RelationshipRecord objects
        """

    @abstractmethod
    def concrete_domains(self) -> Iterator[ConcreteDomainRecord]:
        """
        Iterate over the active concrete domain reference set members.

        :return: iterator of ConcreteDomainRecord objects
        """

    def describe(self) -> dict:
        """
        Names of the underlying inputs, used for the ontology header comment.

        :return: dict with "concepts" and "relationships" entries
        """
        return {"concepts": "", "relationships": ""}


class InMemoryDataSource(TerminologyDataSource):
    """
    Implementation of TerminologyDataSource over records that are already in memory.
    Inactive records are filtered the same way the file-based source filters them.
    """

    def __init__(self,
                 concepts: Optional[Iterable[ConceptRecord]] = None,
                 descriptions: Optional[Iterable[DescriptionRecord]] = None,
                 relationships: Optional[Iterable[RelationshipRecord]] = None,
                 concrete_domains: Optional[Iterable[ConcreteDomainRecord]] = None,
                 name: str = "memory"):
        self._concepts = list(concepts or [])
        self._descriptions = list(descriptions or [])
        self._relationships = list(relationships or [])
        self._concrete_domains = list(concrete_domains or [])
        self.name = name

    def concepts(self) -> Iterator[ConceptRecord]:
        return (record for record in self._concepts if record.active)

    def descriptions(self) -> Iterator[DescriptionRecord]:
        return (record for record in self._descriptions if record.active)

    def relationships(self) -> Iterator[RelationshipRecord]:
        return (record for record in self._relationships if record.active)

    def concrete_domains(self) -> Iterator[ConcreteDomainRecord]:
        return (record for record in self._concrete_domains if record.active)

    def describe(self) -> dict:
        return {"concepts": self.name, "relationships": self.name}
