import logging
import os
from typing import Callable, Iterator, List, TypeVar

from pydantic import ValidationError

from .datasource import TerminologyDataSource, TerminologySourceError
from .domain import ConceptRecord, DescriptionRecord, RelationshipRecord, ConcreteDomainRecord

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Minimum number of tab separated columns per table
CONCEPT_COLUMNS = 5
DESCRIPTION_COLUMNS = 8
RELATIONSHIP_COLUMNS = 8
CONCRETE_DOMAIN_COLUMNS = 9


class RF2SnapshotDataSource(TerminologyDataSource):
    """
    Implementation of TerminologyDataSource for RF2 snapshot files.

    Every file is tab delimited. Header lines, blank lines and inactive rows are dropped
    while reading, so consumers only ever see active records.
    """

    def __init__(self, concepts_path: str, descriptions_path: str,
                 relationships_path: str, concrete_domains_path: str):
        """
        :param concepts_path: RF2 concepts snapshot, e.g. sct2_Concept_Snapshot_INT_20120731.txt
        :param descriptions_path: RF2 descriptions snapshot
        :param relationships_path: RF2 stated relationships snapshot
        :param concrete_domains_path: concrete domain reference set snapshot
        """
        self.concepts_path = concepts_path
        self.descriptions_path = descriptions_path
        self.relationships_path = relationships_path
        self.concrete_domains_path = concrete_domains_path

    def concepts(self) -> Iterator[ConceptRecord]:
        return self._read(self.concepts_path, CONCEPT_COLUMNS, ConceptRecord.from_row)

    def descriptions(self) -> Iterator[DescriptionRecord]:
        return self._read(self.descriptions_path, DESCRIPTION_COLUMNS, DescriptionRecord.from_row)

    def relationships(self) -> Iterator[RelationshipRecord]:
        return self._read(self.relationships_path, RELATIONSHIP_COLUMNS, RelationshipRecord.from_row)

    def concrete_domains(self) -> Iterator[ConcreteDomainRecord]:
        return self._read(self.concrete_domains_path, CONCRETE_DOMAIN_COLUMNS, ConcreteDomainRecord.from_row)

    def describe(self) -> dict:
        return {
            "concepts": os.path.basename(self.concepts_path),
            "relationships": os.path.basename(self.relationships_path),
        }

    def check_readable(self) -> None:
        """
        Fail fast if any of the four inputs cannot be opened.

        :raises TerminologySourceError: for the first unreadable path
        """
        for path in (self.concepts_path, self.descriptions_path,
                     self.relationships_path, self.concrete_domains_path):
            if not os.path.isfile(path) or not os.access(path, os.R_OK):
                raise TerminologySourceError(path, "file does not exist or is not readable")

    def _read(self, path: str, min_columns: int, factory: Callable[[List[str]], T]) -> Iterator[T]:
        """
        Yield a record for every active row of a tab delimited file.

        :param path: file to read
        :param min_columns: rows with fewer columns are rejected
        :param factory: builds the record from the split columns
        """
        try:
            handle = open(path, "r", encoding="utf-8")
        except OSError as e:
            raise TerminologySourceError(path, str(e)) from e

        kept = 0
        skipped = 0
        line_number = 0
        with handle:
            try:
                for line_number, line in enumerate(handle, start=1):
                    values = line.replace("\r", "").replace("\n", "").split("\t")
                    # header, blank and inactive rows
                    if not values[0] or len(values) < 3 or values[2] != "1":
                        skipped += 1
                        continue
                    if len(values) < min_columns:
                        raise TerminologySourceError(
                            path, f"line {line_number} has {len(values)} columns, expected at least {min_columns}")
                    try:
                        record = factory(values)
                    except ValidationError as e:
                        error = e.errors()[0]
                        field = ".".join(str(part) for part in error["loc"])
                        raise TerminologySourceError(
                            path, f"line {line_number}: invalid {field}: {error['msg']}") from e
                    kept += 1
                    yield record
            except UnicodeDecodeError as e:
                # decoding is buffered, so the bad bytes are somewhere after the last complete line
                raise TerminologySourceError(path, f"line {line_number + 1} or later: not valid UTF-8 ({e.reason})") from e

        logger.info(f"Read {kept} active rows from {path} ({skipped} skipped)")
