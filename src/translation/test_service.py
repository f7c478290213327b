"""
Integration tests for the TranslationService.

The sample release is translated end to end, in memory and through files.
"""

import io
import os

import pytest

from ontology.errors import InconsistentDefinitionError, UnsupportedFormatError, UnsupportedOperatorError
from terminology import InMemoryDataSource, RF2SnapshotDataSource
from translation import TranslationReport, TranslationService

import sample_release as sample


@pytest.fixture
def service():
    return TranslationService()


class TestTranslate:

    def test_report_counts(self, service):
        output = io.StringIO()
        report = service.translate(sample.sample_datasource(), "KRSS", output)

        assert isinstance(report, TranslationReport)
        assert report.ok
        assert report.roles == len(sample.ROLES)
        assert report.features == 2
        assert report.concepts == 27 - len(sample.ROLES)
        assert report.summary() == "KRSS: 7 roles, 2 features, 20 concepts"
        assert output.getvalue().startswith("(define-primitive-role RoleGroup)\n")

    def test_header_names_the_source(self, service):
        output = io.StringIO()
        service.translate(sample.sample_datasource(), "OWLF", output)
        assert "Input concepts file was             sample" in output.getvalue()

    def test_inconsistent_definitions_are_reported(self, service):
        output = io.StringIO()
        report = service.translate(sample.sample_datasource(inconsistent=True), "OWLF", output)

        assert not report.ok
        assert [issue.concept_id for issue in report.issues] == [sample.UNANCHORED_PART]
        assert report.summary().endswith(", 1 inconsistent definitions")
        # the concept is still declared
        assert f"Declaration(Class(:SCT_{sample.UNANCHORED_PART}))" in output.getvalue()
        with pytest.raises(InconsistentDefinitionError):
            report.raise_for_issues()

    def test_unknown_format_is_rejected_before_reading(self, service, tmp_path):
        missing = str(tmp_path / "missing.txt")
        # reading this source would fail with TerminologySourceError
        datasource = RF2SnapshotDataSource(missing, missing, missing, missing)
        with pytest.raises(UnsupportedFormatError):
            service.translate(datasource, "TTL", io.StringIO())


class TestTranslateToFile:

    def test_files_are_translated(self, service, tmp_path):
        paths = sample.write_rf2_snapshot(str(tmp_path))
        datasource = RF2SnapshotDataSource(paths["concepts"], paths["descriptions"],
                                           paths["relationships"], paths["concrete_domains"])
        output_path = str(tmp_path / "sample.owl")

        report = service.translate_to_file(datasource, "OWL", output_path)

        assert report.ok
        assert report.output_path == output_path
        assert not os.path.exists(output_path + ".partial")
        with open(output_path, encoding="utf-8") as handle:
            text = handle.read()
        assert "Input concepts file was             sct2_Concept_Snapshot_INT_20120731.txt" in text

        # same text as the in-memory run apart from the source names in the comment
        expected = service.render(service.assemble(service.build_model(sample.sample_datasource())), "OWL",
                                  service.header_for(datasource))
        assert text == expected

    def test_unknown_format_writes_nothing(self, service, tmp_path):
        output_path = str(tmp_path / "sample.ttl")
        with pytest.raises(UnsupportedFormatError, match="Valid formats are KRSS, OWL, OWLF"):
            service.translate_to_file(sample.sample_datasource(), "TTL", output_path)
        assert os.listdir(str(tmp_path)) == []

    def test_fatal_error_leaves_no_output(self, service, tmp_path):
        records = sample.sample_records()
        records["concrete_domains"].append(
            sample.concrete_domain(sample.PARACETAMOL_PACK, sample.PACK_SIZE, "5", sample.TABLET_UNIT,
                                   operator_id="700000061000036106"))
        output_path = str(tmp_path / "sample.owl")

        with pytest.raises(UnsupportedOperatorError):
            service.translate_to_file(InMemoryDataSource(**records), "OWLF", output_path)
        assert os.listdir(str(tmp_path)) == []

    def test_existing_output_is_replaced(self, service, tmp_path):
        output_path = tmp_path / "sample.krss"
        output_path.write_text("stale", encoding="utf-8")
        service.translate_to_file(sample.sample_datasource(), "KRSS", str(output_path))
        assert output_path.read_text(encoding="utf-8").startswith("(define-primitive-role RoleGroup)")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
