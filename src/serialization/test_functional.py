"""
Tests for the OWL 2 Functional Syntax serializer.
"""

import pytest

from ontology.axioms import (
    AssembledOntology, AxiomAssembler, ClassRef, ConceptAxiom, DataHasValue, FeatureAxiom,
    Inconsistent, RoleAxiom, SingleParent, Unconditioned,
)
from ontology.builder import OntologyModelBuilder
from ontology.config import TranslationConfig
from ontology.domain import Datatype
from serialization.functional import FunctionalSyntaxSerializer, escape_label
from serialization.metadata import OntologyHeader

import sample_release as sample


@pytest.fixture
def sample_lines():
    model = OntologyModelBuilder().load(sample.sample_datasource())
    header = OntologyHeader.from_config(TranslationConfig(), "concepts.txt", "stated.txt")
    return FunctionalSyntaxSerializer().render(AxiomAssembler(model).assemble(), header).splitlines()


class TestHeader:

    def test_prefixes_and_ontology(self, sample_lines):
        assert sample_lines[:6] == [
            "Prefix(xsd:=<http://www.w3.org/2001/XMLSchema#>)",
            "Prefix(owl:=<http://www.w3.org/2002/07/owl#>)",
            "Prefix(:=<http://www.ihtsdo.org/>)",
            "Prefix(xml:=<http://www.w3.org/XML/1998/namespace>)",
            "Prefix(rdf:=<http://www.w3.org/1999/02/22-rdf-syntax-ns#>)",
            "Prefix(rdfs:=<http://www.w3.org/2000/01/rdf-schema#>)",
        ]
        assert sample_lines[6:9] == ["", "", "Ontology(<http://www.ihtsdo.org>"]
        assert sample_lines[9] == ('Annotation(rdfs:label "SNOMED Clinical Terms, International Release, '
                                   'Stated Relationships in OWL Functional Syntax")')
        assert sample_lines[10] == 'Annotation(owl:versionInfo "20120731")'
        assert sample_lines[-1] == ")"

    def test_comment_names_the_inputs(self, sample_lines):
        text = "\n".join(sample_lines)
        assert "Input concepts file was             concepts.txt" in text
        assert "Input stated relationships file was stated.txt" in text

    def test_configured_iris(self):
        config = TranslationConfig(base_iri="http://snomed.info/id/", ontology_iri="http://snomed.info/sct",
                                   id_prefix="")
        serializer = FunctionalSyntaxSerializer(config)
        lines = serializer.render(AssembledOntology()).splitlines()
        assert "Prefix(:=<http://snomed.info/id/>)" in lines
        assert "Ontology(<http://snomed.info/sct>" in lines
        assert serializer.ref("404684003") == ":404684003"


class TestAxioms:

    def test_object_properties(self, sample_lines):
        assert "Declaration(ObjectProperty(:RoleGroup))" in sample_lines
        assert 'AnnotationAssertion(rdfs:label :RoleGroup "RoleGroup")' in sample_lines
        assert "Declaration(ObjectProperty(:SCT_UNIT))" in sample_lines
        assert not any(line.startswith("AnnotationAssertion(rdfs:label :SCT_UNIT ") for line in sample_lines)

    def test_role_hierarchy_and_chain(self, sample_lines):
        assert (f"SubObjectPropertyOf(:SCT_{sample.CAUSATIVE_AGENT} :SCT_{sample.ASSOCIATED_WITH})"
                in sample_lines)
        assert (f"SubObjectPropertyOf(ObjectPropertyChain(:SCT_{sample.DIRECT_SUBSTANCE} "
                f":SCT_{sample.HAS_ACTIVE_INGREDIENT}) :SCT_{sample.DIRECT_SUBSTANCE})") in sample_lines

    def test_features_have_ranges(self, sample_lines):
        assert f"Declaration(DataProperty(:SCT_{sample.STRENGTH}))" in sample_lines
        assert f"DataPropertyRange(:SCT_{sample.STRENGTH} xsd:decimal)" in sample_lines
        assert f"DataPropertyRange(:SCT_{sample.PACK_SIZE} xsd:integer)" in sample_lines

    def test_defined_concept(self, sample_lines):
        assert (
            f"EquivalentClasses(:SCT_{sample.SEVERE_HEART_DISEASE} "
            f"ObjectIntersectionOf(:SCT_{sample.CLINICAL_FINDING} "
            f"ObjectSomeValuesFrom(:RoleGroup ObjectIntersectionOf("
            f"ObjectSomeValuesFrom(:SCT_{sample.FINDING_SITE} :SCT_{sample.HEART}) "
            f"ObjectSomeValuesFrom(:SCT_{sample.SEVERITY} :SCT_{sample.SEVERE})))))"
        ) in sample_lines

    def test_never_grouped_attribute(self, sample_lines):
        assert (
            f"SubClassOf(:SCT_{sample.HEART_VALVE} ObjectIntersectionOf(:SCT_{sample.BODY_STRUCTURE} "
            f"ObjectSomeValuesFrom(:SCT_{sample.PART_OF} :SCT_{sample.HEART})))"
        ) in sample_lines

    def test_concept_with_value(self, sample_lines):
        assert (
            f"SubClassOf(:SCT_{sample.PARACETAMOL_PACK} "
            f"ObjectIntersectionOf(:SCT_{sample.PARACETAMOL_TABLET} "
            f"ObjectSomeValuesFrom(:RoleGroup ObjectIntersectionOf("
            f"ObjectSomeValuesFrom(:SCT_UNIT :SCT_{sample.TABLET_UNIT}) "
            f'DataHasValue(:SCT_{sample.PACK_SIZE} "10"^^xsd:integer)))))'
        ) in sample_lines

    def test_concept_declarations(self, sample_lines):
        index = sample_lines.index(f"Declaration(Class(:SCT_{sample.HEART}))")
        assert sample_lines[index + 1] == (f'AnnotationAssertion(rdfs:label :SCT_{sample.HEART} '
                                           f'"Heart structure (body structure)")')
        assert sample_lines[index + 2] == f"SubClassOf(:SCT_{sample.HEART} :SCT_{sample.BODY_STRUCTURE})"

        index = sample_lines.index(f"Declaration(Class(:SCT_{sample.ROOT}))")
        assert sample_lines[index + 2].startswith("Declaration("), "Top level concepts have no axiom"

    def test_inconsistent_concept_is_declared_only(self):
        ontology = AssembledOntology(concepts=[
            ConceptAxiom("e", "E", False, Inconsistent("fully defined concept has only relationships and no parents")),
        ])
        lines = FunctionalSyntaxSerializer().render(ontology).splitlines()
        assert lines[-3:] == ["Declaration(Class(:SCT_e))", 'AnnotationAssertion(rdfs:label :SCT_e "E")', ")"]


class TestLiterals:

    def test_label_quotes_become_apostrophes(self):
        assert escape_label('Finding "with quotes"') == "Finding 'with quotes'"
        ontology = AssembledOntology(concepts=[ConceptAxiom("a", 'say "hi"', True, Unconditioned())])
        text = FunctionalSyntaxSerializer().render(ontology)
        assert "AnnotationAssertion(rdfs:label :SCT_a \"say 'hi'\")" in text

    def test_unknown_datatype_has_plain_literal_and_no_range(self):
        serializer = FunctionalSyntaxSerializer()
        assert serializer.expression(DataHasValue("f", "red", Datatype.UNKNOWN)) == 'DataHasValue(:SCT_f "red")'
        lines = serializer.feature_lines(FeatureAxiom("f", None, Datatype.UNKNOWN))
        assert lines == ["Declaration(DataProperty(:SCT_f))"]

    def test_unlabelled_entities(self):
        serializer = FunctionalSyntaxSerializer()
        assert serializer.role_lines(RoleAxiom("r", None, None, None)) == ["Declaration(ObjectProperty(:SCT_r))"]
        assert serializer.concept_lines(ConceptAxiom("b", None, True, SingleParent("a"))) == [
            "Declaration(Class(:SCT_b))",
            "SubClassOf(:SCT_b :SCT_a)",
        ]
        assert serializer.expression(ClassRef("a")) == ":SCT_a"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
