"""
A small terminology release shared by the tests. It is kept next to them and
is not part of the installed packages.

It contains a role hierarchy with a nested role and a right identity, a fully
defined concept with a role group, a never-grouped attribute, and concrete
domain values attached to a concept and to a relationship. An optional fully
defined concept without parents makes the release inconsistent.
"""

import os
from typing import Dict, List

from terminology.datasource import InMemoryDataSource
from terminology.domain import ConceptRecord, DescriptionRecord, RelationshipRecord, ConcreteDomainRecord

EFFECTIVE_TIME = "20120731"
MODULE_ID = "900000000000207008"
PRIMITIVE_STATUS_ID = "900000000000074008"
DEFINED_STATUS_ID = "900000000000073002"
FSN_TYPE_ID = "900000000000003001"
SYNONYM_TYPE_ID = "900000000000013009"
STATED_TYPE_ID = "900000000000010007"
IS_A = "116680003"
EQUALS_OPERATOR = "700000051000036108"

# Hierarchy tops
ROOT = "138875005"
ATTRIBUTE_ROOT = "410662002"
CLINICAL_FINDING = "404684003"
BODY_STRUCTURE = "123037004"
SEVERITIES = "272141005"
SUBSTANCE = "105590001"
PRODUCT = "373873005"
MEASUREMENT_FLOAT = "700001351000036100"
MEASUREMENT_INT = "700001361000036102"

# Roles
FINDING_SITE = "363698007"
SEVERITY = "246112005"
PART_OF = "123005000"
ASSOCIATED_WITH = "47429007"
CAUSATIVE_AGENT = "246075003"
DIRECT_SUBSTANCE = "363701004"
HAS_ACTIVE_INGREDIENT = "127489000"

# Features
STRENGTH = "700000091000036104"
PACK_SIZE = "700000111000036105"

# Concepts
HEART = "80891009"
HEART_VALVE = "17401000"
SEVERE = "24484000"
SEVERE_HEART_DISEASE = "56265001"
PARACETAMOL = "387517004"
PARACETAMOL_TABLET = "322236009"
PARACETAMOL_PACK = "933220011000036109"
MILLIGRAM = "258684004"
TABLET_UNIT = "732936001"
RETIRED = "999999001"
UNANCHORED_PART = "91689009"

# Relationship carrying the strength of the tablet
TABLET_INGREDIENT_RELATIONSHIP = "3000000021"

ROLES = [FINDING_SITE, SEVERITY, PART_OF, ASSOCIATED_WITH, CAUSATIVE_AGENT,
         DIRECT_SUBSTANCE, HAS_ACTIVE_INGREDIENT]

LABELS: Dict[str, str] = {
    ROOT: "SNOMED CT Concept (SNOMED RT+CTV3)",
    ATTRIBUTE_ROOT: "Concept model attribute (attribute)",
    CLINICAL_FINDING: "Clinical finding (finding)",
    BODY_STRUCTURE: "Body structure (body structure)",
    SEVERITIES: "Severities (qualifier value)",
    SUBSTANCE: "Substance (substance)",
    PRODUCT: "Pharmaceutical / biologic product (product)",
    MEASUREMENT_FLOAT: "Measurement type float (qualifier value)",
    MEASUREMENT_INT: "Measurement type int (qualifier value)",
    FINDING_SITE: "Finding site (attribute)",
    SEVERITY: "Severity (attribute)",
    PART_OF: "Part of (attribute)",
    ASSOCIATED_WITH: "Associated with (attribute)",
    CAUSATIVE_AGENT: "Causative agent (attribute)",
    DIRECT_SUBSTANCE: "Direct substance (attribute)",
    HAS_ACTIVE_INGREDIENT: "Has active ingredient (attribute)",
    STRENGTH: "Strength (attribute)",
    PACK_SIZE: "Pack size (attribute)",
    HEART: "Heart structure (body structure)",
    HEART_VALVE: "Cardiac valve structure (body structure)",
    SEVERE: "Severe (severity modifier) (qualifier value)",
    SEVERE_HEART_DISEASE: "Severe heart disease (disorder)",
    PARACETAMOL: "Paracetamol (substance)",
    PARACETAMOL_TABLET: "Paracetamol 500mg tablet (product)",
    PARACETAMOL_PACK: "Paracetamol 500mg tablet, 10 (pack)",
    MILLIGRAM: "milligram (qualifier value)",
    TABLET_UNIT: "Tablet (unit of presentation)",
    UNANCHORED_PART: "Unanchored heart part (body structure)",
}

# child -> parents
IS_A_EDGES = [
    (ATTRIBUTE_ROOT, ROOT),
    (FINDING_SITE, ATTRIBUTE_ROOT),
    (SEVERITY, ATTRIBUTE_ROOT),
    (PART_OF, ATTRIBUTE_ROOT),
    (ASSOCIATED_WITH, ATTRIBUTE_ROOT),
    (CAUSATIVE_AGENT, ASSOCIATED_WITH),
    (DIRECT_SUBSTANCE, ATTRIBUTE_ROOT),
    (HAS_ACTIVE_INGREDIENT, ATTRIBUTE_ROOT),
    (CLINICAL_FINDING, ROOT),
    (BODY_STRUCTURE, ROOT),
    (SEVERITIES, ROOT),
    (SUBSTANCE, ROOT),
    (PRODUCT, ROOT),
    (MEASUREMENT_FLOAT, ROOT),
    (MEASUREMENT_INT, ROOT),
    (STRENGTH, MEASUREMENT_FLOAT),
    (PACK_SIZE, MEASUREMENT_INT),
    (HEART, BODY_STRUCTURE),
    (HEART_VALVE, BODY_STRUCTURE),
    (SEVERE, SEVERITIES),
    (SEVERE_HEART_DISEASE, CLINICAL_FINDING),
    (PARACETAMOL, SUBSTANCE),
    (PARACETAMOL_TABLET, PRODUCT),
    (PARACETAMOL_PACK, PARACETAMOL_TABLET),
    (MILLIGRAM, ROOT),
    (TABLET_UNIT, ROOT),
]


def concept(concept_id: str, defined: bool = False, active: bool = True) -> ConceptRecord:
    return ConceptRecord(
        id=concept_id,
        active=active,
        definition_status_id=DEFINED_STATUS_ID if defined else PRIMITIVE_STATUS_ID,
    )


def description(description_id: str, concept_id: str, term: str,
                type_id: str = FSN_TYPE_ID, active: bool = True) -> DescriptionRecord:
    return DescriptionRecord(id=description_id, active=active, concept_id=concept_id,
                             type_id=type_id, term=term)


def relationship(relationship_id: str, source_id: str, type_id: str, destination_id: str,
                 group: int = 0, active: bool = True) -> RelationshipRecord:
    return RelationshipRecord(
        id=relationship_id,
        active=active,
        source_id=source_id,
        destination_id=destination_id,
        group=group,
        type_id=type_id,
        characteristic_type_id=STATED_TYPE_ID,
    )


def concrete_domain(component_id: str, feature_id: str, value: str, unit_id: str,
                    operator_id: str = EQUALS_OPERATOR, active: bool = True) -> ConcreteDomainRecord:
    return ConcreteDomainRecord(
        active=active,
        refset_id=feature_id,
        referenced_component_id=component_id,
        unit_id=unit_id,
        operator_id=operator_id,
        value=value,
    )


def sample_records(inconsistent: bool = False) -> dict:
    """
    Records of the sample release.

    :param inconsistent: add a fully defined concept that only has a relationship
    :return: dict with "concepts", "descriptions", "relationships" and "concrete_domains" lists
    """
    defined = {SEVERE_HEART_DISEASE}
    concepts = [concept(concept_id, defined=concept_id in defined)
                for concept_id in LABELS if concept_id != UNANCHORED_PART]
    concepts.append(concept(RETIRED, active=False))

    descriptions = [description(str(1000000 + n), concept_id, term)
                    for n, (concept_id, term) in enumerate(LABELS.items())
                    if concept_id != UNANCHORED_PART]
    descriptions.append(description("2000001", HEART, "Heart", type_id=SYNONYM_TYPE_ID))
    descriptions.append(description("2000002", RETIRED, "Retired concept (finding)", active=False))

    relationships = [relationship(str(3000000100 + n), child, IS_A, parent)
                     for n, (child, parent) in enumerate(IS_A_EDGES)]
    relationships.extend([
        relationship("3000000011", HEART_VALVE, PART_OF, HEART),
        relationship("3000000012", SEVERE_HEART_DISEASE, FINDING_SITE, HEART, group=1),
        relationship("3000000013", SEVERE_HEART_DISEASE, SEVERITY, SEVERE, group=1),
        relationship(TABLET_INGREDIENT_RELATIONSHIP, PARACETAMOL_TABLET, HAS_ACTIVE_INGREDIENT,
                     PARACETAMOL, group=1),
        relationship("3000000099", RETIRED, IS_A, ROOT, active=False),
    ])

    concrete_domains = [
        concrete_domain(TABLET_INGREDIENT_RELATIONSHIP, STRENGTH, "500", MILLIGRAM),
        concrete_domain(PARACETAMOL_PACK, PACK_SIZE, "10", TABLET_UNIT),
        concrete_domain(PARACETAMOL_PACK, PACK_SIZE, "20", TABLET_UNIT, active=False),
    ]

    if inconsistent:
        concepts.append(concept(UNANCHORED_PART, defined=True))
        descriptions.append(description("2000003", UNANCHORED_PART, LABELS[UNANCHORED_PART]))
        relationships.append(relationship("3000000031", UNANCHORED_PART, PART_OF, HEART))

    return {
        "concepts": concepts,
        "descriptions": descriptions,
        "relationships": relationships,
        "concrete_domains": concrete_domains,
    }


def sample_datasource(inconsistent: bool = False) -> InMemoryDataSource:
    return InMemoryDataSource(name="sample", **sample_records(inconsistent))


def write_rf2_snapshot(directory: str, inconsistent: bool = False) -> Dict[str, str]:
    """
    Write the sample release as four tab delimited RF2 snapshot files with header rows.

    :param directory: existing directory receiving the files
    :return: dict mapping "concepts", "descriptions", "relationships" and "concrete_domains" to paths
    """
    records = sample_records(inconsistent)
    active = lambda record: "1" if record.active else "0"

    tables: Dict[str, List[List[str]]] = {
        "concepts": [["id", "effectiveTime", "active", "moduleId", "definitionStatusId"]] + [
            [r.id, EFFECTIVE_TIME, active(r), MODULE_ID, r.definition_status_id]
            for r in records["concepts"]
        ],
        "descriptions": [["id", "effectiveTime", "active", "moduleId", "conceptId", "languageCode",
                          "typeId", "term", "caseSignificanceId"]] + [
            [r.id, EFFECTIVE_TIME, active(r), MODULE_ID, r.concept_id, "en", r.type_id, r.term,
             "900000000000020002"]
            for r in records["descriptions"]
        ],
        "relationships": [["id", "effectiveTime", "active", "moduleId", "sourceId", "destinationId",
                           "relationshipGroup", "typeId", "characteristicTypeId", "modifierId"]] + [
            [r.id, EFFECTIVE_TIME, active(r), MODULE_ID, r.source_id, r.destination_id, str(r.group),
             r.type_id, r.characteristic_type_id, "900000000000451002"]
            for r in records["relationships"]
        ],
        "concrete_domains": [["id", "effectiveTime", "active", "moduleId", "refsetId",
                              "referencedComponentId", "unitId", "operatorId", "value"]] + [
            [f"cd-{n}", EFFECTIVE_TIME, active(r), MODULE_ID, r.refset_id, r.referenced_component_id,
             r.unit_id, r.operator_id, r.value]
            for n, r in enumerate(records["concrete_domains"])
        ],
    }

    file_names = {
        "concepts": "sct2_Concept_Snapshot_INT_20120731.txt",
        "descriptions": "sct2_Description_Snapshot-en_INT_20120731.txt",
        "relationships": "sct2_StatedRelationship_Snapshot_INT_20120731.txt",
        "concrete_domains": "der2_ccsRefset_ConcreteDomainsSnapshot_INT_20120731.txt",
    }
    paths = {}
    for table, rows in tables.items():
        path = os.path.join(directory, file_names[table])
        with open(path, "w", encoding="utf-8", newline="") as handle:
            for row in rows:
                handle.write("\t".join(row) + "\r\n")
        paths[table] = path
    return paths
