"""
Configuration for the terminology to ontology translation.

The values depend on the particular terminology release. Do not assume they
remain stable across releases; the defaults are valid for the 20120731
International Release (RF2) with the AMT v3 concrete domain metadata.
"""

import os
from dataclasses import dataclass, field, replace
from typing import Dict, FrozenSet, Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class TranslationConfig:
    """Release dependent identifiers and output settings."""
    # Hierarchy
    attribute_root_id: str = "410662002"  # top of the concept model attribute hierarchy
    is_a_id: str = "116680003"
    defined_status_id: str = "900000000000073002"
    fsn_type_id: str = "900000000000003001"

    # Attributes rendered without a RoleGroup when they occur alone
    never_grouped: FrozenSet[str] = field(default_factory=lambda: frozenset({
        "123005000",  # part-of
        "272741003",  # laterality
        "127489000",  # has-active-ingredient
        "411116001",  # has-dose-form
    }))

    # role -> right identity: direct-substance o has-active-ingredient -> direct-substance
    right_identities: Dict[str, str] = field(default_factory=lambda: {
        "363701004": "127489000",
    })

    # Concrete domains (AMT v3 metadata, no SNOMED CT equivalents yet)
    measurement_type_float_id: str = "700001351000036100"
    measurement_type_int_id: str = "700001361000036102"
    equals_operator_id: str = "700000051000036108"
    unit_role_id: str = "UNIT"  # placeholder for a "has unit" attribute

    # Output
    id_prefix: str = "SCT_"
    base_iri: str = "http://www.ihtsdo.org/"
    ontology_iri: str = "http://www.ihtsdo.org"
    ontology_label: str = "SNOMED Clinical Terms, International Release, Stated Relationships"
    version_info: str = "20120731"

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "TranslationConfig":
        """Create a config with output settings overridden from SCT_OWL_* environment variables.

        Args:
            env_file: Optional path to a .env file. If None, the default lookup of python-dotenv is used.

        Returns:
            TranslationConfig with the overrides applied
        """
        load_dotenv(env_file)
        overrides = {}
        for name, variable in (
            ("attribute_root_id", "SCT_OWL_ATTRIBUTE_ROOT"),
            ("id_prefix", "SCT_OWL_ID_PREFIX"),
            ("base_iri", "SCT_OWL_BASE_IRI"),
            ("ontology_iri", "SCT_OWL_ONTOLOGY_IRI"),
            ("ontology_label", "SCT_OWL_ONTOLOGY_LABEL"),
            ("version_info", "SCT_OWL_VERSION_INFO"),
        ):
            value = os.getenv(variable)
            if value:
                overrides[name] = value
        return replace(cls(), **overrides)
