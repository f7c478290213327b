"""
Concrete domain resolution.

Attaches literal values to components and infers the datatype of every
feature from its position in the IS-A hierarchy.
"""

import logging
from typing import Dict, List, Optional

from .config import TranslationConfig
from .domain import ConcreteDomainFact, Datatype
from .errors import UnsupportedOperatorError
from .hierarchy import AncestorIndex

logger = logging.getLogger(__name__)


class ConcreteDomainResolver:
    """Collects concrete domain facts and resolves feature datatypes."""

    def __init__(self, config: TranslationConfig):
        self.config = config
        self.facts_by_component: Dict[str, List[ConcreteDomainFact]] = {}
        self.feature_ids: Dict[str, None] = {}  # insertion ordered set

    def add(self, component_id: str, feature_id: str, operator_id: str,
            value: str, unit_id: str) -> ConcreteDomainFact:
        """Attach a value to a component.

        Raises:
            UnsupportedOperatorError: If the operator is not equality
        """
        # Only equality is implemented; other operators need their own rendering
        if operator_id != self.config.equals_operator_id:
            raise UnsupportedOperatorError(operator_id, feature_id, component_id)

        fact = ConcreteDomainFact(feature_id=feature_id, operator_id=operator_id,
                                  value=value, unit_id=unit_id)
        self.facts_by_component.setdefault(component_id, []).append(fact)
        self.feature_ids.setdefault(feature_id, None)
        return fact

    def resolve_datatypes(self, ancestors: AncestorIndex, labels: Optional[Dict[str, str]] = None) -> Dict[str, Datatype]:
        """Classify every feature seen so far.

        A feature below the float measurement type is decimal, below the int
        measurement type is integer, anything else is unknown and only warned about.
        """
        labels = labels or {}
        features: Dict[str, Datatype] = {}
        for feature_id in self.feature_ids:
            if ancestors.has_ancestor(feature_id, self.config.measurement_type_float_id):
                features[feature_id] = Datatype.DECIMAL
            elif ancestors.has_ancestor(feature_id, self.config.measurement_type_int_id):
                features[feature_id] = Datatype.INTEGER
            else:
                features[feature_id] = Datatype.UNKNOWN
                logger.warning(f"Unsure of data property range for {feature_id} | "
                               f"{labels.get(feature_id, '')} | - none defined")
        return features
