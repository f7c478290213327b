"""
IS-A hierarchy and role hierarchy resolution.

The Hierarchy keeps parent and child adjacency built from the IS-A edges.
AncestorIndex answers ancestry questions with memoized ancestor sets, and
RoleHierarchyResolver turns the subtree under the attribute root into roles.
"""

import logging
from typing import Dict, FrozenSet, List, Optional, Set

from .domain import Role
from .errors import RoleHierarchyConflictError, RoleHierarchyCycleError

logger = logging.getLogger(__name__)


class Hierarchy:
    """Bidirectional IS-A adjacency. No cycle validation is done here."""

    def __init__(self):
        self.parents: Dict[str, List[str]] = {}
        self.children: Dict[str, List[str]] = {}

    def add_is_a(self, child_id: str, parent_id: str) -> None:
        """Record that child_id IS-A parent_id."""
        self.parents.setdefault(child_id, []).append(parent_id)
        self.children.setdefault(parent_id, []).append(child_id)

    def parents_of(self, concept_id: str) -> List[str]:
        return self.parents.get(concept_id, [])

    def children_of(self, concept_id: str) -> List[str]:
        return self.children.get(concept_id, [])

    def __len__(self) -> int:
        return sum(len(parents) for parents in self.parents.values())


class AncestorIndex:
    """Transitive ancestor sets, computed once per concept and reused."""

    def __init__(self, hierarchy: Hierarchy):
        self.hierarchy = hierarchy
        self._cache: Dict[str, FrozenSet[str]] = {}

    def ancestors(self, concept_id: str) -> FrozenSet[str]:
        """All proper ancestors of a concept. Cycles terminate through the seen set."""
        cached = self._cache.get(concept_id)
        if cached is not None:
            return cached

        seen: Set[str] = set()
        stack = list(self.hierarchy.parents_of(concept_id))
        while stack:
            current = stack.pop()
            if current in seen:
                continue
            seen.add(current)
            known = self._cache.get(current)
            if known is not None:
                seen.update(known)
                continue
            stack.extend(self.hierarchy.parents_of(current))

        result = frozenset(seen)
        self._cache[concept_id] = result
        return result

    def has_ancestor(self, concept_id: str, ancestor_id: str) -> bool:
        return ancestor_id in self.ancestors(concept_id)


class RoleHierarchyResolver:
    """
    Classify the descendants of the attribute root as roles.

    Every concept below the root becomes a Role whose parent role is the concept
    one level above it; direct children of the root have no parent role. Right
    identities come from the fixed table. A role reached a second time under the
    same parent is skipped; under a different parent it is a conflict, and a
    concept that is its own ancestor is a cycle. Both raise.
    """

    def __init__(self, hierarchy: Hierarchy, right_identities: Dict[str, str]):
        self.hierarchy = hierarchy
        self.right_identities = right_identities

    def resolve(self, attribute_root_id: str) -> Dict[str, Role]:
        roles: Dict[str, Role] = {}
        path = [attribute_root_id]
        self._descend(attribute_root_id, None, path, roles)
        logger.info(f"Resolved {len(roles)} roles under attribute root {attribute_root_id}")
        return roles

    def _descend(self, concept_id: str, parent_role: Optional[str],
                 path: List[str], roles: Dict[str, Role]) -> None:
        for child in self.hierarchy.children_of(concept_id):
            if child in path:
                raise RoleHierarchyCycleError(path + [child])

            existing = roles.get(child)
            if existing is not None:
                if existing.parent_role != parent_role:
                    raise RoleHierarchyConflictError(child, existing.parent_role, parent_role)
                logger.debug(f"Role {child} already resolved under {parent_role}, skipping")
                continue

            roles[child] = Role(
                id=child,
                parent_role=parent_role,
                right_identity=self.right_identities.get(child),
            )
            path.append(child)
            self._descend(child, child, path, roles)
            path.pop()
