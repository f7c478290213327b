"""
Relationship grouping.

Turns a concept's relationships, each carrying a group number, into role
groups. The group number itself is only a partition key and is dropped.
"""

from typing import Dict, Iterable, List

from .domain import GroupedTriple, Relationship, RoleGroup

UNGROUPED = 0


def group_relationships(relationships: Iterable[Relationship]) -> List[RoleGroup]:
    """Partition relationships into role groups.

    Relationships sharing a non-zero group number form one role group. Every
    relationship in group 0 becomes a role group of its own, never merged with
    another group 0 relationship.

    Args:
        relationships: Relationships of one concept

    Returns:
        Role groups ordered by group number, then by the attribute and value of
        their first triple. Triples keep their input order inside a group.
    """
    buckets: Dict[int, List[GroupedTriple]] = {}
    for relationship in relationships:
        triple = GroupedTriple(
            attribute_id=relationship.attribute_id,
            value_id=relationship.value_id,
            component_id=relationship.component_id,
        )
        buckets.setdefault(relationship.group, []).append(triple)

    keyed = []
    for group, triples in buckets.items():
        if group == UNGROUPED:
            for triple in triples:
                keyed.append((group, (triple,)))
        else:
            keyed.append((group, tuple(triples)))

    keyed.sort(key=lambda item: (item[0], item[1][0].attribute_id, item[1][0].value_id, item[1][0].component_id))
    return [role_group for _, role_group in keyed]
