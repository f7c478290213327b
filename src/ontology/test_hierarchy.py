"""
Unit tests for the IS-A hierarchy, ancestor index and role hierarchy resolution.

HOW TO RUN:
From the src directory, run:
    python -m ontology.test_hierarchy

Or with pytest from the project root:
    pytest src/ontology/test_hierarchy.py
"""

from .errors import RoleHierarchyConflictError, RoleHierarchyCycleError
from .hierarchy import AncestorIndex, Hierarchy, RoleHierarchyResolver

ROOT = "410662002"


def build_hierarchy(edges):
    hierarchy = Hierarchy()
    for child, parent in edges:
        hierarchy.add_is_a(child, parent)
    return hierarchy


def test_hierarchy_adjacency():
    """Test that parents and children are recorded in input order."""
    print("Testing Hierarchy adjacency...")

    hierarchy = build_hierarchy([("c", "a"), ("c", "b"), ("d", "a")])
    assert hierarchy.parents_of("c") == ["a", "b"]
    assert hierarchy.children_of("a") == ["c", "d"]
    assert hierarchy.parents_of("a") == []
    assert hierarchy.children_of("unknown") == []
    assert len(hierarchy) == 3, "Length should count IS-A edges"

    print("✓ Hierarchy adjacency working correctly")


def test_ancestors_in_diamond():
    """Test transitive ancestors through a diamond."""
    print("Testing ancestors in a diamond...")

    hierarchy = build_hierarchy([("b", "a"), ("c", "a"), ("d", "b"), ("d", "c"), ("e", "d")])
    index = AncestorIndex(hierarchy)
    assert index.ancestors("e") == frozenset({"a", "b", "c", "d"})
    assert index.ancestors("a") == frozenset()
    assert index.has_ancestor("e", "a")
    assert not index.has_ancestor("a", "e")

    # cached results are reused for the descendants
    assert index.ancestors("d") == frozenset({"a", "b", "c"})
    assert index.ancestors("d") is index.ancestors("d")

    print("✓ Ancestors in a diamond working correctly")


def test_ancestors_terminate_on_cycle():
    """Test that ancestor lookup stops on an IS-A cycle."""
    print("Testing ancestors on a cycle...")

    hierarchy = build_hierarchy([("a", "b"), ("b", "a"), ("c", "a")])
    index = AncestorIndex(hierarchy)
    assert index.ancestors("c") == frozenset({"a", "b"})
    assert "a" in index.ancestors("a"), "A concept on a cycle is its own ancestor"

    print("✓ Ancestors on a cycle working correctly")


def test_role_hierarchy():
    """Test parent roles and right identities."""
    print("Testing role hierarchy resolution...")

    hierarchy = build_hierarchy([
        ("47429007", ROOT),
        ("246075003", "47429007"),
        ("363701004", ROOT),
        ("127489000", ROOT),
        ("404684003", "138875005"),
    ])
    roles = RoleHierarchyResolver(hierarchy, {"363701004": "127489000"}).resolve(ROOT)

    assert set(roles) == {"47429007", "246075003", "363701004", "127489000"}
    assert ROOT not in roles, "The attribute root is not a role"
    assert "404684003" not in roles
    assert roles["47429007"].parent_role is None, "Direct children of the root have no parent role"
    assert roles["246075003"].parent_role == "47429007"
    assert roles["363701004"].right_identity == "127489000"
    assert roles["127489000"].right_identity is None

    print("✓ Role hierarchy resolution working correctly")


def test_role_revisited_under_same_parent():
    """Test that a duplicate IS-A edge does not break resolution."""
    print("Testing duplicate role edges...")

    hierarchy = build_hierarchy([("a", ROOT), ("b", "a"), ("b", "a")])
    roles = RoleHierarchyResolver(hierarchy, {}).resolve(ROOT)
    assert roles["b"].parent_role == "a"
    assert len(roles) == 2

    print("✓ Duplicate role edges handled correctly")


def test_role_with_two_parent_roles():
    """Test that a role under two different parent roles is a conflict."""
    print("Testing conflicting parent roles...")

    hierarchy = build_hierarchy([("a", ROOT), ("b", ROOT), ("c", "a"), ("c", "b")])
    try:
        RoleHierarchyResolver(hierarchy, {}).resolve(ROOT)
        assert False, "Expected RoleHierarchyConflictError"
    except RoleHierarchyConflictError as e:
        assert e.role_id == "c"
        assert e.first_parent == "a"
        assert e.second_parent == "b"

    print("✓ Conflicting parent roles detected correctly")


def test_role_cycle():
    """Test that a cycle below the attribute root is reported."""
    print("Testing role hierarchy cycle...")

    hierarchy = build_hierarchy([("a", ROOT), ("b", "a"), ("a", "b")])
    try:
        RoleHierarchyResolver(hierarchy, {}).resolve(ROOT)
        assert False, "Expected RoleHierarchyCycleError"
    except RoleHierarchyCycleError as e:
        assert e.path == [ROOT, "a", "b", "a"]

    print("✓ Role hierarchy cycle detected correctly")


def test_no_roles_without_root():
    """Test that a missing attribute root yields no roles."""
    print("Testing missing attribute root...")

    hierarchy = build_hierarchy([("a", "b")])
    assert RoleHierarchyResolver(hierarchy, {}).resolve(ROOT) == {}

    print("✓ Missing attribute root handled correctly")


def run_all_tests():
    """Run all test functions."""
    print("=" * 50)
    print("Running Hierarchy Tests")
    print("=" * 50)

    test_functions = [
        test_hierarchy_adjacency,
        test_ancestors_in_diamond,
        test_ancestors_terminate_on_cycle,
        test_role_hierarchy,
        test_role_revisited_under_same_parent,
        test_role_with_two_parent_roles,
        test_role_cycle,
        test_no_roles_without_root,
    ]

    passed = 0
    failed = 0

    for test_func in test_functions:
        try:
            test_func()
            passed += 1
        except Exception as e:
            print(f"✗ {test_func.__name__} FAILED: {e}")
            failed += 1

    print("=" * 50)
    print(f"Test Results: {passed} passed, {failed} failed")
    print("=" * 50)

    return failed == 0


def main():
    """Main function to run the tests."""
    success = run_all_tests()
    if success:
        print("All tests passed!")
        return 0
    else:
        print("Some tests failed!")
        return 1


if __name__ == "__main__":
    exit(main())
