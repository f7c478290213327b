"""
Unit tests for relationship grouping.

HOW TO RUN:
From the src directory, run:
    python -m ontology.test_grouping
"""

from .domain import GroupedTriple, Relationship
from .grouping import group_relationships


def rel(component_id, attribute_id, value_id, group):
    return Relationship(component_id=component_id, attribute_id=attribute_id, value_id=value_id, group=group)


def test_same_group_number_forms_one_group():
    """Test that relationships sharing a non-zero group number are grouped together."""
    print("Testing grouping by group number...")

    groups = group_relationships([
        rel("r1", "363698007", "80891009", 1),
        rel("r2", "246112005", "24484000", 1),
    ])
    assert len(groups) == 1
    assert groups[0] == (
        GroupedTriple("363698007", "80891009", "r1"),
        GroupedTriple("246112005", "24484000", "r2"),
    ), "Triples keep input order inside a group"

    print("✓ Grouping by group number working correctly")


def test_group_zero_is_never_merged():
    """Test that every ungrouped relationship forms its own group."""
    print("Testing ungrouped relationships...")

    groups = group_relationships([
        rel("r1", "123005000", "80891009", 0),
        rel("r2", "272741003", "7771000", 0),
        rel("r3", "123005000", "80891009", 0),
    ])
    assert len(groups) == 3
    assert all(len(group) == 1 for group in groups)

    print("✓ Ungrouped relationships working correctly")


def test_group_order():
    """Test ordering by group number, then attribute, then value."""
    print("Testing role group order...")

    groups = group_relationships([
        rel("r1", "b", "x", 2),
        rel("r2", "z", "x", 0),
        rel("r3", "a", "y", 0),
        rel("r4", "a", "x", 0),
        rel("r5", "c", "x", 1),
    ])
    firsts = [(group[0].attribute_id, group[0].value_id) for group in groups]
    assert firsts == [("a", "x"), ("a", "y"), ("z", "x"), ("c", "x"), ("b", "x")], firsts

    print("✓ Role group order working correctly")


def test_group_numbers_are_dropped():
    """Test that renumbering groups does not change the result."""
    print("Testing group number independence...")

    first = group_relationships([rel("r1", "a", "x", 1), rel("r2", "b", "y", 1), rel("r3", "c", "z", 2)])
    second = group_relationships([rel("r1", "a", "x", 5), rel("r2", "b", "y", 5), rel("r3", "c", "z", 9)])
    assert first == second

    print("✓ Group number independence working correctly")


def test_no_relationships():
    """Test that no relationships give no groups."""
    print("Testing empty input...")

    assert group_relationships([]) == []

    print("✓ Empty input working correctly")


def run_all_tests():
    """Run all test functions."""
    print("=" * 50)
    print("Running Grouping Tests")
    print("=" * 50)

    test_functions = [
        test_same_group_number_forms_one_group,
        test_group_zero_is_never_merged,
        test_group_order,
        test_group_numbers_are_dropped,
        test_no_relationships,
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
