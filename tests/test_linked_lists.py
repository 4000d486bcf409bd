import pytest

from algonotes.linked_lists import (
    ListNode,
    build_list,
    get_intersection_node,
    get_middle,
    is_palindrome,
    to_list,
)


@pytest.mark.parametrize("values", [[], [7], [1, 2, 3], list(range(20))])
def test_build_and_to_list_round_trip(values):
    assert to_list(build_list(values)) == values


def test_empty_list_is_none():
    assert build_list([]) is None
    assert to_list(None) == []


def test_intersection_found_by_identity():
    shared = build_list([8, 4, 5])
    head_a = ListNode(4, ListNode(1, shared))
    head_b = ListNode(5, ListNode(6, ListNode(1, shared)))
    assert get_intersection_node(head_a, head_b) is shared


def test_intersection_when_same_head():
    head = build_list([1, 2, 3])
    assert get_intersection_node(head, head) is head


def test_no_intersection():
    assert get_intersection_node(build_list([1, 2]), build_list([1, 2])) is None


def test_intersection_with_empty_list():
    assert get_intersection_node(None, build_list([1])) is None
    assert get_intersection_node(build_list([1]), None) is None


@pytest.mark.parametrize("length", [1, 2, 3, 4, 5, 6, 11])
def test_get_middle_picks_second_middle(length):
    values = list(range(100, 100 + length))
    assert get_middle(build_list(values)) == values[length // 2]


def test_get_middle_empty_raises():
    with pytest.raises(ValueError):
        get_middle(None)


def test_palindrome_example():
    values = [1, 2, 3, 2, 1]
    head = build_list(values)
    assert is_palindrome(head) is True
    assert to_list(head) == values


@pytest.mark.parametrize("half", [[], [1], [1, 2], [3, 1, 4, 1, 5]])
def test_mirrored_lists_are_palindromes(half):
    even = half + half[::-1]
    odd = half + [9] + half[::-1]
    assert is_palindrome(build_list(even))
    assert is_palindrome(build_list(odd))


@pytest.mark.parametrize("values", [[1, 2], [1, 2, 3], [1, 2, 2, 3], [1, 1, 2]])
def test_non_palindromes_and_list_unchanged(values):
    head = build_list(values)
    assert is_palindrome(head) is False
    assert to_list(head) == values