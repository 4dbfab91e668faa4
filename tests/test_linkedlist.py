import io

import pytest

from rankpuzzles.linkedlist import (
    Node,
    SinglyLinkedList,
    compare_lists,
    delete_node,
    format_list,
    get_node_from_tail,
    insert_at_head,
    insert_at_position,
    insert_at_tail,
    iter_values,
    print_linked_list,
    reverse_list,
)


def build(values):
    return SinglyLinkedList(values).head


def values_of(head):
    return list(iter_values(head))


def test_insert_node_keeps_order():
    llist = SinglyLinkedList()
    for value in [16, 13, 7]:
        llist.insert_node(value)
    assert list(llist) == [16, 13, 7]
    assert llist.tail.data == 7


def test_empty_list_iterates_nothing():
    assert list(SinglyLinkedList()) == []
    assert values_of(None) == []


def test_format_list_joins_with_separator():
    assert format_list(build([1, 2, 3]), " ") == "1 2 3"
    assert format_list(None, ",") == ""


def test_print_linked_list_one_value_per_line():
    out = io.StringIO()
    print_linked_list(build([16, 13]), out)
    assert out.getvalue() == "16\n13\n"


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ([1, 2], [1], False),
        ([1, 2], [1, 2], True),
        ([], [], True),
        ([1, 3], [1, 2], False),
        ([], [5], False),
    ],
)
def test_compare_lists(first, second, expected):
    assert compare_lists(build(first), build(second)) is expected


def test_delete_node_in_middle():
    head = delete_node(build([20, 6, 2, 19, 7, 4, 15, 9]), 3)
    assert values_of(head) == [20, 6, 2, 7, 4, 15, 9]


def test_delete_node_at_head():
    assert values_of(delete_node(build([1, 2, 3]), 0)) == [2, 3]


def test_delete_node_at_tail():
    assert values_of(delete_node(build([1, 2, 3]), 2)) == [1, 2]


def test_delete_node_past_end_leaves_list():
    assert values_of(delete_node(build([1, 2, 3]), 3)) == [1, 2, 3]
    assert values_of(delete_node(build([1, 2, 3]), 10)) == [1, 2, 3]


def test_delete_node_errors():
    with pytest.raises(IndexError):
        delete_node(None, 0)
    with pytest.raises(ValueError):
        delete_node(build([1]), -1)


def test_reverse_list_round_trip():
    values = [3, 1, 4, 1, 5]
    reversed_head = reverse_list(build(values))
    assert values_of(reversed_head) == values[::-1]
    assert values_of(reverse_list(reversed_head)) == values
    assert reverse_list(None) is None


def test_get_node_from_tail():
    head = build([3, 2, 1])
    assert get_node_from_tail(head, 0) == 1
    assert get_node_from_tail(head, 2) == 3
    assert values_of(head) == [3, 2, 1]


def test_get_node_from_tail_out_of_range():
    with pytest.raises(IndexError):
        get_node_from_tail(build([1, 2]), 2)
    with pytest.raises(IndexError):
        get_node_from_tail(None, 0)


def test_insert_at_head_builds_reversed():
    head = None
    for value in [383, 484, 392]:
        head = insert_at_head(head, value)
    assert values_of(head) == [392, 484, 383]


def test_insert_at_tail_builds_in_order():
    head = None
    for value in [141, 302, 164]:
        head = insert_at_tail(head, value)
    assert values_of(head) == [141, 302, 164]


def test_insert_at_position_middle():
    head = insert_at_position(build([16, 13, 7]), 1, 2)
    assert values_of(head) == [16, 13, 1, 7]


def test_insert_at_position_end():
    head = insert_at_position(build([16, 13, 7]), 1, 3)
    assert values_of(head) == [16, 13, 7, 1]


def test_insert_at_position_low_positions_follow_head():
    assert values_of(insert_at_position(build([5, 6]), 9, 0)) == [5, 9, 6]
    assert values_of(insert_at_position(build([5, 6]), 9, 1)) == [5, 9, 6]


def test_insert_at_position_empty_list():
    head = insert_at_position(None, 4, 0)
    assert values_of(head) == [4]


def test_insert_at_position_too_far():
    with pytest.raises(IndexError):
        insert_at_position(build([1]), 2, 5)


def test_node_links():
    tail = Node(2)
    head = Node(1, tail)
    assert values_of(head) == [1, 2]
    assert tail.next is None