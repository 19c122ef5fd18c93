import pytest

from ftlib.linkedlist import LinkedList, Node, delone

WORDS = ["Hello!", "42Tokyo", "shinjuku campus"]


def test_construct_and_iterate():
    lst = LinkedList(WORDS)
    assert list(lst) == WORDS
    assert len(lst) == 3


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_last_returns_final_node():
    lst = LinkedList(WORDS)
    tail = lst.last()
    assert tail.content == "shinjuku campus"
    assert tail.next is None


def test_add_front():
    lst = LinkedList(WORDS)
    lst.add_front(Node("Forever Roppongi campus"))
    assert list(lst) == ["Forever Roppongi campus"] + WORDS


def test_add_front_on_empty():
    lst = LinkedList()
    node = Node("x")
    lst.add_front(node)
    assert lst.head is node
    assert len(lst) == 1


def test_add_back():
    lst = LinkedList(WORDS)
    lst.add_back(Node("Forever Roppongi campus"))
    assert list(lst) == WORDS + ["Forever Roppongi campus"]
    assert lst.last().content == "Forever Roppongi campus"


def test_add_back_on_empty():
    lst = LinkedList()
    node = Node(7)
    lst.add_back(node)
    assert lst.head is node
    assert lst.last() is node


@pytest.mark.parametrize("bad", [None, "text", 3])
def test_add_rejects_non_nodes(bad):
    lst = LinkedList(WORDS)
    with pytest.raises(TypeError):
        lst.add_back(bad)
    with pytest.raises(TypeError):
        lst.add_front(bad)
    assert list(lst) == WORDS


def test_clear_deletes_every_content_in_order():
    lst = LinkedList(WORDS)
    deleted = []
    lst.clear(deleted.append)
    assert deleted == WORDS
    assert lst.head is None
    assert len(lst) == 0


def test_clear_detaches_nodes():
    lst = LinkedList(WORDS)
    first = lst.head
    lst.clear(lambda content: None)
    assert first.next is None


def test_delone():
    node = Node("Hello!", Node("42Tokyo"))
    deleted = []
    delone(node, deleted.append)
    assert deleted == ["Hello!"]
    assert node.next is None


def test_apply_visits_each_content():
    contents = [[1], [2], [3]]
    lst = LinkedList(contents)
    lst.apply(lambda item: item.append(0))
    assert list(lst) == [[1, 0], [2, 0], [3, 0]]


def test_map_builds_new_list():
    lst = LinkedList(WORDS)
    mapped = lst.map(str.upper, lambda content: None)
    assert list(mapped) == [word.upper() for word in WORDS]
    assert list(lst) == WORDS
    assert mapped.head is not lst.head


def test_map_of_empty_list_is_empty():
    mapped = LinkedList().map(str.upper, lambda content: None)
    assert len(mapped) == 0


def test_map_failure_deletes_partial_results():
    deleted = []

    def func(value):
        if value == 3:
            raise RuntimeError("boom")
        return value * 10

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(func, deleted.append)
    assert deleted == [10, 20]


def test_len_matches_iteration():
    lst = LinkedList(range(50))
    assert len(lst) == len(list(lst)) == 50