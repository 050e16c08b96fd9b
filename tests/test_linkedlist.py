import pytest

from negi.linkedlist import LinkedList

DLSIZE = 10


@pytest.fixture
def lists():
    dl = LinkedList()
    dr = LinkedList()
    rl = [dl.add(i) for i in range(DLSIZE)]
    rr = [dr.add_tail(i) for i in range(DLSIZE)]
    return dl, dr, rl, rr


def test_for_each(lists):
    dl, dr, rl, rr = lists
    assert list(dl.nodes()) == list(reversed(rl))
    assert list(dr.nodes()) == rr


def test_for_each_entry(lists):
    dl, dr, _, _ = lists
    assert list(dl) == list(range(DLSIZE - 1, -1, -1))
    assert list(dr) == list(range(DLSIZE))


def test_for_each_entry_safe(lists):
    dl, dr, _, _ = lists
    for node in dl.nodes():
        dl.remove(node)
    assert dl.is_empty()
    assert len(dl) == 0

    for node in dr.nodes():
        dr.remove(node)
    assert dr.is_empty()
    assert list(dr) == []


def test_len_tracks_changes(lists):
    dl, _, rl, _ = lists
    assert len(dl) == DLSIZE
    assert dl.remove(rl[3]) == 3
    assert len(dl) == DLSIZE - 1
    assert 3 not in list(dl)


def test_first_and_last(lists):
    _, dr, _, rr = lists
    assert dr.is_first(rr[0])
    assert dr.is_last(rr[-1])
    assert not dr.is_first(rr[1])
    assert not dr.is_last(rr[0])


def test_remove_twice_raises(lists):
    dl, _, rl, _ = lists
    dl.remove(rl[0])
    with pytest.raises(ValueError):
        dl.remove(rl[0])


def test_remove_from_other_list_raises(lists):
    dl, dr, _, rr = lists
    with pytest.raises(ValueError):
        dl.remove(rr[0])
    assert len(dl) == DLSIZE


def test_construct_from_values():
    values = ["miku", "3939"]
    assert list(LinkedList(values)) == values
    assert not LinkedList().__len__()
    assert LinkedList().is_empty()