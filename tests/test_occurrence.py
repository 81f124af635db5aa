import pytest

from wordsearch.occurrence import Occurrence, OccurrenceList


@pytest.fixture
def example_list():
    occ_list = OccurrenceList([Occurrence(1, [5])])
    occ_list.add_position(1, 10)
    occ_list.add_position(1, 15)
    occ_list.add_position(2, 3)
    occ_list.add_position(2, 7)
    occ_list.add_position(2, 12)
    occ_list.add_position(3, 1)
    return occ_list


def test_example_list_contents(example_list):
    assert [(o.doc_id, o.positions) for o in example_list] == [
        (1, [5, 10, 15]),
        (2, [3, 7, 12]),
        (3, [1]),
    ]


def test_find_and_add_positions(example_list):
    occ = example_list.find(2)
    assert occ.doc_id == 2
    occ.add_position(20)
    occ.add_position(25)
    assert example_list.find(2).positions == [3, 7, 12, 20, 25]


def test_statistics(example_list):
    example_list.find(2).add_position(20)
    example_list.find(2).add_position(25)
    assert len(example_list) == 3
    assert example_list.position_count(1) == 3
    assert example_list.position_count(2) == 5
    assert example_list.position_count(3) == 1
    assert example_list.position_count(4) == 0


def test_find_missing_returns_none(example_list):
    assert example_list.find(4) is None


def test_merge(example_list):
    other = OccurrenceList()
    other.add_position(4, 2)
    other.add_position(4, 8)
    other.add_position(5, 5)
    assert len(other) == 2
    example_list.merge(other)
    assert len(example_list) == 5
    assert [o.doc_id for o in example_list] == [1, 2, 3, 4, 5]
    assert example_list.find(4).positions == [2, 8]
    assert len(other) == 0
    assert list(other) == []


def test_merge_into_empty():
    dest = OccurrenceList()
    src = OccurrenceList([Occurrence(7, [1, 2])])
    dest.merge(src)
    assert [(o.doc_id, o.positions) for o in dest] == [(7, [1, 2])]
    assert len(src) == 0


def test_merge_empty_source_keeps_destination(example_list):
    example_list.merge(OccurrenceList())
    assert len(example_list) == 3


def test_negative_position_rejected():
    with pytest.raises(ValueError):
        Occurrence(1, [-1])
    occ = Occurrence(1, [0])
    with pytest.raises(ValueError):
        occ.add_position(-5)
    with pytest.raises(ValueError):
        OccurrenceList().add_position(1, -3)


def test_append_and_add_position_returns_occurrence():
    occ_list = OccurrenceList()
    occ_list.append(Occurrence(9, []))
    result = occ_list.add_position(9, 4)
    assert result.positions == [4]
    assert occ_list.position_count(9) == 1