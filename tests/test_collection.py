import pytest
from termnotes.collection import NoteList
from termnotes.models import Note


def make_list(count: int) -> NoteList:
    notes = NoteList()
    for i in range(1, count + 1):
        notes.append(f'title{i}', f'desc{i}')
    return notes


def assert_dense(notes: NoteList):
    assert [code for code, _, _ in notes] == list(range(1, len(notes) + 1))
    assert notes.list_codes() == [str(i) for i in range(1, len(notes) + 1)]


def test_empty():
    notes = NoteList()
    assert notes.is_empty()
    assert len(notes) == 0
    assert list(notes) == []
    assert notes.list_codes() == []
    assert notes.next_code() == 1
    assert notes.find_by_code(1) is None


def test_append_assigns_tail_code():
    notes = make_list(3)
    assert notes.next_code() == 4
    assert notes.append('Groceries', 'Buy milk') == 4
    assert len(notes) == 4
    assert list(notes)[-1] == (4, 'Groceries', 'Buy milk')
    assert not notes.is_empty()
    assert_dense(notes)


def test_find_by_code():
    notes = make_list(3)
    assert notes.find_by_code(2) == Note(2, 'title2', 'desc2')
    assert notes.find_by_code(0) is None
    assert notes.find_by_code(4) is None


def test_find_by_code_returns_copy():
    notes = make_list(2)
    found = notes.find_by_code(1)
    found.code = 99
    found.title = 'changed'
    assert list(notes) == [(1, 'title1', 'desc1'), (2, 'title2', 'desc2')]


@pytest.mark.parametrize('code', [1, 2, 3, 4, 5])
def test_delete_from_either_end(code):
    notes = make_list(5)
    assert notes.delete_by_code(code)
    assert len(notes) == 4
    titles = [title for _, title, _ in notes]
    assert f'title{code}' not in titles
    assert titles == [f'title{i}' for i in range(1, 6) if i != code]
    assert_dense(notes)


def test_delete_then_search_old_code():
    notes = make_list(3)
    assert notes.delete_by_code(2)
    assert notes.find_by_code(2) == Note(2, 'title3', 'desc3')
    assert notes.delete_by_code(3) is False
    assert notes.find_by_code(3) is None


def test_delete_missing_code_leaves_list_unchanged():
    notes = make_list(3)
    before = list(notes)
    assert notes.delete_by_code(7) is False
    assert notes.delete_by_code(0) is False
    assert notes.delete_by_code(-2) is False
    assert list(notes) == before


def test_delete_from_empty_list():
    notes = NoteList()
    assert notes.delete_by_code(1) is False
    assert notes.is_empty()


def test_delete_only_note():
    notes = make_list(1)
    assert notes.delete_by_code(1)
    assert notes.is_empty()
    assert notes.next_code() == 1


def test_codes_stay_dense_over_mixed_operations():
    notes = NoteList()
    for step in range(20):
        if step % 3 == 2:
            assert notes.delete_by_code((step % len(notes)) + 1)
        else:
            notes.append(f'title{step}', f'desc{step}')
        assert_dense(notes)
    assert len(notes) == 8


def test_renumber():
    notes = make_list(3)
    notes._notes[0].code = 42
    notes._notes[2].code = 7
    notes.renumber()
    assert_dense(notes)
