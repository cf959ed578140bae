# tests/test_conflicts.py
from app.domain.conflicts import HistoryStore, five_cores, is_conflict, conflicting_group_indices

# -------------------------------
# History store
# -------------------------------

def test_register_tracks_exact_and_five_groups():
    history = HistoryStore()
    history.register([[1, 2, 3, 4, 5], [6, 7, 8, 9, 10, 11], [12, 13, 14]])

    assert len(history) == 3
    assert [5, 4, 3, 2, 1] in history
    assert history.five_core == {"01-02-03-04-05"}

def test_register_only_grows():
    history = HistoryStore()
    history.register([[1, 2, 3]])
    history.register([[4, 5, 6]])
    assert history.exact == {"01-02-03", "04-05-06"}

# -------------------------------
# Conflict rules
# -------------------------------

def test_size_out_of_range_is_conflict():
    history = HistoryStore()
    assert is_conflict([1, 2], history)
    assert is_conflict([1, 2, 3, 4, 5, 6, 7], history)
    assert not is_conflict([1, 2, 3], history)
    assert not is_conflict([1, 2, 3, 4, 5, 6], history)

def test_exact_repeat_in_any_order_is_conflict():
    history = HistoryStore()
    history.register([[1, 2, 3, 4]])
    assert is_conflict([4, 3, 2, 1], history)
    assert not is_conflict([1, 2, 3, 5], history)

def test_five_core_inside_six_group_is_conflict():
    history = HistoryStore()
    history.register([[1, 2, 3, 4, 5]])
    assert is_conflict([9, 1, 2, 3, 4, 5], history)
    assert not is_conflict([1, 2, 3, 4, 6, 7], history)

def test_five_core_only_checked_for_six_groups():
    history = HistoryStore()
    history.register([[1, 2, 3, 4, 5], [10, 11, 12, 13, 14, 15]])
    # a four-group inside an old five-group is fine
    assert not is_conflict([1, 2, 3, 4], history)
    # six-groups never enter the five-core set
    assert not is_conflict([10, 11, 12, 13, 14, 16], history)

def test_five_cores_leave_one_out():
    cores = five_cores([6, 5, 4, 3, 2, 1])
    assert len(cores) == 6
    assert [1, 2, 3, 4, 5] in cores
    assert [2, 3, 4, 5, 6] in cores
    assert five_cores([1, 2, 3, 4, 5]) == []

def test_conflicting_indices():
    history = HistoryStore()
    history.register([[1, 2, 3, 4, 5]])
    groups = [[1, 2, 3, 4, 5], [6, 7, 8], [9, 10], [1, 2, 3, 4, 5, 11]]
    assert conflicting_group_indices(groups, history) == [0, 2, 3]

def test_no_history_no_conflicts():
    groups = [[1, 2, 3, 4, 5], [6, 7, 8, 9, 10]]
    assert conflicting_group_indices(groups, HistoryStore()) == []
