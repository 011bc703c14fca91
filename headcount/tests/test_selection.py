from headcount.selection import SESSION_KEY, SelectionController

CODE = 'ksp1234'


def make_controller(store=None):
    removed = []
    controller = SelectionController({} if store is None else store, CODE, on_remove=removed.append)
    return controller, removed


def test_toggle_flips_membership():
    c, _ = make_controller()
    c.toggle(5)
    assert c.is_selected(5)
    c.toggle(5)
    assert not c.is_selected(5)
    assert c.count == 0


def test_select_all_and_clear_all():
    c, _ = make_controller()
    c.toggle(99)
    c.select_all([1, 2, 3])
    assert c.selected == [1, 2, 3]
    assert c.all_selected([1, 2, 3])
    assert not c.all_selected([1, 2, 3, 4])
    c.clear_all()
    assert c.selected == []
    assert not c.all_selected([])


def test_request_delete_is_noop_without_selection():
    c, removed = make_controller()
    assert c.request_delete() is False
    assert not c.pending
    assert c.confirm(CODE) is False
    assert removed == []


def test_confirm_with_correct_code_emits_selection_and_resets():
    c, removed = make_controller()
    c.select_all([10, 11, 12])
    assert c.request_delete() is True
    assert c.confirm(CODE) is True
    assert removed == [[10, 11, 12]]
    assert not c.pending
    assert c.selected == []
    assert c.entered_code == ''


def test_confirm_with_wrong_code_keeps_state():
    c, removed = make_controller()
    c.select_all([10, 11, 12])
    c.request_delete()
    assert c.confirm('nope') is False
    assert removed == []
    assert c.pending
    assert c.selected == [10, 11, 12]
    assert c.entered_code == 'nope'
    # A retry with the right code still succeeds
    assert c.confirm(CODE) is True
    assert removed == [[10, 11, 12]]


def test_cancel_leaves_selection_untouched():
    c, removed = make_controller()
    c.toggle(3)
    c.request_delete()
    c.cancel()
    assert not c.pending
    assert c.selected == [3]
    assert removed == []


def test_discard_missing_drops_stale_ids():
    c, _ = make_controller()
    c.select_all([1, 2, 3])
    c.discard_missing([2, 3, 4])
    assert c.selected == [2, 3]


def test_state_persists_in_store():
    store = {}
    c, _ = make_controller(store)
    c.toggle(7)
    c.request_delete()
    assert store[SESSION_KEY]['selected'] == [7]
    again, _ = make_controller(store)
    assert again.pending
    assert again.is_selected(7)


def test_pending_dropped_when_every_selected_report_is_gone():
    c, removed = make_controller()
    c.select_all([1, 2])
    c.request_delete()
    c.discard_missing([3])
    assert c.selected == []
    assert not c.pending
    assert c.request_delete() is False
    assert c.confirm(CODE) is False
    assert removed == []


def test_pending_kept_while_some_selection_remains():
    c, _ = make_controller()
    c.select_all([1, 2])
    c.request_delete()
    c.discard_missing([2])
    assert c.pending
    assert c.selected == [2]
