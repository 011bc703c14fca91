import logging
import secrets

logger = logging.getLogger(__name__)

SESSION_KEY = 'headcount_selection'


class SelectionController:
    """Checked table rows plus the two-step bulk delete.

    State lives in ``store`` (the request session, or a plain dict) so it
    survives between requests of one browser session:

    Idle --request_delete--> Pending --confirm ok / cancel--> Idle
    Pending --confirm wrong code--> Pending

    ``on_remove`` receives the selected ids once a confirmation succeeds.
    The passphrase is a shared code, not an authorization check.
    """

    def __init__(self, store, passphrase: str, on_remove=None):
        self.store = store
        self.passphrase = passphrase
        self.on_remove = on_remove

    def _state(self):
        state = self.store.get(SESSION_KEY)
        if state is None:
            state = {'selected': [], 'pending': False, 'entered_code': ''}
        return state

    def _save(self, state):
        self.store[SESSION_KEY] = state
        # Sessions only notice reassignment of top-level keys
        if hasattr(self.store, 'modified'):
            self.store.modified = True

    @property
    def selected(self):
        return list(self._state()['selected'])

    @property
    def count(self) -> int:
        return len(self._state()['selected'])

    @property
    def pending(self) -> bool:
        return bool(self._state()['pending'])

    @property
    def entered_code(self) -> str:
        return self._state()['entered_code']

    def is_selected(self, report_id: int) -> bool:
        return report_id in self._state()['selected']

    def all_selected(self, visible_ids) -> bool:
        n = self.count
        return n > 0 and n == len(list(visible_ids))

    def toggle(self, report_id: int):
        state = self._state()
        if report_id in state['selected']:
            state['selected'].remove(report_id)
        else:
            state['selected'].append(report_id)
        self._save(state)

    def select_all(self, visible_ids):
        state = self._state()
        state['selected'] = list(dict.fromkeys(visible_ids))
        self._save(state)

    def clear_all(self):
        state = self._state()
        state['selected'] = []
        self._save(state)

    def discard_missing(self, existing_ids):
        """Drop ids whose reports are no longer in the collection."""
        existing = set(existing_ids)
        state = self._state()
        kept = [i for i in state['selected'] if i in existing]
        if len(kept) != len(state['selected']):
            state['selected'] = kept
            # Nothing left to confirm
            if not kept:
                state['pending'] = False
            self._save(state)

    def request_delete(self) -> bool:
        state = self._state()
        if state['selected']:
            state['pending'] = True
            self._save(state)
        return bool(state['pending'])

    def confirm(self, entered_code: str) -> bool:
        state = self._state()
        if not state['pending']:
            return False
        entered_code = entered_code or ''
        if not secrets.compare_digest(entered_code.encode(), self.passphrase.encode()):
            state['entered_code'] = entered_code
            self._save(state)
            logger.info('Bulk delete rejected: wrong confirmation code')
            return False
        ids = list(state['selected'])
        if self.on_remove is not None:
            self.on_remove(ids)
        self._save({'selected': [], 'pending': False, 'entered_code': ''})
        return True

    def cancel(self):
        state = self._state()
        state['pending'] = False
        self._save(state)
