from .constants import DORMITORIES
from .selection import SESSION_KEY


def headcount_meta(request):
    """Expose dormitory count and the pending bulk-delete flag to all templates."""
    pending = False
    session = getattr(request, 'session', None)
    if session is not None:
        state = session.get(SESSION_KEY) or {}
        pending = bool(state.get('pending'))
    return {"dormitory_total": len(DORMITORIES) - 1, "delete_pending": pending}
