import threading
from core.ward import Ward

_ward = None
_ward_lock = threading.Lock()


def get_ward() -> Ward:
    """The process-wide ward. Built on first use; tests override this dependency."""
    global _ward
    with _ward_lock:
        if _ward is None:
            _ward = Ward()
    return _ward
