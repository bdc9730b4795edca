"""Process-unique identifiers for uploads, jobs and avatars."""
import itertools
import threading
import time

UPLOADED_FILE_PREFIX = "uploaded-file"
LONG_VIDEO_JOB_PREFIX = "job-video-long"
AVATAR_PREFIX = "avatar"

_sequence = itertools.count(1)
_sequence_lock = threading.Lock()


def next_sequence() -> int:
    """Next value of the process-wide monotonic counter."""
    with _sequence_lock:
        return next(_sequence)


def generate_id(prefix: str) -> str:
    """
    Build an identifier of the form ``<prefix>-<epoch millis>-<sequence>``.

    The timestamp keeps ids readable and distinct across restarts; the
    sequence makes them unique within the process even when two requests
    land in the same millisecond.
    """
    millis = int(time.time() * 1000)
    return f"{prefix}-{millis}-{next_sequence()}"
