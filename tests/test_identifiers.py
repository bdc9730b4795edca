"""Tests for utils.identifiers."""
import re
from concurrent.futures import ThreadPoolExecutor

from utils.identifiers import AVATAR_PREFIX, LONG_VIDEO_JOB_PREFIX, UPLOADED_FILE_PREFIX, generate_id, next_sequence


def test_id_format():
    assert re.fullmatch(r"avatar-\d{13}-\d+", generate_id(AVATAR_PREFIX))
    assert generate_id(LONG_VIDEO_JOB_PREFIX).startswith("job-video-long-")
    assert generate_id(UPLOADED_FILE_PREFIX).startswith("uploaded-file-")


def test_sequence_is_monotonic():
    first = next_sequence()
    second = next_sequence()
    assert second > first


def test_ids_unique_across_threads():
    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(lambda _: generate_id(AVATAR_PREFIX), range(2000)))
    assert len(set(ids)) == len(ids)
