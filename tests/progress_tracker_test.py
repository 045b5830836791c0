"""
Progress tracker tests
"""

import io
import threading

from fanuc_backup_splitter.progress_tracker import ConsoleProgressTracker


def test_counts_updates_from_threads():
    stream = io.StringIO()
    with ConsoleProgressTracker(desc="Test", file=stream) as tracker:
        threads = [threading.Thread(target=lambda: [tracker.update(1) for _ in range(50)])
                   for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
    assert tracker.count == 200
    assert tracker.pbar.n == 200
    assert "Test" in stream.getvalue()


def test_disabled_tracker_is_silent():
    stream = io.StringIO()
    with ConsoleProgressTracker(disable=True, file=stream) as tracker:
        tracker.update(3, postfix="done")
    assert tracker.count == 3
    assert stream.getvalue() == ""
