"""
Opt-in hot path profiling.

Set ``JSONSTACK_PROFILE`` in the environment before import to collect call
counts and timings. Without it every helper here is a no-op.
"""

import os
import threading
import time
from dataclasses import dataclass
from typing import Any

PROFILE_HOT_PATHS = __debug__ and "JSONSTACK_PROFILE" in os.environ


@dataclass
class HotPathStats:
    """Statistics for profiling hot paths during parsing."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    def record_call(self, duration_ns: int, chars: int = 0) -> None:
        """Records a function call with timing and character processing info."""
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars


if PROFILE_HOT_PATHS:
    # Shared by every thread that parses; all access goes through the lock.
    _hot_path_stats: dict[str, HotPathStats] = {}
    _hot_path_lock = threading.Lock()

    class ProfileContext:
        """Context manager for profiling hot paths."""

        def __init__(self, func_name: str, chars: int = 0) -> None:
            self.func_name = func_name
            self.chars = chars
            self.start_time = 0

        def __enter__(self) -> "ProfileContext":
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            with _hot_path_lock:
                stats = _hot_path_stats.get(self.func_name)
                if stats is None:
                    stats = _hot_path_stats[self.func_name] = HotPathStats(
                        self.func_name
                    )
                stats.record_call(duration, self.chars)

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        """Returns a snapshot of the current profiling statistics."""
        with _hot_path_lock:
            return {
                name: HotPathStats(
                    s.function_name,
                    s.call_count,
                    s.total_time_ns,
                    s.chars_processed,
                )
                for name, s in _hot_path_stats.items()
            }

    def clear_hot_path_stats() -> None:
        """Clears profiling statistics."""
        with _hot_path_lock:
            _hot_path_stats.clear()

else:
    # Zero-cost in production - ignore arguments
    class ProfileContext:  # type: ignore[no-redef]
        def __init__(self, func_name: str, chars: int = 0) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        return {}

    def clear_hot_path_stats() -> None:
        pass
