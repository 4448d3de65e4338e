"""
Timing helpers for reporting simulation progress.
"""

import time
from typing import Optional


def format_duration(seconds: Optional[float]) -> str:
    """Format duration in seconds to human-readable string."""
    if seconds is None:
        return 'N/A'

    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    elif seconds < 3600:
        return f"{seconds / 60:.1f}m"
    else:
        return f"{seconds / 3600:.2f}h"


def seconds_since(start: float) -> float:
    """Seconds elapsed since a time.perf_counter() reading."""
    return time.perf_counter() - start
