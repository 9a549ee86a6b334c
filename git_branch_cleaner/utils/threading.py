"""Threading utilities for sizing the PR fetch worker pool."""

import os
import sys
from typing import Dict, Any, Optional

# GitHub throttles bursts of requests from one token
MAX_API_WORKERS = 10


def is_free_threading_enabled() -> bool:
    """Detect if Python is running with free-threading enabled.

    Returns:
        True if running on Python 3.13+ with GIL disabled (free-threading mode)
        False if running with GIL enabled or Python < 3.13
    """
    return hasattr(sys, "_is_gil_enabled") and not sys._is_gil_enabled()


def get_python_threading_mode() -> str:
    """Get a description of the current threading mode."""
    if not hasattr(sys, "_is_gil_enabled"):
        return "GIL-enabled (Python < 3.13)"
    return "free-threading" if is_free_threading_enabled() else "GIL-enabled"


def get_optimal_worker_count(user_specified: Optional[int] = None) -> int:
    """Calculate optimal worker count based on threading mode and CPU count.

    Args:
        user_specified: User-specified worker count, if provided

    Returns:
        Optimal number of workers for parallel processing
    """
    if user_specified is not None and user_specified > 0:
        return user_specified

    cpu_count = os.cpu_count() or 1

    if is_free_threading_enabled():
        return min(64, cpu_count * 2)

    # I/O-bound work: CPU_count + 4 is a good heuristic
    return min(32, cpu_count + 4)


def get_api_worker_count(user_specified: Optional[int] = None) -> int:
    """Worker count for GitHub API calls, capped for rate limiting."""
    return min(MAX_API_WORKERS, get_optimal_worker_count(user_specified))


def get_threading_info() -> Dict[str, Any]:
    """Get information about Python threading configuration for --debug output."""
    return {
        "mode": get_python_threading_mode(),
        "free_threading": is_free_threading_enabled(),
        "cpu_count": os.cpu_count() or 1,
        "optimal_workers": get_optimal_worker_count(),
        "api_workers": get_api_worker_count(),
        "python_version": f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
    }
