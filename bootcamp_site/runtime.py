"""Process metrics reported by the health endpoint."""

import gc
import platform
import resource
import sys
import time
from datetime import datetime, timezone
from typing import Any, Dict

_STARTED_AT = time.monotonic()

# ru_maxrss is kilobytes on Linux, bytes on macOS
_MAXRSS_UNIT = 1 if sys.platform == "darwin" else 1024


def uptime() -> float:
    """Seconds since the server module was first imported."""
    return time.monotonic() - _STARTED_AT


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g. 2024-05-01T12:00:00.000Z"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def python_version() -> str:
    return f"{platform.python_implementation()} {platform.python_version()}"


def memory_usage() -> Dict[str, Any]:
    usage = resource.getrusage(resource.RUSAGE_SELF)
    return {
        "max_rss": usage.ru_maxrss * _MAXRSS_UNIT,
        "gc_objects": len(gc.get_objects()),
        "gc_counts": list(gc.get_count()),
    }
