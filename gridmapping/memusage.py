"""Process memory usage as reported by the proc file system."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TextIO

_PROC_ROOT = Path("/proc")
_KEYS = ("VmData:", "VmSize:")


def parse_memory_status(text: str) -> dict[str, str]:
    """Extract the ``VmData`` and ``VmSize`` values from a proc status text."""
    usage: dict[str, str] = {}
    tokens = iter(text.split())
    for token in tokens:
        if token in _KEYS:
            value = next(tokens, None)
            if value is None:
                break
            usage[token[:-1]] = value
    return usage


def memory_usage(pid: int | None = None) -> dict[str, str]:
    """Memory figures of process ``pid`` (default: this process).

    Raises ``OSError`` when the status file cannot be read.
    """
    if pid is None:
        pid = os.getpid()
    status = _PROC_ROOT / str(pid) / "status"
    return parse_memory_status(status.read_text())


def print_memory_usage(stream: TextIO | None = None) -> None:
    """Write this process's memory figures to ``stream`` (default stderr)."""
    if stream is None:
        stream = sys.stderr
    try:
        usage = memory_usage()
    except OSError:
        return
    for key, value in usage.items():
        stream.write(f"#{key}:\t{value}\n")