"""Timing and console output helpers."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T")


def measure_time(label: str, func: Callable[[], T]) -> T:
    """Run ``func``, print how long it took under ``label``, return its result."""
    start = time.perf_counter()
    result = func()
    elapsed = time.perf_counter() - start
    secs = int(elapsed)
    millis = int((elapsed - secs) * 1000)
    print(f"[{label}] completed in {secs}.{millis:03d} secs")
    return result


def print_section(title: str) -> None:
    """Print a section header."""
    print(f"\n=== {title} ===")