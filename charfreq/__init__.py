"""
charfreq: Multithreaded character frequency counter.

Counts the characters of a text over multiple threads and merges the
partial counts into one mapping from character to occurrence count.

Usage:
    import charfreq

    charfreq.count("Hello, World!")
    # {'h': 1, 'e': 1, 'l': 3, 'o': 2, ',': 1, ' ': 1, 'w': 1, 'r': 1, 'd': 1, '!': 1}

    charfreq.count_with_case("Hello WORLD", charfreq.CaseSense.SENSITIVE)
    charfreq.count_with_threads(text, 8)

The module-level functions delegate to the process-wide engine from
charfreq.services.engine_registry. Build a FrequencyEngine directly for
custom settings or a fixed CPU probe.
"""

from typing import Dict

from charfreq.config.engine_settings import EngineSettings
from charfreq.frequency.case_fold import CaseSense, MultiCharFoldPolicy
from charfreq.frequency.counter import sequential_character_frequencies
from charfreq.frequency.errors import (
    FrequencyError,
    InvalidThreadCount,
    UnsupportedCaseFold,
)
from charfreq.frequency.merge import MergeStrategy
from charfreq.services.cpu_probe import FixedCpuProbe, PsutilCpuProbe
from charfreq.services.engine_registry import get_frequency_engine
from charfreq.services.frequency_engine import FrequencyEngine

__version__ = "0.1.0"


def count(text: str) -> Dict[str, int]:
    """Count characters using the host CPU count and the default case policy."""
    return get_frequency_engine().count(text)


def count_with_threads(text: str, threads: int) -> Dict[str, int]:
    """Count characters with an explicit thread count (>= 1)."""
    return get_frequency_engine().count_with_threads(text, threads)


def count_with_case(text: str, case: CaseSense) -> Dict[str, int]:
    """Count characters with an explicit case policy."""
    return get_frequency_engine().count_with_case(text, case)


def count_with_threads_and_case(text: str, threads: int, case: CaseSense) -> Dict[str, int]:
    """Count characters with an explicit thread count and case policy."""
    return get_frequency_engine().count_with_threads_and_case(text, threads, case)


__all__ = [
    # Counting
    "count",
    "count_with_threads",
    "count_with_case",
    "count_with_threads_and_case",
    "sequential_character_frequencies",
    # Engine
    "FrequencyEngine",
    "EngineSettings",
    "PsutilCpuProbe",
    "FixedCpuProbe",
    # Policies
    "CaseSense",
    "MultiCharFoldPolicy",
    "MergeStrategy",
    # Errors
    "FrequencyError",
    "InvalidThreadCount",
    "UnsupportedCaseFold",
]
