"""
Core counting logic - dem tan suat ky tu trong 1 segment.

Functions:
- count_segment(): Worker function, dem 1 Segment (parallel-safe)
- count_range(): Dem trong inclusive range [start, end]
- sequential_character_frequencies(): Dem ca text trong thread hien tai

Moi ham tra ve dict moi, khong doc/ghi state dung chung
nen goi tu nhieu threads cung luc la an toan.
"""

from typing import Dict, Iterable

from charfreq.frequency.case_fold import (
    DEFAULT_CASE_SENSE,
    DEFAULT_MULTI_CHAR_POLICY,
    CaseSense,
    MultiCharFoldPolicy,
    get_folder,
)
from charfreq.frequency.partition import Segment


def _count_chars(
    chars: Iterable[str],
    case: CaseSense,
    multi_char: MultiCharFoldPolicy,
) -> Dict[str, int]:
    fold = get_folder(case, multi_char)
    frequencies: Dict[str, int] = {}
    for char in chars:
        for key in fold(char):
            frequencies[key] = frequencies.get(key, 0) + 1
    return frequencies


def count_segment(
    text: str,
    segment: Segment,
    case: CaseSense = DEFAULT_CASE_SENSE,
    multi_char: MultiCharFoldPolicy = DEFAULT_MULTI_CHAR_POLICY,
) -> Dict[str, int]:
    """
    Dem tan suat ky tu trong 1 segment cua text.

    Worker function - chay doc lap trong 1 thread.
    Text chi duoc doc, partial map la local cua worker.

    Args:
        text: Toan bo text (shared, read-only)
        segment: Range can dem
        case: CaseSense policy
        multi_char: Policy cho multi-character lowercase

    Returns:
        PartialFrequencyMap cua segment

    Raises:
        UnsupportedCaseFold: INSENSITIVE + REJECT gap ky tu khong fold duoc
    """
    return _count_chars(text[segment.start : segment.end], case, multi_char)


def count_range(
    text: str,
    start: int,
    end: int,
    case: CaseSense = DEFAULT_CASE_SENSE,
    multi_char: MultiCharFoldPolicy = DEFAULT_MULTI_CHAR_POLICY,
) -> Dict[str, int]:
    """
    Dem tan suat trong inclusive character range [start, end].

    Raises:
        ValueError: Range nam ngoai text hoac start > end
    """
    if start < 0 or end < start or end >= len(text):
        raise ValueError(
            f"Invalid range [{start}, {end}] for text of length {len(text)}"
        )
    return count_segment(text, Segment(index=0, start=start, end=end + 1), case, multi_char)


def sequential_character_frequencies(
    text: str,
    case: CaseSense = DEFAULT_CASE_SENSE,
    multi_char: MultiCharFoldPolicy = DEFAULT_MULTI_CHAR_POLICY,
) -> Dict[str, int]:
    """
    Dem toan bo text trong thread hien tai, khong spawn worker.

    Dung lam fast path khi chi co 1 segment va lam baseline cho benchmark.
    """
    return _count_chars(text, case, multi_char)
