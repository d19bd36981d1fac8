"""
Partitioner - chia text thanh cac Segment lien tiep cho worker threads.

Segment la character-index range (half-open [start, end)), khong phai
byte offset, nen khong bao gio cat doi mot code point.

Chia deu: L % n segments dau co ceil(L/n) ky tu, phan con lai floor(L/n).
"""

from dataclasses import dataclass
from typing import List

from charfreq.frequency.errors import InvalidThreadCount


@dataclass(frozen=True)
class Segment:
    """
    Mot doan lien tiep cua text giao cho 1 worker.

    Attributes:
        index: Thu tu segment (0-based)
        start: Character index bat dau (inclusive)
        end: Character index ket thuc (exclusive)
    """

    index: int
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


def validate_thread_count(threads: object) -> int:
    """
    Kiem tra thread count la int >= 1.

    bool bi reject (isinstance(True, int) == True trong Python).

    Raises:
        InvalidThreadCount: Neu khong hop le
    """
    if isinstance(threads, bool) or not isinstance(threads, int) or threads < 1:
        raise InvalidThreadCount(threads)
    return threads


def partition(length: int, threads: int) -> List[Segment]:
    """
    Chia `length` ky tu thanh toi da `threads` segments.

    Args:
        length: So ky tu cua text (>= 0)
        threads: So worker threads (>= 1)

    Returns:
        List Segment theo thu tu, hop lai dung bang [0, length).
        Rong neu length == 0. Toi da min(threads, length) segments,
        khong co segment rong.

    Raises:
        InvalidThreadCount: threads < 1
        ValueError: length < 0
    """
    validate_thread_count(threads)
    if length < 0:
        raise ValueError(f"Text length must be >= 0, got {length}")
    if length == 0:
        return []

    count = min(threads, length)
    base, remainder = divmod(length, count)

    segments: List[Segment] = []
    start = 0
    for i in range(count):
        size = base + 1 if i < remainder else base
        segments.append(Segment(index=i, start=start, end=start + size))
        start += size
    return segments


def segment_text(text: str, threads: int) -> List[str]:
    """Cat text theo partition() - tien loi cho debug va tests."""
    return [text[s.start : s.end] for s in partition(len(text), threads)]
