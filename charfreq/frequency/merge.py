"""
Merger - gop cac PartialFrequencyMap thanh 1 FrequencyMap.

Functions:
- add_frequencies(): Cong 2 maps, khong mutate input
- merge_frequencies(): Sequential reduction
- merge_frequencies_tree(): Pairwise reduction tree (co the chay tren executor)

Phep cong giao hoan va ket hop nen thu tu merge khong anh huong ket qua.
"""

from concurrent.futures import Executor
from enum import Enum
from typing import Dict, List, Mapping, Optional, Sequence


class MergeStrategy(Enum):
    """Cach gop partial maps."""

    SEQUENTIAL = "sequential"
    TREE = "tree"


def add_frequencies(a: Mapping[str, int], b: Mapping[str, int]) -> Dict[str, int]:
    """
    Cong 2 frequency maps.

    Args:
        a: Map thu nhat
        b: Map thu hai

    Returns:
        Dict moi, count cua key chung la tong 2 ben
    """
    out = dict(a)
    for char, frequency in b.items():
        out[char] = out.get(char, 0) + frequency
    return out


def merge_frequencies(partials: Sequence[Mapping[str, int]]) -> Dict[str, int]:
    """
    Gop tuan tu tat ca partial maps.

    Input khong bi mutate. List rong -> {}.
    """
    merged: Dict[str, int] = {}
    for partial in partials:
        for char, frequency in partial.items():
            merged[char] = merged.get(char, 0) + frequency
    return merged


def merge_frequencies_tree(
    partials: Sequence[Mapping[str, int]],
    executor: Optional[Executor] = None,
) -> Dict[str, int]:
    """
    Gop theo cay: moi level cong tung cap lien ke, map le duoc
    chuyen thang len level tiep theo.

    Neu co executor, cac cap trong cung level duoc cong song song
    va level sau chi bat dau khi level truoc xong het.

    Args:
        partials: Cac partial maps
        executor: Executor de chay song song (None = chay trong thread hien tai)

    Returns:
        FrequencyMap (dict moi)
    """
    if not partials:
        return {}

    level: List[Mapping[str, int]] = list(partials)
    while len(level) > 1:
        pairs = [(level[i], level[i + 1]) for i in range(0, len(level) - 1, 2)]
        carry = level[-1] if len(level) % 2 else None

        if executor is not None:
            futures = [executor.submit(add_frequencies, a, b) for a, b in pairs]
            next_level: List[Mapping[str, int]] = [f.result() for f in futures]
        else:
            next_level = [add_frequencies(a, b) for a, b in pairs]

        if carry is not None:
            next_level.append(carry)
        level = next_level

    return dict(level[0])
