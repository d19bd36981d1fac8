"""
Property Tests cho frequency counting.

Kiem tra cac invariants voi moi text va moi thread count:
- Tong counts == so ky tu
- Ket qua khong phu thuoc thread count
- Merge giao hoan / ket hop
- Partition phu kin text, khong overlap
"""

from hypothesis import given, settings, strategies as st

from charfreq.config.engine_settings import EngineSettings
from charfreq.frequency.case_fold import CaseSense, MultiCharFoldPolicy
from charfreq.frequency.counter import sequential_character_frequencies
from charfreq.frequency.merge import merge_frequencies, merge_frequencies_tree
from charfreq.frequency.partition import partition
from charfreq.services.cpu_probe import FixedCpuProbe
from charfreq.services.frequency_engine import FrequencyEngine

# =============================================================================
# STRATEGIES (Generators)
# =============================================================================

thread_counts = st.integers(min_value=1, max_value=16)
case_policies = st.sampled_from(CaseSense)
frequency_maps = st.dictionaries(
    st.characters(), st.integers(min_value=1, max_value=1000), max_size=20
)

ENGINE = FrequencyEngine(
    settings=EngineSettings(multi_char=MultiCharFoldPolicy.IDENTITY),
    cpu_probe=FixedCpuProbe(4),
)


# =============================================================================
# ENGINE PROPERTIES
# =============================================================================


@settings(deadline=None)
@given(text=st.text(min_size=1), threads=thread_counts, case=case_policies)
def test_total_count_equals_length(text, threads, case):
    result = ENGINE.count_with_threads_and_case(text, threads, case)
    assert sum(result.values()) == len(text)


@settings(deadline=None)
@given(text=st.text(), n1=thread_counts, n2=thread_counts)
def test_thread_count_does_not_affect_result(text, n1, n2):
    assert ENGINE.count_with_threads(text, n1) == ENGINE.count_with_threads(text, n2)


@settings(deadline=None)
@given(text=st.text(), threads=thread_counts, case=case_policies)
def test_parallel_matches_sequential(text, threads, case):
    expected = sequential_character_frequencies(
        text, case, MultiCharFoldPolicy.IDENTITY
    )
    assert ENGINE.count_with_threads_and_case(text, threads, case) == expected


@settings(deadline=None)
@given(text=st.text(alphabet="aAbBzZ09 ", min_size=1))
def test_ascii_only_merges_case_pairs(text):
    sensitive = ENGINE.count_with_case(text, CaseSense.SENSITIVE)
    folded = ENGINE.count_with_case(text, CaseSense.INSENSITIVE_ASCII_ONLY)
    for lower in "abz":
        combined = sensitive.get(lower, 0) + sensitive.get(lower.upper(), 0)
        assert folded.get(lower, 0) == combined
        assert lower.upper() not in folded


@settings(deadline=None)
@given(text=st.text(min_size=1, max_size=30), extra=st.integers(min_value=1, max_value=50))
def test_more_threads_than_characters(text, extra):
    assert ENGINE.count_with_threads(text, len(text) + extra) == ENGINE.count_with_threads(
        text, len(text)
    )


# =============================================================================
# MERGE / PARTITION PROPERTIES
# =============================================================================


@given(p1=frequency_maps, p2=frequency_maps)
def test_merge_commutative(p1, p2):
    assert merge_frequencies([p1, p2]) == merge_frequencies([p2, p1])


@given(partials=st.lists(frequency_maps, max_size=9))
def test_tree_merge_matches_sequential(partials):
    assert merge_frequencies_tree(partials) == merge_frequencies(partials)


@given(p1=frequency_maps, p2=frequency_maps, p3=frequency_maps)
def test_merge_associative(p1, p2, p3):
    left = merge_frequencies([merge_frequencies([p1, p2]), p3])
    right = merge_frequencies([p1, merge_frequencies([p2, p3])])
    assert left == right


@given(length=st.integers(min_value=0, max_value=500), threads=st.integers(min_value=1, max_value=64))
def test_partition_covers_range(length, threads):
    segments = partition(length, threads)
    assert sum(len(s) for s in segments) == length
    assert len(segments) == min(length, threads)
    position = 0
    for segment in segments:
        assert segment.start == position
        assert len(segment) >= 1
        position = segment.end
