"""
FrequencyEngine - Concrete implementation cua IFrequencyEngine.

Pipeline cho moi call:
  1. Resolve thread count (explicit > settings.threads > CPU probe), clamp vao [1, len(text)]
  2. partition() -> Segments theo character index
  3. Moi Segment chay count_segment() tren 1 worker thread (ThreadPoolExecutor)
  4. Doi tat ca futures xong (barrier) roi moi merge
  5. merge theo settings.merge_strategy

AN TOAN RACE CONDITION:
- Text la str (immutable), shared read-only giua cac workers
- Moi worker tra ve dict rieng qua future, khong co shared mutable state
- Khong can lock trong counting path

Dependency Flow:
  engine_registry -> FrequencyEngine -> charfreq.frequency (pure functions)
                                     -> ICpuProbe (host CPU count)
"""

import time
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional

from charfreq.config.engine_settings import EngineSettings
from charfreq.frequency.case_fold import CaseSense, parse_case_sense
from charfreq.frequency.counter import count_segment, sequential_character_frequencies
from charfreq.frequency.errors import InvalidThreadCount, UnsupportedCaseFold
from charfreq.frequency.merge import (
    MergeStrategy,
    merge_frequencies,
    merge_frequencies_tree,
)
from charfreq.frequency.partition import Segment, partition, validate_thread_count
from charfreq.logging_config import log_debug, log_error
from charfreq.services.cpu_probe import PsutilCpuProbe
from charfreq.services.interfaces.cpu_probe import ICpuProbe
from charfreq.services.interfaces.frequency_engine import IFrequencyEngine

WORKER_THREAD_PREFIX = "charfreq-worker"


class FrequencyEngine(IFrequencyEngine):
    """
    Dem tan suat ky tu song song - thread-safe, khong dung global state.

    Settings va CPU probe duoc inject qua constructor.
    Moi call tao ThreadPoolExecutor rieng, fan-out co dinh 1 worker / segment.
    """

    def __init__(
        self,
        settings: Optional[EngineSettings] = None,
        cpu_probe: Optional[ICpuProbe] = None,
    ) -> None:
        """
        Khoi tao FrequencyEngine.

        Args:
            settings: EngineSettings (default: EngineSettings())
            cpu_probe: Nguon so CPU khi khong chi dinh threads (default: PsutilCpuProbe)
        """
        self._settings = settings if settings is not None else EngineSettings()
        self._cpu_probe = cpu_probe if cpu_probe is not None else PsutilCpuProbe()

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    # ================================================================
    # Public API - IFrequencyEngine contract
    # ================================================================

    def count(self, text: str) -> Dict[str, int]:
        return self._count(text, None, None)

    def count_with_threads(self, text: str, threads: int) -> Dict[str, int]:
        return self._count(text, threads, None)

    def count_with_case(self, text: str, case: CaseSense) -> Dict[str, int]:
        return self._count(text, None, case)

    def count_with_threads_and_case(
        self, text: str, threads: int, case: CaseSense
    ) -> Dict[str, int]:
        return self._count(text, threads, case)

    def resolve_thread_count(self, text_length: int, threads: Optional[int] = None) -> int:
        """
        Tinh so worker threads thuc te cho mot call.

        Thu tu uu tien: threads (explicit) > settings.threads > CPU probe.
        Ket qua luon >= 1 roi clamp theo text_length
        (khong bao gio spawn nhieu workers hon so ky tu).

        Args:
            text_length: So ky tu cua text
            threads: Thread count explicit hoac None

        Returns:
            So workers; 0 neu text rong

        Raises:
            InvalidThreadCount: threads explicit < 1
        """
        if threads is not None:
            requested = validate_thread_count(threads)
        elif self._settings.threads is not None:
            requested = self._settings.threads
        else:
            requested = max(1, self._cpu_probe.available_units())

        return min(requested, text_length)

    # ================================================================
    # Internal pipeline
    # ================================================================

    def _count(
        self,
        text: str,
        threads: Optional[int],
        case: Optional[CaseSense],
    ) -> Dict[str, int]:
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {type(text).__name__}")

        try:
            effective_case = (
                self._settings.case if case is None else parse_case_sense(case)
            )
            workers = self.resolve_thread_count(len(text), threads)
        except InvalidThreadCount as e:
            log_error("[FrequencyEngine] Rejected call", e)
            raise

        # Text rong: khong spawn worker nao
        if workers == 0:
            return {}

        segments = partition(len(text), workers)
        multi_char = self._settings.multi_char
        start = time.perf_counter()

        try:
            if len(segments) == 1:
                result = sequential_character_frequencies(text, effective_case, multi_char)
            else:
                result = self._count_parallel(text, segments, effective_case)
        except UnsupportedCaseFold as e:
            log_error("[FrequencyEngine] Case folding failed", e)
            raise

        log_debug(
            f"[FrequencyEngine] {len(text)} chars, {len(segments)} segments, "
            f"{effective_case.value}, {len(result)} keys in "
            f"{(time.perf_counter() - start) * 1000:.2f}ms"
        )
        return result

    def _count_parallel(
        self,
        text: str,
        segments: List[Segment],
        case: CaseSense,
    ) -> Dict[str, int]:
        multi_char = self._settings.multi_char

        with ThreadPoolExecutor(
            max_workers=len(segments), thread_name_prefix=WORKER_THREAD_PREFIX
        ) as executor:
            futures = [
                executor.submit(count_segment, text, segment, case, multi_char)
                for segment in segments
            ]
            # Barrier: result() tung future; neu 1 worker raise, executor
            # van doi cac worker con lai truoc khi exception thoat khoi with
            partials = [future.result() for future in futures]

            if self._settings.merge_strategy is MergeStrategy.TREE:
                return merge_frequencies_tree(partials, executor)

        return merge_frequencies(partials)
