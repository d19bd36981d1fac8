"""
IFrequencyEngine - Interface cho dich vu dem tan suat ky tu.

Dinh nghia contract 2x2: {auto threads, explicit threads} x {default case, explicit case}.
Cho phep dependency injection va testability (mock/stub).

Methods:
- count(): Auto thread count, default case policy
- count_with_threads(): Explicit thread count, default case policy
- count_with_case(): Auto thread count, explicit case policy
- count_with_threads_and_case(): Explicit ca hai
"""

from abc import ABC, abstractmethod
from typing import Dict

from charfreq.frequency.case_fold import CaseSense


class IFrequencyEngine(ABC):
    """
    Interface cho frequency engine.

    Moi implementation phai dam bao:
    - Thread-safe (nhieu caller goi dong thoi)
    - Ket qua khong phu thuoc so threads hay thu tu hoan thanh cua workers
    - Tra ve dict moi, caller so huu
    """

    @abstractmethod
    def count(self, text: str) -> Dict[str, int]:
        """
        Dem tan suat voi thread count tu host va case policy mac dinh.

        Args:
            text: Text can dem

        Returns:
            FrequencyMap: ky tu (da fold) -> so lan xuat hien
        """
        ...

    @abstractmethod
    def count_with_threads(self, text: str, threads: int) -> Dict[str, int]:
        """
        Dem tan suat voi thread count chi dinh.

        Raises:
            InvalidThreadCount: threads < 1
        """
        ...

    @abstractmethod
    def count_with_case(self, text: str, case: CaseSense) -> Dict[str, int]:
        """Dem tan suat voi case policy chi dinh."""
        ...

    @abstractmethod
    def count_with_threads_and_case(
        self, text: str, threads: int, case: CaseSense
    ) -> Dict[str, int]:
        """Dem tan suat voi ca thread count va case policy chi dinh."""
        ...
