"""
ICpuProbe - Interface cho nguon so luong processing units cua host.

FrequencyEngine dung probe nay khi caller khong chi dinh thread count.
Tach thanh interface de tests inject gia tri co dinh thay vi phu thuoc host.
"""

from abc import ABC, abstractmethod


class ICpuProbe(ABC):
    """Interface tra ve so processing units kha dung."""

    @abstractmethod
    def available_units(self) -> int:
        """
        So processing units ma process hien tai co the dung.

        Returns:
            So nguyen >= 1
        """
        ...
