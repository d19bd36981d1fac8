"""
CPU Probe - Doc so processing units cua host qua psutil.

Classes:
- PsutilCpuProbe: CPU affinity cua process, fallback ve logical CPU count
- FixedCpuProbe: Tra ve gia tri co dinh (tests, embedding apps)
"""

import psutil

from charfreq.logging_config import log_debug
from charfreq.services.interfaces.cpu_probe import ICpuProbe


class PsutilCpuProbe(ICpuProbe):
    """
    Probe dua tren psutil.

    Uu tien cpu_affinity() (so CPU process duoc phep chay, vd trong
    container bi gioi han), fallback ve cpu_count(logical=True)
    tren platform khong ho tro affinity (macOS).
    """

    def available_units(self) -> int:
        try:
            affinity = psutil.Process().cpu_affinity()
            if affinity:
                return len(affinity)
        except (AttributeError, psutil.Error) as e:
            log_debug(f"[CpuProbe] cpu_affinity unavailable: {e}")

        return max(1, psutil.cpu_count(logical=True) or 1)


class FixedCpuProbe(ICpuProbe):
    """Probe tra ve so units co dinh."""

    def __init__(self, units: int) -> None:
        if isinstance(units, bool) or not isinstance(units, int) or units < 1:
            raise ValueError(f"units must be a positive integer, got {units!r}")
        self._units = units

    def available_units(self) -> int:
        return self._units
