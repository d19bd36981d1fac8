"""
Engine Registry - Provider cho FrequencyEngine dung chung trong process.

Module nay la single access point cho engine ma public API
(charfreq.count(), ...) su dung.

Functions:
- get_frequency_engine(): Lay FrequencyEngine singleton (lazy, thread-safe)
- set_frequency_engine(): Thay engine (tests, app nhung charfreq)
- reset_frequency_engine(): Bo singleton, lan goi sau tao lai tu env
"""

import threading
from typing import Optional

from charfreq.config.engine_settings import EngineSettings
from charfreq.services.cpu_probe import PsutilCpuProbe
from charfreq.services.frequency_engine import FrequencyEngine
from charfreq.services.interfaces.frequency_engine import IFrequencyEngine

_engine_instance: Optional[IFrequencyEngine] = None
_engine_lock = threading.Lock()


def get_frequency_engine() -> IFrequencyEngine:
    """
    Lay FrequencyEngine singleton instance.

    Thread-safe lazy initialization. Settings doc tu CHARFREQ_* env vars
    tai lan goi dau tien.

    Returns:
        IFrequencyEngine instance
    """
    global _engine_instance
    if _engine_instance is not None:
        return _engine_instance

    with _engine_lock:
        if _engine_instance is None:
            _engine_instance = FrequencyEngine(
                settings=EngineSettings.from_env(),
                cpu_probe=PsutilCpuProbe(),
            )
        return _engine_instance


def set_frequency_engine(engine: IFrequencyEngine) -> None:
    """
    Dat engine dung chung.

    Args:
        engine: Bat ky IFrequencyEngine implementation nao
    """
    global _engine_instance
    if not isinstance(engine, IFrequencyEngine):
        raise TypeError(f"Expected IFrequencyEngine, got {type(engine).__name__}")
    with _engine_lock:
        _engine_instance = engine


def reset_frequency_engine() -> None:
    """Bo engine hien tai."""
    global _engine_instance
    with _engine_lock:
        _engine_instance = None
