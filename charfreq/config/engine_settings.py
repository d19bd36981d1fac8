"""
EngineSettings - Typed settings dataclass cho FrequencyEngine.

Default case policy la mot field co default value ro rang
(INSENSITIVE_ASCII_ONLY), khong phai global state an.

Modules:
- EngineSettings: Dataclass chua toan bo engine settings
- from_dict(): Tao EngineSettings tu dict, bo qua values sai type
- from_env(): Doc settings tu CHARFREQ_* environment variables
- to_dict(): Chuyen doi EngineSettings thanh dict

Su dung:
    settings = EngineSettings.from_env()
    engine = FrequencyEngine(settings=settings)
"""

import os
from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Optional

from charfreq.config.paths import CASE_ENV_VAR, MERGE_ENV_VAR, THREADS_ENV_VAR
from charfreq.frequency.case_fold import (
    DEFAULT_CASE_SENSE,
    DEFAULT_MULTI_CHAR_POLICY,
    CaseSense,
    MultiCharFoldPolicy,
    parse_case_sense,
)
from charfreq.frequency.errors import InvalidThreadCount
from charfreq.frequency.merge import MergeStrategy
from charfreq.frequency.partition import validate_thread_count
from charfreq.logging_config import log_warning


def _parse_enum(enum_cls, value: Any):
    """Parse enum member tu member hoac string value, None neu khong khop."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower().replace("-", "_")
        for member in enum_cls:
            if member.value == normalized:
                return member
    return None


@dataclass
class EngineSettings:
    """
    Typed settings cho FrequencyEngine.

    Moi field tuong ung voi mot key trong dict config.
    """

    # Case policy mac dinh cho count() / count_with_threads()
    case: CaseSense = field(default=DEFAULT_CASE_SENSE)
    # Xu ly ky tu co lowercase dai hon 1 ky tu (chi INSENSITIVE)
    multi_char: MultiCharFoldPolicy = field(default=DEFAULT_MULTI_CHAR_POLICY)
    # So threads co dinh; None = hoi CPU probe
    threads: Optional[int] = None
    merge_strategy: MergeStrategy = field(default=MergeStrategy.SEQUENTIAL)

    def __post_init__(self) -> None:
        if self.threads is not None:
            validate_thread_count(self.threads)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EngineSettings":
        """
        Tao EngineSettings tu dict, chi lay cac keys trung voi field names.

        Value sai type hoac khong hop le bi bo qua va dung default,
        khong raise loi. Enum fields chap nhan string value ("sensitive", ...).

        Args:
            data: Dict settings

        Returns:
            EngineSettings instance voi values tu dict, fallback ve defaults
        """
        known = {f.name for f in fields(cls)}
        filtered: dict[str, Any] = {}

        for key, value in data.items():
            if key not in known:
                continue

            if key == "case":
                parsed = _parse_enum(CaseSense, value)
            elif key == "multi_char":
                parsed = _parse_enum(MultiCharFoldPolicy, value)
            elif key == "merge_strategy":
                parsed = _parse_enum(MergeStrategy, value)
            elif key == "threads":
                if value is None:
                    continue
                try:
                    parsed = validate_thread_count(value)
                except InvalidThreadCount:
                    parsed = None
            else:
                parsed = None

            if parsed is not None:
                filtered[key] = parsed

        return cls(**filtered)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineSettings":
        """
        Doc settings tu CHARFREQ_THREADS, CHARFREQ_CASE, CHARFREQ_MERGE.

        Value khong hop le -> warning log + default.

        Args:
            environ: Mapping environment (default: os.environ)
        """
        env = os.environ if environ is None else environ
        data: dict[str, Any] = {}

        threads_raw = env.get(THREADS_ENV_VAR, "").strip()
        if threads_raw:
            try:
                data["threads"] = int(threads_raw)
            except ValueError:
                log_warning(f"Ignoring {THREADS_ENV_VAR}={threads_raw!r}: not an integer")

        case_raw = env.get(CASE_ENV_VAR, "").strip()
        if case_raw:
            try:
                data["case"] = parse_case_sense(case_raw)
            except ValueError:
                log_warning(f"Ignoring {CASE_ENV_VAR}={case_raw!r}: unknown case policy")

        merge_raw = env.get(MERGE_ENV_VAR, "").strip()
        if merge_raw:
            data["merge_strategy"] = merge_raw

        settings = cls.from_dict(data)
        if "threads" in data and settings.threads is None:
            log_warning(f"{THREADS_ENV_VAR} must be >= 1, probing host CPUs instead")
        if merge_raw and settings.merge_strategy.value != merge_raw.lower():
            log_warning(f"Ignoring {MERGE_ENV_VAR}={merge_raw!r}: unknown merge strategy")
        return settings

    def to_dict(self) -> dict[str, Any]:
        """
        Chuyen doi EngineSettings thanh dict (enum -> string value).

        Returns:
            Dict voi toan bo settings
        """
        return {
            "case": self.case.value,
            "multi_char": self.multi_char.value,
            "threads": self.threads,
            "merge_strategy": self.merge_strategy.value,
        }
