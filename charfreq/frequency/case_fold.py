"""
Case folding - map moi ky tu thanh counting key theo CaseSense policy.

Functions:
- fold_char(): Fold 1 ky tu, raise UnsupportedCaseFold neu khong fold duoc
- try_fold(): Tagged-result variant, khong raise
- get_folder(): Chon folding callable 1 lan cho ca segment
- parse_case_sense(): Doc CaseSense tu config value (enum hoac string)

Policy:
- SENSITIVE: identity
- INSENSITIVE_ASCII_ONLY (default): chi A-Z -> a-z
- INSENSITIVE: full Unicode str.lower(), xem MultiCharFoldPolicy
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple, Union

from charfreq.frequency.errors import UnsupportedCaseFold


class CaseSense(Enum):
    """Case-sensitivity policy ap dung truoc khi dem."""

    INSENSITIVE_ASCII_ONLY = "insensitive_ascii_only"
    INSENSITIVE = "insensitive"
    SENSITIVE = "sensitive"


class MultiCharFoldPolicy(Enum):
    """
    Xu ly ky tu co lowercase dai hon 1 ky tu (vd: 'İ' -> 'i̇').

    Chi ap dung cho CaseSense.INSENSITIVE.
    """

    REJECT = "reject"  # raise UnsupportedCaseFold
    EXPAND = "expand"  # dem tung ky tu cua expansion
    IDENTITY = "identity"  # giu nguyen ky tu goc


DEFAULT_CASE_SENSE = CaseSense.INSENSITIVE_ASCII_ONLY
DEFAULT_MULTI_CHAR_POLICY = MultiCharFoldPolicy.REJECT

FoldFunc = Callable[[str], Tuple[str, ...]]


@dataclass(frozen=True)
class FoldResult:
    """
    Ket qua fold 1 ky tu.

    Attributes:
        keys: Counting keys (rong neu that bai)
        error: UnsupportedCaseFold neu that bai, None neu thanh cong
    """

    keys: Tuple[str, ...] = ()
    error: Optional[UnsupportedCaseFold] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _fold_sensitive(char: str) -> Tuple[str, ...]:
    return (char,)


def _fold_ascii(char: str) -> Tuple[str, ...]:
    # str.lower() tren ASCII letter luon ra dung 1 ky tu ASCII
    if "A" <= char <= "Z":
        return (char.lower(),)
    return (char,)


def _make_unicode_folder(multi_char: MultiCharFoldPolicy) -> FoldFunc:
    def fold(char: str) -> Tuple[str, ...]:
        lowered = char.lower()
        if len(lowered) == 1:
            return (lowered,)
        if multi_char is MultiCharFoldPolicy.EXPAND:
            return tuple(lowered)
        if multi_char is MultiCharFoldPolicy.IDENTITY:
            return (char,)
        raise UnsupportedCaseFold(char, lowered)

    return fold


def get_folder(
    case: CaseSense = DEFAULT_CASE_SENSE,
    multi_char: MultiCharFoldPolicy = DEFAULT_MULTI_CHAR_POLICY,
) -> FoldFunc:
    """
    Lay folding function cho policy.

    Worker goi ham nay 1 lan roi dung ket qua cho moi ky tu,
    tranh phai match policy trong vong lap.

    Args:
        case: CaseSense policy
        multi_char: Policy cho multi-character lowercase (chi INSENSITIVE)

    Returns:
        Callable nhan 1 ky tu, tra ve tuple counting keys
    """
    if case is CaseSense.SENSITIVE:
        return _fold_sensitive
    if case is CaseSense.INSENSITIVE_ASCII_ONLY:
        return _fold_ascii
    if case is CaseSense.INSENSITIVE:
        return _make_unicode_folder(multi_char)
    raise ValueError(f"Unknown case policy: {case!r}")


def fold_char(
    char: str,
    case: CaseSense = DEFAULT_CASE_SENSE,
    multi_char: MultiCharFoldPolicy = DEFAULT_MULTI_CHAR_POLICY,
) -> Tuple[str, ...]:
    """
    Fold 1 ky tu thanh counting key(s).

    Args:
        char: Dung 1 ky tu (1 code point)
        case: CaseSense policy
        multi_char: Policy cho multi-character lowercase

    Returns:
        Tuple counting keys, thuong chi co 1 phan tu

    Raises:
        ValueError: char khong phai dung 1 ky tu
        UnsupportedCaseFold: INSENSITIVE + REJECT va lowercase dai hon 1 ky tu
    """
    if len(char) != 1:
        raise ValueError(f"Expected a single character, got {char!r}")
    return get_folder(case, multi_char)(char)


def try_fold(
    char: str,
    case: CaseSense = DEFAULT_CASE_SENSE,
    multi_char: MultiCharFoldPolicy = DEFAULT_MULTI_CHAR_POLICY,
) -> FoldResult:
    """Giong fold_char() nhung tra ve FoldResult thay vi raise UnsupportedCaseFold."""
    try:
        return FoldResult(keys=fold_char(char, case, multi_char))
    except UnsupportedCaseFold as e:
        return FoldResult(error=e)


def parse_case_sense(value: Union[CaseSense, str]) -> CaseSense:
    """
    Parse CaseSense tu enum hoac string value.

    Chap nhan "Sensitive", "insensitive-ascii-only", ...
    (khong phan biet hoa thuong, '-' tuong duong '_').

    Raises:
        ValueError: Value khong hop le
    """
    if isinstance(value, CaseSense):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower().replace("-", "_")
        for member in CaseSense:
            if member.value == normalized:
                return member
    raise ValueError(f"Unknown case policy: {value!r}")
