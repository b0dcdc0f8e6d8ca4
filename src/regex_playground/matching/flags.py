"""Flag canonicalization shared by the matcher and the flag picker."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Union

GLOBAL = "g"
MULTILINE = "m"
CASE_INSENSITIVE = "i"

CANONICAL_ORDER: tuple[str, ...] = (GLOBAL, MULTILINE, CASE_INSENSITIVE)

_RE_FLAGS = {
    MULTILINE: re.MULTILINE,
    CASE_INSENSITIVE: re.IGNORECASE,
}


@dataclass(frozen=True, slots=True)
class FlagSet:
    """Ordered subset of ``g``/``m``/``i``; build it with ``normalize_flags``."""

    flags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "flags", _canonical(self.flags))

    def __str__(self) -> str:
        return "".join(self.flags)

    def __iter__(self) -> Iterator[str]:
        return iter(self.flags)

    def __contains__(self, flag: object) -> bool:
        return flag in self.flags

    def __len__(self) -> int:
        return len(self.flags)

    def has(self, flag: str) -> bool:
        return flag in self.flags

    @property
    def is_global(self) -> bool:
        return GLOBAL in self.flags

    @property
    def is_multiline(self) -> bool:
        return MULTILINE in self.flags

    @property
    def is_case_insensitive(self) -> bool:
        return CASE_INSENSITIVE in self.flags

    def toggle(self, flag: str) -> "FlagSet":
        if flag not in CANONICAL_ORDER:
            raise ValueError(f"Unknown flag '{flag}'")
        if flag in self.flags:
            return FlagSet(tuple(f for f in self.flags if f != flag))
        return FlagSet(self.flags + (flag,))

    def re_flags(self) -> re.RegexFlag:
        """Python ``re`` flags; ``g`` is handled by the evaluator, not the engine."""

        value = re.RegexFlag(0)
        for flag in self.flags:
            value |= _RE_FLAGS.get(flag, re.RegexFlag(0))
        return value


FlagInput = Union[str, Iterable[str], FlagSet]


def _canonical(requested: Iterable[str]) -> tuple[str, ...]:
    present = {item for item in requested if item in CANONICAL_ORDER}
    return tuple(flag for flag in CANONICAL_ORDER if flag in present)


def normalize_flags(requested: FlagInput = "") -> FlagSet:
    """Collapse free-form flag input into the canonical ``FlagSet``.

    A string is read character by character, any other iterable item by
    item. Unknown entries and duplicates are dropped silently: ``"igxg"``
    becomes ``"gi"`` and ``["multiline", "g"]`` becomes ``"g"``.
    """

    if isinstance(requested, FlagSet):
        return requested
    if requested is None:
        return FlagSet()
    return FlagSet(tuple(requested))


__all__ = [
    "CANONICAL_ORDER",
    "CASE_INSENSITIVE",
    "FlagInput",
    "FlagSet",
    "GLOBAL",
    "MULTILINE",
    "normalize_flags",
]
