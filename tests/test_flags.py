import re

import pytest

from regex_playground.matching import FlagSet, normalize_flags


@pytest.mark.parametrize(
    ("requested", "expected"),
    [
        ("", ""),
        ("g", "g"),
        ("igm", "gmi"),
        ("igxg", "gi"),
        ("yusd", ""),
        (["m", "g"], "gm"),
        (("i", "i", "i"), "i"),
        (["multiline", "g"], "g"),
        (["multiline"], ""),
        (["gm", "i"], "i"),
    ],
)
def test_normalize_flags_canonical_order(requested, expected) -> None:
    assert str(normalize_flags(requested)) == expected


def test_normalize_flags_passes_flagset_through() -> None:
    flags = normalize_flags("mg")

    assert normalize_flags(flags) is flags
    assert flags == FlagSet(("g", "m"))


def test_flagset_membership_helpers() -> None:
    flags = normalize_flags("gi")

    assert flags.has("g")
    assert "i" in flags
    assert not flags.is_multiline
    assert flags.is_global and flags.is_case_insensitive
    assert list(flags) == ["g", "i"]


def test_flagset_re_flags_ignore_global() -> None:
    assert normalize_flags("g").re_flags() == re.RegexFlag(0)
    assert normalize_flags("gmi").re_flags() == re.MULTILINE | re.IGNORECASE


def test_toggle_flag_keeps_canonical_order() -> None:
    flags = normalize_flags("i")

    toggled = flags.toggle("g")

    assert str(toggled) == "gi"
    assert str(toggled.toggle("i")) == "g"


def test_toggle_unknown_flag_rejected() -> None:
    with pytest.raises(ValueError):
        normalize_flags("g").toggle("x")
