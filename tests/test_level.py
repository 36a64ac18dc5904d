from __future__ import annotations

import pytest

from alailog import Level

ORDER = [Level.ALL, Level.DEBUG, Level.INFO, Level.WARN, Level.ERROR, Level.FATAL, Level.OFF]


def test_levels_are_strictly_increasing() -> None:
    for lower, higher in zip(ORDER, ORDER[1:]):
        assert lower < higher


def test_off_is_above_every_other_level() -> None:
    assert all(level < Level.OFF for level in ORDER[:-1])


@pytest.mark.parametrize(
    "value, expected",
    [
        ("info", Level.INFO),
        ("WARNING", Level.WARN),
        (" Error ", Level.ERROR),
        ("critical", Level.FATAL),
        (0, Level.ALL),
        (Level.OFF, Level.OFF),
    ],
)
def test_parse_accepts_names_and_ordinals(value, expected) -> None:
    assert Level.parse(value) is expected


@pytest.mark.parametrize("value", ["verbose", 42, None])
def test_parse_rejects_unknown_values(value) -> None:
    with pytest.raises(ValueError):
        Level.parse(value)
