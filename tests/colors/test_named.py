import pytest

from tinct import NAMED_COLORS, RANDOM, ColorValue
from tinct.colors.named import is_keyword, keyword_to_hex
from samples import samples_named_hex


def test_table_contents():
    assert set(NAMED_COLORS) == set(samples_named_hex) | {RANDOM}
    for name, hex_color in samples_named_hex.items():
        assert NAMED_COLORS[name] == hex_color
        assert keyword_to_hex(name) == hex_color


def test_table_is_read_only():
    with pytest.raises(TypeError):
        NAMED_COLORS["pink"] = "#FFC0CB"  # type: ignore[index]
    with pytest.raises(TypeError):
        del NAMED_COLORS["red"]  # type: ignore[attr-defined]
    assert "pink" not in NAMED_COLORS


def test_keywords_are_case_sensitive():
    assert is_keyword("navy")
    assert not is_keyword("Navy")
    assert not is_keyword(None)


def test_random_has_no_fixed_hex():
    with pytest.raises(ValueError):
        keyword_to_hex(RANDOM)


def test_every_keyword_builds_an_opaque_color():
    for name in NAMED_COLORS:
        assert ColorValue(name).a == 1.0
