import pytest

from tinct import InvalidColorInput, HexCase
from tinct.conversions import hex_to_ints, hex_to_unit, unit_to_hex, split_hex_groups, parse_hex_byte
from samples import samples_hex_unit, samples_hex_alpha_unit


def test_split_groups():
    assert split_hex_groups("#A1B2C3") == ["A1", "B2", "C3"]
    assert split_hex_groups("#A1B2C3D4") == ["A1", "B2", "C3", "D4"]


def test_split_rejects_wrong_shape():
    for raw in ("A1B2C3", "#A1B2C", "#A1B2C3D", "#A1B2C3D4E5", ""):
        with pytest.raises(InvalidColorInput):
            split_hex_groups(raw)


def test_parse_byte():
    assert parse_hex_byte("00") == 0
    assert parse_hex_byte("ff") == 255
    assert parse_hex_byte("Ff") == 255
    assert parse_hex_byte("7f") == 127


def test_parse_byte_rejects_coercible_junk():
    # all of these would pass int(x, 16)
    for group in ("+f", "-1", " f", "f ", "_f", "0x"):
        with pytest.raises(InvalidColorInput):
            parse_hex_byte(group)
    with pytest.raises(InvalidColorInput):
        parse_hex_byte("fff")


def test_malformed_digit_error_names_source():
    with pytest.raises(InvalidColorInput) as excinfo:
        hex_to_ints("#00ZZ00")
    assert excinfo.value.value == "#00ZZ00"
    assert "'ZZ'" in str(excinfo.value)


def test_hex_to_ints_defaults_alpha():
    assert hex_to_ints("#102030") == (16, 32, 48, 255)
    assert hex_to_ints("#10203040") == (16, 32, 48, 64)


def test_hex_to_unit_samples():
    for hex_color, expected in {**samples_hex_unit, **samples_hex_alpha_unit}.items():
        result = hex_to_unit(hex_color)
        assert len(result) == 4
        for got, exp in zip(result, expected):
            assert abs(got - exp) < 1e-12


def test_unit_to_hex_samples():
    for hex_color, channels in samples_hex_unit.items():
        assert unit_to_hex(channels).lower() == hex_color.lower()
    for hex_color, channels in samples_hex_alpha_unit.items():
        assert unit_to_hex(channels, opacity=True).lower() == hex_color.lower()


def test_unit_to_hex_clamps_and_pads():
    assert unit_to_hex((2.0, -1.0, 0.0, 1.0)) == "#FF0000"
    assert unit_to_hex((1 / 255, 0.0, 15 / 255, 0.0), opacity=True) == "#01000F00"


def test_unit_to_hex_case():
    assert unit_to_hex((0.0, 0.6666666, 1.0, 1.0)) == "#00AAFF"
    assert unit_to_hex((0.0, 0.6666666, 1.0, 1.0), case=HexCase.LOWER) == "#00aaff"
    assert unit_to_hex((0.0, 0.6666666, 1.0, 1.0), case="lower") == "#00aaff"
