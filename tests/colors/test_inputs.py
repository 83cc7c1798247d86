import numpy as np

from tinct import (
    ColorValue, ChannelsInput, CopyInput, FlagInput, HexInput, KeywordInput, ScalarInput,
    classify, is_hex, is_valid,
)
from samples import samples_invalid, samples_named_hex


def test_classify_each_shape():
    color = ColorValue("navy")
    assert classify(None) == FlagInput(False)
    assert classify(False) == FlagInput(False)
    assert classify(True) == FlagInput(True)
    assert classify(color) == CopyInput(color)
    assert classify(0.5) == ScalarInput(0.5)
    assert classify(2) == ScalarInput(2.0)
    assert classify("navy") == KeywordInput("navy")
    assert classify("random") == KeywordInput("random")
    assert classify("#001F3F") == HexInput("#001F3F")
    assert classify("#001F3F80") == HexInput("#001F3F80")
    assert classify([0.1, 0.2]) == ChannelsInput((0.1, 0.2))
    assert classify((1, 0, 0)) == ChannelsInput((1.0, 0.0, 0.0))
    assert classify(np.array([0.5, 0.25])) == ChannelsInput((0.5, 0.25))


def test_bool_is_a_flag_not_a_scalar():
    assert isinstance(classify(True), FlagInput)
    assert isinstance(classify(np.bool_(False)), FlagInput)
    # a list of bools is not a channel list
    assert classify([True, False]) is None


def test_valid_for_every_accepted_shape():
    accepted = [
        None, False, True, ColorValue(0.3), 0, 1.0, np.float64(0.2), np.uint8(4),
        "#000000", "#00000000", [0.1], (0.1, 0.2, 0.3, 0.4), np.array([1.0]),
    ]
    accepted.extend(samples_named_hex)
    accepted.append("random")
    for raw in accepted:
        assert is_valid(raw), raw


def test_invalid_for_everything_else():
    for raw in samples_invalid:
        assert not is_valid(raw), raw
        assert classify(raw) is None


def test_hex_predicate_checks_shape_only():
    assert is_hex("#ABCDEF")
    assert is_hex("#ABCDEF12")
    # digits are checked when decoding, not here
    assert is_hex("#GGGGGG")
    assert is_valid("#GGGGGG")
    assert not is_hex("#ABC")
    assert not is_hex("ABCDEFG")
    assert not is_hex("")
    assert not is_hex(0xABCDEF)


def test_real_numbers_are_valid():
    from fractions import Fraction

    assert classify(Fraction(1, 2)) == ScalarInput(0.5)
    assert classify([Fraction(1, 2), 1]) == ChannelsInput((0.5, 1.0))
    assert is_valid(Fraction(3, 4))


def test_overflowing_numbers_are_not_colors():
    for raw in (10**400, [10**400], (0.5, 10**400), np.array([1.0]).tolist() + [10**400]):
        assert classify(raw) is None
        assert not is_valid(raw)
    assert not is_valid(complex(0.5, 0))
