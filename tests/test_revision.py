import pytest

from pi_gpio.errors import BoardRevisionError
from pi_gpio.pins import BASE_PIN_MAPPING, pin_mapping
from pi_gpio.revision import parse_revision, resolve_board_revision


@pytest.mark.parametrize("code, expected", [
    ("0002", 1),
    ("2", 1),
    ("0003", 2),
    ("10", 2),
    ("000e", 2),
    ("a02082", 2),
])
def test_parse_revision_classifies_board(code, expected):
    assert parse_revision(f"Hardware\t: BCM2708\nRevision\t: {code}\n") == expected


def test_revision_one_keeps_mapping_unmodified(cpuinfo):
    revision = resolve_board_revision(cpuinfo("2"))
    assert revision == 1
    assert pin_mapping(revision) == BASE_PIN_MAPPING


def test_revision_two_remaps_three_pins(cpuinfo):
    revision = resolve_board_revision(cpuinfo("10"))
    mapping = pin_mapping(revision)

    assert revision == 2
    assert (mapping[3], mapping[5], mapping[13]) == (2, 3, 27)
    changed = {pin for pin in mapping if mapping[pin] != BASE_PIN_MAPPING[pin]}
    assert changed == {3, 5, 13}


def test_missing_revision_line_is_fatal():
    with pytest.raises(BoardRevisionError):
        parse_revision("processor\t: 0\nHardware\t: BCM2708\n")


def test_non_hex_revision_is_fatal():
    with pytest.raises(BoardRevisionError):
        parse_revision("Revision\t: zz\n")


def test_unreadable_cpuinfo_is_fatal(tmp_path):
    with pytest.raises(BoardRevisionError):
        resolve_board_revision(tmp_path / "does-not-exist")
