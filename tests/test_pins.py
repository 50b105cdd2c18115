import pytest

from pi_gpio.pins import BASE_PIN_MAPPING, REVISION_2_OVERRIDES, pin_mapping


def test_mapping_covers_26_and_40_pin_headers():
    assert len(BASE_PIN_MAPPING) == 26
    assert 26 in BASE_PIN_MAPPING and 40 in BASE_PIN_MAPPING
    assert 1 not in BASE_PIN_MAPPING  # 3.3V supply pin


def test_pin_mapping_returns_fresh_copy():
    mapping = pin_mapping(2)
    mapping[7] = 99
    assert pin_mapping(2)[7] == 4
    assert BASE_PIN_MAPPING[3] == 0


def test_revision_two_overrides_only_touch_known_pins():
    assert set(REVISION_2_OVERRIDES) <= set(BASE_PIN_MAPPING)


def test_unknown_revision_class_is_rejected():
    with pytest.raises(ValueError):
        pin_mapping(3)
