"""
Physical header pin to chip pin mapping.

Keys are the numbers printed next to the header pins, values are the
identifiers the kernel and `gpio-admin` use (gpio<N> in sysfs).
"""
from typing import Dict

# Revision 1 wiring of the 26-pin header, plus the 40-pin header
# extension found on the A+/B+ and later models.
BASE_PIN_MAPPING: Dict[int, int] = {
    3: 0,
    5: 1,
    7: 4,
    8: 14,
    10: 15,
    11: 17,
    12: 18,
    13: 21,
    15: 22,
    16: 23,
    18: 24,
    19: 10,
    21: 9,
    22: 25,
    23: 11,
    24: 8,
    26: 7,
    # A+ / B+ extension
    29: 5,
    31: 6,
    32: 12,
    33: 13,
    35: 19,
    36: 16,
    37: 26,
    38: 20,
    40: 21,
}

REVISION_2_OVERRIDES: Dict[int, int] = {
    3: 2,
    5: 3,
    13: 27,
}


def pin_mapping(revision: int) -> Dict[int, int]:
    """Returns a fresh mapping table for the given board revision class."""
    if revision not in (1, 2):
        raise ValueError(f"Unknown board revision class: {revision}")
    mapping = dict(BASE_PIN_MAPPING)
    if revision == 2:
        mapping.update(REVISION_2_OVERRIDES)
    return mapping
