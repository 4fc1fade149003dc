"""Constants and helpers for units.

All the helpers take a string containing a single CSS component value and
never raise: values that can't be resolved give ``nan`` (``None`` for
angles), to be checked by the caller.

"""

import math

from .properties import INITIAL_VALUES
from .tokens import get_keyword, parse_one_token
from .typography import FONT_SIZE_KEYWORDS, FONT_WEIGHTS

# How many degrees is one <unit>?
# https://drafts.csswg.org/css-values-4/#angles
ANGLE_TO_DEGREES = {
    'deg': 1,
    'rad': 360 / (2 * math.pi),
    'grad': 360 / 400,
    'turn': 360,
}

# How many CSS pixels is one <unit>?
# https://www.w3.org/TR/CSS21/syndata.html#length-units
LENGTHS_TO_PIXELS = {
    'px': 1,
    'pt': 1 / 0.75,
    'pc': 16,  # LENGTHS_TO_PIXELS['pt'] * 12
    'in': 96,  # LENGTHS_TO_PIXELS['pt'] * 72
    'cm': 96 / 2.54,  # LENGTHS_TO_PIXELS['in'] / 2.54
    'mm': 96 / 25.4,  # LENGTHS_TO_PIXELS['in'] / 25.4
    'q': 96 / 25.4 / 4,  # LENGTHS_TO_PIXELS['mm'] / 4
}

# How many base sizes is one <unit>? Font-relative units all resolve against
# the base size.
# https://drafts.csswg.org/css-values-4/#font-relative-lengths
FONT_UNITS_TO_EMS = {
    'em': 1,
    'rem': 1,
    'ex': 1,
    'ch': 1,
}

# Sets of units.
ABSOLUTE_UNITS = set(LENGTHS_TO_PIXELS)
LENGTH_UNITS = ABSOLUTE_UNITS | set(FONT_UNITS_TO_EMS)
ANGLE_UNITS = set(ANGLE_TO_DEGREES)


def parse_size(string, base_size=INITIAL_VALUES['font_size']):
    """Get the number of pixels of a length, percentage or size keyword.

    Relative units, percentages and size keywords are resolved against
    ``base_size``.

    """
    token = parse_one_token(string)
    if token is None:
        return math.nan
    if token.type == 'dimension':
        unit = token.lower_unit
        if unit in LENGTHS_TO_PIXELS:
            return token.value * LENGTHS_TO_PIXELS[unit]
        elif unit in FONT_UNITS_TO_EMS:
            return token.value * FONT_UNITS_TO_EMS[unit] * base_size
    elif token.type == 'percentage':
        return token.value * base_size / 100
    elif token.type == 'number' and token.value == 0:
        return 0
    elif (keyword := get_keyword(token)) in FONT_SIZE_KEYWORDS:
        return base_size * FONT_SIZE_KEYWORDS[keyword]
    return math.nan


def parse_weight(string):
    """Get the numeric value of a font weight."""
    token = parse_one_token(string)
    if token is None:
        return math.nan
    if token.type == 'number' and token.int_value is not None:
        if 1 <= token.int_value <= 1000:
            return token.int_value
    elif (keyword := get_keyword(token)) in FONT_WEIGHTS:
        return FONT_WEIGHTS[keyword]
    return math.nan


def parse_angle(string):
    """Get the number of degrees of an angle, or ``None``."""
    token = parse_one_token(string)
    if token is not None and token.type == 'dimension':
        factor = ANGLE_TO_DEGREES.get(token.lower_unit)
        if factor is not None:
            return token.value * factor


def parse_percentage(string):
    """Get the fraction for a percentage with at most 3 integer digits."""
    token = parse_one_token(string)
    if token is not None and token.type == 'percentage':
        digits = token.representation.lstrip('+-')
        if (token.int_value is not None and digits.isdigit() and
                len(digits) <= 3):
            return token.int_value / 100
    return math.nan


def serialize_number(value):
    """Get the shortest string for a number, without trailing ``.0``."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
