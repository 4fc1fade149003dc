"""Parse the ``filter`` shorthand.

https://drafts.fxtf.org/filter-effects/#FilterProperty

Invalid filter functions are silently dropped, parsing never fails.

"""

import math
import types

import tinycss2

from .properties import DropShadow, ParsedFilter
from .tokens import tokenize
from .units import parse_angle, parse_percentage, parse_size

# Parser of the single argument of each filter function.
FILTER_ARGUMENTS = {
    'blur': parse_size,
    'hue-rotate': parse_angle,
    'brightness': parse_percentage,
    'contrast': parse_percentage,
    'grayscale': parse_percentage,
    'invert': parse_percentage,
    'opacity': parse_percentage,
    'saturate': parse_percentage,
    'sepia': parse_percentage,
}


def _is_finite(value):
    return value is not None and math.isfinite(value)


def drop_shadow(argument):
    """Get ``(value, canonical)`` for drop-shadow, or ``None``.

    The three first items are the x and y offsets and the blur radius, all
    the following items are the color.

    """
    items = argument.split()
    lengths, color = items[:3], ' '.join(items[3:])
    values = [parse_size(length) for length in lengths]
    if len(values) == 3 and all(map(_is_finite, values)) and color:
        color_string = color.replace(' ', '')
        canonical = f'drop-shadow({" ".join(lengths)} {color_string})'
        return DropShadow(*values, color), canonical


def single_argument_filter(name, argument):
    """Get ``(value, canonical)`` for a single-argument filter, or ``None``."""
    value = FILTER_ARGUMENTS[name](argument)
    if _is_finite(value):
        return value, f'{name}({argument.strip()})'


def parse_filter(string):
    """Parse a filter shorthand.

    Return a :class:`ParsedFilter`, or ``None`` when no filter function is
    valid. ``filters`` is a read-only mapping, empty for the ``none``
    keyword.

    """
    if not isinstance(string, str):
        return
    if string.strip() == 'none':
        return ParsedFilter(types.MappingProxyType({}), 'none')

    filters, canonical = {}, []
    for token in tokenize(string):
        if token.type != 'function':
            continue
        name = token.lower_name
        argument = tinycss2.serialize(token.arguments)
        if name == 'drop-shadow':
            result = drop_shadow(argument)
        elif name in FILTER_ARGUMENTS:
            result = single_argument_filter(name, argument)
        else:
            continue
        if result is not None:
            filters[name], serialized = result
            canonical.append(serialized)

    if canonical:
        return ParsedFilter(
            types.MappingProxyType(filters), ' '.join(canonical))
