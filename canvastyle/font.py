"""Parse the ``font`` shorthand.

https://www.w3.org/TR/css-fonts-3/#font-prop

Style, variant, stretch and weight come first, in any order, followed by the
mandatory size with an optional line height, followed by the mandatory list
of families. Parsing steps return errors instead of raising them, the first
error is logged as a warning by :func:`parse_font` and ``None`` is cached for
the invalid string.

"""

import math

from tinycss2.serializer import serialize_string_value

from .cache import FONT_CACHE
from .logger import LOGGER
from .properties import INITIAL_VALUES, NO_FEATURES, FontFeatures, ParsedFont
from .tokens import (
    InvalidFont, InvalidNumericField, MalformedInput, MissingFontFamily,
    MissingSize, UnrecognizedToken, get_keyword, is_slash, parse_one_token,
    split_on_comma, split_on_whitespace, tokenize)
from .typography import FONT_SIZE_KEYWORDS, FONT_STRETCH_KEYWORDS, FONT_WEIGHTS
from .units import LENGTH_UNITS, parse_size, parse_weight, serialize_number

SMALL_CAPS_FEATURES = FontFeatures(('smcp', 'onum'), (), ())


def font_style(token):
    return get_keyword(token) in ('normal', 'italic', 'oblique')


def font_variant(token):
    return get_keyword(token) in ('normal', 'small-caps')


def font_stretch(token):
    return get_keyword(token) in FONT_STRETCH_KEYWORDS


def font_weight(token):
    if token.type == 'number' and token.int_value is not None:
        return 1 <= token.int_value <= 1000
    return get_keyword(token) in FONT_WEIGHTS


def font_size(token):
    if token.type == 'dimension' and token.lower_unit in LENGTH_UNITS:
        return token.value >= 0
    elif token.type == 'percentage':
        return token.value >= 0
    return get_keyword(token) in FONT_SIZE_KEYWORDS


# Rules are tried in this order, the first matching rule sets its field.
ATTRIBUTE_RULES = (
    ('style', font_style),
    ('variant', font_variant),
    ('stretch', font_stretch),
    ('weight', font_weight),
)


def _get_attribute(word):
    """Get the name of the field set by ``word``, or ``None``."""
    if len(word) == 1:
        for name, rule in ATTRIBUTE_RULES:
            if rule(word[0]):
                return name


def _get_value(token):
    keyword = get_keyword(token)
    return token.serialize() if keyword is None else keyword


def _resolve_line_height(line_height, size):
    if line_height[-1:].isdigit():
        line_height = f'{line_height}em'
    return parse_size(line_height, size)


def _resolve_numbers(fields, word):
    """Get ``(size, line_height, weight)`` from fields and size word."""
    size_token, *line_height_tokens = word
    if not line_height_tokens:
        line_height = INITIAL_VALUES['line_height']
    elif len(line_height_tokens) == 2 and is_slash(line_height_tokens[0]):
        line_height = line_height_tokens[1].serialize()
    else:
        return UnrecognizedToken(
            f'unrecognized font attribute {_serialize_word(word)!r}')

    size = parse_size(size_token.serialize())
    line_height = _resolve_line_height(line_height, size)
    weight = parse_weight(fields['weight'])
    for name, value in (
            ('font size', size), ('line height', line_height),
            ('font weight', weight)):
        if not (math.isfinite(value) and value > 0):
            return InvalidNumericField(f'invalid {name} {value!r}')
    return size, line_height, weight


def _get_family(words):
    """Get the tuple of family names in ``words``."""
    tokens = [token for word in words for token in word]
    family = []
    for part in split_on_comma(tokens):
        if len(part) == 1 and part[0].type == 'string':
            family.append(part[0].value)
        elif part:
            family.append(' '.join(
                token.value if token.type == 'ident' else token.serialize()
                for token in part))
    return tuple(name for name in family if name)


def _serialize_word(word):
    return ''.join(token.serialize() for token in word)


def _serialize_family(name):
    # Only names read back as a single identifier are left unquoted.
    token = parse_one_token(name)
    if token is not None and token.type == 'ident' and token.value == name:
        return name
    return f'"{serialize_string_value(name)}"'


def serialize_font(style, variant, weight, stretch, size, line_height, family):
    """Get the canonical font shorthand string.

    Keywords equal to a previous one are omitted.

    """
    return ' '.join(filter(None, (
        style,
        variant != style and variant,
        weight not in (variant, style) and str(weight),
        stretch not in (variant, style, weight) and stretch,
        f'{serialize_number(size)}px/{serialize_number(line_height)}px',
        ', '.join(_serialize_family(name) for name in family),
    )))


def _parse_font(string):
    """Get a :class:`ParsedFont` or an :class:`InvalidFont` error."""
    if not isinstance(string, str):
        return MalformedInput('font argument must be a string')
    if not string:
        return MalformedInput('cannot parse an empty string')

    fields = {
        'style': INITIAL_VALUES['font_style'],
        'variant': INITIAL_VALUES['font_variant'],
        'weight': INITIAL_VALUES['font_weight'],
        'stretch': INITIAL_VALUES['font_stretch'],
    }
    words = split_on_whitespace(tokenize(string))
    for i, word in enumerate(words):
        if (name := _get_attribute(word)) is not None:
            fields[name] = _get_value(word[0])
            continue
        if not font_size(word[0]):
            return UnrecognizedToken(
                f'unrecognized font attribute {_serialize_word(word)!r}')

        numbers = _resolve_numbers(fields, word)
        if isinstance(numbers, InvalidFont):
            return numbers
        size, line_height, weight = numbers

        family = _get_family(words[i + 1:])
        if not family:
            return MissingFontFamily('expected at least one font family')

        style, variant, stretch = (
            fields['style'], fields['variant'], fields['stretch'])
        features = (
            SMALL_CAPS_FEATURES if variant == 'small-caps' else NO_FEATURES)
        canonical = serialize_font(
            style, variant, weight, stretch, size, line_height, family)
        return ParsedFont(
            style=style, variant=variant, weight=weight, stretch=stretch,
            size=size, line_height=line_height, family=family,
            features=features, canonical=canonical)

    return MissingSize('font size not provided')


def decode_font(string):
    """Parse a font shorthand without cache, log a warning on error."""
    font = _parse_font(string)
    if isinstance(font, InvalidFont):
        LOGGER.warning('Ignored font %r, %s.', string, font)
        return None
    return font


def parse_font(string):
    """Parse a font shorthand.

    Return a :class:`ParsedFont`, or ``None`` if the string is invalid. A
    warning is logged the first time an invalid string is parsed.

    """
    return FONT_CACHE.get_or_set(string, decode_font)
