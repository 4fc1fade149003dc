"""Decode the ``font-variant`` shorthand into OpenType features.

https://www.w3.org/TR/css-fonts-4/#font-variant-prop

Unknown values are ignored, decoding never fails.

"""

from .cache import VARIANT_CACHE
from .properties import NORMAL_VARIANT, FontFeatures, ParsedVariant
from .tokens import get_keyword, remove_whitespace, tokenize
from .typography import VARIANT_ALTERNATES, VARIANT_FEATURES


def _append(tags, tag):
    if tag not in tags:
        tags.append(tag)


def _get_alternate(token):
    """Get ``(keyword, value)`` for ``keyword(<digits>)`` alternates."""
    if token.type != 'function' or token.lower_name not in VARIANT_ALTERNATES:
        return
    arguments = remove_whitespace(token.arguments)
    if len(arguments) == 1 and arguments[0].type == 'number':
        if arguments[0].representation.isdigit():
            return token.lower_name, max(0, min(99, arguments[0].int_value))


def decode_variant(string):
    """Decode a font-variant string, without cache."""
    if not isinstance(string, str) or string.strip().lower() in ('', 'normal'):
        return NORMAL_VARIANT

    tokens = remove_whitespace(tokenize(string))
    variants, on, off, settings = [], [], [], {}

    for token in tokens:
        keyword = get_keyword(token)
        if keyword not in VARIANT_FEATURES:
            continue
        for tag in VARIANT_FEATURES[keyword]:
            if tag.startswith('-'):
                _append(off, tag[1:])
            else:
                _append(on, tag)
        variants.append(keyword)

    for token in tokens:
        if (alternate := _get_alternate(token)) is None:
            continue
        keyword, value = alternate
        pattern = VARIANT_ALTERNATES[keyword]
        pattern = pattern.replace('##', f'{value:02}')
        pattern = pattern.replace('#', str(min(9, value)))
        tag, *parameter = pattern.split()
        if parameter:
            settings[tag] = int(parameter[0])
        else:
            _append(on, tag)
        variants.append(f'{keyword}({value})')

    if not variants:
        return NORMAL_VARIANT
    features = FontFeatures(tuple(on), tuple(off), tuple(settings.items()))
    return ParsedVariant(' '.join(variants), features)


def parse_variant(string):
    """Parse a font-variant shorthand.

    Return a :class:`ParsedVariant`, whose ``variant`` is the space-separated
    list of the recognized values, or ``'normal'`` when no value is
    recognized.

    """
    return VARIANT_CACHE.get_or_set(string, decode_variant)
