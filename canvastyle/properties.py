"""Initial values and parsed value types of the supported shorthands."""

import collections

INITIAL_VALUES = {
    # CSS Fonts 3: https://www.w3.org/TR/css-fonts-3/#font-prop
    'font_style': 'normal',
    'font_variant': 'normal',
    'font_weight': 'normal',
    'font_stretch': 'normal',
    'font_size': 16,  # base size in pixels for relative units, aka 1rem
    'line_height': '1.2',  # unitless, relative to font size
    'font_family': ('serif',),  # depends on user agent
}

#: OpenType features set by a font or a font-variant shorthand.
#:
#: ``on`` and ``off`` are tuples of tags to enable and disable,
#: ``settings`` is a tuple of ``(tag, value)`` couples for features
#: taking an integer parameter.
FontFeatures = collections.namedtuple(
    'FontFeatures', ['on', 'off', 'settings'])

NO_FEATURES = FontFeatures((), (), ())

ParsedFont = collections.namedtuple('ParsedFont', [
    'style', 'variant', 'weight', 'stretch', 'size', 'line_height', 'family',
    'features', 'canonical'])

ParsedVariant = collections.namedtuple(
    'ParsedVariant', ['variant', 'features'])

NORMAL_VARIANT = ParsedVariant('normal', NO_FEATURES)

DropShadow = collections.namedtuple(
    'DropShadow', ['offset_x', 'offset_y', 'blur', 'color'])

ParsedFilter = collections.namedtuple('ParsedFilter', ['filters', 'canonical'])
