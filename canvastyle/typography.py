"""Keyword tables for fonts and OpenType features."""

# https://www.w3.org/TR/css-fonts-3/#font-weight-prop
# Relative weights are resolved against the initial 400 weight.
FONT_WEIGHTS = {
    'lighter': 300,
    'normal': 400,
    'bold': 700,
    'bolder': 800,
}

# Ratio of the base font size for <absolute-size> and <relative-size>
# keywords, scaling factors given in CSS3:
# https://www.w3.org/TR/css-fonts-3/#font-size-prop
FONT_SIZE_KEYWORDS = {
    'xx-small': 3 / 5,
    'x-small': 3 / 4,
    'small': 8 / 9,
    'smaller': 8 / 9,
    'medium': 1,
    'normal': 1,
    'large': 6 / 5,
    'larger': 6 / 5,
    'x-large': 3 / 2,
    'xx-large': 2,
}

# https://www.w3.org/TR/css-fonts-3/#font-stretch-prop
FONT_STRETCH_KEYWORDS = (
    'ultra-condensed', 'extra-condensed', 'condensed', 'semi-condensed',
    'normal',
    'semi-expanded', 'expanded', 'extra-expanded', 'ultra-expanded')

# OpenType tags for font-variant keywords, a leading "-" disables the tag.
# https://www.w3.org/TR/css-fonts-3/#font-variant-prop
VARIANT_FEATURES = {
    # font-variant-ligatures
    'common-ligatures': ['liga', 'clig'],
    'no-common-ligatures': ['-liga', '-clig'],
    'discretionary-ligatures': ['dlig'],
    'no-discretionary-ligatures': ['-dlig'],
    'historical-ligatures': ['hlig'],
    'no-historical-ligatures': ['-hlig'],
    'contextual': ['calt'],
    'no-contextual': ['-calt'],

    # font-variant-position
    'super': ['sups'],
    'sub': ['subs'],

    # font-variant-caps
    'small-caps': ['smcp', 'onum'],
    'all-small-caps': ['c2sc', 'smcp'],
    'petite-caps': ['pcap'],
    'all-petite-caps': ['c2pc', 'pcap'],
    'unicase': ['unic'],
    'titling-caps': ['titl'],

    # font-variant-numeric
    'lining-nums': ['lnum'],
    'oldstyle-nums': ['onum'],
    'proportional-nums': ['pnum'],
    'tabular-nums': ['tnum'],
    'diagonal-fractions': ['frac'],
    'stacked-fractions': ['afrc'],
    'ordinal': ['ordn'],
    'slashed-zero': ['zero'],

    # font-variant-east-asian
    'jis78': ['jp78'],
    'jis83': ['jp83'],
    'jis90': ['jp90'],
    'jis04': ['jp04'],
    'simplified': ['smpl'],
    'traditional': ['trad'],
    'full-width': ['fwid'],
    'proportional-width': ['pwid'],
    'ruby': ['ruby'],

    # font-variant-alternates, without parameter
    'historical-forms': ['hist'],
}

# Patterns for parameterized font-variant-alternates functions. "##" is
# replaced by the zero-padded two-digit value, "#" by the value capped to 9.
# https://www.w3.org/TR/css-fonts-4/#font-variant-alternates-prop
VARIANT_ALTERNATES = {
    'stylistic': 'salt #',
    'styleset': 'ss##',
    'character-variant': 'cv##',
    'swash': 'swsh #',
    'ornaments': 'ornm #',
    'annotation': 'nalt #',
}
