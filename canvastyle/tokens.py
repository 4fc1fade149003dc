"""CSS tokens helpers and errors."""

import tinycss2


class InvalidFont(ValueError):  # noqa: N818
    """Invalid or unsupported font shorthand."""


class MalformedInput(InvalidFont):  # noqa: N818
    """Font shorthand that is not a string, or an empty string."""


class UnrecognizedToken(InvalidFont):  # noqa: N818
    """Font attribute matching no known grammar."""


class InvalidNumericField(InvalidFont):  # noqa: N818
    """Font size, line height or weight that can't be resolved."""


class MissingFontFamily(InvalidFont):  # noqa: N818
    """Font shorthand without font family after its size."""


class MissingSize(InvalidFont):  # noqa: N818
    """Font shorthand without font size."""


def tokenize(string):
    """Get the list of component values in ``string``, comments excluded."""
    return tinycss2.parse_component_value_list(string, skip_comments=True)


def parse_one_token(string):
    """Get the only component value in ``string``, or ``None``."""
    if not isinstance(string, str):
        return
    token = tinycss2.parse_one_component_value(string, skip_comments=True)
    if token.type != 'error':
        return token


def is_slash(token):
    return token.type == 'literal' and token.value == '/'


def split_on_comma(tokens):
    """Split a list of tokens on commas, ie ``LiteralToken(',')``.

    Only "top-level" comma tokens are splitting points, not commas inside a
    function or blocks.

    """
    parts = []
    this_part = []
    for token in tokens:
        if token.type == 'literal' and token.value == ',':
            parts.append(this_part)
            this_part = []
        else:
            this_part.append(token)
    parts.append(this_part)
    return tuple(parts)


def split_on_whitespace(tokens):
    """Split a list of tokens into lists of tokens separated by whitespace.

    A slash and the tokens around it always belong to the same word, even when
    whitespace surrounds the slash, so that ``12px / 1.5`` is one word.

    """
    words = []
    joined = True
    for token in tokens:
        if token.type == 'whitespace':
            joined = False
        elif words and (is_slash(token) or is_slash(words[-1][-1])):
            words[-1].append(token)
        elif words and joined:
            words[-1].append(token)
        else:
            words.append([token])
            joined = True
    return words


def remove_whitespace(tokens):
    """Remove any top-level whitespace in a token list."""
    return tuple(token for token in tokens if token.type != 'whitespace')


def get_keyword(token):
    """If ``token`` is a keyword, return its lowercase name.

    Otherwise return ``None``.

    """
    if token.type == 'ident':
        return token.lower_value
