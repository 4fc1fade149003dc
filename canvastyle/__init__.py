"""Parse CSS font, font-variant and filter shorthands for canvas-like APIs.

The public API is what is accessible from this "root" package without
importing sub-modules.

"""

from .cache import clear_caches
from .filters import parse_filter
from .font import parse_font
from .logger import LOGGER
from .properties import (
    DropShadow, FontFeatures, ParsedFilter, ParsedFont, ParsedVariant)
from .tokens import (
    InvalidFont, InvalidNumericField, MalformedInput, MissingFontFamily,
    MissingSize, UnrecognizedToken)
from .units import parse_angle, parse_percentage, parse_size, parse_weight
from .variant import parse_variant

VERSION = __version__ = '1.0'

__all__ = [
    'LOGGER', 'VERSION', 'DropShadow', 'FontFeatures', 'InvalidFont',
    'InvalidNumericField', 'MalformedInput', 'MissingFontFamily',
    'MissingSize', 'ParsedFilter', 'ParsedFont', 'ParsedVariant',
    'UnrecognizedToken', '__version__', 'clear_caches', 'parse_angle',
    'parse_filter', 'parse_font', 'parse_percentage', 'parse_size',
    'parse_variant', 'parse_weight']
