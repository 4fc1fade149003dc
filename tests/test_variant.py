"""Test the font-variant shorthand decoder."""

import pytest

from canvastyle import parse_variant
from canvastyle.cache import VARIANT_CACHE
from canvastyle.properties import NORMAL_VARIANT, FontFeatures

from .testing_utils import assert_no_logs


@assert_no_logs
@pytest.mark.parametrize('string', (
    'normal', 'NORMAL', '  normal ', '', '   ', 'unknown', 'small-capz',
    'styleset(a)', 'foo(3)', None, 42,
))
def test_variant_normal(string):
    variant = parse_variant(string)
    assert variant == NORMAL_VARIANT
    assert variant.variant == 'normal'
    assert variant.features.on == variant.features.off == ()


@assert_no_logs
def test_variant_small_caps():
    variant = parse_variant('small-caps')
    assert variant.variant == 'small-caps'
    assert 'smcp' in variant.features.on
    assert 'onum' in variant.features.on
    assert variant.features.off == ()


@assert_no_logs
@pytest.mark.parametrize('string, variant, features', (
    ('common-ligatures tabular-nums', 'common-ligatures tabular-nums',
     FontFeatures(('liga', 'clig', 'tnum'), (), ())),
    ('no-common-ligatures no-contextual', 'no-common-ligatures no-contextual',
     FontFeatures((), ('liga', 'clig', 'calt'), ())),
    ('all-small-caps small-caps', 'all-small-caps small-caps',
     FontFeatures(('c2sc', 'smcp', 'onum'), (), ())),
    ('Slashed-Zero ruby', 'slashed-zero ruby',
     FontFeatures(('zero', 'ruby'), (), ())),
    ('jis78 unknown full-width', 'jis78 full-width',
     FontFeatures(('jp78', 'fwid'), (), ())),
    ('historical-forms super', 'historical-forms super',
     FontFeatures(('hist', 'sups'), (), ())),
    ('small-caps normal', 'small-caps',
     FontFeatures(('smcp', 'onum'), (), ())),
))
def test_variant_keywords(string, variant, features):
    result = parse_variant(string)
    assert result.variant == variant
    assert result.features == features


@assert_no_logs
@pytest.mark.parametrize('string, variant, features', (
    ('styleset(3)', 'styleset(3)', FontFeatures(('ss03',), (), ())),
    ('styleset(12)', 'styleset(12)', FontFeatures(('ss12',), (), ())),
    ('styleset(150)', 'styleset(99)', FontFeatures(('ss99',), (), ())),
    ('character-variant(7)', 'character-variant(7)',
     FontFeatures(('cv07',), (), ())),
    ('swash(2)', 'swash(2)', FontFeatures((), (), (('swsh', 2),))),
    ('stylistic(12)', 'stylistic(12)', FontFeatures((), (), (('salt', 9),))),
    ('ornaments(0)', 'ornaments(0)', FontFeatures((), (), (('ornm', 0),))),
    ('annotation(1) swash(3) swash(4)', 'annotation(1) swash(3) swash(4)',
     FontFeatures((), (), (('nalt', 1), ('swsh', 4)))),
    ('styleset(-1) styleset(1.5) swash(1)', 'swash(1)',
     FontFeatures((), (), (('swsh', 1),))),
))
def test_variant_alternates(string, variant, features):
    result = parse_variant(string)
    assert result.variant == variant
    assert result.features == features


@assert_no_logs
def test_variant_keywords_before_alternates():
    result = parse_variant('styleset(1) small-caps swash(5) lining-nums')
    assert result.variant == 'small-caps lining-nums styleset(1) swash(5)'
    assert result.features == FontFeatures(
        ('smcp', 'onum', 'lnum', 'ss01'), (), (('swsh', 5),))


@assert_no_logs
def test_variant_cache():
    variant = parse_variant('small-caps')
    assert parse_variant('small-caps') is variant
    assert 'small-caps' in VARIANT_CACHE
    assert len(VARIANT_CACHE) == 1
