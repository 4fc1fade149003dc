"""Test the caches of parsed values."""

import threading

from canvastyle import clear_caches, parse_font, parse_variant
from canvastyle.cache import FONT_CACHE, VARIANT_CACHE, ResultCache, cache_key
from canvastyle.logger import LOGGER, CallbackHandler


def test_cache_key():
    assert cache_key('12px serif') == '12px serif'
    assert cache_key(12) == ('int', '12')
    assert cache_key(12) != cache_key('12')
    assert cache_key(['a']) == ('list', "['a']")


def test_get_or_set():
    calls = []

    def function(value):
        calls.append(value)
        return value.upper() if value else None

    cache = ResultCache('test')
    assert cache.get_or_set('a', function) == 'A'
    assert cache.get_or_set('a', function) == 'A'
    assert cache.get_or_set('', function) is None
    assert cache.get_or_set('', function) is None
    assert calls == ['a', '']
    assert 'a' in cache
    assert 'b' not in cache
    assert len(cache) == 2
    assert repr(cache) == "<ResultCache 'test' (2 values)>"

    cache.clear()
    assert len(cache) == 0
    assert cache.get_or_set('a', function) == 'A'
    assert calls == ['a', '', 'a']


def test_get_or_set_threads():
    calls = []
    barrier = threading.Barrier(8)

    def function(value):
        calls.append(value)
        return object()

    cache = ResultCache('test')
    results = []

    def worker():
        barrier.wait()
        results.append(cache.get_or_set('key', function))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert calls == ['key']
    assert len(results) == 8
    assert all(result is results[0] for result in results)


def test_get_or_set_reentrant():
    cache = ResultCache('test')

    def function(value):
        if value == 'inner':
            return value
        return cache.get_or_set('inner', function) * 2

    assert cache.get_or_set('outer', function) == 'innerinner'
    assert len(cache) == 2


def test_parse_font_in_log_handler():
    fonts = []
    handler = CallbackHandler(
        lambda record: fonts.append(parse_font('10px serif')))
    LOGGER.addHandler(handler)
    try:
        assert parse_font('10px') is None
    finally:
        LOGGER.removeHandler(handler)
    assert len(fonts) == 1
    assert fonts[0].size == 10


def test_clear_caches():
    parse_font('12px serif')
    parse_variant('small-caps')
    assert len(FONT_CACHE) == len(VARIANT_CACHE) == 1
    clear_caches()
    assert len(FONT_CACHE) == len(VARIANT_CACHE) == 0
