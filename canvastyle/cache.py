"""Caches of parsed values.

Font and font-variant shorthands are parsed once per distinct input. The
caches are created at import time, live as long as the process and are never
evicted: canvas-like APIs set the same few values again and again. Call
:func:`clear_caches` to empty them.

"""

import threading


def cache_key(value):
    """Get a hashable key for ``value``, never equal to a string's key."""
    if isinstance(value, str):
        return value
    return (type(value).__name__, repr(value))


class ResultCache:
    """Thread-safe mapping between raw inputs and their parsed values.

    ``None`` is a valid value, stored for inputs that can't be parsed.

    """
    def __init__(self, name):
        self.name = name
        self._values = {}
        self._lock = threading.RLock()

    def __contains__(self, value):
        with self._lock:
            return cache_key(value) in self._values

    def __len__(self):
        with self._lock:
            return len(self._values)

    def __repr__(self):
        return f'<{type(self).__name__} {self.name!r} ({len(self)} values)>'

    def get_or_set(self, value, function):
        """Get the cached result for ``value``, or store ``function(value)``.

        ``function`` is called with the lock held, at most once per key. It
        may use the same cache for other keys.

        """
        key = cache_key(value)
        with self._lock:
            if key not in self._values:
                self._values[key] = function(value)
            return self._values[key]

    def clear(self):
        with self._lock:
            self._values.clear()


FONT_CACHE = ResultCache('font')
VARIANT_CACHE = ResultCache('variant')


def clear_caches():
    """Empty the font and font-variant caches."""
    FONT_CACHE.clear()
    VARIANT_CACHE.clear()
