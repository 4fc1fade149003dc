"""Configuration for CanvaStyle tests.

Parsed fonts and variants are cached for the whole process, caches are
emptied before each test so that warnings are logged again.

"""

import pytest

from canvastyle import clear_caches


@pytest.fixture(autouse=True)
def empty_caches():
    clear_caches()
    yield
    clear_caches()
