from __future__ import annotations

import pytest

from alphabet_and_permutation import Alphabet
from suites import load_suite
from utilities import read_config

# four-symbol test wheel set: reflector U, fixed F, movers X (notch B) and Y (notch A)
SMALL_CONFIG = """\
ABCD
4 2
 U R      (AB) (CD)
 F N      (ABC)
 X MB     (ABCD)
 Y MA     (AC)
"""


@pytest.fixture
def alpha() -> Alphabet:
    return Alphabet()


@pytest.fixture
def abcd() -> Alphabet:
    return Alphabet("ABCD")


@pytest.fixture
def m3():
    return load_suite("M3")


@pytest.fixture
def m4():
    return load_suite("M4")


@pytest.fixture
def small():
    return read_config(SMALL_CONFIG)
