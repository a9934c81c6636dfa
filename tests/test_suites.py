from __future__ import annotations

import pytest

from alphabet_and_permutation import Alphabet, Permutation
from errors import ConfigurationError
from suites import SUITES, load_suite

# published wheel wirings: position i of the alphabet maps to wiring[i]
WIRINGS = {
    "I": "EKMFLGDQVZNTOWYHXUSPAIBRCJ",
    "II": "AJDKSIRUXBLHWTMCQGZNPYFVOE",
    "III": "BDFHJLCPRTXVZNYEIWGAKMUSQO",
    "IV": "ESOVPZJAYQUIRHXLNFTGKDCMWB",
    "V": "VZBRGITYUPSDNHLXAWMJQOFECK",
    "VI": "JPGVOUMFYQBENHZRDKASXLICTW",
    "VII": "NZJHGRCXMYSWBOUFAIVLPEKQDT",
    "VIII": "FKQHTLXOCBJSPDZRAMEWNIUYGV",
}


def _wiring(perm: Permutation) -> str:
    return "".join(perm.permute_char(ch) for ch in perm.alphabet)


@pytest.mark.parametrize("name,wiring", sorted(WIRINGS.items()))
def test_m3_wheels_match_published_wiring(m3, name, wiring):
    assert _wiring(m3.all_rotors[name].permutation) == wiring


def test_m3_reflectors(m3):
    assert _wiring(m3.all_rotors["B"].permutation) == "YRUHQSLDPXNGOKMIEBFZCWVJAT"
    assert _wiring(m3.all_rotors["C"].permutation) == "FVPJIAOYEDRZXWGCTKUQSBNMHL"


def test_m4_thin_reflectors_and_greek_wheels(m4):
    assert _wiring(m4.all_rotors["B"].permutation) == "ENKQAUYWJICOPBLMDXZVFTHRGS"
    assert _wiring(m4.all_rotors["Beta"].permutation) == "LEYJVCNIXWPBQMDRTAKZGFUHOS"
    assert _wiring(m4.all_rotors["Gamma"].permutation) == "FSOKANUERHMBTIYCWLQPZXVGJD"
    assert not m4.all_rotors["Beta"].rotates()


def test_notches(m3):
    notches = {name: m3.all_rotors[name].notches() for name in WIRINGS}
    assert notches == {
        "I": "Q", "II": "E", "III": "V", "IV": "J", "V": "Z",
        "VI": "ZM", "VII": "ZM", "VIII": "ZM",
    }


def test_suite_shapes():
    m3, m4 = load_suite("m3"), load_suite("M4")
    assert (m3.num_rotors, m3.num_pawls) == (4, 3)
    assert (m4.num_rotors, m4.num_pawls) == (5, 3)
    assert m3.alphabet == m4.alphabet == Alphabet()
    assert set(SUITES) == {"M3", "M4"}


def test_each_load_is_independent():
    a, b = load_suite("M3"), load_suite("M3")
    assert a.all_rotors["I"] is not b.all_rotors["I"]


def test_unknown_suite():
    with pytest.raises(ConfigurationError):
        load_suite("M9")
