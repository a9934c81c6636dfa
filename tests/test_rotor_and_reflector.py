from __future__ import annotations

import pytest

from alphabet_and_permutation import Permutation
from errors import ConfigurationError, UnknownCharacterError
from rotor_and_reflector import Rotor, RotorKind

ROTOR_I = "(AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ)"
REFLECTOR_B = "(AY) (BR) (CU) (DH) (EQ) (FS) (GL) (IP) (JX) (KN) (MO) (TZ) (VW)"


@pytest.fixture
def rotor_i(alpha):
    return Rotor.moving("I", Permutation(ROTOR_I, alpha), "Q")


@pytest.fixture
def reflector_b(alpha):
    return Rotor.reflector("B", Permutation(REFLECTOR_B, alpha))


def test_variant_table(alpha, rotor_i, reflector_b):
    beta = Rotor.fixed("Beta", Permutation("(ALBEVFCYODJWUGNMQTZSKPR) (HIX)", alpha))

    assert (reflector_b.rotates(), reflector_b.reflecting(), reflector_b.notches()) == (False, True, "")
    assert (beta.rotates(), beta.reflecting(), beta.notches()) == (False, False, "")
    assert (rotor_i.rotates(), rotor_i.reflecting(), rotor_i.notches()) == (True, False, "Q")
    assert rotor_i.kind is RotorKind.MOVING


def test_convert_forward_applies_offset(rotor_i):
    rotor_i.set("A")
    assert rotor_i.convert_forward(0) == 4          # A -> E
    rotor_i.set("B")
    assert rotor_i.convert_forward(0) == 9          # K shifted back one
    assert rotor_i.convert_backward(9) == 0


def test_forward_and_backward_are_inverse_at_every_setting(rotor_i):
    for s in range(rotor_i.size()):
        rotor_i.set(s)
        for p in range(rotor_i.size()):
            assert rotor_i.convert_backward(rotor_i.convert_forward(p)) == p
            assert rotor_i.convert_forward(rotor_i.convert_backward(p)) == p


def test_set_wraps_and_accepts_characters(rotor_i):
    rotor_i.set(27)
    assert rotor_i.setting == 1
    rotor_i.set(-1)
    assert rotor_i.setting == 25
    rotor_i.set("Q")
    assert rotor_i.setting == 16
    assert rotor_i.window() == "Q"


def test_set_rejects_unknown_character(rotor_i):
    with pytest.raises(UnknownCharacterError):
        rotor_i.set("?")


def test_at_notch(rotor_i, reflector_b):
    rotor_i.set("P")
    assert not rotor_i.at_notch()
    rotor_i.set("Q")
    assert rotor_i.at_notch()
    for s in range(26):
        reflector_b.set(s)
        assert not reflector_b.at_notch()


def test_advance_moves_only_moving_rotors(alpha, rotor_i, reflector_b):
    rotor_i.set("Z")
    rotor_i.advance()
    assert rotor_i.window() == "A"

    fixed = Rotor.fixed("F", Permutation("(AB)", alpha))
    fixed.set(3)
    fixed.advance()
    reflector_b.advance()
    assert fixed.setting == 3
    assert reflector_b.setting == 0


def test_reflector_must_be_a_derangement(alpha):
    with pytest.raises(ConfigurationError):
        Rotor.reflector("U", Permutation("(AB)", alpha))


@pytest.mark.parametrize("notches", ["", "?"])
def test_moving_rotor_needs_valid_notches(alpha, notches):
    with pytest.raises(ConfigurationError):
        Rotor.moving("X", Permutation("(AB)", alpha), notches)


def test_multiple_notches(alpha):
    vi = Rotor.moving("VI", Permutation("(AJQDVLEOZWIYTS) (CGMNHFUX) (BPRK)", alpha), "ZM")
    hits = []
    for ch in alpha:
        vi.set(ch)
        if vi.at_notch():
            hits.append(ch)
    assert hits == ["M", "Z"]
