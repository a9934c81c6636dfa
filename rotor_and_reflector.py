# rotor_and_reflector.py
from __future__ import annotations

from enum import Enum

from alphabet_and_permutation import Alphabet, Permutation
from debug import Debug
from errors import ConfigurationError


class RotorKind(Enum):
    REFLECTOR = "R"
    FIXED = "N"
    MOVING = "M"


class Rotor:
    """A wheel wired by *permutation*, turned *setting* steps from zero.

    The kind is one of a closed set: reflectors and fixed wheels never
    move, moving wheels step on demand and carry notches. Build them with
    :meth:`reflector`, :meth:`fixed` or :meth:`moving`.
    """

    def __init__(
        self,
        name: str,
        permutation: Permutation,
        kind: RotorKind = RotorKind.FIXED,
        notches: str = "",
        *,
        debug: Debug | None = None,
    ) -> None:
        self.name = name
        self.permutation = permutation
        self.kind = kind
        self._notches = notches
        self.setting = 0
        self.debug = debug if debug is not None else Debug()

    # ── constructors ─────────────────────────────────────────────
    @classmethod
    def reflector(cls, name: str, perm: Permutation, **kw) -> "Rotor":
        if not perm.derangement():
            raise ConfigurationError(f"Reflector {name} must not map a symbol to itself")
        return cls(name, perm, RotorKind.REFLECTOR, **kw)

    @classmethod
    def fixed(cls, name: str, perm: Permutation, **kw) -> "Rotor":
        return cls(name, perm, RotorKind.FIXED, **kw)

    @classmethod
    def moving(cls, name: str, perm: Permutation, notches: str, **kw) -> "Rotor":
        if not notches:
            raise ConfigurationError(f"Moving rotor {name} needs at least one notch")
        bad = [c for c in notches if c not in perm.alphabet]
        if bad:
            raise ConfigurationError(f"Notch {bad[0]!r} of rotor {name} not in alphabet")
        return cls(name, perm, RotorKind.MOVING, notches, **kw)

    # ── variant behaviour ────────────────────────────────────────
    def rotates(self) -> bool:
        if self.kind is RotorKind.MOVING:
            return True
        if self.kind in (RotorKind.FIXED, RotorKind.REFLECTOR):
            return False
        raise AssertionError(self.kind)

    def reflecting(self) -> bool:
        if self.kind is RotorKind.REFLECTOR:
            return True
        if self.kind in (RotorKind.FIXED, RotorKind.MOVING):
            return False
        raise AssertionError(self.kind)

    def notches(self) -> str:
        if self.kind is RotorKind.MOVING:
            return self._notches
        if self.kind in (RotorKind.FIXED, RotorKind.REFLECTOR):
            return ""
        raise AssertionError(self.kind)

    def advance(self) -> None:
        """Step one position if I am a moving rotor."""
        if self.kind is RotorKind.MOVING:
            self.setting = self.permutation.wrap(self.setting + 1)
            self.debug.log("rotor", f"{self.name} -> {self.window()}")

    # ── position ─────────────────────────────────────────────────
    @property
    def alphabet(self) -> Alphabet:
        return self.permutation.alphabet

    def size(self) -> int:
        return self.permutation.size()

    def set(self, posn: int | str) -> None:
        if isinstance(posn, str):
            self.setting = self.alphabet.to_index(posn)
        else:
            self.setting = self.permutation.wrap(posn)

    def window(self) -> str:
        """Letter currently showing in the rotor's window."""
        return self.alphabet.to_char(self.setting)

    def at_notch(self) -> bool:
        return self.window() in self.notches()

    # ── signal paths ─────────────────────────────────────────────
    def convert_forward(self, p: int) -> int:
        mapped = self.permutation.permute(p + self.setting)
        return self.permutation.wrap(mapped - self.setting)

    def convert_backward(self, e: int) -> int:
        mapped = self.permutation.invert(e + self.setting)
        return self.permutation.wrap(mapped - self.setting)

    # ── niceties ─────────────────────────────────────────────────
    def __repr__(self) -> str:
        return f"<Rotor {self.name} {self.kind.name} pos={self.setting}>"
