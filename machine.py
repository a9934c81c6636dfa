# machine.py  ─────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Mapping, Sequence

from alphabet_and_permutation import Alphabet, Permutation
from debug import Debug
from errors import (
    ConfigurationError,
    InvalidSettingError,
    StructuralError,
    UnknownRotorError,
)
from rotor_and_reflector import Rotor


class Machine:
    """A rotor machine with *num_rotors* slots and *num_pawls* pawls.

    Slot 0 holds the reflector and slot ``num_rotors - 1`` the fast rotor.
    *all_rotors* is the caller's pool of wheels keyed by name; the machine
    only keeps references to the ones currently inserted.
    """

    def __init__(
        self,
        alphabet: Alphabet,
        num_rotors: int,
        num_pawls: int,
        all_rotors: Mapping[str, Rotor],
        *,
        debug: Debug | None = None,
    ) -> None:
        if num_rotors < 2:
            raise ConfigurationError("Machine needs at least two rotor slots")
        if not (0 <= num_pawls < num_rotors):
            raise ConfigurationError(
                f"Pawl count {num_pawls} must be in 0–{num_rotors - 1}"
            )

        self.alphabet = alphabet
        self.num_rotors = num_rotors
        self.num_pawls = num_pawls
        self.all_rotors = all_rotors
        self.debug = debug if debug is not None else Debug()

        self.rotors: list[Rotor] = []
        self._plugboard = Permutation("", alphabet)

    # ── rotor slots ─────────────────────────────────────────────

    def get_rotor(self, k: int) -> Rotor:
        return self.rotors[k]

    def insert_rotors(self, names: Sequence[str]) -> None:
        """Fill my slots with the pool rotors called *names* (reflector first)."""
        if len(names) != self.num_rotors:
            raise StructuralError(
                f"Expected {self.num_rotors} rotors, got {len(names)}"
            )
        chosen = []
        for name in names:
            try:
                chosen.append(self.all_rotors[name])
            except KeyError:
                raise UnknownRotorError(f"No such rotor: {name!r}")
        self.rotors = chosen

    def set_rotors(self, setting: str) -> None:
        """Rotate slots 1‥N-1 to the window letters in *setting*."""
        if len(setting) != self.num_rotors - 1:
            raise InvalidSettingError(
                f"Setting {setting!r} must have {self.num_rotors - 1} symbols"
            )
        for ch in setting:
            if ch not in self.alphabet:
                raise InvalidSettingError(f"Setting symbol {ch!r} not in alphabet")
        if len(self.rotors) != self.num_rotors:
            raise StructuralError("Rotors must be inserted before they are set")

        for rotor, letter in zip(self.rotors[1:], setting):
            rotor.set(letter)

    def positions(self) -> str:
        """Window letters of every non-reflector slot, left to right."""
        return "".join(r.window() for r in self.rotors[1:])

    # ── plugboard ───────────────────────────────────────────────

    @property
    def plugboard(self) -> Permutation:
        return self._plugboard

    def set_plugboard(self, plugboard: Permutation) -> None:
        self._plugboard = plugboard

    # ── stepping logic  ─────────────────────────────────────────

    def _advance_rotors(self) -> None:
        """Advance rotors one key-press, double-stepping where a notch says so."""
        n = self.num_rotors

        # decide which rotors step before any of them moves
        steps = [False] * n
        for i in range(1, n - 1):
            if self.rotors[i].rotates() and self.rotors[i + 1].at_notch():
                steps[i] = steps[i + 1] = True
        steps[n - 1] = True

        for rotor, step in zip(self.rotors[1:], steps[1:]):
            if step and rotor.rotates():
                rotor.advance()

    # ── encipher one symbol  ────────────────────────────────────

    def _apply_rotors(self, c: int) -> int:
        for rotor in reversed(self.rotors):
            c = rotor.convert_forward(c)
        for rotor in self.rotors[1:]:
            c = rotor.convert_backward(c)
        return c

    def convert(self, c: int) -> int:
        """Encipher signal *c* after first stepping the rotors."""
        if len(self.rotors) != self.num_rotors:
            raise StructuralError("No rotors inserted")
        self._advance_rotors()
        self.debug.log("stepping", f"[{self.positions()}]")

        plugged = self._plugboard.permute(c)
        signal = self._apply_rotors(plugged)
        out = self._plugboard.permute(signal)

        if self.debug.active("encipher"):
            to_char = self.alphabet.to_char
            self.debug.log(
                "encipher",
                f"{to_char(c)} -> {to_char(plugged)} -> {to_char(signal)} -> {to_char(out)}",
            )
        return out

    def convert_message(self, msg: str) -> str:
        """Encipher every symbol of *msg*, carrying rotor state across them."""
        out: list[str] = []
        for ch in msg:
            out.append(self.alphabet.to_char(self.convert(self.alphabet.to_index(ch))))
        return "".join(out)

    def __repr__(self) -> str:
        names = " ".join(r.name for r in self.rotors) or "empty"
        return f"<Machine {names} [{self.positions()}]>"
