# alphabet_and_permutation.py
from __future__ import annotations

from collections.abc import Iterator

from debug import Debug
from errors import (
    ConfigurationError,
    MalformedCycleError,
    OutOfRangeError,
    UnknownCharacterError,
)

Alpha26 = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_RESERVED = set("()*")


# ── Alphabet ──────────────────────────────────────────────────────
class Alphabet:
    """Ordered, duplicate-free set of symbols; index = position."""

    def __init__(self, chars: str = Alpha26) -> None:
        if not chars:
            raise ConfigurationError("Alphabet must contain at least one symbol")
        seen: set[str] = set()
        for ch in chars:
            if ch in seen:
                raise ConfigurationError(f"Character {ch!r} duplicated in alphabet")
            if ch.isspace() or ch in _RESERVED:
                raise ConfigurationError(f"Character {ch!r} cannot be in an alphabet")
            seen.add(ch)

        self.chars: str = chars
        self.alpha_to_index: dict[str, int] = {
            ch: i for i, ch in enumerate(chars)
        }

    def size(self) -> int:
        return len(self.chars)

    def contains(self, ch: str) -> bool:
        return ch in self.alpha_to_index

    # letter → integer signal
    def to_index(self, ch: str) -> int:
        try:
            return self.alpha_to_index[ch]
        except KeyError:
            raise UnknownCharacterError(
                f"Invalid character {ch!r} for current alphabet."
            )

    # integer signal → letter
    def to_char(self, index: int) -> str:
        if not (0 <= index < len(self.chars)):
            hi = len(self.chars) - 1
            raise OutOfRangeError(f"Signal {index} out of range 0–{hi}")
        return self.chars[index]

    __len__ = size
    __contains__ = contains

    def __iter__(self) -> Iterator[str]:
        return iter(self.chars)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Alphabet) and other.chars == self.chars

    def __hash__(self) -> int:
        return hash(self.chars)

    def __repr__(self) -> str:
        return f"<Alphabet {self.chars}>"


# ── cycle notation ────────────────────────────────────────────────
def parse_cycles(cycles: str) -> list[str]:
    """Split "(ABC) (DE)" into ["ABC", "DE"]; whitespace is ignored."""
    groups: list[str] = []
    current: list[str] | None = None

    for ch in cycles:
        if ch.isspace():
            continue
        if ch == "(":
            if current is not None:
                raise MalformedCycleError(f"Nested '(' in {cycles!r}")
            current = []
        elif ch == ")":
            if current is None:
                raise MalformedCycleError(f"Unbalanced ')' in {cycles!r}")
            if not current:
                raise MalformedCycleError(f"Empty cycle in {cycles!r}")
            groups.append("".join(current))
            current = None
        elif current is None:
            raise MalformedCycleError(f"Symbol {ch!r} outside any cycle in {cycles!r}")
        else:
            current.append(ch)

    if current is not None:
        raise MalformedCycleError(f"Incomplete cycle in {cycles!r}")
    return groups


# ── Permutation ───────────────────────────────────────────────────
class Permutation:
    """A bijection on the indices of *alphabet*, given in cycle notation.

    Symbols missing from every cycle map to themselves. Both directions are
    kept as integer tables so ``invert`` is always the exact inverse of
    ``permute``.
    """

    def __init__(
        self,
        cycles: str,
        alphabet: Alphabet,
        *,
        debug: Debug | None = None,
    ) -> None:
        self.alphabet: Alphabet = alphabet
        self.debug = debug if debug is not None else Debug()
        size = alphabet.size()

        self._fwd: list[int] = list(range(size))
        used: set[str] = set()

        for group in parse_cycles(cycles):
            for ch in group:
                if ch not in alphabet:
                    raise MalformedCycleError(f"Symbol {ch!r} not in alphabet")
                if ch in used:
                    raise MalformedCycleError(f"Symbol {ch!r} appears twice in {cycles!r}")
                used.add(ch)
            # each symbol maps to its successor, the last wraps to the first
            for a, b in zip(group, group[1:] + group[0]):
                self._fwd[alphabet.to_index(a)] = alphabet.to_index(b)

        self._rev: list[int] = [0] * size
        for i, j in enumerate(self._fwd):
            self._rev[j] = i

        if self.debug.active("permutation"):
            self.debug.log("permutation", f"{cycles!r} -> {self.cycles()!r}")

    @classmethod
    def from_wiring(cls, wiring: str, alphabet: Alphabet, **kw) -> "Permutation":
        """Build from a wiring string: symbol i of *alphabet* maps to wiring[i]."""
        if sorted(wiring) != sorted(alphabet.chars):
            raise ConfigurationError("wiring must be a permutation of alphabet")
        perm = cls("", alphabet, **kw)
        perm._fwd = [alphabet.to_index(c) for c in wiring]
        for i, j in enumerate(perm._fwd):
            perm._rev[j] = i
        return perm

    # ── index helpers ────────────────────────────────────────────
    def size(self) -> int:
        return len(self._fwd)

    def wrap(self, p: int) -> int:
        return p % self.size()

    def permute(self, p: int) -> int:
        return self._fwd[self.wrap(p)]

    def invert(self, c: int) -> int:
        return self._rev[self.wrap(c)]

    # ── character helpers ────────────────────────────────────────
    def permute_char(self, ch: str) -> str:
        return self.alphabet.to_char(self._fwd[self.alphabet.to_index(ch)])

    def invert_char(self, ch: str) -> str:
        return self.alphabet.to_char(self._rev[self.alphabet.to_index(ch)])

    # ── properties of the mapping ────────────────────────────────
    def derangement(self) -> bool:
        """True iff no index maps to itself."""
        return all(i != j for i, j in enumerate(self._fwd))

    def involution(self) -> bool:
        """True iff applying the mapping twice is the identity."""
        return all(self._fwd[j] == i for i, j in enumerate(self._fwd))

    def cycles(self) -> str:
        """Canonical cycle notation, fixed points omitted."""
        seen: set[int] = set()
        out: list[str] = []
        for start in range(self.size()):
            if start in seen or self._fwd[start] == start:
                continue
            group: list[str] = []
            i = start
            while i not in seen:
                seen.add(i)
                group.append(self.alphabet.to_char(i))
                i = self._fwd[i]
            out.append("(" + "".join(group) + ")")
        return " ".join(out)

    # nicety for debugging
    def __repr__(self) -> str:
        return f"<Permutation {self.cycles() or 'identity'}>"
