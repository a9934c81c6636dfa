# utilities.py
from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Dict, List, Tuple

from alphabet_and_permutation import Alphabet, Permutation
from debug import Debug
from errors import ConfigurationError, EnigmaError, StructuralError, UnknownRotorError
from machine import Machine
from rotor_and_reflector import Rotor

BLOCK = 5

# ────────────────────────────────────────────────────────────────────────
#  0. Trivial helpers
# ────────────────────────────────────────────────────────────────────────


def _is_cycle(token: str) -> bool:
    return token.startswith("(")


def read_text(path: str | Path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError:
        raise EnigmaError(f"could not open {path}")


# ────────────────────────────────────────────────────────────────────────
#  1. Configuration: alphabet, slot counts and the wheel pool
# ────────────────────────────────────────────────────────────────────────


def make_rotor(
    name: str,
    kind: str,
    cycles: str,
    alphabet: Alphabet,
    debug: Debug | None = None,
) -> Rotor:
    """Build one wheel from its *kind* token: ``R``, ``N`` or ``M<notches>``."""
    perm = Permutation(cycles, alphabet, debug=debug)
    if kind == "R":
        return Rotor.reflector(name, perm, debug=debug)
    if kind == "N":
        return Rotor.fixed(name, perm, debug=debug)
    if kind.startswith("M"):
        return Rotor.moving(name, perm, kind[1:], debug=debug)
    raise ConfigurationError(f"bad rotor description: unknown type {kind!r} for {name}")


def read_rotors(tokens: List[str], alphabet: Alphabet, debug: Debug | None = None) -> Dict[str, Rotor]:
    """Consume ``name type (cycles)...`` groups until *tokens* runs out."""
    pool: Dict[str, Rotor] = {}
    pos = 0
    while pos < len(tokens):
        name = tokens[pos]
        if _is_cycle(name):
            raise ConfigurationError(f"bad rotor description: stray cycle {name!r}")
        if pos + 1 >= len(tokens) or _is_cycle(tokens[pos + 1]):
            raise ConfigurationError(f"bad rotor description: {name} has no type")
        kind = tokens[pos + 1]
        pos += 2

        groups: List[str] = []
        while pos < len(tokens) and _is_cycle(tokens[pos]):
            groups.append(tokens[pos])
            pos += 1

        if name in pool:
            raise ConfigurationError(f"Rotor {name} defined twice")
        pool[name] = make_rotor(name, kind, " ".join(groups), alphabet, debug)
    return pool


def read_config(text: str, *, debug: Debug | None = None) -> Machine:
    """Return a Machine built from configuration *text*.

    Line one is the alphabet, followed by the slot and pawl counts and the
    wheel descriptions; anything after the alphabet may wrap freely.
    """
    lines = text.splitlines()
    while lines and not lines[0].strip():
        lines.pop(0)
    if not lines:
        raise ConfigurationError("configuration file truncated")

    alphabet = Alphabet(lines[0].strip())
    tokens = " ".join(lines[1:]).split()
    if len(tokens) < 2:
        raise ConfigurationError("configuration file truncated")
    try:
        num_rotors, num_pawls = int(tokens[0]), int(tokens[1])
    except ValueError:
        raise ConfigurationError(f"Expected rotor and pawl counts, got {tokens[:2]}")

    pool = read_rotors(tokens[2:], alphabet, debug)
    if debug is not None:
        debug.log("config", f"{len(pool)} wheels over {alphabet.size()} symbols")
    return Machine(alphabet, num_rotors, num_pawls, pool, debug=debug)


def read_config_file(path: str | Path, *, debug: Debug | None = None) -> Machine:
    return read_config(read_text(path), debug=debug)


# ────────────────────────────────────────────────────────────────────────
#  2. Setting lines
# ────────────────────────────────────────────────────────────────────────


def parse_setting_line(line: str, num_rotors: int) -> Tuple[List[str], str, str]:
    """Split ``* B I II III AAA (AB)`` into names, window letters, plug cycles."""
    fields = line.lstrip()[1:].split()
    if len(fields) <= num_rotors:
        raise StructuralError("wrong number of rotors")
    names = fields[:num_rotors]
    setting = fields[num_rotors]
    plugs = " ".join(fields[num_rotors + 1:])
    return names, setting, plugs


def check_rotor_choice(machine: Machine, names: List[str]) -> None:
    """Reject selections the machine could not physically hold."""
    rotors = []
    for name in names:
        if name not in machine.all_rotors:
            raise UnknownRotorError(f"No such rotor: {name!r}")
        rotors.append(machine.all_rotors[name])

    if len(set(names)) != len(names):
        raise StructuralError("duplicated rotors")
    if not rotors[0].reflecting():
        raise StructuralError("first rotor must be the reflector")
    if any(r.reflecting() for r in rotors[1:]):
        raise StructuralError("only the first rotor may be a reflector")
    moving = sum(1 for r in rotors if r.rotates())
    if moving != machine.num_pawls:
        raise StructuralError(
            f"wrong number of moving rotors: {moving}, expected {machine.num_pawls}"
        )


def setup(machine: Machine, line: str) -> None:
    """Apply setting *line* to *machine*: rotors, window letters, plugboard."""
    names, setting, plugs = parse_setting_line(line, machine.num_rotors)
    check_rotor_choice(machine, names)
    plugboard = Permutation(plugs, machine.alphabet)
    machine.insert_rotors(names)
    machine.set_rotors(setting)
    machine.set_plugboard(plugboard)


# ────────────────────────────────────────────────────────────────────────
#  3. Text preprocessing & output
# ────────────────────────────────────────────────────────────────────────


def preprocess_message(msg: str) -> str:
    """Drop every whitespace character."""
    return "".join(msg.split())


def format_message_line(msg: str, block: int = BLOCK) -> str:
    """Group *msg* into blocks of *block* symbols separated by spaces."""
    return " ".join(msg[i : i + block] for i in range(0, len(msg), block))


def process(machine: Machine, lines: Iterable[str]) -> Iterator[str]:
    """Yield one output line for every message line in *lines*."""
    configured = False
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line.startswith("*"):
            setup(machine, line)
            configured = True
        elif not configured:
            if line.strip():
                raise ConfigurationError("must have a setting")
        elif not line:
            yield " "
        else:
            yield format_message_line(machine.convert_message(preprocess_message(line)))


__all__ = [
    "read_config",
    "read_config_file",
    "parse_setting_line",
    "check_rotor_choice",
    "setup",
    "preprocess_message",
    "format_message_line",
    "process",
]
