# settings_generator.py
from __future__ import annotations

import argparse
import string
import sys
from pathlib import Path
from random import Random, SystemRandom
from typing import List, Sequence, Tuple

from alphabet_and_permutation import Alphabet, Permutation
from errors import ConfigurationError, EnigmaError
from machine import Machine
from utilities import read_config

ALPHA_MAP = {
    "26": string.ascii_uppercase,
    "36": string.ascii_uppercase + "0123456789",
}

# (name, type token, cycles) as written in a configuration file
WheelSpec = Tuple[str, str, str]

# ─── helpers ────────────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Return deterministic RNG when *seed* is given, else CSPRNG."""
    return Random(seed) if seed is not None else SystemRandom()


def make_rotor_cycles(alpha: Alphabet, rng: Random | SystemRandom) -> str:
    """Return a random permutation of *alpha* in cycle notation."""
    chars = list(alpha.chars)
    rng.shuffle(chars)
    return Permutation.from_wiring("".join(chars), alpha).cycles()


def make_reflector_cycles(alpha: Alphabet, rng: Random | SystemRandom) -> str:
    """Return a fixed-point-free involution of *alpha* as 2-cycles."""
    if alpha.size() % 2:
        raise ConfigurationError("Reflectors need an alphabet of even length")
    remaining = list(alpha.chars)
    rng.shuffle(remaining)
    return " ".join(f"({a}{b})" for a, b in zip(remaining[::2], remaining[1::2]))


def choose_notches(alpha: Alphabet, max_n: int, rng: Random | SystemRandom) -> str:
    return "".join(rng.sample(alpha.chars, rng.randint(1, max_n)))


def choose_pairs(alpha: Alphabet, k: int, rng: Random | SystemRandom) -> str:
    """Return *k* disjoint plug pairs as 2-cycles."""
    k = min(k, alpha.size() // 2)
    pool = list(alpha.chars)
    rng.shuffle(pool)
    return " ".join(f"({a}{b})" for a, b in zip(pool[::2], pool[1::2][:k]))


def make_wheels(
    alpha: Alphabet,
    rng: Random | SystemRandom,
    *,
    moving: int,
    fixed: int,
    reflectors: int,
    max_notches: int = 2,
) -> List[WheelSpec]:
    wheels: List[WheelSpec] = []
    for i in range(1, moving + 1):
        notch = choose_notches(alpha, max_notches, rng)
        wheels.append((f"R{i}", f"M{notch}", make_rotor_cycles(alpha, rng)))
    for i in range(1, fixed + 1):
        wheels.append((f"F{i}", "N", make_rotor_cycles(alpha, rng)))
    for i in range(reflectors):
        wheels.append((f"UKW{i + 1}", "R", make_reflector_cycles(alpha, rng)))
    return wheels


# ─── output formatters ─────────────────────────────────────────────────


def emit_config(
    alpha: Alphabet,
    num_rotors: int,
    num_pawls: int,
    wheels: Sequence[WheelSpec],
) -> str:
    """Return configuration text that :func:`utilities.read_config` accepts."""
    width = max((len(n) + len(k) + 1 for n, k, _ in wheels), default=0)
    lines = [alpha.chars, f"{num_rotors} {num_pawls}"]
    for name, kind, cycles in wheels:
        lines.append(f" {name + ' ' + kind:<{width}}  {cycles}")
    lines.append("")
    return "\n".join(lines)


def random_setting_line(
    machine: Machine,
    rng: Random | SystemRandom,
    *,
    pairs: int = 10,
) -> str:
    """Pick a legal rotor order, window letters and plugboard for *machine*."""
    pool = machine.all_rotors.values()
    refl = [r.name for r in pool if r.reflecting()]
    movers = [r.name for r in pool if r.rotates()]
    fixed = [r.name for r in pool if not r.rotates() and not r.reflecting()]

    n_fixed = machine.num_rotors - 1 - machine.num_pawls
    if not refl or len(movers) < machine.num_pawls or len(fixed) < n_fixed:
        raise ConfigurationError("Wheel pool cannot fill this machine")

    # non-moving wheels sit left of the moving ones
    names = (
        [rng.choice(refl)]
        + rng.sample(fixed, n_fixed)
        + rng.sample(movers, machine.num_pawls)
    )
    key = "".join(rng.choices(machine.alphabet.chars, k=machine.num_rotors - 1))
    plugs = choose_pairs(machine.alphabet, pairs, rng)
    return " ".join(["*", *names, key] + ([plugs] if plugs else []))


# ─── CLI ───────────────────────────────────────────────────────────────


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate a random wheel set configuration.")
    p.add_argument(
        "--alphabet",
        default="26",
        help="26, 36 or a literal string of symbols (default 26)",
    )
    p.add_argument("--slots", type=int, default=5, help="Rotor slots incl. reflector (default 5)")
    p.add_argument("--pawls", type=int, default=3, help="Moving rotor slots (default 3)")
    p.add_argument("--rotors", type=int, default=8, help="How many moving rotors (default 8)")
    p.add_argument("--fixed", type=int, default=2, help="How many fixed rotors (default 2)")
    p.add_argument("--reflectors", type=int, default=2, help="How many reflectors (default 2)")
    p.add_argument(
        "--seed",
        type=int,
        help="Integer seed for deterministic output "
        "(omit for cryptographically strong randomness)",
    )
    p.add_argument("--setting", action="store_true", help="Also print a random setting line.")
    p.add_argument(
        "--outfile",
        type=Path,
        help="Write to this file (stdout if omitted)",
    )
    return p.parse_args(argv)


# ─── main ──────────────────────────────────────────────────────────────


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    rng = build_rng(args.seed)
    try:
        alpha = Alphabet(ALPHA_MAP.get(args.alphabet, args.alphabet))
        wheels = make_wheels(
            alpha, rng, moving=args.rotors, fixed=args.fixed, reflectors=args.reflectors
        )
        text = emit_config(alpha, args.slots, args.pawls, wheels)
        setting = random_setting_line(read_config(text), rng) if args.setting else None
    except EnigmaError as excp:
        print(f"Error: {excp}", file=sys.stderr)
        return 1

    if args.outfile:
        args.outfile.write_text(text, encoding="utf-8")
        print(f"Wrote {args.outfile} ({len(wheels)} wheels, {len(text)} bytes)")
    else:
        sys.stdout.write(text)
    if setting:
        print(setting)
    return 0


if __name__ == "__main__":
    sys.exit(main())
