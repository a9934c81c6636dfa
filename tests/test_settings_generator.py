from __future__ import annotations

import pytest

from alphabet_and_permutation import Alphabet, Permutation
from errors import ConfigurationError
from settings_generator import (
    build_rng,
    choose_pairs,
    emit_config,
    main,
    make_reflector_cycles,
    make_rotor_cycles,
    make_wheels,
    random_setting_line,
)
from utilities import read_config, setup


def test_seeded_rng_is_deterministic(alpha):
    assert make_rotor_cycles(alpha, build_rng(7)) == make_rotor_cycles(alpha, build_rng(7))


def test_rotor_cycles_parse_back(alpha):
    cycles = make_rotor_cycles(alpha, build_rng(1))
    perm = Permutation(cycles, alpha)
    assert perm.cycles() == cycles


def test_reflector_cycles_form_a_derangement(alpha):
    perm = Permutation(make_reflector_cycles(alpha, build_rng(3)), alpha)
    assert perm.derangement()
    assert perm.involution()


def test_reflector_needs_even_alphabet():
    with pytest.raises(ConfigurationError):
        make_reflector_cycles(Alphabet("ABC"), build_rng(0))


def test_choose_pairs_is_an_involution(alpha):
    plugs = choose_pairs(alpha, 10, build_rng(5))
    assert plugs.count("(") == 10
    assert Permutation(plugs, alpha).involution()
    assert choose_pairs(Alphabet("ABCD"), 10, build_rng(5)).count("(") == 2


def test_generated_config_drives_a_machine(alpha):
    rng = build_rng(11)
    wheels = make_wheels(alpha, rng, moving=5, fixed=2, reflectors=2)
    machine = read_config(emit_config(alpha, 5, 3, wheels))
    assert len(machine.all_rotors) == 9

    line = random_setting_line(machine, rng)
    plain = "THEQUICKBROWNFOXJUMPSOVERTHELAZYDOG"
    setup(machine, line)
    cipher = machine.convert_message(plain)
    setup(machine, line)
    assert machine.convert_message(cipher) == plain


def test_setting_line_needs_enough_wheels(alpha):
    wheels = make_wheels(alpha, build_rng(2), moving=2, fixed=0, reflectors=1)
    machine = read_config(emit_config(alpha, 4, 3, wheels))
    with pytest.raises(ConfigurationError):
        random_setting_line(machine, build_rng(2))


def test_cli_writes_config_and_setting(tmp_path, capsys):
    out = tmp_path / "wheels.conf"
    assert main(["--seed", "4", "--setting", "--outfile", str(out)]) == 0
    stdout = capsys.readouterr().out
    setting = stdout.splitlines()[-1]
    assert setting.startswith("* ")

    machine = read_config(out.read_text(encoding="utf-8"))
    setup(machine, setting)
    assert len(machine.rotors) == 5


def test_cli_reports_errors(capsys):
    assert main(["--alphabet", "ABC"]) == 1
    assert capsys.readouterr().err.startswith("Error: ")
