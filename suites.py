# suites.py
from __future__ import annotations

from typing import Dict

from debug import Debug
from errors import ConfigurationError
from machine import Machine
from utilities import read_config

Alpha26 = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Army & naval wheels I–VIII ---------------------------------------------
_WHEELS = """\
 I MQ      (AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ)
 II ME     (FIXVYOMW) (CDKLHUP) (ESZ) (BJ) (GR) (NT)
 III MV    (ABDHPEJT) (CFLVMZOYQIRWUKXSG)
 IV MJ     (AEPLIYWCOXMRFZBSTGJQNH) (DV) (KU)
 V MZ      (AVOLDRWFIUQ) (BZKSMNHYC) (EGTJPX)
 VI MZM    (AJQDVLEOZWIYTS) (CGMNHFUX) (BPRK)
 VII MZM   (ANOUPFRIMBZTLWKSVEGCJYDHXQ)
 VIII MZM  (AFLSETWUNDHOZVICQ) (BKJ) (GXY) (MPR)
"""

# Wide reflectors for the three-wheel machine ---------------------------
_M3_REFLECTORS = """\
 B R       (AY) (BR) (CU) (DH) (EQ) (FS) (GL) (IP) (JX) (KN) (MO)
           (TZ) (VW)
 C R       (AF) (BV) (CP) (DJ) (EI) (GO) (HY) (KR) (LZ) (MX) (NW)
           (QT) (SU)
"""

# Thin reflectors and Greek wheels for the naval four-wheel machine ------
_M4_EXTRAS = """\
 Beta N    (ALBEVFCYODJWUGNMQTZSKPR) (HIX)
 Gamma N   (AFNIRLBSQWVXGUZDKMTPCOYJHE)
 B R       (AE) (BN) (CK) (DQ) (FU) (GY) (HW) (IJ) (LO) (MP)
           (RX) (SZ) (TV)
 C R       (AR) (BD) (CO) (EJ) (FN) (GT) (HK) (IV) (LM) (PW)
           (QZ) (SX) (UY)
"""

SUITES: Dict[str, Dict[str, str]] = {
    "M3": {"name": "Enigma I / M3", "config": f"{Alpha26}\n4 3\n{_WHEELS}{_M3_REFLECTORS}"},
    "M4": {"name": "Naval M4",      "config": f"{Alpha26}\n5 3\n{_WHEELS}{_M4_EXTRAS}"},
}


def load_suite(key: str, *, debug: Debug | None = None) -> Machine:
    """Return a fresh Machine over the built-in wheel set *key*."""
    try:
        suite = SUITES[key.upper()]
    except KeyError:
        raise ConfigurationError(f"Unknown suite {key!r}. Expected one of {list(SUITES)}")
    return read_config(suite["config"], debug=debug)
