# errors.py
from __future__ import annotations


class EnigmaError(ValueError):
    """Base class for every fatal error raised by the simulator."""


# ── wiring & lookup ───────────────────────────────────────────────
class MalformedCycleError(EnigmaError):
    pass


class UnknownCharacterError(EnigmaError):
    pass


class OutOfRangeError(EnigmaError):
    pass


# ── machine assembly ──────────────────────────────────────────────
class UnknownRotorError(EnigmaError):
    pass


class InvalidSettingError(EnigmaError):
    pass


class ConfigurationError(EnigmaError):
    pass


class StructuralError(EnigmaError):
    """Setting line selects rotors that cannot form a working machine."""


__all__ = [
    "EnigmaError",
    "MalformedCycleError",
    "UnknownCharacterError",
    "OutOfRangeError",
    "UnknownRotorError",
    "InvalidSettingError",
    "ConfigurationError",
    "StructuralError",
]
