from __future__ import annotations
import os

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})


def env_flag(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def optimize_enabled() -> bool:
    return env_flag('VARCORE_OPT')


def disasm_enabled() -> bool:
    return env_flag('VARCORE_DISASM')
