"""
Process-wide configuration for rns_numbers.

Only one knob exists today: whether the cheap-but-not-free precondition
checks (adder headroom, inverse coprimality, digit range) run.  They
are on by default; set RNS_NUMBERS_CHECKS=0 in the environment to turn
them off for hot loops once a caller is known to be correct.

The fatal errors (overflow, unsupported modulus, non-factorable value)
are raised regardless of this setting.
"""

import os
import warnings
from dataclasses import dataclass, asdict, replace
from typing import Any, Dict, Optional

ENV_CHECKS = "RNS_NUMBERS_CHECKS"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class NumbersConfig:
    """Runtime configuration."""
    check_preconditions: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(environ: Optional[Dict[str, str]] = None) -> NumbersConfig:
    """Build a NumbersConfig from environment variables."""
    env = os.environ if environ is None else environ
    raw = env.get(ENV_CHECKS)
    if raw is None:
        return NumbersConfig()

    value = raw.strip().lower()
    if value in _TRUE:
        return NumbersConfig(check_preconditions=True)
    if value in _FALSE:
        return NumbersConfig(check_preconditions=False)

    warnings.warn(
        f"Ignoring unrecognised {ENV_CHECKS}={raw!r}; "
        "precondition checks stay enabled.",
        RuntimeWarning,
    )
    return NumbersConfig()


_config = load_config()


def get_config() -> NumbersConfig:
    return _config


def set_config(config: Optional[NumbersConfig] = None, **overrides) -> NumbersConfig:
    """Replace the process-wide config and return the previous one.

    Either pass a full NumbersConfig or keyword overrides applied to the
    current one, e.g. ``set_config(check_preconditions=False)``.
    """
    global _config
    previous = _config
    base = config if config is not None else _config
    _config = replace(base, **overrides) if overrides else base
    return previous


def checks_enabled() -> bool:
    return _config.check_preconditions
