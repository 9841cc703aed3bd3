"""Digit group settings for sevenseg.

Settings are read from ~/.config/sevenseg/config.json (XDG-compliant).
Nothing is ever written back; the file is maintained by hand or by the
embedding application.

Example config::

    {
        "digits": 5,
        "size": [600, 246],
        "base": 10,
        "negative": true,
        "leading_zeroes": false,
        "spacing": 12
    }

Usage:
    from sevenseg.conf import load_settings

    settings = load_settings()
    group = settings.build(value=-42)
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Tuple

from .digit_group import DigitGroup, NumberBase

log = logging.getLogger(__name__)

# =========================================================================
# Config file location (XDG-compliant)
# =========================================================================

_XDG_CONFIG = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
CONFIG_DIR = os.path.join(_XDG_CONFIG, 'sevenseg')
CONFIG_PATH = os.path.join(CONFIG_DIR, 'config.json')


# =========================================================================
# Low-level config access
# =========================================================================

def load_config(path: Optional[str] = None) -> dict:
    """Load config from disk. Returns empty dict on missing/corrupt file."""
    path = path or CONFIG_PATH
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        return {}
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
        log.warning("Ignoring unreadable config %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        log.warning("Ignoring config %s: top level is not an object", path)
        return {}
    return data


# =========================================================================
# Group settings
# =========================================================================

@dataclass
class GroupSettings:
    """Constructor arguments for a ``DigitGroup``."""
    digits: int = 4
    size: Tuple[float, float] = (500.0, 246.0)
    base: int = 16
    value: int = 0
    negative: bool = False
    leading_zeroes: bool = False
    spacing: float = 0.0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GroupSettings':
        """Build settings from a config dict, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            log.debug("Unknown config keys ignored: %s", ', '.join(sorted(unknown)))
        kwargs = {k: v for k, v in data.items() if k in known}
        if 'size' in kwargs:
            try:
                kwargs['size'] = tuple(kwargs['size'])
            except TypeError:
                raise ValueError(f"bad setting size: {kwargs['size']!r}") from None
        return cls(**kwargs)

    def build(self, **overrides: Any) -> DigitGroup:
        """Create a DigitGroup; ``overrides`` replace individual settings.

        Raises:
            ValueError: A setting is out of range (bad base, digit count,
                size or spacing).
        """
        s = self if not overrides else GroupSettings(**{**self.__dict__, **overrides})
        try:
            size = tuple(float(v) for v in s.size)
            digits = int(s.digits)
            base = int(s.base)
            value = int(s.value)
            spacing = float(s.spacing)
        except (TypeError, ValueError) as e:
            raise ValueError(f"bad setting in {s!r}: {e}") from None
        if len(size) != 2:
            raise ValueError(f"size must be [width, height], got {s.size!r}")
        return DigitGroup(
            number_of_digits=digits,
            size=size,
            number_base=NumberBase(base),
            value=value,
            can_show_negative=bool(s.negative),
            show_leading_zeroes=bool(s.leading_zeroes),
            spacing=spacing,
        )


def load_settings(path: Optional[str] = None) -> GroupSettings:
    """Settings from the config file, falling back to defaults."""
    return GroupSettings.from_dict(load_config(path))
