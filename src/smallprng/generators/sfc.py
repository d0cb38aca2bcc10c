"""
sfc.py
------

SFC32 / SFC64 generator facades and preset factories.

MVP implementation:
- SFC64 defaults to SFC64A (24, 11, 3), SFC32 to SFC32A (21, 9, 3).
- Factories for every named preset; the non-recommended ones warn.

Examples
--------
>>> from smallprng.generators.sfc import sfc64a
>>> g = sfc64a()
>>> hex(g.next())
'0xc85c4d72435e6052'
"""

from __future__ import annotations

import warnings

from smallprng.engines.sfc import (
    NOT_RECOMMENDED,
    SFC_PRESETS,
    SFC32Engine,
    SFC64Engine,
)
from smallprng.generators.base import Generator


class _SFCGenerator(Generator):
    """Seeding methods shared by both SFC widths."""

    def init(self, seed: int) -> None:
        """Seed all three chaotic words with ``seed`` and warm up."""
        self.engine.init(seed)

    def init3(self, s1: int, s2: int, s3: int) -> None:
        """Seed the three chaotic words independently and warm up."""
        self.engine.init3(s1, s2, s3)

    def init_pre(self) -> None:
        """Seed with the built-in default seed for this width."""
        self.engine.init_pre()

    @property
    def params(self):
        return self.engine.params


class SFC64(_SFCGenerator):
    """
    64-bit Small Fast Chaotic generator.

    Parameters
    ----------
    p, q, r : int, default=(24, 11, 3)
        Rotation and shift constants.
    seed : int, optional
        When given, ``init(seed)`` is applied immediately.
    """

    def __init__(self, p: int = 24, q: int = 11, r: int = 3, seed: int | None = None):
        super().__init__(SFC64Engine(p, q, r))
        if seed is not None:
            self.init(seed)


class SFC32(_SFCGenerator):
    """
    32-bit Small Fast Chaotic generator.

    Parameters
    ----------
    p, q, r : int, default=(21, 9, 3)
        Rotation and shift constants.
    seed : int, optional
        When given, ``init(seed)`` is applied immediately.

    Notes
    -----
    ``next_u64`` draws two raw words per call.
    """

    def __init__(self, p: int = 21, q: int = 9, r: int = 3, seed: int | None = None):
        super().__init__(SFC32Engine(p, q, r))
        if seed is not None:
            self.init(seed)


def from_preset(name: str) -> _SFCGenerator:
    """
    Build an unseeded SFC generator from a named preset.

    Parameters
    ----------
    name : str
        One of ``SFC_PRESETS`` ("sfc64a", "sfc64b", "sfc32a", "sfc32b",
        "sfc32c").

    Raises
    ------
    ValueError
        If the preset name is unknown.
    """
    if name not in SFC_PRESETS:
        raise ValueError(
            f"Unknown SFC preset: {name}. Use one of {sorted(SFC_PRESETS)}."
        )
    if name in NOT_RECOMMENDED:
        warnings.warn(
            f"SFC preset '{name}' is not recommended; prefer 'sfc64a', "
            f"'sfc32a' or 'sfc32b'.",
            UserWarning,
            stacklevel=3,
        )
    params = SFC_PRESETS[name]
    cls = SFC64 if params.width == 64 else SFC32
    return cls(params.p, params.q, params.r)


def sfc64a() -> SFC64:
    """SFC64 (24, 11, 3), seeded with ``init_pre``."""
    g = from_preset("sfc64a")
    g.init_pre()
    return g


def sfc64b() -> SFC64:
    """SFC64 (25, 12, 3), seeded with ``init_pre``. Not recommended."""
    g = from_preset("sfc64b")
    g.init_pre()
    return g


def sfc32a() -> SFC32:
    """SFC32 (21, 9, 3), seeded with ``init_pre``."""
    g = from_preset("sfc32a")
    g.init_pre()
    return g


def sfc32b() -> SFC32:
    """SFC32 (15, 8, 3), seeded with ``init_pre``."""
    g = from_preset("sfc32b")
    g.init_pre()
    return g


def sfc32c() -> SFC32:
    """SFC32 (25, 8, 3), seeded with ``init_pre``. Not recommended."""
    g = from_preset("sfc32c")
    g.init_pre()
    return g
