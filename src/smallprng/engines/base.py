"""
base.py
-------

Abstract base class for raw word engines.

An engine owns the state of one PRNG algorithm and exposes a single
capability, ``next()``, returning an unsigned word of ``width`` bits.
Everything else (bit packing, typed extraction) is layered on top by
smallprng.utils.packing and smallprng.generators.

All engines (Seiran128Engine, SFC32Engine, SFC64Engine) subclass from this base.
"""

from __future__ import annotations

import copy as _copy
from abc import ABC, abstractmethod


class Engine(ABC):
    """
    Abstract interface for raw word generators.

    Attributes
    ----------
    width : int
        Word size in bits (32 or 64).

    Methods
    -------
    next() -> int
        Advance the state and return the next raw word.

    Notes
    -----
    Engines are not thread-safe. Callers sharing an instance across
    threads must hold a lock around every state-mutating call.
    """

    width: int = 64

    @abstractmethod
    def next(self) -> int:
        """
        Advance the state by one step.

        Returns
        -------
        int
            Unsigned word in ``[0, 2**width)``.
        """
        ...

    @property
    @abstractmethod
    def state(self) -> tuple[int, ...]:
        """Current state words, in algorithm order."""
        ...

    @state.setter
    @abstractmethod
    def state(self, words: tuple[int, ...]) -> None: ...

    def copy(self) -> Engine:
        """Return an independent engine with identical parameters and state."""
        return _copy.copy(self)

    def __repr__(self) -> str:
        words = ", ".join(f"0x{w:0{self.width // 4}x}" for w in self.state)
        return f"{type(self).__name__}({words})"
