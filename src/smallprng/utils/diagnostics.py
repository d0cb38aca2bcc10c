"""
diagnostics.py
--------------

Quick statistical sanity checks on generator output.

Provides tools for:
- Byte frequency histograms
- Pearson chi-square test of byte uniformity (scipy.stats.chisquare)
- Monobit (fraction of set bits) test on raw words

These are smoke tests, not a replacement for TestU01 or PractRand. A
correct generator passes them almost always; a broken one (e.g. a wrong
shift constant, or an unseeded all-zero state) typically fails badly.

Examples
--------
>>> from smallprng import Seiran128
>>> from smallprng.utils.diagnostics import chisquare_bytes
>>> stat, pvalue = chisquare_bytes(Seiran128(seed=1), n_bytes=1 << 16)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from scipy import stats

if TYPE_CHECKING:
    from smallprng.generators import Generator


def byte_histogram(generator: Generator, n_bytes: int) -> np.ndarray:
    """
    Count byte values in ``n_bytes`` bytes drawn with ``next_array``.

    Returns
    -------
    np.ndarray, shape (256,)
        Count of each byte value.
    """
    if n_bytes <= 0:
        raise ValueError(f"n_bytes must be positive, got {n_bytes}")
    return np.bincount(generator.next_array(n_bytes), minlength=256)


def chisquare_bytes(
    generator: Generator, n_bytes: int = 1 << 16
) -> tuple[float, float]:
    """
    Chi-square goodness of fit of the byte stream against uniform.

    Parameters
    ----------
    generator : Generator
        Source generator; advanced by ``n_bytes`` bytes.
    n_bytes : int, default=65536
        Sample size. Should be large enough that every expected count
        (``n_bytes / 256``) is at least 5.

    Returns
    -------
    statistic : float
        Pearson chi-square statistic (255 degrees of freedom).
    pvalue : float
        Probability of a statistic at least this extreme under uniformity.
    """
    if n_bytes < 5 * 256:
        raise ValueError(
            f"n_bytes must be at least {5 * 256} for a valid test, got {n_bytes}"
        )
    counts = byte_histogram(generator, n_bytes)
    result = stats.chisquare(counts)
    return float(result.statistic), float(result.pvalue)


def monobit_fraction(generator: Generator, n_words: int = 1024) -> float:
    """
    Fraction of set bits across ``n_words`` raw words.

    Expected value is 0.5 with standard deviation
    ``0.5 / sqrt(n_words * width)``.
    """
    if n_words <= 0:
        raise ValueError(f"n_words must be positive, got {n_words}")
    words = generator.next_words(n_words)
    ones = int(np.unpackbits(words.view(np.uint8)).sum())
    return ones / (n_words * generator.width)


def summary(
    generator: Generator, n_bytes: int = 1 << 16, n_words: int = 1024
) -> dict[str, float]:
    """
    Run all checks and collect the results.

    Byte checks run first, then the monobit check, each on fresh output.

    Returns
    -------
    dict[str, float]
        Keys "chi2", "chi2_pvalue", "monobit".
    """
    chi2, pvalue = chisquare_bytes(generator, n_bytes)
    return {
        "chi2": chi2,
        "chi2_pvalue": pvalue,
        "monobit": monobit_fraction(generator, n_words),
    }


def print_summary(
    generator: Generator, n_bytes: int = 1 << 16, n_words: int = 1024
) -> None:
    """
    Print a human-readable diagnostics summary.

    Examples
    --------
    >>> print_summary(Seiran128(seed=1))  # doctest: +SKIP
    Seiran128 diagnostics (65536 bytes, 1024 words):
      chi2 (255 dof): 241.3  p=0.718
      monobit:        0.5003
    """
    results = summary(generator, n_bytes, n_words)
    print(
        f"{type(generator).__name__} diagnostics "
        f"({n_bytes} bytes, {n_words} words):"
    )
    print(f"  chi2 (255 dof): {results['chi2']:.1f}  p={results['chi2_pvalue']:.3f}")
    print(f"  monobit:        {results['monobit']:.4f}")
