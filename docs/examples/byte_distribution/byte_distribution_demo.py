r"""
Byte Distribution Demo: Visual sanity checks for smallprng generators
----------------------------------------------------------------------

This script draws a byte stream and a printable-text stream from each
registered generator and plots their value histograms.

What this demo shows:
1. Building generators from the registry (make_generator)
2. Bulk byte extraction (next_array) and the chi-square smoke test
3. 7-bit text extraction with rejection (next_text): only 0x20..0x7E appear
4. Driving jax.random from a smallprng stream (jax_key)

An unseeded Seiran128 is plotted as well: its all-zero state is a fixed
point, so every byte is 0x00.
"""

from __future__ import annotations

import os
import sys

import jax.random as jr
import matplotlib.pyplot as plt
import numpy as np

# Allow running script from repo root
sys.path.insert(
    0, os.path.abspath(os.path.join(os.path.dirname(__file__), "../../../src"))
)

# --8<-- [start:imports]
from smallprng import Seiran128, make_generator
from smallprng.utils import byte_histogram, chisquare_bytes, jax_key

# --8<-- [end:imports]

PLOTS_DIR = os.path.join(os.path.dirname(__file__), "plots")
os.makedirs(PLOTS_DIR, exist_ok=True)

N_BYTES = 1 << 16
N_CHARS = 1 << 14


def plot_byte_histograms(names: list[str]) -> None:
    fig, axes = plt.subplots(len(names) + 1, 1, figsize=(8, 2 * (len(names) + 1)))

    for ax, name in zip(axes, names):
        g = make_generator(name, seed=2024)
        counts = byte_histogram(g, N_BYTES)
        stat, pvalue = chisquare_bytes(g, N_BYTES)
        ax.bar(np.arange(256), counts, width=1.0)
        ax.axhline(N_BYTES / 256, color="k", lw=0.8)
        ax.set_title(f"{name}: chi2={stat:.1f}, p={pvalue:.3f}", fontsize=9)
        ax.set_xlim(0, 255)

    broken = Seiran128()
    axes[-1].bar(np.arange(256), byte_histogram(broken, N_BYTES), width=1.0, color="C3")
    axes[-1].set_title("seiran128 (unseeded, all-zero state)", fontsize=9)
    axes[-1].set_xlim(0, 255)

    fig.tight_layout()
    fig.savefig(os.path.join(PLOTS_DIR, "byte_histograms.png"), dpi=150)
    plt.close(fig)


def plot_text_histogram() -> None:
    g = make_generator("seiran128", seed=7)
    text = g.next_text(N_CHARS)
    codes = np.frombuffer(text.encode("ascii"), dtype=np.uint8)

    fig, ax = plt.subplots(figsize=(8, 2.5))
    ax.bar(np.arange(128), np.bincount(codes, minlength=128), width=1.0)
    ax.axvspan(-0.5, 0x1F + 0.5, color="0.9")
    ax.axvspan(0x7F - 0.5, 127.5, color="0.9")
    ax.set_title("next_text: 7-bit units, printable ASCII only", fontsize=9)
    ax.set_xlim(-0.5, 127.5)
    fig.tight_layout()
    fig.savefig(os.path.join(PLOTS_DIR, "text_histogram.png"), dpi=150)
    plt.close(fig)


def plot_jax_samples() -> None:
    g = make_generator("sfc64a")
    samples = jr.normal(jax_key(g), (5000,))

    fig, ax = plt.subplots(figsize=(5, 3))
    ax.hist(np.asarray(samples), bins=60, density=True)
    ax.set_title("jax.random.normal keyed from sfc64a", fontsize=9)
    fig.tight_layout()
    fig.savefig(os.path.join(PLOTS_DIR, "jax_normal.png"), dpi=150)
    plt.close(fig)


if __name__ == "__main__":
    plot_byte_histograms(["seiran128", "sfc64a", "sfc32a", "sfc32b"])
    plot_text_histogram()
    plot_jax_samples()
    print(f"Plots written to {PLOTS_DIR}")
