from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outpath: Path, *, show: bool) -> None:
    if show:
        plt.show()
    else:
        _ensure_dir(outpath.parent)
        fig.savefig(outpath, dpi=200, bbox_inches="tight")
        plt.close(fig)


def plot_outcomes(table: pd.DataFrame, outdir: Path, *, show: bool) -> Path:
    """Bar chart of games per outcome (expects outcome_table output)."""
    outpath = outdir / "outcomes.png"

    fig = plt.figure()
    plt.bar(table["label"].astype(str), table["games"].astype(int))
    plt.title("Outcomes")
    plt.xlabel("outcome")
    plt.ylabel("games")

    _finish(fig, outpath, show=show)
    return outpath


def plot_moves_histogram(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path:
    outpath = outdir / "hist_moves.png"

    fig = plt.figure()
    # one bin per possible game length
    plt.hist(df["moves"].dropna(), bins=range(0, 44))
    plt.title("Histogram: moves per game")
    plt.xlabel("moves")
    plt.ylabel("count")

    _finish(fig, outpath, show=show)
    return outpath
