from __future__ import annotations

import pandas as pd

from ..io.load_results import OUTCOMES


LABELS = {"H": "first player (H)", "C": "second player (C)", "D": "draw"}


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def outcome_table(df: pd.DataFrame) -> pd.DataFrame:
    """Count and share of each outcome; every outcome gets a row, even with zero games."""
    _require_cols(df, ["outcome"])

    counts = df["outcome"].value_counts().reindex(list(OUTCOMES), fill_value=0)
    total = int(counts.sum())

    out = pd.DataFrame({
        "outcome": list(OUTCOMES),
        "label": [LABELS[o] for o in OUTCOMES],
        "games": counts.astype(int).tolist(),
    })
    out["rate"] = (out["games"] / total) if total else 0.0
    return out


def moves_summary(df: pd.DataFrame) -> pd.DataFrame:
    """Game-length statistics per outcome plus an 'all' row."""
    _require_cols(df, ["outcome", "moves"])
    if df.empty:
        return pd.DataFrame()

    per = df.groupby("outcome")["moves"].describe()
    per.loc["all"] = df["moves"].describe()
    return per
