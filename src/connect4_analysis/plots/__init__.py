from .chart import (
    plot_moves_histogram,
    plot_outcomes,
)

__all__ = [
    "plot_moves_histogram",
    "plot_outcomes",
]
