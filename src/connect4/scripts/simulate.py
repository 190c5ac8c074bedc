from __future__ import annotations

import argparse
import csv
import time
from dataclasses import dataclass, astuple, fields
from pathlib import Path
from typing import List, Tuple

from connect4.ai.base import Agent
from connect4.ai.random_agent import RandomAgent
from connect4.game.actions import play_move
from connect4.game.state import GameState
from connect4.types import Outcome
from connect4.ui.colors import c, BOLD, DIM


@dataclass(frozen=True)
class GameRecord:
    game: int
    seed: int
    outcome: str   # "H", "C" or "D"
    moves: int


def play_headless(agent_h: Agent, agent_c: Agent) -> Tuple[Outcome, int]:
    """Play one game without any UI. Returns (outcome, number of pieces dropped)."""
    state = GameState(last_status="")
    moves = 0

    while not state.is_over:
        agent = agent_h if state.current == "H" else agent_c
        move = agent.choose_move(state)
        if play_move(state, move) is None:
            continue
        moves += 1

    return state.outcome, moves


def simulate(num_games: int, seed: int = 1234) -> List[GameRecord]:
    records: List[GameRecord] = []
    for g in range(num_games):
        game_seed = seed + g
        agent_h = RandomAgent(seed=game_seed + 101)
        agent_c = RandomAgent(seed=game_seed + 202)
        outcome, moves = play_headless(agent_h, agent_c)
        records.append(GameRecord(game=g + 1, seed=game_seed, outcome=str(outcome), moves=moves))
    return records


def export_csv(records: List[GameRecord], out_dir: Path) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = out_dir / f"simulation_results_{ts}.csv"

    with open(out_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow([fld.name for fld in fields(GameRecord)])
        for rec in records:
            w.writerow(astuple(rec))

    return out_path


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="connect4-simulate",
        description="Play seeded random-vs-random games and export the results as CSV.",
    )
    ap.add_argument("--games", type=int, default=100, help="Number of games to play")
    ap.add_argument("--seed", type=int, default=1234, help="Base seed; game i uses seed + i")
    ap.add_argument("--out-dir", type=str, default="data/results", help="Directory for the results CSV")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    start = time.perf_counter()
    records = simulate(args.games, seed=args.seed)
    elapsed = time.perf_counter() - start

    totals = {"H": 0, "C": 0, "D": 0}
    for rec in records:
        totals[rec.outcome] += 1

    print(c(f"Played {len(records)} games in {elapsed:.2f}s", BOLD))
    print(f"H wins:    {totals['H']}")
    print(f"C wins:    {totals['C']}")
    print(f"Draws:     {totals['D']}")

    out_path = export_csv(records, Path(args.out_dir))
    print(c(f"Wrote CSV: {out_path}", DIM))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
