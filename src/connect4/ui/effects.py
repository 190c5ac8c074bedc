from __future__ import annotations
import sys
import time

from connect4 import config


def ai_thinking(label: str = "Computer is thinking") -> None:
    """
    Small user-visible delay + optional spinner so computer moves are not instant.
    """
    if config.AI_THINK_DELAY_SEC <= 0:
        return

    if not config.AI_THINKING_SPINNER:
        time.sleep(config.AI_THINK_DELAY_SEC)
        return

    frames = ["|", "/", "-", "\\"]
    start = time.time()
    i = 0
    while (time.time() - start) < config.AI_THINK_DELAY_SEC:
        sys.stdout.write(f"\r{label}... {frames[i % len(frames)]}")
        sys.stdout.flush()
        time.sleep(0.08)
        i += 1
    sys.stdout.write("\r" + (" " * (len(label) + 10)) + "\r")
    sys.stdout.flush()
