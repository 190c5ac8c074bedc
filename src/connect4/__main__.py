from __future__ import annotations

from connect4.main import main


if __name__ == "__main__":
    raise SystemExit(main())
