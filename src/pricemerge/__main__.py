from __future__ import annotations

from pricemerge.ui.cli import run

if __name__ == "__main__":
    run()
