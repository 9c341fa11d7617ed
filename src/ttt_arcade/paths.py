"""Centralized path helpers for the high-score file.

Environment-first, with fallbacks that still work when installed as a
package or executed from arbitrary CWDs.
"""

from __future__ import annotations

import os
from pathlib import Path

HIGH_SCORES_FILENAME = "high-scores.json"


def base_dir() -> Path:
    """Directory the game keeps its files in.

    Order: env var TTT_REPO_ROOT -> CWD.
    Avoids writing under site-packages when installed as a library.
    """
    env = os.getenv("TTT_REPO_ROOT")
    if env:
        return Path(env)
    return Path.cwd()


def high_scores_file(override: Path | None = None) -> Path:
    if override is not None:
        return override
    p = os.getenv("TTT_HIGH_SCORES")
    return Path(p) if p else base_dir() / HIGH_SCORES_FILENAME


def ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
