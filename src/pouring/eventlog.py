"""JSONL log of solver runs.

Every solved (or abandoned) puzzle becomes one ``solve.completed`` line
carrying the request, the outcome, the search effort and the digest of the
structured report, so two runs can be compared without storing full paths.
Files live under ``<base_dir>/<YYYYMMDD>/solve_NN.jsonl`` and roll over to the
next ``NN`` once they reach ``max_bytes``.
"""

from __future__ import annotations

import json
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator

from project_config import get_section

from .report import report_digest
from .search import SolveResult

__all__ = [
    "SOLVE_COMPLETED",
    "append_event",
    "configure",
    "current_log_path",
    "iter_events",
    "record_solve",
    "solve_event",
]

SOLVE_COMPLETED = "solve.completed"

_LOCK = threading.Lock()
_LOG_DIR: Path | None = None
_MAX_BYTES: int | None = None
_CURRENT_PATH: Path | None = None


def configure(base_dir: str | Path | None = None, *, max_bytes: int | None = None) -> None:
    """Direct subsequent events to ``base_dir``; unset values come from ``[LOG]``."""

    global _LOG_DIR, _MAX_BYTES, _CURRENT_PATH
    _LOG_DIR = Path(base_dir) if base_dir is not None else Path(get_section("LOG.dir"))
    _MAX_BYTES = max_bytes or int(get_section("LOG.max_bytes"))
    _CURRENT_PATH = None


def _day_dir() -> Path:
    if _LOG_DIR is None:
        configure()
    base = _LOG_DIR if _LOG_DIR is not None else Path(get_section("LOG.dir"))
    return base / datetime.now(timezone.utc).strftime("%Y%m%d")


def _has_room(path: Path) -> bool:
    return not path.exists() or path.stat().st_size < (_MAX_BYTES or 0)


def _resolve_log_path() -> Path:
    global _CURRENT_PATH
    day_dir = _day_dir()
    day_dir.mkdir(parents=True, exist_ok=True)

    # A new UTC day always starts a fresh file sequence.
    if _CURRENT_PATH is not None and _CURRENT_PATH.parent == day_dir and _has_room(_CURRENT_PATH):
        return _CURRENT_PATH

    index = 0
    while not _has_room(day_dir / f"solve_{index:02d}.jsonl"):
        index += 1
    _CURRENT_PATH = day_dir / f"solve_{index:02d}.jsonl"
    return _CURRENT_PATH


def append_event(event: Dict[str, Any]) -> Path:
    """Append ``event`` to the active JSONL file and return the file path."""

    payload = dict(event)
    payload.setdefault("ts", datetime.now(timezone.utc).isoformat(timespec="milliseconds"))

    line = json.dumps(payload, sort_keys=True, ensure_ascii=False)
    with _LOCK:
        path = _resolve_log_path()
        with path.open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")
    return path


def solve_event(result: SolveResult, elapsed_ms: int) -> Dict[str, Any]:
    """Build the ``solve.completed`` record for ``result``."""

    return {
        "event": SOLVE_COMPLETED,
        "goal": result.goal,
        "capacities": list(result.capacities),
        "reason": result.reason.value,
        "moves": result.moves,
        "explored": result.explored,
        "elapsed_ms": int(elapsed_ms),
        "report_digest": report_digest(result),
    }


def record_solve(result: SolveResult, elapsed_ms: int) -> Path:
    """Log one solver run and return the file it was written to."""

    return append_event(solve_event(result, elapsed_ms))


def iter_events(path: Path, *, event: str | None = SOLVE_COMPLETED) -> Iterator[Dict[str, Any]]:
    """Yield logged records from ``path``, filtered to ``event`` unless ``None``."""

    for line in path.read_text("utf-8").splitlines():
        if not line.strip():
            continue
        record = json.loads(line)
        if event is None or record.get("event") == event:
            yield record


def current_log_path() -> Path | None:
    return _CURRENT_PATH
