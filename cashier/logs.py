"""File logs for register diagnostics and errors."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from cashier.config import DEBUG_LOG_PATH, ERROR_LOG_PATH


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class DebugLog:
    """Best-effort trace of what the register is doing."""

    def __init__(self, path: str | Path = DEBUG_LOG_PATH) -> None:
        self.path = Path(path)

    def write(self, message: str) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as fh:
                fh.write(f"{_utc_now_iso()} {message}\n")
        except OSError:
            # Logging must never interfere with the sale flow.
            return


class ErrorLog:
    """Durable append-only record of every error the register reported."""

    def __init__(self, path: str | Path = ERROR_LOG_PATH) -> None:
        self.path = Path(path)

    def log(self, exc: BaseException) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as fh:
            fh.write(f"{_utc_now_iso()} {type(exc).__name__}: {exc}\n")
