import threading
from datetime import datetime

from movieFeed.settings import LOG_PATH

_log_lock = threading.Lock()


def log_debug(message: str) -> None:
    """Append timestamped message to the log file."""
    ts = datetime.now().isoformat(timespec="seconds")
    entry = f"[{ts}] {message}\n"
    with _log_lock:
        LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
        with LOG_PATH.open("a", encoding="utf-8") as f:
            f.write(entry)


def mean(values: list[float]) -> float:
    """Arithmetic mean, 0.0 for an empty list."""
    return sum(values) / len(values) if values else 0.0


def format_rating(avg: float) -> str:
    return f"Average rating: ⭐ {avg:.1f}"
