import logging
import threading
from collections import deque
from typing import Any, Deque, Dict, List, Optional

DEFAULT_RING_SIZE = 200

# Detail keys rendered first, in this order; anything else follows sorted.
DRINK_DETAIL_ORDER = ("drink", "cup_size", "grams", "sugar", "doses")


class DrinkEventFormatter(logging.Formatter):
    """Renders ``extra={"details": ...}`` as ``key=value`` pairs after the event name."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)s %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        details = getattr(record, "details", None) or {}
        keys = [k for k in DRINK_DETAIL_ORDER if k in details]
        keys += sorted(k for k in details if k not in DRINK_DETAIL_ORDER)
        pairs = " ".join(f"{k}={details[k]}" for k in keys)
        return f"{line} {pairs}" if pairs else line


class RingBufferHandler(logging.Handler):
    """Keeps the latest drink events in memory, newest last."""

    def __init__(self, max_entries: int = DEFAULT_RING_SIZE):
        super().__init__()
        self.max_entries = max_entries
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        event = {
            "event": record.getMessage(),
            "level": record.levelname,
            "ts": record.created,
            # Copied so later changes to the caller's dict do not rewrite history.
            "details": dict(getattr(record, "details", None) or {}),
            "line": self.format(record),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self, event: Optional[str] = None) -> List[Dict]:
        with self._lock:
            events = list(self._events)
        if event is None:
            return events
        return [e for e in events if e["event"] == event]

    def clear(self) -> None:
        with self._lock:
            self._events.clear()


def create_logger(name: str, ring_size: int = DEFAULT_RING_SIZE) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(logging.INFO)
    handler = RingBufferHandler(max_entries=ring_size)
    handler.setFormatter(DrinkEventFormatter())
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def log_drink_event(logger: logging.Logger, event: str, **details: Any) -> None:
    logger.info(event, extra={"details": details})


def get_ring_buffer(logger: logging.Logger) -> Optional[RingBufferHandler]:
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None
