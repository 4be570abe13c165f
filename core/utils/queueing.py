# core/utils/queueing.py
from __future__ import annotations
from queue import Queue, Full, Empty
from typing import Any
import structlog

log = structlog.get_logger()

def safe_put(q: Queue, item: Any) -> None:
    """
    Publish without blocking. When the queue is full the oldest record is
    dropped (and logged) to make room, so a slow consumer never stalls typing.
    """
    try:
        q.put_nowait(item)
        return
    except Full:
        pass
    try:
        dropped = q.get_nowait()
        log.warning("queue.drop_oldest", dropped=type(dropped).__name__, maxsize=q.maxsize)
    except Empty:
        pass
    q.put_nowait(item)
