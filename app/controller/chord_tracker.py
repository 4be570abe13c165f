# app/controller/chord_tracker.py
from __future__ import annotations
from typing import List, Optional
import structlog

from core.keystrokes.events import (
    Clock, KeystrokeEvent, ClassificationResult, TypingPattern, mono_ms,
)
from app.analytics.chord_detection import classify_by_events

log = structlog.get_logger()

class ChordDetectionTracker:
    """
    Collects keystrokes for the word currently being typed.
    - idle: no events, no start time
    - recording: start time set, events appended as they arrive
    complete() classifies the word and drops back to idle; reset() abandons it.
    """
    def __init__(self, clock: Clock = mono_ms):
        self.clock = clock
        self._events: List[KeystrokeEvent] = []
        self._start_time: Optional[float] = None

    @property
    def is_recording(self) -> bool:
        return self._start_time is not None

    def start(self) -> None:
        # Restarting mid-word discards what was recorded so far
        self._events = []
        self._start_time = self.clock()

    def record_keystroke(self, char: str) -> None:
        if self._start_time is None:
            self.start()
        self._events.append(KeystrokeEvent(char=char, timestamp=self.clock()))

    def complete(self) -> ClassificationResult:
        if not self._events:
            self.reset()
            return ClassificationResult(
                typing_pattern=TypingPattern.UNKNOWN,
                confidence=0.0,
                reason="No keystrokes recorded",
            )

        result = classify_by_events(self._events)
        log.debug(
            "chord.tracker.complete",
            keystrokes=len(self._events),
            duration_ms=self.get_duration(),
            pattern=result.typing_pattern.value,
        )
        self.reset()
        return result

    def get_duration(self) -> float:
        if self._start_time is None:
            return 0
        return self.clock() - self._start_time

    def get_keystroke_count(self) -> int:
        return len(self._events)

    def reset(self) -> None:
        self._events = []
        self._start_time = None


def create_tracker(clock: Clock = mono_ms) -> ChordDetectionTracker:
    return ChordDetectionTracker(clock=clock)
