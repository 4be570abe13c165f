# app/controller/word_runner.py
from __future__ import annotations
from dataclasses import dataclass
from queue import Queue
from typing import Optional, Dict, Any
import structlog

from core.keystrokes.events import Clock, ClassificationResult, mono_ms
from core.keystrokes.words import is_word_boundary, compare_words
from core.utils.queueing import safe_put
from app.controller.chord_tracker import ChordDetectionTracker

log = structlog.get_logger()

@dataclass(frozen=True)
class WordAttempt:
    """One practice word: what was asked, what came out, and how it was entered."""
    target: str
    typed: str
    correct: bool
    result: ClassificationResult
    duration_ms: float

    def to_record(self) -> Dict[str, Any]:
        rec = {
            "target": self.target,
            "typed": self.typed,
            "correct": self.correct,
            "duration_ms": self.duration_ms,
        }
        rec.update(self.result.to_record())
        return rec

class WordRunner:
    """
    Drives a tracker one target word at a time and publishes a WordAttempt per
    word onto out_q. A space or punctuation mark ends the word.
    """
    def __init__(
        self,
        out_q: Queue,
        tracker: Optional[ChordDetectionTracker] = None,
        clock: Clock = mono_ms,
    ):
        self.out_q = out_q
        self.tracker = tracker or ChordDetectionTracker(clock=clock)
        self._target = ""
        self._typed = ""

    @property
    def target(self) -> str:
        return self._target

    @property
    def typed(self) -> str:
        return self._typed

    def begin(self, target: str) -> None:
        self._target = target
        self._typed = ""
        self.tracker.start()

    def feed(self, char: str) -> Optional[WordAttempt]:
        if is_word_boundary(char):
            # leading delimiters before any character are noise
            if not self._typed:
                return None
            return self.finish()

        self.tracker.record_keystroke(char)
        self._typed += char
        return None

    def finish(self) -> WordAttempt:
        duration_ms = self.tracker.get_duration()
        result = self.tracker.complete()
        attempt = WordAttempt(
            target=self._target,
            typed=self._typed,
            correct=compare_words(self._typed, self._target),
            result=result,
            duration_ms=duration_ms,
        )
        safe_put(self.out_q, attempt)
        log.info(
            "word.attempt",
            target=attempt.target,
            correct=attempt.correct,
            pattern=result.typing_pattern.value,
            confidence=result.confidence,
        )
        self._target = ""
        self._typed = ""
        return attempt

    def cancel(self) -> None:
        self.tracker.reset()
        self._typed = ""
        log.debug("word.cancel", target=self._target)
        self._target = ""
