# app/analytics/chord_detection.py
from __future__ import annotations
from typing import Iterable, Optional
import numpy as np
import structlog

from core.keystrokes.events import KeystrokeEvent, ClassificationResult, TypingPattern
from app.analytics.config import CHORD_THRESHOLD_MS, SEQUENTIAL_THRESHOLD_MS, CHORD_RATIO_MAX

log = structlog.get_logger()


def _result(pattern: TypingPattern, confidence: float, reason: str, rule: str) -> ClassificationResult:
    log.debug("chord.classify", rule=rule, pattern=pattern.value, confidence=confidence, reason=reason)
    return ClassificationResult(typing_pattern=pattern, confidence=confidence, reason=reason)


def classify_by_duration(word: str, raw_input: str, duration_ms: Optional[float] = None) -> ClassificationResult:
    """
    Classify a word from how long the whole burst took to appear.

    Rules, first match wins:
      - duration below the chord threshold            -> chord (0.95)
      - duration well under expected sequential time  -> chord (0.85)
      - any other measured duration                   -> sequential (0.8)
      - no timing, word appeared whole (+ delimiter)  -> chord (0.7)
      - no timing otherwise                           -> unknown (0.5)
    """
    if duration_ms is not None:
        if duration_ms < CHORD_THRESHOLD_MS:
            return _result(
                TypingPattern.CHORD, 0.95,
                f"Input appeared in {duration_ms:g}ms (< {CHORD_THRESHOLD_MS}ms threshold)",
                "duration_threshold",
            )

        # empty word has no expected time; skip the ratio rule
        if word:
            expected_ms = len(word) * SEQUENTIAL_THRESHOLD_MS
            ratio = duration_ms / expected_ms
            if ratio < CHORD_RATIO_MAX:
                return _result(
                    TypingPattern.CHORD, 0.85,
                    f"Input was {ratio * 100:.0f}% of expected sequential time",
                    "duration_ratio",
                )

        return _result(
            TypingPattern.SEQUENTIAL, 0.8,
            f"Input duration {duration_ms:g}ms suggests sequential typing",
            "duration_sequential",
        )

    if raw_input == word or raw_input == word + " ":
        return _result(
            TypingPattern.CHORD, 0.7,
            "Word appeared with immediate space (likely chord)",
            "instant_output",
        )

    return _result(
        TypingPattern.UNKNOWN, 0.5,
        "Unable to determine typing pattern without timing data",
        "no_timing",
    )


def classify_by_events(events: Iterable[KeystrokeEvent]) -> ClassificationResult:
    """
    Classify a burst from its per-character timestamps.

    Works on a timestamp-sorted copy (stable, so simultaneous characters keep
    their recording order); the caller's sequence is left untouched.
    """
    ordered = sorted(events, key=lambda e: e.timestamp)
    n = len(ordered)

    if n == 0:
        return _result(TypingPattern.UNKNOWN, 0.0, "No keystroke events to analyze", "no_events")

    if n == 1:
        return _result(
            TypingPattern.SEQUENTIAL, 0.9,
            "Single character - sequential by definition",
            "single_event",
        )

    total_ms = ordered[-1].timestamp - ordered[0].timestamp
    if total_ms < CHORD_THRESHOLD_MS:
        return _result(
            TypingPattern.CHORD, 0.95,
            f"All {n} characters appeared within {total_ms:g}ms",
            "total_window",
        )

    # inter-arrival gaps between consecutive characters
    intervals = np.diff(np.array([e.timestamp for e in ordered], dtype=float))
    avg_interval = float(intervals.mean())
    max_interval = float(intervals.max())

    if avg_interval < CHORD_THRESHOLD_MS / 2 and max_interval < CHORD_THRESHOLD_MS:
        return _result(
            TypingPattern.CHORD, 0.85,
            f"Average interval {avg_interval:.0f}ms suggests chord input",
            "fast_intervals",
        )

    if avg_interval >= SEQUENTIAL_THRESHOLD_MS:
        return _result(
            TypingPattern.SEQUENTIAL, 0.85,
            f"Average interval {avg_interval:.0f}ms suggests sequential typing",
            "slow_intervals",
        )

    return _result(
        TypingPattern.UNKNOWN, 0.5,
        f"Intermediate timing (avg {avg_interval:.0f}ms) is ambiguous",
        "ambiguous",
    )
