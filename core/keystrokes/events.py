from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Any
import time

# Milliseconds, monotonic; injected wherever "now" is needed.
Clock = Callable[[], float]

# --- timing helpers ---
def mono_ms() -> float:
    # Monotonic high-res timestamp in ms (immune to system clock changes)
    return time.perf_counter() * 1000.0

# --- core enums ---
class TypingPattern(Enum):
    """How a burst of characters was entered."""
    CHORD = "chord"
    SEQUENTIAL = "sequential"
    UNKNOWN = "unknown"

# --- keystroke event ---
@dataclass(frozen=True)
class KeystrokeEvent:
    """One character as it appeared, with the time it appeared (ms)."""
    char: str
    timestamp: float

    def to_record(self) -> Dict[str, Any]:
        return {
            "char": self.char,
            "timestamp": self.timestamp,
        }

# --- classification result ---
@dataclass(frozen=True)
class ClassificationResult:
    """
    Verdict for one burst. `used_chord` is derived from the pattern so the two
    can never disagree.
    """
    typing_pattern: TypingPattern
    confidence: float       # fixed per rule, 0..1
    reason: str             # human-readable 'why'

    @property
    def used_chord(self) -> bool:
        return self.typing_pattern is TypingPattern.CHORD

    def to_record(self) -> Dict[str, Any]:
        return {
            "used_chord": self.used_chord,
            "typing_pattern": self.typing_pattern.value,
            "confidence": self.confidence,
            "reason": self.reason,
        }
