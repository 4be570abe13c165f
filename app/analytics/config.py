from __future__ import annotations

# Shared by both classifiers; not tunable per call.

# Keystrokes closer together than this count as simultaneous (ms).
# Chording keyboards typically emit a whole word within ~50ms.
CHORD_THRESHOLD_MS: int = 80

# Typical sequential typing, per character (ms).
SEQUENTIAL_THRESHOLD_MS: int = 100

# duration / (len(word) * SEQUENTIAL_THRESHOLD_MS) below this → chord
CHORD_RATIO_MAX: float = 0.3
