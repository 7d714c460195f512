"""Timed transcript segment."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TranscriptSegment:
    """Represents a single transcript segment with timing in seconds."""
    text: str
    start: float
    duration: float

    @property
    def end(self) -> float:
        """Calculate end time."""
        return self.start + self.duration
