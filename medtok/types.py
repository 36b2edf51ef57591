from __future__ import annotations

from dataclasses import dataclass

# -----------------------
# Core data types
# -----------------------

@dataclass(frozen=True, order=True)
class TokenSpan:
    """
    One token as a half-open character range [start, end) into the source text.
    Ordering and equality follow (start, end).
    """
    start: int  # inclusive char index in original string
    end: int    # exclusive char index in original string

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"span start must be >= 0, got {self.start}")
        if self.end <= self.start:
            raise ValueError(f"span end ({self.end}) must be > start ({self.start})")

    def __len__(self) -> int:
        return self.end - self.start

    def covered_text(self, text: str) -> str:
        return text[self.start:self.end]

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)
