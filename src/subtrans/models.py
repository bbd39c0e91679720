"""Data models for subtrans."""

from pydantic import BaseModel, ConfigDict, Field


class TimeCode(BaseModel):
    """A non-negative duration with millisecond resolution."""

    model_config = ConfigDict(frozen=True)

    milliseconds: int = Field(ge=0)

    @classmethod
    def from_parts(
        cls, hours: int = 0, minutes: int = 0, seconds: int = 0, millis: int = 0
    ) -> "TimeCode":
        """Build a time code from its display components."""
        return cls(
            milliseconds=((hours * 60 + minutes) * 60 + seconds) * 1000 + millis
        )

    @classmethod
    def from_seconds(cls, seconds: float) -> "TimeCode":
        """Build a time code from fractional seconds."""
        return cls(milliseconds=int(round(seconds * 1000)))

    @property
    def hours(self) -> int:
        return self.milliseconds // 3_600_000

    @property
    def minutes(self) -> int:
        return (self.milliseconds // 60_000) % 60

    @property
    def seconds(self) -> int:
        return (self.milliseconds // 1000) % 60

    @property
    def millis(self) -> int:
        return self.milliseconds % 1000

    def __lt__(self, other: "TimeCode") -> bool:
        return self.milliseconds < other.milliseconds

    def __le__(self, other: "TimeCode") -> bool:
        return self.milliseconds <= other.milliseconds

    def __gt__(self, other: "TimeCode") -> bool:
        return self.milliseconds > other.milliseconds

    def __ge__(self, other: "TimeCode") -> bool:
        return self.milliseconds >= other.milliseconds


class Subtitle(BaseModel):
    """A single subtitle entry with timing and text."""

    model_config = ConfigDict(frozen=True)

    index: int
    start: TimeCode
    end: TimeCode
    text: str  # may contain embedded line breaks

    def with_text(self, text: str) -> "Subtitle":
        """Return a copy of this entry with only the text replaced."""
        return self.model_copy(update={"text": text})
