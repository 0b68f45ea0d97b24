"""A transcript: the full text of one agent run."""

from pydantic import BaseModel, Field


class Transcript(BaseModel, frozen=True):
    """Immutable transcript; ``text`` may be empty."""

    transcript_id: str = Field(min_length=1)
    text: str
