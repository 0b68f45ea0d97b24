"""Observer port for the transcript domain."""

from typing import Protocol


class TranscriptObserver(Protocol):
    """Observer port for transcript loading events."""

    def transcript_loading_started(self, path: str, text_key: str) -> None: ...

    def transcript_loaded(self, transcript_id: str) -> None: ...

    def transcript_loading_completed(self, path: str, total_transcripts: int) -> None: ...

    def transcript_loading_failed(self, path: str, reason: str) -> None: ...
