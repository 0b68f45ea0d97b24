"""Structlog implementation of the TranscriptObserver port."""

import structlog


class StructlogTranscriptObserver:
    """Delegates transcript domain events to structlog.

    Satisfies the TranscriptObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def transcript_loading_started(self, path: str, text_key: str) -> None:
        self._log.info("transcript.loading_started", path=path, text_key=text_key)

    def transcript_loaded(self, transcript_id: str) -> None:
        self._log.debug("transcript.loaded", transcript_id=transcript_id)

    def transcript_loading_completed(self, path: str, total_transcripts: int) -> None:
        self._log.info(
            "transcript.loading_completed",
            path=path,
            total_transcripts=total_transcripts,
        )

    def transcript_loading_failed(self, path: str, reason: str) -> None:
        self._log.error("transcript.loading_failed", path=path, reason=reason)
