"""Fake TranscriptObserver for use in tests — records events without mocking."""


class FakeTranscriptObserver:
    def __init__(self) -> None:
        self.started: list[str] = []
        self.loaded_ids: list[str] = []
        self.completed: list[int] = []
        self.failures: list[str] = []

    def transcript_loading_started(self, path: str, text_key: str) -> None:
        self.started.append(path)

    def transcript_loaded(self, transcript_id: str) -> None:
        self.loaded_ids.append(transcript_id)

    def transcript_loading_completed(self, path: str, total_transcripts: int) -> None:
        self.completed.append(total_transcripts)

    def transcript_loading_failed(self, path: str, reason: str) -> None:
        self.failures.append(reason)
