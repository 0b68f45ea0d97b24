"""JSONL transcript loader — reads a batch file and returns Transcript objects."""

import json
from pathlib import Path

from scenario_eval.transcript.domain.observer import TranscriptObserver
from scenario_eval.transcript.domain.transcript import Transcript
from scenario_eval.transcript.infrastructure.errors import TranscriptLoadError

DEFAULT_TEXT_KEY = "fullResponse"
DEFAULT_ID_KEY = "id"


class JsonlTranscriptLoader:
    """Loads a JSONL file holding one transcript object per line."""

    def __init__(self, observer: TranscriptObserver) -> None:
        self._observer = observer

    def load(
        self,
        path: Path,
        text_key: str = DEFAULT_TEXT_KEY,
        id_key: str = DEFAULT_ID_KEY,
    ) -> list[Transcript]:
        """
        Load every transcript from ``path``.

        Lines without ``id_key`` are identified by their line index. Collects
        ALL per-line errors before raising a single TranscriptLoadError.

        Raises:
            TranscriptLoadError: if the file cannot be read, any line is invalid
                JSON or not an object, or any line lacks a string ``text_key``.
        """
        path_str = str(path)
        self._observer.transcript_loading_started(path=path_str, text_key=text_key)

        try:
            lines = self._read_lines(path=path)
        except FileNotFoundError:
            reason = f"file not found: {path_str}"
            self._observer.transcript_loading_failed(path=path_str, reason=reason)
            raise TranscriptLoadError(reason=reason)
        except (OSError, UnicodeDecodeError) as exc:
            reason = f"cannot read {path_str}: {exc}"
            self._observer.transcript_loading_failed(path=path_str, reason=reason)
            raise TranscriptLoadError(reason=reason) from exc

        transcripts, errors = self._parse_lines(
            lines=lines, text_key=text_key, id_key=id_key
        )

        if errors:
            reason = "; ".join(errors)
            self._observer.transcript_loading_failed(path=path_str, reason=reason)
            raise TranscriptLoadError(reason=reason)

        self._observer.transcript_loading_completed(
            path=path_str, total_transcripts=len(transcripts)
        )
        return transcripts

    def _read_lines(self, path: Path) -> list[str]:
        """Open the file and return all non-empty lines."""
        with open(path, encoding="utf-8") as fh:
            return [line for line in fh if line.strip()]

    def _parse_lines(
        self, lines: list[str], text_key: str, id_key: str
    ) -> tuple[list[Transcript], list[str]]:
        """Parse each line into a Transcript, collecting errors without aborting early."""
        transcripts: list[Transcript] = []
        errors: list[str] = []

        for index, line in enumerate(lines):
            result = self._parse_line(
                line=line, index=index, text_key=text_key, id_key=id_key
            )
            if isinstance(result, str):
                errors.append(result)
            else:
                transcripts.append(result)
                self._observer.transcript_loaded(transcript_id=result.transcript_id)

        return transcripts, errors

    def _parse_line(
        self, line: str, index: int, text_key: str, id_key: str
    ) -> Transcript | str:
        """Return a Transcript on success, or an error string describing the problem."""
        try:
            data = json.loads(line)
        except json.JSONDecodeError as exc:
            return f"line {index}: invalid JSON: {exc}"

        if not isinstance(data, dict):
            return f"line {index}: expected a JSON object"
        if text_key not in data:
            return f"line {index}: missing key '{text_key}'"

        text = data[text_key]
        if not isinstance(text, str):
            return f"line {index}: '{text_key}' must be a string"

        transcript_id = str(data.get(id_key, "") or index)
        return Transcript(transcript_id=transcript_id, text=text)
