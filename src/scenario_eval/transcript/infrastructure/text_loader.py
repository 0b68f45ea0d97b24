"""Load a single transcript from a text file, or from stdin when the path is ``-``."""

import sys
from pathlib import Path

from scenario_eval.transcript.domain.transcript import Transcript
from scenario_eval.transcript.infrastructure.errors import TranscriptLoadError

STDIN_PATH = Path("-")


def load_transcript_text(path: Path) -> Transcript:
    """
    Read one transcript verbatim; the transcript id is the file stem.

    Raises:
        TranscriptLoadError: if the file does not exist, cannot be read, or is not valid UTF-8.
    """
    if path == STDIN_PATH:
        return Transcript(transcript_id="stdin", text=sys.stdin.read())

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise TranscriptLoadError(f"file not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise TranscriptLoadError(f"{path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise TranscriptLoadError(f"cannot read {path}: {exc}") from exc

    return Transcript(transcript_id=path.stem or str(path), text=text)
