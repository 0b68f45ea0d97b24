"""Best-effort persistence of DiagnosticRecord files."""

from pathlib import Path

from scenario_eval.evaluation.domain.diagnostic import DiagnosticRecord
from scenario_eval.evaluation.domain.observer import EvaluationObserver


class JsonDiagnosticWriter:
    """Writes one DiagnosticRecord as a JSON document to a fixed path.

    Each write overwrites the previous file. Keeping older records is opt-in:
    when ``history_dir`` is set, a timestamped copy is written there as well.
    """

    def __init__(
        self,
        path: Path,
        observer: EvaluationObserver,
        history_dir: Path | None = None,
    ) -> None:
        self._path = path
        self._observer = observer
        self._history_dir = history_dir

    @property
    def path(self) -> Path:
        return self._path

    def write(self, record: DiagnosticRecord) -> Path | None:
        """
        Persist ``record``; return the written path, or None if writing failed.

        Serialization and filesystem errors are reported to the observer and
        swallowed. ValueError covers PydanticSerializationError and
        UnicodeEncodeError, e.g. a transcript holding a lone surrogate.
        """
        try:
            payload = record.to_json()
            _write_text(path=self._path, payload=payload)
        except (OSError, ValueError) as exc:
            self._observer.diagnostic_write_failed(path=str(self._path), reason=str(exc))
            return None
        self._observer.diagnostic_written(path=str(self._path))

        if self._history_dir is not None:
            history_path = self._history_dir / _history_name(
                stem=self._path.stem, record=record
            )
            try:
                _write_text(path=history_path, payload=payload)
            except (OSError, ValueError) as exc:
                self._observer.diagnostic_write_failed(
                    path=str(history_path), reason=str(exc)
                )
            else:
                self._observer.diagnostic_written(path=str(history_path))

        return self._path


def _write_text(path: Path, payload: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(payload, encoding="utf-8")


def _history_name(stem: str, record: DiagnosticRecord) -> str:
    """Build ``{stem}.{YYYYmmddTHHMMSSffffff}.json`` from the record timestamp."""
    return f"{stem}.{record.timestamp.strftime('%Y%m%dT%H%M%S%f')}.json"
