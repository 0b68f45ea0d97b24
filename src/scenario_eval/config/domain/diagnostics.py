"""Where and how the diagnostic record is persisted."""

from pathlib import Path

from pydantic import BaseModel, Field

from scenario_eval.evaluation.domain.diagnostic import DEFAULT_PREVIEW_CHARS


class DiagnosticsConfig(BaseModel, frozen=True):
    """Settings for the best-effort diagnostic JSON artifact."""

    enabled: bool = True
    path: Path = Path("debug-analysis.json")
    preview_chars: int = Field(default=DEFAULT_PREVIEW_CHARS, ge=0)
    keep_history: bool = False
    history_dir: Path | None = None

    def resolved_history_dir(self) -> Path | None:
        """Return the history directory, defaulting to ``<path dir>/history``."""
        if not self.keep_history:
            return None
        if self.history_dir is not None:
            return self.history_dir
        return self.path.parent / "history"

    def relative_to(self, base: Path) -> "DiagnosticsConfig":
        """Return a copy whose relative paths are anchored at ``base``."""
        history_dir = self.history_dir
        if history_dir is not None and not history_dir.is_absolute():
            history_dir = base / history_dir
        path = self.path if self.path.is_absolute() else base / self.path
        return self.model_copy(update={"path": path, "history_dir": history_dir})
