"""Observer port for the config domain."""

from typing import Protocol


class ConfigObserver(Protocol):
    """Observer port for config domain events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def scenario_loaded(self, name: str, num_checks: int, threshold: int) -> None: ...

    def scenario_threshold_lenient(self, name: str, threshold: int) -> None: ...
