"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def scenario_loaded(self, name: str, num_checks: int, threshold: int) -> None:
        self._log.info(
            "config.scenario_loaded",
            name=name,
            num_checks=num_checks,
            threshold=threshold,
        )

    def scenario_threshold_lenient(self, name: str, threshold: int) -> None:
        self._log.warning(
            "config.scenario_threshold_lenient",
            name=name,
            threshold=threshold,
            message="A threshold of 1 passes any transcript that matches a single check",
        )
