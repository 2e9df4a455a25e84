"""
Callback integration points for progress reporting and cooperative stopping.

Callbacks are plain objects; every method is optional. Returning a truthy
value from ``on_evaluation`` or ``on_generation`` (or from ``should_stop``)
requests that the run terminates at the next generation boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Protocol, Sequence

import numpy as np


@dataclass
class RunContext:
    """
    Static context of an optimization run.
    Passed to on_start events.
    """

    n_var: int
    n_obj: int
    config: Any
    algorithm_name: str = "moead"


class MOEADCallback(Protocol):
    """Callback interface for progress/telemetry hooks."""

    def on_start(self, ctx: RunContext) -> None: ...

    def on_evaluation(self, point: np.ndarray, objectives: np.ndarray) -> Optional[bool]: ...

    def on_generation(
        self,
        generation: int,
        F: Optional[np.ndarray] = None,
        X: Optional[np.ndarray] = None,
        stats: Optional[dict[str, Any]] = None,
    ) -> Optional[bool]: ...

    def should_stop(self) -> bool: ...

    def on_end(
        self,
        final_F: Optional[np.ndarray] = None,
        final_stats: Optional[dict[str, Any]] = None,
    ) -> None: ...


class CallbackList:
    """Dispatch events to every registered callback."""

    def __init__(self, callbacks: Sequence[Any] = ()) -> None:
        self.callbacks = list(callbacks)
        self.stop_requested = False

    def _call(self, name: str, *args: Any, **kwargs: Any) -> bool:
        requested = False
        for cb in self.callbacks:
            method = getattr(cb, name, None)
            if callable(method) and method(*args, **kwargs):
                requested = True
        if requested:
            self.stop_requested = True
        return requested

    def on_start(self, ctx: RunContext) -> None:
        self._call("on_start", ctx)

    def on_evaluation(self, point: np.ndarray, objectives: np.ndarray) -> None:
        self._call("on_evaluation", point, objectives)

    def on_generation(
        self,
        generation: int,
        F: Optional[np.ndarray] = None,
        X: Optional[np.ndarray] = None,
        stats: Optional[dict[str, Any]] = None,
    ) -> None:
        self._call("on_generation", generation, F=F, X=X, stats=stats)

    def should_stop(self) -> bool:
        """Poll ``should_stop`` on every callback; sticky once any stop was requested."""
        if self._call("should_stop"):
            return True
        return self.stop_requested

    def on_end(
        self,
        final_F: Optional[np.ndarray] = None,
        final_stats: Optional[dict[str, Any]] = None,
    ) -> None:
        self._call("on_end", final_F=final_F, final_stats=final_stats)


__all__ = ["CallbackList", "MOEADCallback", "RunContext"]
