"""Interface for objects whose values can be animated by transitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence


class Transitionable(ABC):
    """An object that exposes float values, keyed by a transition id.

    A transition reads the starting values with :meth:`get_values` and
    writes interpolated values back with :meth:`set_values`.
    """

    @abstractmethod
    def get_values(self, transition_id: int) -> list[float]:
        """Return the current values for ``transition_id``."""

    @abstractmethod
    def set_values(self, transition_id: int, values: Sequence[float]) -> None:
        """Apply ``values`` to the part of the object named by ``transition_id``."""