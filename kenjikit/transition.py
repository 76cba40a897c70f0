"""Timed transitions that move a target's values from a start to a destination.

Durations and elapsed times are in seconds, given as floats or as
:class:`datetime.timedelta` values.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import timedelta
from enum import Enum

from kenjikit.transitionable import Transitionable

Duration = "float | timedelta"


def _seconds(value: float | timedelta) -> float:
    if isinstance(value, timedelta):
        return value.total_seconds()
    return float(value)


class TransitionMode(Enum):
    """What a transition does once it reaches its destination."""

    FINITE = 0
    """Mark the transition as finished."""
    FINITE_REVERSE = 1
    """Play back to the start values, then mark it as finished."""
    LOOP = 2
    """Jump back to the start values and play again, forever."""
    LOOP_SMOOTH = 3
    """Play back and forth between start and destination, forever."""


class FinishMode(Enum):
    """Values a transition leaves on its target when it is finished early."""

    START = 0
    CURRENT = 1
    DESTINATION = 2


class TransitionContract:
    """The parameters of a transition: target, values, duration, delay and mode.

    The start values are read from the target when the contract is made.
    """

    def __init__(
        self,
        target: Transitionable,
        transition_id: int,
        duration: float | timedelta,
        destination: Sequence[float],
        delay: float | timedelta = 0.0,
        mode: TransitionMode = TransitionMode.FINITE,
    ) -> None:
        duration_s = _seconds(duration)
        delay_s = _seconds(delay)
        if duration_s < 0:
            raise ValueError(f"duration must not be negative, got {duration_s}")
        if duration_s == 0 and mode in (TransitionMode.LOOP, TransitionMode.LOOP_SMOOTH):
            raise ValueError("a looping transition needs a positive duration")
        if delay_s < 0:
            raise ValueError(f"delay must not be negative, got {delay_s}")
        beginning = tuple(float(v) for v in target.get_values(transition_id))
        destination_values = tuple(float(v) for v in destination)
        if len(beginning) != len(destination_values):
            raise ValueError(
                f"destination has {len(destination_values)} value(s), "
                f"target has {len(beginning)}"
            )
        self.target = target
        self.transition_id = transition_id
        self.mode = mode
        self.beginning = beginning
        self.destination = destination_values
        self.duration = duration_s
        self.delay = delay_s
        self.destination_callback: Callable[[], None] | None = None

    def set_destination_callback(self, callback: Callable[[], None] | None) -> None:
        """Set the function called each time the destination is reached."""
        self.destination_callback = callback


class Transition(TransitionContract):
    """A contract being played: it tracks elapsed time and updates its target."""

    def __init__(self, contract: TransitionContract) -> None:
        # The start values come from the contract, not from the target's current state.
        self.target = contract.target
        self.transition_id = contract.transition_id
        self.mode = contract.mode
        self.beginning = contract.beginning
        self.destination = contract.destination
        self.duration = contract.duration
        self.delay = contract.delay
        self.destination_callback = contract.destination_callback
        self._elapsed = 0.0
        self._reversed = False
        self._finished = False

    @property
    def elapsed(self) -> float:
        """Seconds elapsed since the transition started, delay included."""
        return self._elapsed

    @property
    def is_reversed(self) -> bool:
        """Whether the transition is playing from destination back to start."""
        return self._reversed

    @property
    def is_finished(self) -> bool:
        """Whether the transition is over and may be dropped."""
        return self._finished

    def set_elapsed(self, elapsed: float | timedelta) -> None:
        """Set the elapsed time, then update the target's values."""
        self._elapsed = _seconds(elapsed)
        self._update_values()

    def add_to_elapsed(self, added: float | timedelta) -> None:
        """Advance the elapsed time by ``added``, then update the target."""
        self.set_elapsed(self._elapsed + _seconds(added))

    def finish(self, finish_mode: FinishMode = FinishMode.DESTINATION) -> None:
        """Mark the transition as finished, leaving the values ``finish_mode`` names."""
        if finish_mode is FinishMode.START:
            self.target.set_values(self.transition_id, list(self.beginning))
        elif finish_mode is FinishMode.DESTINATION:
            self.target.set_values(self.transition_id, list(self.destination))
        self._finished = True

    def _interpolate(self, fraction: float) -> list[float]:
        return [
            start + (end - start) * fraction
            for start, end in zip(self.beginning, self.destination)
        ]

    def _update_values(self) -> None:
        while not self._finished:
            progress = self._elapsed - self.delay
            if progress < 0:
                return
            if progress < self.duration:
                fraction = progress / self.duration
                if self._reversed:
                    fraction = 1.0 - fraction
                self.target.set_values(self.transition_id, self._interpolate(fraction))
                return
            self._handle_endlife()

    def _handle_endlife(self) -> None:
        if not self._reversed and self.destination_callback is not None:
            self.destination_callback()
        if self.mode is TransitionMode.FINITE:
            self.finish(FinishMode.DESTINATION)
        elif self.mode is TransitionMode.FINITE_REVERSE:
            if self._reversed:
                self.finish(FinishMode.START)
            else:
                self._reversed = True
                self._elapsed -= self.duration
        elif self.mode is TransitionMode.LOOP:
            self.target.set_values(self.transition_id, list(self.beginning))
            self._elapsed -= self.duration
        else:
            self._reversed = not self._reversed
            self._elapsed -= self.duration


class TransitionEngine:
    """Plays several transitions at once and drops those that are finished."""

    def __init__(self) -> None:
        self._transitions: list[Transition] = []

    def update(self, delta: float | timedelta) -> None:
        """Advance every transition by ``delta`` and drop the finished ones."""
        for transition in self._transitions:
            transition.add_to_elapsed(delta)
        self._transitions = [t for t in self._transitions if not t.is_finished]

    def start_contract(self, contract: TransitionContract) -> Transition:
        """Start playing ``contract`` and return the running transition."""
        transition = Transition(contract)
        self._transitions.append(transition)
        return transition

    def finish_every_transition(
        self, finish_mode: FinishMode = FinishMode.DESTINATION
    ) -> None:
        """Finish and drop every transition."""
        for transition in self._transitions:
            transition.finish(finish_mode)
        self._transitions.clear()

    def finish_every_transition_of_target(
        self,
        target: Transitionable,
        finish_mode: FinishMode = FinishMode.DESTINATION,
    ) -> None:
        """Finish and drop the transitions acting on ``target``."""
        kept = []
        for transition in self._transitions:
            if transition.target is target:
                transition.finish(finish_mode)
            else:
                kept.append(transition)
        self._transitions = kept

    def __len__(self) -> int:
        return len(self._transitions)