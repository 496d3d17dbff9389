"""Navigation controller: which screen is showing, and how that changes.

The dashboard is a fixed hub. Onboarding leads to it once, the dashboard
opens one detail screen at a time, and every detail screen returns straight
to the dashboard. There is no history stack.

All state changes go through ``reduce``, a pure function of the current
screen and a ``NavEvent``; ``NavigationController.dispatch`` is the only
place that assigns the result.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .screens import DESTINATIONS, ScreenID

Listener = Callable[[ScreenID, ScreenID], None]


class InvalidScreenIdentifier(ValueError):
    """Raised when ``navigate`` receives something that is not a destination."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Not a navigable screen: {value!r}")
        self.value = value


class NavAction(Enum):
    NAVIGATE = "navigate"
    BACK = "back"
    COMPLETE_ONBOARDING = "complete_onboarding"


@dataclass(frozen=True)
class NavEvent:
    """One navigation request. ``target`` is only set for NAVIGATE."""

    action: NavAction
    target: ScreenID | None = None


def resolve_destination(value: ScreenID | str) -> ScreenID:
    """Map a ScreenID or its string value to a navigable ScreenID."""
    screen_id: ScreenID | None
    if isinstance(value, ScreenID):
        screen_id = value
    else:
        try:
            screen_id = ScreenID(value)
        except ValueError:
            screen_id = None
    if screen_id is None or screen_id not in DESTINATIONS:
        raise InvalidScreenIdentifier(value)
    return screen_id


def reduce(current: ScreenID, event: NavEvent) -> ScreenID:
    """Return the screen that follows ``current`` after ``event``."""
    if event.action in (NavAction.BACK, NavAction.COMPLETE_ONBOARDING):
        return ScreenID.DASHBOARD
    if event.action is NavAction.NAVIGATE:
        if event.target is None or event.target not in DESTINATIONS:
            raise InvalidScreenIdentifier(event.target)
        # Only the hub opens destinations.
        if current is not ScreenID.DASHBOARD:
            return current
        return event.target
    raise ValueError(f"Unknown navigation action: {event.action!r}")


class NavigationController:
    """Owns the current screen for the lifetime of the process."""

    def __init__(self) -> None:
        self._current = ScreenID.ONBOARDING
        self._listeners: list[Listener] = []

    @property
    def current(self) -> ScreenID:
        return self._current

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(previous, current)`` after every state change.

        Returns a function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, event: NavEvent) -> ScreenID:
        previous = self._current
        following = reduce(previous, event)
        if event.action is NavAction.NAVIGATE and following is previous:
            if previous is not event.target:
                print(
                    f"Ignored navigation to {event.target.value} "
                    f"from {previous.value}"
                )
            return previous
        self._current = following
        if following is not previous:
            for listener in list(self._listeners):
                listener(previous, following)
        return following

    def navigate(self, target: ScreenID | str) -> ScreenID:
        """Open ``target`` from the dashboard.

        Raises ``InvalidScreenIdentifier`` (state unchanged) for anything
        that is not the dashboard or one of the detail screens.
        """
        return self.dispatch(NavEvent(NavAction.NAVIGATE, resolve_destination(target)))

    def go_back(self) -> ScreenID:
        """Return to the dashboard, whichever screen is showing."""
        return self.dispatch(NavEvent(NavAction.BACK))

    def complete_onboarding(self) -> ScreenID:
        """Leave onboarding for the dashboard. Harmless from any other screen."""
        return self.dispatch(NavEvent(NavAction.COMPLETE_ONBOARDING))


__all__ = [
    "InvalidScreenIdentifier",
    "NavAction",
    "NavEvent",
    "NavigationController",
    "reduce",
    "resolve_destination",
]
