"""Auto-hide controller -- two-state machine over the dock and trigger surfaces."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Callable, Protocol

from hydock.log import get_logger

if TYPE_CHECKING:
    from hydock.core.position import Position

log = get_logger(name="autohide")


class Visibility(enum.Enum):
    SHOWN = "shown"
    HIDDEN = "hidden"


class Surface(Protocol):
    """What the controller needs from a dock or trigger window."""

    def show(self) -> None: ...

    def hide(self) -> None: ...

    def attach_hover(self, callback: Callable[[], None]) -> None: ...

    def detach_hover(self) -> None: ...

    def set_position(self, pos: Position) -> None: ...


class VisibilityController:
    """Shows and hides the dock according to the auto_hide policy.

    The policy is re-applied on every refresh tick; pointer events arrive
    in between from the surfaces' hover listeners.
    """

    def __init__(self, dock: Surface, trigger: Surface) -> None:
        self._dock = dock
        self._trigger = trigger
        self.state = Visibility.SHOWN
        self.position: Position | None = None
        self._listening = False

    @property
    def enabled(self) -> bool:
        return self._listening

    # Visibility state machine:
    #
    #   ┌───────┐  leave dock    ┌────────┐
    #   │ SHOWN │──────────────->│ HIDDEN │
    #   └───────┘                └────────┘
    #       ^     enter trigger      │
    #       └────────────────────────┘
    #
    # Both transitions only exist while auto_hide is on; turning it off
    # detaches the listeners and forces SHOWN.

    def apply_policy(self, auto_hide: bool) -> None:
        """Apply the auto_hide setting read on this tick."""
        if auto_hide:
            self._trigger.show()
            if not self._listening:
                log.debug("auto-hide on: attaching hover listeners")
                self._dock.attach_hover(self.on_dock_leave)
                self._trigger.attach_hover(self.on_trigger_enter)
                self._listening = True
            return

        if self._listening:
            log.debug("auto-hide off: detaching hover listeners")
            self._dock.detach_hover()
            self._trigger.detach_hover()
            self._listening = False
        self.state = Visibility.SHOWN
        self._dock.show()
        self._trigger.hide()

    def on_dock_leave(self) -> None:
        """Pointer left the dock surface."""
        if not self._listening:
            return
        log.debug("on_dock_leave: state=%s", self.state.value)
        self.state = Visibility.HIDDEN
        self._dock.hide()

    def on_trigger_enter(self) -> None:
        """Pointer entered the trigger strip."""
        if not self._listening:
            return
        log.debug("on_trigger_enter: state=%s", self.state.value)
        self.state = Visibility.SHOWN
        self._dock.show()

    def reanchor(self, pos: Position) -> bool:
        """Move both surfaces to ``pos``; returns True when it changed.

        The current visibility state is kept as is.
        """
        if pos == self.position:
            return False
        log.info("Anchoring dock to %s", pos.value)
        self.position = pos
        self._dock.set_position(pos)
        self._trigger.set_position(pos)
        return True
