"""
Run-or-raise decision logic.

Repeated invocations cycle focus through the matching windows without any
saved state: the position in the cycle is derived each time from which
window currently has focus.
"""
import logging
from typing import Sequence

from .actions import Action, Dispatcher
from .Models import WindowInfo
from .window_detection import QueryError, WindowSource
from .window_rules import ConditionSet

logger = logging.getLogger(__name__)


def select_action(
    windows: Sequence[WindowInfo],
    conditions: ConditionSet,
    focused: WindowInfo | None,
    launch_command: str
) -> Action:
    """
    Decide between raising, cycling and launching.

    :param windows: All open windows, in window manager order
    :param conditions: Conditions a window must satisfy
    :param focused: Currently focused window, or None if unknown
    :param launch_command: Command to run when nothing matches
    :return: The action to dispatch
    """
    candidates = conditions.filter(windows)
    logger.debug(f"{len(candidates)} of {len(windows)} windows match {conditions!r}")

    current = focused if focused is not None and conditions.matches(focused) else None

    if current is None:
        if candidates:
            return Action.focus(candidates[0].address)
        return Action.launch(launch_command)

    for index, candidate in enumerate(candidates):
        if candidate.address == current.address:
            next_window = candidates[(index + 1) % len(candidates)]
            return Action.focus(next_window.address)

    # Focus changed between the two queries
    logger.debug(f"Focused window {current} is not among the candidates")
    return Action.none()


def run_or_raise(
    conditions: ConditionSet,
    launch_command: str,
    source: WindowSource,
    dispatcher: Dispatcher
) -> Action:
    """
    Run one invocation: query, decide and dispatch a single action.

    Query failures are not errors here. If the window list is unavailable
    the command is launched; if the focused window is unavailable nothing
    is treated as focused.

    :raises ActionError: If the chosen action cannot be dispatched
    """
    try:
        windows = source.list_windows()
    except QueryError as exc:
        logger.info(f"Window list unavailable ({exc}), launching")
        action = Action.launch(launch_command)
        dispatcher.dispatch(action)
        return action

    try:
        focused = source.active_window()
    except QueryError as exc:
        logger.debug(f"No focused window: {exc}")
        focused = None

    action = select_action(windows, conditions, focused, launch_command)
    logger.debug(f"Decided: {action}")
    dispatcher.dispatch(action)
    return action
