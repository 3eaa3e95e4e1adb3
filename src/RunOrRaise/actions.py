"""
Actions issued to the window manager.

Focusing a window and launching a command are both fire-and-forget: the
hyprctl process is spawned and never waited for, so an issued dispatch
that has no effect looks the same as a successful one.
"""
import logging
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from .errors import RunOrRaiseError

logger = logging.getLogger(__name__)


class ActionError(RunOrRaiseError):
    """Exception raised when an action cannot be dispatched."""


class ActionType(Enum):
    FOCUS = "focus"
    LAUNCH = "launch"
    NONE = "none"


@dataclass(frozen=True)
class Action:
    """
    A decided action.

    Attributes:
        type: What to do
        target: Window address for FOCUS, command line for LAUNCH
    """
    type: ActionType
    target: str | None = None

    @classmethod
    def focus(cls, address: str) -> "Action":
        return cls(ActionType.FOCUS, address)

    @classmethod
    def launch(cls, command: str) -> "Action":
        return cls(ActionType.LAUNCH, command)

    @classmethod
    def none(cls) -> "Action":
        return cls(ActionType.NONE)

    def __str__(self) -> str:
        if self.type is ActionType.NONE:
            return "no action"
        return f"{self.type.value} {self.target}"


class Dispatcher(ABC):
    """Write side of the window manager boundary."""

    @abstractmethod
    def focus(self, address: str) -> None:
        """
        Focus the window with the given address.

        :raises ActionError: If the request cannot be issued
        """
        pass

    @abstractmethod
    def launch(self, command: str) -> None:
        """
        Launch a command.

        :raises ActionError: If the request cannot be issued
        """
        pass

    def dispatch(self, action: Action) -> None:
        """Carry out a decided action; NONE does nothing."""
        if action.type is ActionType.FOCUS:
            self.focus(action.target)
        elif action.type is ActionType.LAUNCH:
            self.launch(action.target)
        else:
            logger.debug("Nothing to dispatch")


class HyprctlDispatcher(Dispatcher):
    """Dispatches actions by spawning hyprctl."""

    def __init__(self, hyprctl: str = "hyprctl"):
        self.hyprctl = hyprctl

    def focus(self, address: str) -> None:
        logger.info(f"Focusing window {address}")
        self._spawn([self.hyprctl, "dispatch", "focuswindow", f"address:{address}"])

    def launch(self, command: str) -> None:
        # Launch through the compositor so the new client is not our child
        logger.info(f"Launching: {command}")
        self._spawn([self.hyprctl, "keyword", "exec", command])

    def _spawn(self, cmd: list[str]) -> None:
        """Spawn a command without waiting for it."""
        logger.debug(f"Spawning: {' '.join(cmd)}")
        try:
            subprocess.Popen(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                close_fds=True,
            )
        except OSError as exc:
            raise ActionError(f"Failed to run {cmd[0]}: {exc}") from exc


class DryRunDispatcher(Dispatcher):
    """Logs and records actions instead of dispatching them."""

    def __init__(self):
        self.dispatched: list[Action] = []

    def focus(self, address: str) -> None:
        logger.info(f"[dry-run] Would focus window {address}")
        self.dispatched.append(Action.focus(address))

    def launch(self, command: str) -> None:
        logger.info(f"[dry-run] Would launch: {command}")
        self.dispatched.append(Action.launch(command))
