"""
Window queries for Hyprland.

This module implements the read side of the window manager boundary: the
full client list and the currently focused window, both as WindowInfo
records. Any failure is reported as QueryError; callers decide how to
recover.
"""
import json
import logging
import subprocess
from abc import ABC, abstractmethod

from .errors import RunOrRaiseError
from .Models import WindowInfo


class QueryError(RunOrRaiseError):
    """Exception raised when the window manager cannot be queried."""


class WindowSource(ABC):
    """
    Abstract base class for window manager queries.

    Each query is a point-in-time snapshot; two queries made in a row are
    not guaranteed to agree with each other.
    """

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def list_windows(self) -> list[WindowInfo]:
        """
        Get all open windows, in the order the window manager reports them.

        :raises QueryError: If the query fails
        """
        pass

    @abstractmethod
    def active_window(self) -> WindowInfo:
        """
        Get the currently focused window.

        :raises QueryError: If no window is focused or the query fails
        """
        pass


class HyprctlSource(WindowSource):
    """Window queries through ``hyprctl`` JSON output."""

    def __init__(self, hyprctl: str = "hyprctl"):
        super().__init__()
        self.hyprctl = hyprctl

    def list_windows(self) -> list[WindowInfo]:
        data = self._query(["clients", "-j"])

        if not isinstance(data, list):
            raise QueryError(
                f"Expected a list from `{self.hyprctl} clients -j`, got {type(data).__name__}"
            )

        try:
            windows = [WindowInfo.from_dict(client) for client in data]
        except ValueError as exc:
            raise QueryError(f"Malformed client in `{self.hyprctl} clients -j`: {exc}") from exc

        self.logger.debug(f"Found {len(windows)} open windows")
        return windows

    def active_window(self) -> WindowInfo:
        data = self._query(["activewindow", "-j"])

        # Hyprland prints an empty object when nothing has focus
        if not data:
            raise QueryError("No window is focused")

        try:
            window = WindowInfo.from_dict(data)
        except ValueError as exc:
            raise QueryError(f"Malformed output of `{self.hyprctl} activewindow -j`: {exc}") from exc

        self.logger.debug(f"Focused window: {window}")
        return window

    def _query(self, args: list):
        """Run a hyprctl query and decode its JSON output."""
        cmd = [self.hyprctl] + args
        result = self._run_command(cmd)
        try:
            return json.loads(result.stdout.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise QueryError(f"Failed to parse `{' '.join(cmd)}` output: {exc}") from exc

    def _run_command(self, cmd: list) -> subprocess.CompletedProcess:
        """
        Run a subprocess command once and capture its output.

        Args:
            cmd: Command and arguments as list

        Returns:
            CompletedProcess on zero exit status

        Raises:
            QueryError: If the command cannot be run or exits non-zero
        """
        self.logger.debug(f"Running command: {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                check=False,
            )
        except FileNotFoundError as exc:
            raise QueryError(f"Command {cmd[0]} not found") from exc
        except OSError as exc:
            raise QueryError(f"Command {cmd[0]} failed: {exc}") from exc

        if result.stderr:
            self.logger.debug(f"Command {cmd[0]} stderr: {result.stderr[:200].decode(errors='replace')}")

        if result.returncode != 0:
            raise QueryError(f"Command {' '.join(cmd)} returned code {result.returncode}")

        return result
