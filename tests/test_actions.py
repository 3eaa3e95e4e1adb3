import subprocess
import unittest
from unittest.mock import MagicMock, patch

from RunOrRaise.actions import (Action, ActionError, ActionType,
                                DryRunDispatcher, HyprctlDispatcher)


class TestActions(unittest.TestCase):

    @patch('RunOrRaise.actions.subprocess.Popen')
    def test_focus_window(self, mock_popen):
        """Test focusing a window spawns hyprctl without waiting."""
        HyprctlDispatcher().focus("0x55d1a0")

        mock_popen.assert_called_once()
        args, kwargs = mock_popen.call_args
        self.assertEqual(args[0], ["hyprctl", "dispatch", "focuswindow", "address:0x55d1a0"])
        self.assertEqual(kwargs['stdout'], subprocess.DEVNULL)
        self.assertEqual(kwargs['stderr'], subprocess.DEVNULL)
        mock_popen.return_value.wait.assert_not_called()

    @patch('RunOrRaise.actions.subprocess.Popen')
    def test_launch_command(self, mock_popen):
        """Test launching goes through the compositor as a single argument."""
        HyprctlDispatcher().launch("firefox --new-window")

        args, _ = mock_popen.call_args
        self.assertEqual(args[0], ["hyprctl", "keyword", "exec", "firefox --new-window"])

    @patch('RunOrRaise.actions.subprocess.Popen')
    def test_custom_binary(self, mock_popen):
        HyprctlDispatcher("/usr/local/bin/hyprctl").focus("0x1")
        self.assertEqual(mock_popen.call_args[0][0][0], "/usr/local/bin/hyprctl")

    @patch('RunOrRaise.actions.subprocess.Popen', side_effect=FileNotFoundError("hyprctl"))
    def test_spawn_failure(self, mock_popen):
        """Test a missing binary is reported as ActionError."""
        with self.assertRaises(ActionError) as ctx:
            HyprctlDispatcher().launch("firefox")
        self.assertIn("Failed to run hyprctl", str(ctx.exception))
        self.assertIsInstance(ctx.exception.__cause__, FileNotFoundError)

    @patch('RunOrRaise.actions.subprocess.Popen')
    def test_dispatch_routes_by_type(self, mock_popen):
        dispatcher = HyprctlDispatcher()
        dispatcher.focus = MagicMock()
        dispatcher.launch = MagicMock()

        dispatcher.dispatch(Action.focus("0x1"))
        dispatcher.dispatch(Action.launch("kitty"))
        dispatcher.dispatch(Action.none())

        dispatcher.focus.assert_called_once_with("0x1")
        dispatcher.launch.assert_called_once_with("kitty")
        mock_popen.assert_not_called()

    @patch('RunOrRaise.actions.subprocess.Popen')
    def test_dry_run_records_without_spawning(self, mock_popen):
        dispatcher = DryRunDispatcher()

        dispatcher.dispatch(Action.focus("0x1"))
        dispatcher.dispatch(Action.none())
        dispatcher.dispatch(Action.launch("kitty"))

        self.assertEqual(dispatcher.dispatched, [Action.focus("0x1"), Action.launch("kitty")])
        mock_popen.assert_not_called()

    def test_action_str(self):
        self.assertEqual(str(Action.focus("0x1")), "focus 0x1")
        self.assertEqual(str(Action.launch("kitty -1")), "launch kitty -1")
        self.assertEqual(str(Action.none()), "no action")
        self.assertIs(Action.none().type, ActionType.NONE)


if __name__ == '__main__':
    unittest.main()
