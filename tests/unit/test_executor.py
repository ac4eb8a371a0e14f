"""Tests for command execution"""

import subprocess
from unittest.mock import Mock, patch

import pytest

from puppet_strings.core.exceptions import EngineExecutionError, EngineNotFoundError
from puppet_strings.core.executor import run_command


class TestRunCommand:
    """Test the run_command function"""

    @patch("subprocess.run")
    def test_successful_command(self, mock_run):
        """Test successful command execution"""
        mock_result = Mock()
        mock_result.returncode = 0
        mock_result.stdout = "output"
        mock_run.return_value = mock_result

        result = run_command(["echo", "test"])

        assert result.stdout == "output"
        mock_run.assert_called_once_with(["echo", "test"], capture_output=True, text=True, check=True, shell=False)

    @patch("subprocess.run")
    def test_inherit_output(self, mock_run):
        """Test running without capturing output"""
        mock_run.return_value = Mock(returncode=0)

        run_command(["yard", "doc"], capture_output=False)

        _, kwargs = mock_run.call_args
        assert kwargs["capture_output"] is False

    @patch("subprocess.run")
    def test_command_failure(self, mock_run):
        """Test command execution failure"""
        mock_run.side_effect = subprocess.CalledProcessError(1, ["false"], stderr="error message")

        with pytest.raises(EngineExecutionError, match="failed with exit code 1") as exc_info:
            run_command(["false"])

        assert exc_info.value.returncode == 1
        assert exc_info.value.stderr == "error message"
        assert exc_info.value.command == ["false"]

    @patch("subprocess.run")
    def test_command_failure_without_captured_stderr(self, mock_run):
        """Test failure of a command whose output was not captured"""
        mock_run.side_effect = subprocess.CalledProcessError(2, ["yard", "doc"], stderr=None)

        with pytest.raises(EngineExecutionError) as exc_info:
            run_command(["yard", "doc"], capture_output=False)

        assert exc_info.value.stderr == ""
        assert str(exc_info.value) == "Command 'yard doc' failed with exit code 2"

    @patch("subprocess.run")
    def test_yard_not_found(self, mock_run):
        """Test when yard is not installed"""
        mock_run.side_effect = FileNotFoundError()

        with pytest.raises(EngineNotFoundError, match="gem install yard"):
            run_command(["yard", "--version"])

    @patch("subprocess.run")
    def test_command_not_found(self, mock_run):
        """Test when another command is not found"""
        mock_run.side_effect = FileNotFoundError()

        with pytest.raises(EngineNotFoundError, match="Command 'ruby' not found"):
            run_command(["ruby", "-e", "puts 1"])

    @patch("puppet_strings.core.executor.sentry_sdk")
    @patch("subprocess.run")
    def test_failure_reported_to_sentry(self, mock_run, mock_sentry):
        """Test that failures are captured by Sentry"""
        mock_run.side_effect = subprocess.CalledProcessError(1, ["yard"], stderr="bad")

        with pytest.raises(EngineExecutionError):
            run_command(["yard", "doc"])

        mock_sentry.capture_exception.assert_called_once()
        error = mock_sentry.capture_exception.call_args[0][0]
        assert isinstance(error, EngineExecutionError)
