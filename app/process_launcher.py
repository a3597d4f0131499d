import os
import shlex
import subprocess
from typing import List, Union

from .logger import get_logger


def quote_argument(value: str) -> str:
    """
    Quote a value so ProcessLauncher reads it back as a single argument.

    Values without spaces or quotes are returned unchanged.
    """
    if os.name == "nt":
        return subprocess.list2cmdline([value])
    return shlex.quote(value)


class ProcessLauncher:
    """
    Start an external command as a detached process.

    The launch is fire-and-forget: the result only tells whether the OS
    accepted the command, never how the child eventually exits.
    """

    def __init__(self):
        self.logger = get_logger(__name__)

    def launch(self, command: str) -> bool:
        """
        Start the command without waiting for it.

        Args:
            command: Complete command line to run

        Returns:
            True if the process was created, False otherwise
        """
        if not command or not command.strip():
            self.logger.error("Cannot launch: command is empty")
            return False

        self.logger.info(f"Launching: {command}")

        try:
            args = self._split_command(command)
            process = subprocess.Popen(args, **self._popen_options())
            self.logger.info(f"Process started with PID: {process.pid}")
            return True

        except FileNotFoundError as e:
            self.logger.error(f"Failed to launch: executable not found. Error: {e}")
            return False
        except PermissionError as e:
            self.logger.error(f"Failed to launch: permission denied. Error: {e}")
            return False
        except OSError as e:
            self.logger.error(f"Failed to launch: OS error occurred. Error: {e}")
            return False
        except ValueError as e:
            self.logger.error(f"Failed to launch: malformed command. Error: {e}")
            return False

    @staticmethod
    def _split_command(command: str) -> Union[str, List[str]]:
        """
        Prepare the command for Popen without involving a shell.

        Windows parses the command line itself, so the string is passed as is.
        """
        if os.name == "nt":
            return command
        args = shlex.split(command)
        if not args:
            raise ValueError("command contains no arguments")
        return args

    @staticmethod
    def _popen_options() -> dict:
        options = {
            "stdin": subprocess.DEVNULL,
            "close_fds": True,
        }
        if os.name == "nt":
            options["creationflags"] = (
                subprocess.DETACHED_PROCESS | subprocess.CREATE_NEW_PROCESS_GROUP
            )
        else:
            options["start_new_session"] = True
        return options
