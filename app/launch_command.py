import os
import re
from typing import Callable, Optional

from .config import (
    CWD_PLACEHOLDER,
    FALLBACK_USERNAME,
    LAUNCH_TEMPLATE,
    MEMORY_KEY,
    MEMORY_PLACEHOLDER,
    NAME_PLACEHOLDER,
    USERNAME_KEY,
)
from .logger import get_logger
from .process_launcher import ProcessLauncher, quote_argument
from .settings_store import SettingsStore

_WHITESPACE = re.compile(r"\s+")
_UNSAFE_CHARACTERS = re.compile(r"[^A-Za-z0-9_]")


def sanitize_identity(value: str) -> str:
    """
    Reduce a username to a token that is safe on a command line.

    Whitespace runs become a single underscore and every character outside
    ASCII letters, digits and underscore is removed.
    """
    value = _WHITESPACE.sub("_", value.strip())
    return _UNSAFE_CHARACTERS.sub("", value)


def render_command(
    template: str, identity: str, memory: int, working_directory: str
) -> str:
    """
    Substitute the placeholders of a launch command template.

    All placeholders are replaced in one pass, so substituted values are
    never scanned for further placeholders. Unknown tokens are left as is.

    Args:
        template: Command template text
        identity: Sanitized username
        memory: Memory allocation in GB
        working_directory: Absolute path of the current working directory

    Returns:
        Rendered command line
    """
    values = {
        NAME_PLACEHOLDER: identity,
        MEMORY_PLACEHOLDER: str(memory),
        CWD_PLACEHOLDER: working_directory,
    }
    pattern = re.compile("|".join(re.escape(token) for token in values))
    return pattern.sub(lambda match: values[match.group(0)], template)


class LaunchCommandBuilder:
    """
    Turn the user's username and memory choice into a started game process.

    Persists the values that were used, renders the launch template and hands
    the result to the process launcher.
    """

    def __init__(
        self,
        settings: SettingsStore,
        process_launcher: ProcessLauncher,
        template_path: Optional[str] = None,
        cwd_provider: Callable[[], str] = os.getcwd,
    ):
        """
        Initialize the launch command builder.

        Args:
            settings: Settings store that receives the chosen values
            process_launcher: Collaborator that starts the rendered command
            template_path: Launch template location (defaults to LAUNCH_TEMPLATE)
            cwd_provider: Returns the working directory substituted for %cd%
        """
        self.settings = settings
        self.process_launcher = process_launcher
        self.template_path = template_path or LAUNCH_TEMPLATE
        self.cwd_provider = cwd_provider

        self.logger = get_logger(__name__)

    def load_template(self) -> str:
        """
        Read the launch template from disk.

        Non-blank lines are stripped and joined into a single command line.

        Returns:
            Template text, or an empty string if it could not be read
        """
        try:
            with open(self.template_path, "r", encoding="utf-8") as template_file:
                lines = [line.strip() for line in template_file]
        except OSError as e:
            self.logger.error(
                f"Failed to read launch template {self.template_path}: {e}"
            )
            return ""

        return " ".join(line for line in lines if line)

    def build(self, identity: str, memory: int) -> str:
        """
        Render the launch command for a raw username and memory value.
        """
        return self._render(self.effective_identity(identity), memory)

    def effective_identity(self, identity: str) -> str:
        """
        Sanitized username, or FALLBACK_USERNAME when nothing usable is left.

        An empty value would let the next template argument take its place.
        """
        username = sanitize_identity(identity)
        if not username:
            self.logger.warning(
                f"Username {identity!r} has no usable characters, using {FALLBACK_USERNAME!r}"
            )
            return FALLBACK_USERNAME
        if username != identity:
            self.logger.info(f"Username sanitized from {identity!r} to {username!r}")
        return username

    def launch(self, identity: str, memory: int) -> bool:
        """
        Save the chosen values and start the game.

        Args:
            identity: Username as typed by the user
            memory: Memory allocation in GB

        Returns:
            True if the process launcher accepted the command

        Raises:
            ValueError: memory is not a positive integer
        """
        if isinstance(memory, bool) or not isinstance(memory, int):
            raise ValueError(f"Memory must be an integer, got {memory!r}")
        if memory < 1:
            raise ValueError(f"Memory must be at least 1 GB, got {memory}")

        username = self.effective_identity(identity)

        self.settings.set(USERNAME_KEY, username)
        self.settings.set(MEMORY_KEY, str(memory))
        if not self.settings.save():
            self.logger.warning("Settings were not saved, launching anyway")

        accepted = self.process_launcher.launch(self._render(username, memory))
        if not accepted:
            self.logger.error("Game launch was rejected")
        return accepted

    def _render(self, username: str, memory: int) -> str:
        # %cd% expands to exactly one argument
        working_directory = quote_argument(os.path.abspath(self.cwd_provider()))
        return render_command(self.load_template(), username, memory, working_directory)
