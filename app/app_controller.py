from typing import Optional

from ui.main_window import MainWindow
from .config import (
    DEFAULT_SETTINGS,
    MEMORY_KEY,
    MEMORY_MAX,
    MEMORY_MIN,
    USERNAME_KEY,
    VERSION_KEY,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from .launch_command import LaunchCommandBuilder
from .logger import get_logger
from .process_launcher import ProcessLauncher
from .settings_store import SettingsStore, open_settings


class AppController:
    """
    Wire the settings store, launch command builder and window together.

    The flow is linear: show the stored values, launch once, then close the
    window so the application exits.
    """

    def __init__(
        self, settings_file: Optional[str] = None, template_path: Optional[str] = None
    ):
        """
        Initialize the application controller.

        Args:
            settings_file: Settings file location (defaults to SETTINGS_FILE)
            template_path: Launch template location (defaults to LAUNCH_TEMPLATE)
        """
        self.logger = get_logger(__name__)
        self.settings_file = settings_file
        self.template_path = template_path

        self.settings: SettingsStore = None
        self.builder: LaunchCommandBuilder = None
        self.window: MainWindow = None

        self.launched = False
        self.exit_code = 0

        self.logger.info("AppController initialized")

    def initialize(self) -> None:
        """
        Create the settings store and the launch command builder.
        """
        self.logger.info("Initializing application components")

        self.settings = open_settings(self.settings_file)
        self.builder = LaunchCommandBuilder(
            settings=self.settings,
            process_launcher=ProcessLauncher(),
            template_path=self.template_path,
        )

        self.logger.info("Application components initialized")

    def start_application(
        self, username: Optional[str] = None, memory: Optional[int] = None
    ) -> None:
        """
        Show the launcher window (blocking call).

        Returns when the window is closed, either by the user or after a launch.

        Args:
            username: Value to pre-fill instead of the stored username
            memory: Value to pre-select instead of the stored memory allocation
        """
        self.logger.info("Starting application")

        if username is None:
            username = self.settings.get(USERNAME_KEY)
        if memory is None:
            memory = self.stored_memory()

        self.window = MainWindow(
            width=WINDOW_WIDTH,
            height=WINDOW_HEIGHT,
            username=username,
            memory=memory,
            version=self.settings.get(VERSION_KEY),
            on_launch=self.launch_game,
        )
        self.window.initialize()
        self.window.show()

        self.logger.info("Main window closed")

    def launch_without_window(
        self, username: Optional[str] = None, memory: Optional[int] = None
    ) -> int:
        """
        Launch directly, using stored values for anything not given.

        Returns:
            Exit code (0 if the launch was accepted, 1 otherwise)
        """
        if username is None:
            username = self.settings.get(USERNAME_KEY)
        if memory is None:
            memory = self.stored_memory()

        self.launch_game(username, memory)
        return self.exit_code

    def launch_game(self, username: str, memory: int) -> None:
        """
        Launch the game once and close the window.

        Failures are logged and reflected in exit_code, never raised.
        """
        if self.launched:
            self.logger.warning("Launch already requested, ignoring")
            return
        self.launched = True

        try:
            accepted = self.builder.launch(username, memory)
            self.exit_code = 0 if accepted else 1
        except ValueError as e:
            self.logger.error(f"Invalid launch parameters: {e}")
            self.exit_code = 1
        except Exception as e:
            self.logger.error(f"Unexpected error during launch: {e}", exc_info=True)
            self.exit_code = 1
        finally:
            if self.window:
                try:
                    self.window.destroy()
                except Exception as e:
                    self.logger.error(f"Error closing window after launch: {e}")

    def stored_memory(self) -> int:
        """
        Memory allocation from settings, clamped to the selectable range.

        Unparseable values fall back to the default.
        """
        value = self.settings.get(MEMORY_KEY)
        try:
            memory = int(value)
        except ValueError:
            self.logger.warning(f"Stored memory value {value!r} is not a number")
            memory = int(DEFAULT_SETTINGS[MEMORY_KEY])
        return max(MEMORY_MIN, min(MEMORY_MAX, memory))
