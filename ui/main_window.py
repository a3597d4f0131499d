import webview
from typing import Callable, Optional
from .launcher_page import LauncherPage
from app.config import MEMORY_MIN, MEMORY_MAX, MEMORY_TICK, WINDOW_TITLE
from app.logger import get_logger


class LauncherApi:
    """
    JavaScript API exposed to the launcher page as window.pywebview.api.

    Only public methods are reachable from the page, so state is kept in
    underscore attributes.
    """

    def __init__(self, on_launch: Callable[[str, int], None]):
        self._on_launch = on_launch
        self._logger = get_logger(__name__)

    def launch(self, username: str, memory) -> None:
        """
        Called by the page when the launch button is pressed.

        The page disables its button before calling, so every call is
        forwarded; an unusable memory value is rejected by the launch handler,
        which still closes the window.
        """
        self._logger.info("Launch requested from window")
        try:
            memory = int(memory)
        except (TypeError, ValueError):
            self._logger.error(f"Invalid memory value from page: {memory!r}")
        self._on_launch(str(username or ""), memory)


class MainWindow:
    """
    Launcher window using pywebview.

    Shows the username field and memory slider, and forwards the launch
    button to the on_launch callback.
    """

    def __init__(
        self,
        width: int = 280,
        height: int = 450,
        username: str = "",
        memory: int = 6,
        version: str = "",
        on_launch: Optional[Callable[[str, int], None]] = None,
    ):
        """
        Initialize the main window.

        Args:
            width: Window width in pixels
            height: Window height in pixels
            username: Username to pre-fill
            memory: Memory allocation to pre-select in GB
            version: Version text displayed next to the title
            on_launch: Callback receiving (username, memory) when launch is pressed
        """
        self.width = width
        self.height = height
        self.username = username
        self.memory = memory
        self.version = version
        self.on_launch = on_launch

        self.window: Optional[webview.Window] = None
        self.api = LauncherApi(self._handle_launch)

        self.logger = get_logger(__name__)
        self.logger.info(f"MainWindow initialized ({width}x{height})")

    def initialize(self) -> None:
        """
        Create the pywebview window with the launcher form.
        """
        self.logger.info("Initializing main window")

        title = WINDOW_TITLE
        if self.version:
            title = f"{WINDOW_TITLE} {self.version}"

        self.window = webview.create_window(
            title=title,
            html=LauncherPage.render(
                self.username,
                self.memory,
                self.version,
                memory_min=MEMORY_MIN,
                memory_max=MEMORY_MAX,
                memory_tick=MEMORY_TICK,
            ),
            js_api=self.api,
            width=self.width,
            height=self.height,
            resizable=False,
            fullscreen=False,
        )

        self.logger.info("Main window created")

    def show(self) -> None:
        """
        Display the window (blocking call).
        """
        if not self.window:
            self.logger.error("Cannot show window: not initialized")
            return

        self.logger.info("Starting pywebview")
        webview.start()

    def destroy(self) -> None:
        """
        Destroy the window, which makes show() return.
        """
        if not self.window:
            self.logger.error("Cannot destroy window: not initialized")
            return

        self.logger.info("Destroying window")
        self.window.destroy()

    def _handle_launch(self, username: str, memory: int) -> None:
        if not self.on_launch:
            self.logger.error("No launch handler registered")
            return
        self.on_launch(username, memory)
