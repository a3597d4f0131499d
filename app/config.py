import os


"""
Application configuration and constants.

Contains all configurable parameters and constants used throughout
the Factions Launcher application.
"""

# Location of the key=value settings file
# Read from SETTINGS_FILE environment variable, default to launcher.dat in the working directory
SETTINGS_FILE = os.getenv("SETTINGS_FILE", "launcher.dat")

# Location of the launch command template
# Read from LAUNCH_TEMPLATE environment variable, default to the bundled
# launch.cmd on Windows and launch.sh elsewhere (classpath separators differ)
LAUNCH_TEMPLATE = os.getenv(
    "LAUNCH_TEMPLATE",
    os.path.join(
        os.path.dirname(__file__), "launch.cmd" if os.name == "nt" else "launch.sh"
    ),
)

# Placeholder tokens recognized in the launch command template
NAME_PLACEHOLDER = "{name}"
MEMORY_PLACEHOLDER = "{ram}"
CWD_PLACEHOLDER = "%cd%"

# Well-known settings keys
USERNAME_KEY = "username"
MEMORY_KEY = "memory"
VERSION_KEY = "version"

# Username used when the entered one has no usable characters left
FALLBACK_USERNAME = "Player"

# Values used when a well-known key is missing from the settings file
DEFAULT_SETTINGS = {
    USERNAME_KEY: "",
    MEMORY_KEY: "6",
    VERSION_KEY: "",
}

# Memory allocation range in GB, and the distance between slider labels
MEMORY_MIN = int(os.getenv("MEMORY_MIN", "1"))
MEMORY_MAX = int(os.getenv("MEMORY_MAX", "32"))
MEMORY_TICK = int(os.getenv("MEMORY_TICK", "8"))

# Default window width in pixels
WINDOW_WIDTH = int(os.getenv("WINDOW_WIDTH", "280"))

# Default window height in pixels
WINDOW_HEIGHT = int(os.getenv("WINDOW_HEIGHT", "450"))

# Window title text
WINDOW_TITLE = "Factions Launcher"

# Logging level name (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Optional log file, empty for console only
LOG_FILE = os.getenv("LOG_FILE", "")
