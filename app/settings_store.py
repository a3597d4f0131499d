import os
import tempfile
from typing import Dict, Optional

from .config import DEFAULT_SETTINGS, SETTINGS_FILE
from .logger import get_logger


class UnknownSettingError(KeyError):
    """
    Raised when a key with no default is requested before it was ever set.

    Indicates a programming error, not a runtime condition.
    """


class SettingsStore:
    """
    Persistent key/value settings backed by a plain text file.

    The file holds one key=value pair per line. It is read lazily on the
    first get() and rewritten completely on every save().
    """

    def __init__(self, path: str, defaults: Optional[Dict[str, str]] = None):
        """
        Initialize the settings store.

        Args:
            path: Location of the backing settings file
            defaults: Values returned for keys missing from the file
        """
        self.path = path
        self.defaults = dict(DEFAULT_SETTINGS if defaults is None else defaults)

        self._settings: Dict[str, str] = {}
        self._loaded = False

        self.logger = get_logger(__name__)

    @property
    def loaded(self) -> bool:
        return self._loaded

    def get(self, key: str) -> str:
        """
        Return a setting, loaded from file or default.

        Args:
            key: Name of the setting

        Returns:
            The stored value, or the default for the key if none is stored

        Raises:
            UnknownSettingError: key is absent and has no default
        """
        if not self._loaded:
            self.load()

        if key not in self._settings:
            if key not in self.defaults:
                raise UnknownSettingError(key)
            self._settings[key] = self.defaults[key]

        return self._settings[key]

    def set(self, key: str, value: str) -> None:
        """
        Add or modify a setting in memory. Call save() to persist it.
        """
        self._settings[key] = value

    def as_dict(self) -> Dict[str, str]:
        return dict(self._settings)

    def load(self) -> None:
        """
        Replace the in-memory settings with the contents of the backing file.

        A missing file is created empty. Read errors are logged and whatever
        was parsed before the error is kept.
        """
        self._settings = {}
        self._read_into(self._settings)
        self._loaded = True
        self.logger.debug(f"Loaded {len(self._settings)} settings from {self.path}")

    def save(self) -> bool:
        """
        Write all current settings to the backing file, replacing its contents.

        Returns:
            True if the file was written, False if an I/O error occurred
        """
        if not self._loaded:
            # Keep entries already on disk that were never read into memory
            pending = self._settings
            self._settings = {}
            self._read_into(self._settings)
            self._settings.update(pending)
            self._loaded = True

        directory = os.path.dirname(os.path.abspath(self.path))
        temp_path = None
        try:
            os.makedirs(directory, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                newline="\n",
                dir=directory,
                prefix=".settings-",
                suffix=".tmp",
                delete=False,
            ) as temp_file:
                temp_path = temp_file.name
                for key, value in self._settings.items():
                    temp_file.write(f"{key}={value}\n")

            os.replace(temp_path, self.path)
            temp_path = None
            self.logger.info(f"Saved {len(self._settings)} settings to {self.path}")
            return True

        except OSError as e:
            self.logger.error(f"Failed to save settings to {self.path}: {e}")
            return False

        finally:
            if temp_path and os.path.exists(temp_path):
                try:
                    os.remove(temp_path)
                except OSError as e:
                    self.logger.warning(f"Failed to remove temporary file: {e}")

    def _read_into(self, target: Dict[str, str]) -> None:
        """
        Parse the backing file into target, creating the file if missing.

        Lines that do not split into exactly one key and one value are skipped.
        """
        try:
            if not os.path.exists(self.path):
                directory = os.path.dirname(self.path)
                if directory:
                    os.makedirs(directory, exist_ok=True)
                open(self.path, "a", encoding="utf-8").close()
                self.logger.info(f"Created empty settings file: {self.path}")

            with open(self.path, "r", encoding="utf-8") as settings_file:
                for line in settings_file:
                    parts = line.rstrip("\r\n").split("=")
                    if len(parts) == 2:
                        target[parts[0]] = parts[1]
                    else:
                        self.logger.debug(f"Skipping malformed settings line: {line!r}")

        except (OSError, UnicodeDecodeError) as e:
            self.logger.error(f"Failed to load settings from {self.path}: {e}")


def open_settings(
    path: Optional[str] = None, defaults: Optional[Dict[str, str]] = None
) -> SettingsStore:
    """
    Create the settings store for this run.

    Args:
        path: Settings file location (defaults to SETTINGS_FILE)
        defaults: Default values (defaults to DEFAULT_SETTINGS)

    Returns:
        A SettingsStore that loads itself on first access
    """
    return SettingsStore(path or SETTINGS_FILE, defaults)
