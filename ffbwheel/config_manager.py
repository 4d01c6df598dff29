"""Persisting and restoring the shared settings on disk."""

import logging
from pathlib import Path
from typing import Optional, Union

from .shared_data import SHARED_DATA_SIZE, SharedData

log = logging.getLogger(__name__)

CONFIG_FILE = "config.bin"


class ConfigError(Exception):
    """The configuration storage could not be used."""


class ConfigManager:
    """Saves SharedData as a binary file and loads it back."""

    def __init__(self, path: Union[str, Path] = CONFIG_FILE):
        self.path = Path(path)

    def begin(self) -> None:
        """Make sure the storage location exists."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            log.error("ConfigManager: storage unavailable: %s", exc)
            raise ConfigError(f"cannot prepare {self.path.parent}: {exc}") from exc

    def save(self, data: SharedData) -> None:
        """Write the settings to the config file."""
        payload = data.to_bytes()
        try:
            with self.path.open("wb") as handle:
                written = handle.write(payload)
        except OSError as exc:
            log.error("ConfigManager: failed to open file for writing")
            raise ConfigError(f"cannot write {self.path}: {exc}") from exc
        if written != len(payload):
            log.error("ConfigManager: save failed (size mismatch)")
            raise ConfigError("short write while saving config")
        log.info("ConfigManager: config saved successfully")

    def load(self) -> Optional[SharedData]:
        """Read the settings back; None when no config file exists yet."""
        if not self.path.exists():
            log.info("ConfigManager: no config file found, using defaults")
            return None
        try:
            with self.path.open("rb") as handle:
                payload = handle.read(SHARED_DATA_SIZE + 1)
        except OSError as exc:
            log.error("ConfigManager: failed to open file for reading")
            raise ConfigError(f"cannot read {self.path}: {exc}") from exc
        if len(payload) < SHARED_DATA_SIZE:
            log.error("ConfigManager: load failed (size mismatch)")
            raise ConfigError(
                f"config file holds {len(payload)} bytes, expected {SHARED_DATA_SIZE}"
            )
        data = SharedData.from_bytes(payload[:SHARED_DATA_SIZE])
        log.info("ConfigManager: config loaded successfully")
        return data