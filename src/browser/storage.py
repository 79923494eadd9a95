"""On-disk layout for screenshots captured during a flow."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from pathlib import Path

SCREENSHOTS_DIR = "screenshots"
SCREENSHOT_EXTENSION = ".png"


def generate_screenshot_name() -> str:
    """Return a collision-resistant file name for a new screenshot."""
    stamp = datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")
    return f"{stamp}_{uuid.uuid4().hex[:12]}{SCREENSHOT_EXTENSION}"


class ScreenshotStore:
    """Writes screenshots under ``<data_dir>/screenshots/flow-<flow_id>/``."""

    def __init__(self, data_dir: str | Path, flow_id: int) -> None:
        self._data_dir = Path(data_dir)
        self._flow_id = flow_id

    @property
    def flow_id(self) -> int:
        return self._flow_id

    @property
    def directory(self) -> Path:
        return self._data_dir / SCREENSHOTS_DIR / f"flow-{self._flow_id}"

    def path_for(self, name: str) -> Path:
        return self.directory / name

    def save(self, data: bytes) -> str:
        """Persist *data* and return the generated file name.

        Raises ``OSError`` if the directory or file cannot be written; a
        partially written file is removed first.
        """
        self.directory.mkdir(parents=True, exist_ok=True)
        name = generate_screenshot_name()
        path = self.path_for(name)
        try:
            path.write_bytes(data)
        except OSError:
            path.unlink(missing_ok=True)
            raise
        return name

    def find(self, name: str) -> Path | None:
        """Return the path of an existing screenshot, or ``None``."""
        if not name or Path(name).name != name or name in (".", ".."):
            return None
        path = self.path_for(name)
        return path if path.is_file() else None
