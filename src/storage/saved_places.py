# src/storage/saved_places.py

"""Persisted list of places the user saved from the map."""

import json
import logging
from pathlib import Path
from typing import Any

from src.config.settings import Settings
from src.models.place import Place

logger = logging.getLogger("border_helper.storage")


class StorageError(Exception):
    """The saved-places file could not be read or written."""


class SavedPlacesStore:
    """JSON key-value file holding the saved places under one key."""

    def __init__(
        self,
        path: Path | None = None,
        key: str = Settings.SAVED_PLACES_KEY,
    ) -> None:
        self.path: Path = path or Settings.SAVED_PLACES_PATH
        self.key = key
        logger.debug("SavedPlacesStore initialised, path=%s", self.path)

    def _read_blob(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                blob = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            logger.error(
                "Failed to read saved places from %s",
                self.path,
                exc_info=True,
            )
            msg = f"Failed to read saved places: {exc}"
            raise StorageError(msg) from exc
        if not isinstance(blob, dict):
            msg = f"Unexpected saved places format in {self.path}"
            raise StorageError(msg)
        return blob

    def _write_places(self, places: list[Place]) -> None:
        blob = self._read_blob()
        blob[self.key] = [p.to_dict() for p in places]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(blob, f, ensure_ascii=False, indent=2)
        except OSError as exc:
            logger.error(
                "Failed to write saved places to %s",
                self.path,
                exc_info=True,
            )
            msg = f"Failed to save place: {exc}"
            raise StorageError(msg) from exc

    def list_places(self) -> list[Place]:
        """Return saved places in the order they were saved."""
        raw = self._read_blob().get(self.key, [])
        return [Place.from_dict(item) for item in raw]

    def is_saved(self, place_id: str) -> bool:
        return any(p.id == place_id for p in self.list_places())

    def save_place(self, place: Place) -> bool:
        """Append *place* unless its id is already saved.

        Returns ``True`` when the place was written.
        """
        places = self.list_places()
        if any(p.id == place.id for p in places):
            logger.info("Place %s already saved", place.id)
            return False
        places.append(place)
        self._write_places(places)
        logger.info("Saved place %s (%s)", place.id, place.title)
        return True

    def remove_place(self, place_id: str) -> bool:
        """Remove the place with *place_id*; ``False`` if absent."""
        places = self.list_places()
        kept = [p for p in places if p.id != place_id]
        if len(kept) == len(places):
            return False
        self._write_places(kept)
        logger.info("Removed saved place %s", place_id)
        return True
