# src/models/place.py

"""Attraction (place) data model."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Place:
    """A tourist attraction as served by the attractions API."""

    id: str
    title: str
    type: str = ""
    description: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    image: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Place":
        """Build a place from an API record (``_id`` or ``id``)."""
        return cls(
            id=str(data.get("_id") or data.get("id") or ""),
            title=str(data.get("title", "")),
            type=str(data.get("type", "")),
            description=str(data.get("description", "")),
            latitude=float(data.get("latitude", 0) or 0),
            longitude=float(data.get("longitude", 0) or 0),
            image=str(data.get("image", "")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict for JSON output and storage."""
        return {
            "id": self.id,
            "title": self.title,
            "type": self.type,
            "description": self.description,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "image": self.image,
        }


def build_itinerary(
    places: list[Place], place_ids: list[str]
) -> list[Place]:
    """Resolve *place_ids* to places in visiting order.

    Ids with no matching place are skipped.
    """
    by_id = {p.id: p for p in places}
    return [by_id[pid] for pid in place_ids if pid in by_id]
