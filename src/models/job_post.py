# src/models/job_post.py

"""Job board post data model (employer offers and seeker profiles)."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class JobPost:
    """A job board post normalised across employer and seeker shapes.

    Employer posts carry ``jobTitle``/``companyName``; seeker posts carry
    ``fullName``/``skill``.  Both end up in ``title``/``subtitle``.
    """

    id: str
    kind: str
    title: str
    subtitle: str = ""
    location: str = ""
    description: str = ""
    image: str = ""

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], kind: str, base_url: str = ""
    ) -> "JobPost":
        """Build a post from an API record of the given *kind*."""
        if kind == "employer":
            title = data.get("jobTitle", "")
            subtitle = data.get("companyName", "")
        else:
            title = data.get("fullName", "")
            subtitle = data.get("skill", "")

        image = str(data.get("image") or "")
        if image and not image.startswith("http") and base_url:
            image = f"{base_url.rstrip('/')}/{image.lstrip('/')}"

        return cls(
            id=str(data.get("_id") or data.get("id") or ""),
            kind=kind,
            title=str(title or ""),
            subtitle=str(subtitle or ""),
            location=str(data.get("location") or ""),
            description=str(data.get("description") or ""),
            image=image,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "kind": self.kind,
            "title": self.title,
            "subtitle": self.subtitle,
            "location": self.location,
            "description": self.description,
            "image": self.image,
        }
