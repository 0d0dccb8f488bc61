# src/clients/api_client.py

"""HTTP client for the attractions and job board APIs."""

import logging
import time
from typing import Any

from curl_cffi import requests as curl_requests

from src.config.settings import Settings
from src.models.job_post import JobPost
from src.models.place import Place

logger = logging.getLogger("border_helper.api")

# Statuses worth another attempt
_RETRY_STATUSES = {429, 500, 502, 503, 504}


class ApiError(Exception):
    """A remote call failed after all retries."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ApiClient:
    """Thin JSON client over a browser-impersonating curl_cffi session."""

    def __init__(self) -> None:
        self.settings = Settings()
        self.session = curl_requests.Session(
            impersonate=self.settings.IMPERSONATE_BROWSER
        )
        self._request_timeout: int = self.settings.REQUEST_TIMEOUT

    def _request_json(
        self,
        method: str,
        url: str,
        params: dict[str, str] | None = None,
        payload: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request with retries and decode the JSON body.

        Raises :class:`ApiError` once retries are exhausted, on a
        non-retryable HTTP status, or when the body is not JSON.
        """
        headers = dict(self.settings.DEFAULT_HEADERS)
        if payload is not None:
            headers["Content-Type"] = "application/json"

        last_error = ""
        last_status: int | None = None
        for attempt in range(self.settings.MAX_RETRIES):
            try:
                resp = self.session.request(
                    method,
                    url,
                    params=params,
                    json=payload,
                    headers=headers,
                    timeout=self._request_timeout,
                )
            except Exception as exc:
                last_error = str(exc)
                logger.warning(
                    "%s %s failed on attempt %d: %s",
                    method,
                    url,
                    attempt + 1,
                    exc,
                    exc_info=True,
                )
                time.sleep(self.settings.RETRY_DELAY * (attempt + 1))
                continue

            last_status = resp.status_code
            if 200 <= resp.status_code < 300:
                try:
                    return resp.json()
                except ValueError as exc:
                    msg = f"Invalid JSON from {url}"
                    raise ApiError(msg, resp.status_code) from exc

            logger.warning(
                "%s %s returned HTTP %d on attempt %d",
                method,
                url,
                resp.status_code,
                attempt + 1,
            )
            last_error = f"HTTP error! status: {resp.status_code}"
            if resp.status_code not in _RETRY_STATUSES:
                break
            time.sleep(self.settings.RETRY_DELAY * (attempt + 1))

        logger.error("%s %s gave up: %s", method, url, last_error)
        raise ApiError(last_error or f"Request to {url} failed", last_status)

    # ── Attractions ──────────────────────────────────────

    def get_attractions(self) -> list[Place]:
        """Fetch every attraction."""
        try:
            data = self._request_json("GET", self.settings.ATTRACTIONS_URL)
        except ApiError as exc:
            msg = f"Failed to fetch attractions: {exc}"
            raise ApiError(msg, exc.status_code) from exc
        if not isinstance(data, list):
            msg = "Failed to fetch attractions: expected a JSON list"
            raise ApiError(msg)
        places = [Place.from_dict(item) for item in data]
        logger.info("Fetched %d attractions", len(places))
        return places

    def get_attraction(self, place_id: str) -> Place | None:
        """Return the attraction with *place_id*, if the API knows it."""
        for place in self.get_attractions():
            if place.id == place_id:
                return place
        return None

    # ── Job board ────────────────────────────────────────

    def get_job_posts(self, kind: str) -> list[JobPost]:
        """Fetch job posts of *kind* (``employer`` or ``seeker``)."""
        if kind not in self.settings.JOB_POST_KINDS:
            valid = ", ".join(self.settings.JOB_POST_KINDS)
            msg = f"Unknown job post kind '{kind}' (expected: {valid})"
            raise ValueError(msg)

        base = self.settings.API_BASE_URL.rstrip("/")
        data = self._request_json(
            "GET", f"{base}/api/job-posts", params={"type": kind}
        )
        if not isinstance(data, list):
            msg = "Failed to fetch data from server."
            raise ApiError(msg)
        posts = [
            JobPost.from_dict(item, kind, base_url=base) for item in data
        ]
        logger.info("Fetched %d %s posts", len(posts), kind)
        return posts

    def get_all_jobs(self) -> list[dict[str, Any]]:
        """Fetch the raw job feed; an empty list on any failure."""
        base = self.settings.JOBS_API_BASE_URL.rstrip("/")
        try:
            data = self._request_json("GET", f"{base}/dummy")
        except ApiError:
            logger.error("Failed to fetch jobs", exc_info=True)
            return []
        if not isinstance(data, list):
            logger.error("Job feed returned %s, expected a list", type(data).__name__)
            return []
        return data

    def add_post_review(
        self, post_id: str, review: dict[str, Any]
    ) -> Any:
        """Attach a review to a job post."""
        base = self.settings.API_BASE_URL.rstrip("/")
        result = self._request_json(
            "POST",
            f"{base}/api/job-posts/{post_id}/review",
            payload=review,
        )
        logger.info("Review added to post %s", post_id)
        return result
