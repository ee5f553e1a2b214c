"""PicPeak admin REST API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from picpeak_admin.errors import ConflictError, EventNotFoundError

_CONFLICT_STATUSES = {409, 412}


class PicPeakClient(Protocol):
    """Interface for the PicPeak backend endpoints the admin policy uses."""

    async def list_events(self, status: str | None = None) -> list[dict[str, object]]:
        """Return raw event payloads."""

    async def get_event(self, event_id: int) -> dict[str, object]:
        """Return a raw event payload."""

    async def update_event(
        self, event_id: int, data: dict[str, object], version: str | None = None
    ) -> dict[str, object]:
        """Update event fields and return the stored event."""

    async def extend_expiration(
        self, event_id: int, days: int, version: str | None = None
    ) -> dict[str, object]:
        """Extend the gallery expiry by a number of days."""

    async def archive_event(self, event_id: int, version: str | None = None) -> None:
        """Archive an event."""

    async def get_feedback_settings(self, event_id: int) -> dict[str, object]:
        """Return the event's feedback settings."""

    async def update_feedback_settings(
        self, event_id: int, settings: dict[str, object], version: str | None = None
    ) -> dict[str, object]:
        """Replace the event's feedback settings."""


@dataclass
class HttpxPicPeakClient(PicPeakClient):
    """HTTPX-backed PicPeak client."""

    base_url: str
    admin_token: str
    http_client: httpx.AsyncClient
    timeout: float = 15

    @classmethod
    def create(
        cls, base_url: str, admin_token: str, timeout: float = 15
    ) -> "HttpxPicPeakClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            admin_token=admin_token,
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def list_events(self, status: str | None = None) -> list[dict[str, object]]:
        """Fetch all events, optionally filtered by backend status."""
        params = {"status": status} if status else None
        response = await self.http_client.get(
            f"{self.base_url}/admin/events",
            params=params,
            headers=self._headers(),
            timeout=self.timeout,
        )
        response.raise_for_status()
        payload = response.json()
        if isinstance(payload, list):
            return payload
        return list(payload.get("events", []))

    async def get_event(self, event_id: int) -> dict[str, object]:
        """Fetch one event."""
        response = await self.http_client.get(
            f"{self.base_url}/admin/events/{event_id}",
            headers=self._headers(),
            timeout=self.timeout,
        )
        _raise_for_event_status(response, event_id)
        return response.json()

    async def update_event(
        self, event_id: int, data: dict[str, object], version: str | None = None
    ) -> dict[str, object]:
        """Update event fields."""
        response = await self.http_client.put(
            f"{self.base_url}/admin/events/{event_id}",
            json=data,
            headers=self._headers(version),
            timeout=self.timeout,
        )
        _raise_for_event_status(response, event_id, version)
        return response.json()

    async def extend_expiration(
        self, event_id: int, days: int, version: str | None = None
    ) -> dict[str, object]:
        """Extend the expiry; the backend also reactivates the event."""
        response = await self.http_client.post(
            f"{self.base_url}/events/{event_id}/extend",
            json={"days": days},
            headers=self._headers(version),
            timeout=self.timeout,
        )
        _raise_for_event_status(response, event_id, version)
        return response.json()

    async def archive_event(self, event_id: int, version: str | None = None) -> None:
        """Force-archive an event."""
        response = await self.http_client.post(
            f"{self.base_url}/admin/events/{event_id}/archive",
            headers=self._headers(version),
            timeout=self.timeout,
        )
        _raise_for_event_status(response, event_id, version)

    async def get_feedback_settings(self, event_id: int) -> dict[str, object]:
        """Fetch feedback settings."""
        response = await self.http_client.get(
            f"{self.base_url}/admin/feedback/events/{event_id}/feedback-settings",
            headers=self._headers(),
            timeout=self.timeout,
        )
        _raise_for_event_status(response, event_id)
        return response.json()

    async def update_feedback_settings(
        self, event_id: int, settings: dict[str, object], version: str | None = None
    ) -> dict[str, object]:
        """Replace feedback settings as a whole."""
        response = await self.http_client.put(
            f"{self.base_url}/admin/feedback/events/{event_id}/feedback-settings",
            json=settings,
            headers=self._headers(version),
            timeout=self.timeout,
        )
        _raise_for_event_status(response, event_id, version)
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    def _headers(self, version: str | None = None) -> dict[str, str]:
        headers = {"Authorization": f"Bearer {self.admin_token}"}
        if version is not None:
            headers["If-Match"] = f'"{version}"'
        return headers


def _raise_for_event_status(
    response: httpx.Response, event_id: int, version: str | None = None
) -> None:
    """Map event-specific HTTP failures to domain errors."""
    if response.status_code == 404:
        raise EventNotFoundError(event_id)
    if response.status_code in _CONFLICT_STATUSES:
        raise ConflictError(event_id, version)
    response.raise_for_status()
