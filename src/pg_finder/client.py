"""Listings API client.

Fetches the full listing array once per refresh and validates each record.
Failures never propagate into filtering: a failed fetch yields the last good
snapshot (empty before the first success), and malformed records are dropped.
"""

from typing import Any

import httpx
from pydantic import ValidationError

from pg_finder.logging import get_logger
from pg_finder.models import Property

logger = get_logger(__name__)

_TIMEOUT = 10.0


def parse_properties(payload: Any) -> list[Property]:
    """Validate a decoded API payload into properties, skipping invalid records.

    Raises:
        ValueError: If the payload is not a JSON array.
    """
    if not isinstance(payload, list):
        raise ValueError(f"expected a list of listings, got {type(payload).__name__}")

    properties: list[Property] = []
    seen_ids: set[str] = set()
    for index, record in enumerate(payload):
        try:
            prop = Property.model_validate(record)
        except ValidationError as e:
            logger.warning(
                "listing_record_rejected",
                index=index,
                errors=e.error_count(),
                detail=str(e.errors(include_url=False)[0]["msg"]),
            )
            continue
        if prop.id in seen_ids:
            logger.warning("listing_duplicate_id", index=index, listing_id=prop.id)
            continue
        seen_ids.add(prop.id)
        properties.append(prop)
    return properties


class PropertyFeed:
    """Data-access collaborator for the listings endpoint."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float = _TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the feed.

        Args:
            url: Absolute URL of the endpoint returning the listing array.
            timeout: Request timeout in seconds (ignored when ``client`` is given).
            client: Shared HTTP client. A short-lived one is created per fetch otherwise.
        """
        self.url = url
        self.timeout = timeout
        self._client = client
        self._cached: tuple[Property, ...] = ()

    @property
    def cached(self) -> tuple[Property, ...]:
        """Last successfully fetched snapshot."""
        return self._cached

    async def fetch(self) -> tuple[Property, ...]:
        """Fetch and validate the listing array.

        Returns:
            The new snapshot, or the previous one if the request failed.
        """
        if self._client is not None:
            return await self._fetch_with_client(self._client)

        async with httpx.AsyncClient(timeout=self.timeout) as c:
            return await self._fetch_with_client(c)

    async def _fetch_with_client(self, client: httpx.AsyncClient) -> tuple[Property, ...]:
        try:
            resp = await client.get(self.url)
            resp.raise_for_status()
            payload = resp.json()
            properties = parse_properties(payload)
        except httpx.HTTPError:
            logger.warning("listings_fetch_failed", url=self.url, exc_info=True)
            return self._cached
        except ValueError:
            # Covers undecodable JSON as well as a non-array payload.
            logger.warning("listings_payload_invalid", url=self.url, exc_info=True)
            return self._cached

        self._cached = tuple(properties)
        logger.info(
            "listings_fetched",
            url=self.url,
            received=len(payload),
            accepted=len(self._cached),
        )
        return self._cached
