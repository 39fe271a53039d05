from typing import Optional

from geoapify.models import IPGeolocationResponse

from .base import Service, query


class IPGeolocationService(Service):
    async def lookup(self, ip: Optional[str] = None) -> IPGeolocationResponse:
        """Locates `ip`, or the caller's own address when omitted."""
        return await self.client.execute_get(
            "/v1/ipinfo", query(("ip", ip)), IPGeolocationResponse
        )
