"""Network reachability checks.

The API helper consults a :class:`ConnectivityProbe` before each call
when ``check_internet`` is enabled. Two probes are provided:

- :class:`DNSConnectivityProbe` resolves a well-known host name and is
  the default.
- :class:`HTTPConnectivityProbe` issues a GET against a URL and treats
  any 2xx answer as reachable.

Probes never raise for network conditions; they answer ``False``.
"""

import asyncio
import logging
from typing import Optional, Protocol, runtime_checkable

import httpx

from ..config.settings import get_settings

logger = logging.getLogger(__name__)


@runtime_checkable
class ConnectivityProbe(Protocol):
    """Anything that can answer "is the network reachable?"."""

    async def has_network(self) -> bool:
        ...


class DNSConnectivityProbe:
    """Reachability probe based on a host name lookup.

    :param host: Host name to resolve
    :type host: str
    :param port: Port passed to the resolver
    :type port: int
    :param timeout: Seconds to wait for the resolver
    :type timeout: float
    """

    def __init__(self, host: str = "google.com", port: int = 443, timeout: float = 5.0):
        self.host = host
        self.port = port
        self.timeout = timeout

    @classmethod
    def from_settings(cls) -> "DNSConnectivityProbe":
        """Build a probe from the current environment settings."""
        s = get_settings()
        return cls(
            host=s.connectivity_host,
            port=s.connectivity_port,
            timeout=s.connectivity_timeout_seconds,
        )

    async def has_network(self) -> bool:
        """Resolve the configured host.

        :return: True if at least one address came back in time
        :rtype: bool
        """
        loop = asyncio.get_running_loop()
        try:
            infos = await asyncio.wait_for(
                loop.getaddrinfo(self.host, self.port), timeout=self.timeout
            )
        except (OSError, asyncio.TimeoutError) as e:
            logger.debug("Lookup of %s failed: %s", self.host, e)
            return False
        return bool(infos)


class HTTPConnectivityProbe:
    """Reachability probe based on a GET request.

    :param url: URL expected to answer with a 2xx status
    :type url: str
    :param timeout: Request timeout in seconds
    :type timeout: float
    :param transport: Optional transport for the probe client
    :type transport: Optional[httpx.AsyncBaseTransport]
    """

    def __init__(
        self,
        url: str,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.timeout = timeout
        self._transport = transport

    async def has_network(self) -> bool:
        """Perform the health check request.

        :return: True if the URL answered with a 2xx status
        :rtype: bool
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                r = await client.get(self.url)
                return 200 <= r.status_code < 300
        except httpx.HTTPError as e:
            logger.debug("Health check against %s failed: %s", self.url, e)
            return False


async def has_network() -> bool:
    """Check reachability with the settings-configured DNS probe.

    :return: True if the network is reachable
    :rtype: bool
    """
    return await DNSConnectivityProbe.from_settings().has_network()
