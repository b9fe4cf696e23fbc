"""SSRF protection for outbound notification webhooks."""

import asyncio
import ipaddress
import logging
import socket

import httpx

from neouptime.config import settings

logger = logging.getLogger(__name__)

_BLOCKED_NETWORKS = [
    ipaddress.ip_network("10.0.0.0/8"),
    ipaddress.ip_network("172.16.0.0/12"),
    ipaddress.ip_network("192.168.0.0/16"),
    ipaddress.ip_network("127.0.0.0/8"),
    ipaddress.ip_network("169.254.0.0/16"),
    ipaddress.ip_network("0.0.0.0/8"),
    ipaddress.ip_network("::1/128"),
    ipaddress.ip_network("fc00::/7"),
    ipaddress.ip_network("fe80::/10"),
]

_BLOCKED_HOSTNAMES = {
    "localhost",
    "metadata",
    "metadata.google.internal",
}


def is_ip_blocked(ip_str: str) -> bool:
    try:
        ip = ipaddress.ip_address(ip_str)
        return any(ip in network for network in _BLOCKED_NETWORKS)
    except ValueError:
        return True


async def is_hostname_blocked(hostname: str) -> bool:
    """
    Return True if a webhook host must not be contacted.

    Resolution runs in the loop's executor. Hostnames that fail to resolve
    are treated as blocked.
    """
    if hostname.lower() in _BLOCKED_HOSTNAMES:
        return True
    loop = asyncio.get_running_loop()
    try:
        addr_infos = await loop.getaddrinfo(hostname, None, type=socket.SOCK_STREAM)
    except socket.gaierror:
        return True
    return any(is_ip_blocked(sockaddr[0]) for _, _, _, _, sockaddr in addr_infos)


class SSRFSafeTransport(httpx.AsyncHTTPTransport):
    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        hostname = request.url.host
        if hostname and await is_hostname_blocked(hostname):
            logger.warning("Refusing webhook delivery to blocked host %s", hostname)
            raise httpx.ConnectError(f"Blocked webhook host: {hostname}", request=request)
        return await super().handle_async_request(request)


def safe_http_client(follow_redirects: bool = True, **kwargs) -> httpx.AsyncClient:
    """
    Build the client used for webhook deliveries.

    No timeout is set here, so httpx's default applies unless the caller passes one.
    """
    if settings.webhook_ssrf_protection:
        kwargs.setdefault("transport", SSRFSafeTransport())
    return httpx.AsyncClient(follow_redirects=follow_redirects, **kwargs)
