"""Syntactic classification of target hosts as private or public."""

from __future__ import annotations

import ipaddress
from enum import Enum
from urllib.parse import urlparse


class HostClass(str, Enum):
    PRIVATE = "private"
    PUBLIC = "public"


_PRIVATE_ZONES = (".local", ".localhost")

_PRIVATE_NETWORKS = (
    ipaddress.ip_network("10.0.0.0/8"),
    ipaddress.ip_network("172.16.0.0/12"),
    ipaddress.ip_network("192.168.0.0/16"),
    ipaddress.ip_network("fc00::/7"),
    ipaddress.ip_network("fe80::/10"),
)


def classify_hostname(hostname: str) -> HostClass:
    """Classify a bare hostname or IP literal without touching the network."""
    host = hostname.strip().rstrip(".").lower()
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]

    if host == "localhost":
        return HostClass.PRIVATE

    try:
        ip = ipaddress.ip_address(host)
    except ValueError:
        ip = None

    if ip is not None:
        if ip.is_loopback:
            return HostClass.PRIVATE
        if any(ip in net for net in _PRIVATE_NETWORKS if net.version == ip.version):
            return HostClass.PRIVATE
        return HostClass.PUBLIC

    if host.endswith(_PRIVATE_ZONES):
        return HostClass.PRIVATE
    return HostClass.PUBLIC


def classify_host(url: str) -> HostClass:
    """Classify the host of *url* as private (internal network) or public."""
    return classify_hostname(urlparse(url).hostname or "")
