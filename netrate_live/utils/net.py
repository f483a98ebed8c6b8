from __future__ import annotations
import ipaddress
import logging
import socket
from typing import Optional, Sequence

import psutil

logger = logging.getLogger(__name__)

COMMON_INTERFACES = ("br-lan", "eth0", "wan", "wlan0")

def ipv4_from_bytes(b: bytes) -> str:
    return socket.inet_ntop(socket.AF_INET, b)

def ipv6_from_bytes(b: bytes) -> str:
    try:
        return socket.inet_ntop(socket.AF_INET6, b)
    except (AttributeError, OSError):
        return str(ipaddress.IPv6Address(b))

def _is_up(stats: dict, name: str) -> bool:
    st = stats.get(name)
    if st is None or not st.isup:
        logger.warning("interface %s is down or not running", name)
        return False
    return True

def _ipv4_of(addrs: dict, name: str) -> Optional[str]:
    for a in addrs.get(name, ()):
        if a.family == socket.AF_INET and a.address:
            return a.address
    return None

def resolve_local_ip(interface: Optional[str],
                     fallbacks: Sequence[str] = COMMON_INTERFACES) -> Optional[str]:
    """IPv4 address to treat as "this host".

    Order:
      1) the requested interface
      2) common router/host interface names (br-lan, eth0, wan, wlan0)
      3) any non-loopback interface that is up
    Returns None if nothing matches.
    """
    addrs = psutil.net_if_addrs()
    stats = psutil.net_if_stats()

    if interface and interface in addrs and _is_up(stats, interface):
        ip = _ipv4_of(addrs, interface)
        if ip:
            logger.info("found IP on specified interface %s: %s", interface, ip)
            return ip

    for name in fallbacks:
        if name == "lo" or name not in addrs or not _is_up(stats, name):
            continue
        ip = _ipv4_of(addrs, name)
        if ip:
            logger.info("found IP on common interface %s: %s", name, ip)
            return ip

    for name in addrs:
        if name == "lo":
            continue
        ip = _ipv4_of(addrs, name)
        if not ip or ipaddress.ip_address(ip).is_loopback:
            continue
        if not _is_up(stats, name):
            continue
        logger.info("fallback IP on %s: %s", name, ip)
        return ip

    logger.error("failed to find a valid IPv4 address")
    return None
