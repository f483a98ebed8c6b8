from __future__ import annotations
import struct
import time
from typing import Optional

from ..models import PacketEvent
from ..utils.net import ipv4_from_bytes, ipv6_from_bytes

ETH_HLEN = 14
ETH_P_IP = 0x0800
ETH_P_IPV6 = 0x86DD

def decode_frame(frame: bytes, ts: Optional[float] = None) -> Optional[PacketEvent]:
    """Ethernet frame -> PacketEvent, or None for anything that is not IPv4/IPv6.

    The event length is the whole frame as delivered by the socket, not the
    IP total-length field.
    """
    if len(frame) < ETH_HLEN:
        return None
    ethertype = struct.unpack("!H", frame[12:14])[0]
    ip = frame[ETH_HLEN:]
    if ethertype == ETH_P_IP:
        if len(ip) < 20:
            return None
        src, dst = ipv4_from_bytes(ip[12:16]), ipv4_from_bytes(ip[16:20])
    elif ethertype == ETH_P_IPV6:
        if len(ip) < 40:
            return None
        src, dst = ipv6_from_bytes(ip[8:24]), ipv6_from_bytes(ip[24:40])
    else:
        return None
    return PacketEvent(src=src, dst=dst, length=len(frame),
                       ts=time.time() if ts is None else ts)
