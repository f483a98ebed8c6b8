import struct

import pytest

from netrate_live.models import PacketEvent
from netrate_live.stats import TrafficState

LOCAL = "10.0.0.1"


@pytest.fixture
def state():
    return TrafficState(local_address=LOCAL)


@pytest.fixture
def scenario_events():
    return [
        PacketEvent(src="1.1.1.1", dst=LOCAL, length=100, ts=0.0),
        PacketEvent(src=LOCAL, dst="2.2.2.2", length=200, ts=0.5),
    ]


def eth_frame(ethertype: int, l3: bytes) -> bytes:
    return b"\x00\x11\x22\x33\x44\x55" + b"\x66\x77\x88\x99\xaa\xbb" + struct.pack("!H", ethertype) + l3


def ipv4_header(src: bytes, dst: bytes, payload_len: int = 0) -> bytes:
    return struct.pack(
        "!BBHHHBBH4s4s",
        (4 << 4) | 5, 0, 20 + payload_len, 0, 0, 64, 17, 0, src, dst,
    )


def ipv6_header(src: bytes, dst: bytes, payload_len: int = 0) -> bytes:
    return struct.pack("!IHBB16s16s", 6 << 28, payload_len, 17, 64, src, dst)
