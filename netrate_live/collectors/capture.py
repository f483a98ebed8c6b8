from __future__ import annotations
import logging
import socket
import threading
from typing import Iterator, Optional

from ..errors import CaptureError
from ..models import PacketEvent
from .decode import decode_frame

logger = logging.getLogger(__name__)

ETH_P_ALL = 0x0003
RECV_BUF = 4 * 1024 * 1024
MAX_FRAME = 65535

class RawCapture:
    """Link-layer capture on one interface via an AF_PACKET raw socket.

    Needs root or CAP_NET_RAW. recv() times out every `poll` seconds so the
    reader can notice a stop request.
    """

    def __init__(self, interface: str, poll: float = 1.0):
        self.interface = interface
        self.poll = poll
        self.sock: Optional[socket.socket] = None
        self.dropped = 0

    def open(self) -> None:
        try:
            sock = socket.socket(socket.AF_PACKET, socket.SOCK_RAW, socket.htons(ETH_P_ALL))
        except PermissionError as e:
            logger.error("permission denied opening raw socket; run as root or grant CAP_NET_RAW")
            raise CaptureError(self.interface, "permission denied") from e
        except (OSError, AttributeError) as e:
            raise CaptureError(self.interface, str(e)) from e
        try:
            sock.bind((self.interface, 0))
        except OSError as e:
            sock.close()
            raise CaptureError(self.interface, str(e)) from e
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_RCVBUF, RECV_BUF)
        except OSError:
            logger.debug("could not enlarge receive buffer on %s", self.interface)
        sock.settimeout(self.poll)
        self.sock = sock
        logger.info("capturing on %s", self.interface)

    def close(self) -> None:
        if self.sock:
            try:
                self.sock.close()
            finally:
                self.sock = None

    def __enter__(self) -> "RawCapture":
        self.open()
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def recv(self) -> Optional[bytes]:
        if not self.sock:
            raise RuntimeError("capture socket not open")
        try:
            data, _addr = self.sock.recvfrom(MAX_FRAME)
        except socket.timeout:
            return None
        except OSError as e:
            raise CaptureError(self.interface, str(e)) from e
        return data

    def events(self, stop: Optional[threading.Event] = None) -> Iterator[PacketEvent]:
        while stop is None or not stop.is_set():
            frame = self.recv()
            if frame is None:
                continue
            ev = decode_frame(frame)
            if ev is None:
                self.dropped += 1
                continue
            yield ev
