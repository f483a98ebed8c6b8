from __future__ import annotations
import enum
import time
from dataclasses import dataclass, field

class Direction(enum.Enum):
    INBOUND = "RX"
    OUTBOUND = "TX"

    @property
    def label(self) -> str:
        return self.value

@dataclass(frozen=True)
class PacketEvent:
    src: str
    dst: str
    length: int  # frame length as reported by the capture layer
    ts: float = field(default_factory=time.time)
