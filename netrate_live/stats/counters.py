from __future__ import annotations
from dataclasses import dataclass
from ..models import Direction

@dataclass
class GlobalCounters:
    total_rx_bytes: int = 0
    total_tx_bytes: int = 0
    global_peak_bytes: int = 0

    def account(self, direction: Direction, length: int) -> None:
        if direction is Direction.INBOUND:
            self.total_rx_bytes += length
        else:
            self.total_tx_bytes += length

    def observe_peak(self, length: int) -> None:
        if length > self.global_peak_bytes:
            self.global_peak_bytes = length

    @property
    def total_bytes(self) -> int:
        return self.total_rx_bytes + self.total_tx_bytes
