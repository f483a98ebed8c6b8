from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Tuple

@dataclass(frozen=True)
class CountersView:
    total_rx_bytes: int
    total_tx_bytes: int
    global_peak_bytes: int

    @property
    def total_bytes(self) -> int:
        return self.total_rx_bytes + self.total_tx_bytes

@dataclass(frozen=True)
class FlowRow:
    src: str
    dst: str
    direction: str  # 'RX' / 'TX'
    total_bytes: int
    total_packets: int
    peak_bytes: int

@dataclass(frozen=True)
class WindowRates:
    short_bytes: int
    medium_bytes: int
    long_bytes: int
    short_rate: float   # bytes/s over 2s
    medium_rate: float  # bytes/s over 10s
    long_rate: float    # bytes/s over 40s

@dataclass(frozen=True)
class Snapshot:
    local_address: str
    counters: CountersView
    windows: WindowRates
    flows: Tuple[FlowRow, ...]
    flow_count: int
    taken_at: float

    def to_dict(self) -> Dict[str, Any]:
        c, w = self.counters, self.windows
        return {
            "local_address": self.local_address,
            "taken_at": self.taken_at,
            "total_rx_bytes": c.total_rx_bytes,
            "total_tx_bytes": c.total_tx_bytes,
            "global_peak_bytes": c.global_peak_bytes,
            "rates": {
                "short": {"bytes": w.short_bytes, "bps": w.short_rate},
                "medium": {"bytes": w.medium_bytes, "bps": w.medium_rate},
                "long": {"bytes": w.long_bytes, "bps": w.long_rate},
            },
            "flow_count": self.flow_count,
            "flows": [
                {
                    "direction": f.direction,
                    "src": f.src,
                    "dst": f.dst,
                    "total_bytes": f.total_bytes,
                    "total_packets": f.total_packets,
                    "peak_bytes": f.peak_bytes,
                } for f in self.flows
            ],
        }
