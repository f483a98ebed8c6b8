from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterator, List, NamedTuple, Tuple
from ..models import Direction

class FlowKey(NamedTuple):
    src: str
    dst: str
    direction: Direction

@dataclass
class FlowRecord:
    total_bytes: int = 0
    total_packets: int = 0
    peak_bytes: int = 0

    def add(self, length: int) -> None:
        self.total_bytes += length
        self.total_packets += 1
        if length > self.peak_bytes:
            self.peak_bytes = length

class FlowTable:
    """Per-flow byte/packet counters, kept for the lifetime of the process.

    Records are never removed. Iteration follows first-seen order, which is
    also the order the dashboard lists flows in. Lookups go through the dict
    hash, so per-packet cost does not grow with the number of flows.
    """

    def __init__(self):
        self._flows: Dict[FlowKey, FlowRecord] = {}

    def record(self, src: str, dst: str, direction: Direction, length: int) -> FlowRecord:
        if length < 0:
            raise ValueError(f"negative packet length {length}")
        key = FlowKey(src, dst, direction)
        rec = self._flows.get(key)
        if rec is None:
            rec = FlowRecord(total_bytes=length, total_packets=1, peak_bytes=length)
            self._flows[key] = rec
        else:
            rec.add(length)
        return rec

    def get(self, src: str, dst: str, direction: Direction) -> FlowRecord | None:
        return self._flows.get(FlowKey(src, dst, direction))

    def head(self, n: int) -> List[Tuple[FlowKey, FlowRecord]]:
        out: List[Tuple[FlowKey, FlowRecord]] = []
        if n <= 0:
            return out
        for key, rec in self._flows.items():
            out.append((key, rec))
            if len(out) >= n:
                break
        return out

    def __len__(self) -> int:
        return len(self._flows)

    def __iter__(self) -> Iterator[Tuple[FlowKey, FlowRecord]]:
        return iter(self._flows.items())
