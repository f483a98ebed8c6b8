from __future__ import annotations
import logging
import threading
import time
from typing import Optional

from ..models import Direction, PacketEvent
from .classifier import classify, UNRESOLVED_ADDRESS
from .counters import GlobalCounters
from .flow_table import FlowTable
from .rate_tracker import RateTracker
from .snapshot import CountersView, FlowRow, Snapshot, WindowRates

logger = logging.getLogger(__name__)

DEFAULT_SNAPSHOT_FLOWS = 10

class TrafficState:
    """Everything the capture thread writes and the display thread reads.

    One lock covers the flow table, the rate tracker and the global counters.
    A packet's updates are applied as a unit and snapshots are copied out
    under the same lock, so a reader never sees half of an update.
    """

    def __init__(self, local_address: Optional[str] = None):
        self.local_address = local_address or UNRESOLVED_ADDRESS
        self.lock = threading.Lock()
        self.flows = FlowTable()
        self.rates = RateTracker()
        self.totals = GlobalCounters()
        if self.local_address == UNRESOLVED_ADDRESS:
            logger.warning("local address unresolved, all traffic counts as TX")

    def ingest(self, event: PacketEvent) -> Direction:
        # reject before touching anything so a bad event leaves no partial update
        if event.length < 0:
            raise ValueError(f"negative packet length {event.length}")
        with self.lock:
            direction = classify(event.dst, self.local_address)
            self.totals.account(direction, event.length)
            self.totals.observe_peak(event.length)
            self.flows.record(event.src, event.dst, direction, event.length)
            self.rates.tick(event.length, event.ts)
        return direction

    def counters(self) -> CountersView:
        with self.lock:
            t = self.totals
            return CountersView(t.total_rx_bytes, t.total_tx_bytes, t.global_peak_bytes)

    def get_snapshot(self, limit: int = DEFAULT_SNAPSHOT_FLOWS) -> Snapshot:
        with self.lock:
            t = self.totals
            counters = CountersView(t.total_rx_bytes, t.total_tx_bytes, t.global_peak_bytes)
            w = self.rates.state
            short_rate, medium_rate, long_rate = self.rates.rates()
            windows = WindowRates(w.short_bytes, w.medium_bytes, w.long_bytes,
                                  short_rate, medium_rate, long_rate)
            rows = tuple(
                FlowRow(k.src, k.dst, k.direction.label,
                        r.total_bytes, r.total_packets, r.peak_bytes)
                for k, r in self.flows.head(limit)
            )
            flow_count = len(self.flows)
        return Snapshot(local_address=self.local_address, counters=counters,
                        windows=windows, flows=rows, flow_count=flow_count,
                        taken_at=time.time())
