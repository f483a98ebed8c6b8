from __future__ import annotations
import sys
from typing import TextIO

from .stats import Snapshot

CLEAR = "\033[H\033[J"
RULE = "-" * 60

def kbps(bytes_per_sec: float) -> float:
    return bytes_per_sec / 1024.0

def render_text(snap: Snapshot, interface: str) -> str:
    c, w = snap.counters, snap.windows
    lines = [
        f"=== Live traffic === [interface: {interface}]",
        f"Local IP: {snap.local_address}",
        f"Total RX: {c.total_rx_bytes:<10d} bytes | Total TX: {c.total_tx_bytes:<10d} bytes",
        f"Peak: {c.global_peak_bytes} bytes/packet",
        "",
        "=== Average rate ===",
        f"  last 2s:  {kbps(w.short_rate):8.2f} KB/s",
        f"  last 10s: {kbps(w.medium_rate):8.2f} KB/s",
        f"  last 40s: {kbps(w.long_rate):8.2f} KB/s",
    ]
    if snap.flows:
        lines += [
            "",
            f"=== Flows === (first {len(snap.flows)} of {snap.flow_count})",
            f"Dir | {'Source':<15} -> {'Destination':<15} | Bytes         | Pkts  | Peak",
            RULE,
        ]
        for f in snap.flows:
            lines.append(f" {f.direction} | {f.src:<15} -> {f.dst:<15} | "
                         f"{f.total_bytes:<13d} | {f.total_packets:<5d} | {f.peak_bytes}")
    return "\n".join(lines)

def print_snapshot(snap: Snapshot, interface: str, out: TextIO = sys.stdout) -> None:
    """Redraw in place on a terminal; plain append when piped to a log."""
    if out.isatty():
        out.write(CLEAR)
    out.write(render_text(snap, interface) + "\n")
    out.flush()
