from __future__ import annotations
from ..models import Direction

# never equal to a presentation-form IPv4/IPv6 address
UNRESOLVED_ADDRESS = "unknown"

def classify(dst: str, local_address: str) -> Direction:
    if dst == local_address:
        return Direction.INBOUND
    return Direction.OUTBOUND
