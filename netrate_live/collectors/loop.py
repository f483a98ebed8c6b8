from __future__ import annotations
import logging
import threading
from typing import Iterable, Optional

from ..config import CFG
from ..errors import CaptureError
from ..models import PacketEvent
from ..stats import TrafficState
from .capture import RawCapture

logger = logging.getLogger(__name__)

def ingest_loop(state: TrafficState, source: Iterable[PacketEvent],
                stop: Optional[threading.Event] = None) -> int:
    """Feed events into state until stop is set or the source runs dry."""
    n = 0
    for ev in source:
        state.ingest(ev)
        n += 1
        if stop is not None and stop.is_set():
            break
    return n

def capture_loop(cfg: CFG, state: TrafficState, stop: threading.Event) -> None:
    try:
        with RawCapture(cfg.interface) as cap:
            n = ingest_loop(state, cap.events(stop), stop)
            logger.info("capture on %s finished: %d packets, %d non-IP frames skipped",
                        cfg.interface, n, cap.dropped)
    except CaptureError as e:
        logger.error("%s", e)
        raise
    except OSError as e:
        err = CaptureError(cfg.interface, str(e))
        logger.error("%s", err)
        raise err from e
    finally:
        stop.set()
