from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

# nominal window lengths in seconds: short, medium, long
SHORT_WINDOW = 2
MEDIUM_WINDOW = 10
LONG_WINDOW = 40

MEDIUM_RESET_TICKS = 5
LONG_RESET_TICKS = 20

@dataclass
class TimeWindowState:
    short_bytes: int = 0
    medium_bytes: int = 0
    long_bytes: int = 0
    last_tick: Optional[float] = None
    tick_count: int = 0

class RateTracker:
    """Cascading byte counters for the 2s / 10s / 40s rate estimates.

    Every sample goes into all three accumulators. Resets are driven by the
    2 second tick: short resets on each tick; medium resets on every tick
    once tick_count has reached 5 (not once per five ticks); long resets and
    tick_count returns to 0 when tick_count reaches 20.

    Rates are bytes divided by the nominal window length, so they can jump
    around reset boundaries. There is no sample history.
    """

    def __init__(self):
        self.state = TimeWindowState()

    def tick(self, length: int, now: float) -> None:
        st = self.state
        if st.last_tick is None:
            st.last_tick = now
            st.tick_count = 0
            st.short_bytes = st.medium_bytes = st.long_bytes = 0

        st.short_bytes += length
        st.medium_bytes += length
        st.long_bytes += length

        if now - st.last_tick >= SHORT_WINDOW:
            st.short_bytes = 0
            st.last_tick = now
            st.tick_count += 1
            if st.tick_count >= MEDIUM_RESET_TICKS:
                st.medium_bytes = 0
                if st.tick_count >= LONG_RESET_TICKS:
                    st.long_bytes = 0
                    st.tick_count = 0

    def rates(self) -> tuple[float, float, float]:
        st = self.state
        return (st.short_bytes / SHORT_WINDOW,
                st.medium_bytes / MEDIUM_WINDOW,
                st.long_bytes / LONG_WINDOW)
