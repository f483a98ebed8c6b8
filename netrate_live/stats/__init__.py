from .classifier import classify, UNRESOLVED_ADDRESS
from .counters import GlobalCounters
from .flow_table import FlowKey, FlowRecord, FlowTable
from .rate_tracker import RateTracker, TimeWindowState
from .snapshot import CountersView, FlowRow, Snapshot, WindowRates
from .state import TrafficState

__all__ = [
    "classify", "UNRESOLVED_ADDRESS", "GlobalCounters", "FlowKey", "FlowRecord",
    "FlowTable", "RateTracker", "TimeWindowState", "CountersView", "FlowRow",
    "Snapshot", "WindowRates", "TrafficState",
]
