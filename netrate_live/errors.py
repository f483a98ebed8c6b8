from __future__ import annotations


class NetrateError(Exception):
    """Base class for failures surfaced to the operator."""


class ConfigError(NetrateError):
    pass


class CaptureError(NetrateError):
    def __init__(self, interface: str, reason: str):
        super().__init__(f"cannot capture on {interface}: {reason}")
        self.interface = interface
        self.reason = reason
