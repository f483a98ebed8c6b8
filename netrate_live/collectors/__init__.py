from .capture import RawCapture
from .decode import decode_frame
from .loop import capture_loop, ingest_loop

__all__ = ["RawCapture", "decode_frame", "capture_loop", "ingest_loop"]
