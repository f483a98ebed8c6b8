from __future__ import annotations
import argparse, logging, sys, threading
from typing import Callable, List, Optional

from .config import CFG, init_cfg_from_args
from .errors import CaptureError, ConfigError
from .collectors import capture_loop
from .render import print_snapshot
from .stats import CountersView, Snapshot, TrafficState, UNRESOLVED_ADDRESS
from .utils.net import resolve_local_ip
from .web import create_app

logger = logging.getLogger(__name__)

def parse_args(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description='Live per-flow traffic and rate monitor')
    ap.add_argument('-i', '--interface', type=str, default=None, help='capture interface (default: eth0)')
    ap.add_argument('--local-ip', type=str, default=None, help='address treated as this host; skips auto-detection')
    ap.add_argument('--interval', type=float, default=None, help='seconds between dashboard refreshes (default: 2)')
    ap.add_argument('--stop-bytes', type=int, default=None, help='stop after rx+tx exceeds this many bytes, 0 = run forever (default: 10000000)')
    ap.add_argument('--max-flows', type=int, default=None, help='flows shown per refresh (default: 10)')
    ap.add_argument('--port', type=int, default=None, help='also serve the dashboard over HTTP on this port')
    ap.add_argument('--no-console', action='store_true', help='do not draw the text dashboard')
    ap.add_argument('--config', type=str, default=None, help='YAML or JSON file with the same settings')
    ap.add_argument('-v', '--verbose', action='store_true')
    return ap.parse_args(argv)

def should_stop(counters: CountersView, stop_bytes: int) -> bool:
    return stop_bytes > 0 and counters.total_bytes > stop_bytes

def display_loop(cfg: CFG, state: TrafficState, stop: threading.Event,
                 show: Optional[Callable[[Snapshot], None]] = None) -> None:
    """Periodic side: wait, snapshot, draw, apply the stop policy."""
    if show is None and cfg.console:
        show = lambda snap: print_snapshot(snap, cfg.interface)
    while not stop.wait(cfg.interval):
        snap = state.get_snapshot(limit=cfg.max_flows)
        if show:
            show(snap)
        if should_stop(snap.counters, cfg.stop_bytes):
            logger.info("byte threshold %d reached, stopping", cfg.stop_bytes)
            stop.set()

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='[%(levelname)s] %(name)s: %(message)s')
    try:
        cfg = init_cfg_from_args(args)
    except ConfigError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1

    local_ip = cfg.local_ip or resolve_local_ip(cfg.interface)
    if not local_ip:
        print(f"[warn] could not get an IP address for {cfg.interface}", file=sys.stderr)
        local_ip = UNRESOLVED_ADDRESS
    state = TrafficState(local_ip)
    stop = threading.Event()
    failures: list[CaptureError] = []

    def run_capture():
        try:
            capture_loop(cfg, state, stop)
        except CaptureError as e:
            failures.append(e)

    t = threading.Thread(target=run_capture, name='capture', daemon=True)
    t.start()

    if cfg.web_port:
        app = create_app(cfg, state)
        web = threading.Thread(target=app.run, name='web', daemon=True,
                               kwargs=dict(host='0.0.0.0', port=cfg.web_port,
                                           debug=False, use_reloader=False))
        web.start()
        print(f"[*] Serving on http://localhost:{cfg.web_port}")

    try:
        display_loop(cfg, state, stop)
    except KeyboardInterrupt:
        stop.set()

    # capture wakes up within one socket timeout
    t.join(timeout=5.0)
    if failures:
        print(f"[error] {failures[0]}", file=sys.stderr)
        return 1
    print("\ntraffic monitor stopped")
    return 0

if __name__ == '__main__':
    raise SystemExit(main())
