from __future__ import annotations
import orjson
from flask import Flask, Response, current_app, request

from ..config import CFG
from ..stats import TrafficState
from .ui import render_html

MAX_LIMIT = 1000

def dumps(obj) -> str:
    return orjson.dumps(obj).decode()

def create_app(cfg: CFG, state: TrafficState) -> Flask:
    app = Flask(__name__)

    @app.get("/")
    def index():
        return Response(render_html(cfg.interface, cfg.interval), mimetype="text/html")

    @app.get("/api/snapshot")
    def api_snapshot():
        raw = request.args.get("limit")
        try:
            limit = cfg.max_flows if raw is None else int(raw)
        except ValueError:
            limit = -1
        if limit < 0:
            current_app.logger.warning("rejecting snapshot limit %r", raw)
            return Response(dumps({"error": "limit must be a non-negative integer"}),
                            status=400, mimetype="application/json")
        snap = state.get_snapshot(limit=min(limit, MAX_LIMIT))
        data = snap.to_dict()
        data["interface"] = cfg.interface
        return Response(dumps(data), mimetype="application/json")

    @app.get("/api/counters")
    def api_counters():
        c = state.counters()
        return Response(dumps({
            "total_rx_bytes": c.total_rx_bytes,
            "total_tx_bytes": c.total_tx_bytes,
            "total_bytes": c.total_bytes,
            "global_peak_bytes": c.global_peak_bytes,
            "stop_bytes": cfg.stop_bytes,
        }), mimetype="application/json")

    return app
