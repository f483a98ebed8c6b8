import pytest

from netrate_live.config import CFG
from netrate_live.web import create_app


@pytest.fixture
def client(state, scenario_events):
    for ev in scenario_events:
        state.ingest(ev)
    app = create_app(CFG(interface="br-lan", max_flows=1), state)
    app.testing = True
    return app.test_client()


def test_index_page(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.mimetype == "text/html"
    body = r.get_data(as_text=True)
    assert "br-lan" in body
    assert "/api/snapshot" in body
    assert "setInterval(refresh, 2000)" in body


def test_snapshot_endpoint_uses_configured_limit(client):
    data = client.get("/api/snapshot").get_json()
    assert data["interface"] == "br-lan"
    assert data["flow_count"] == 2
    assert len(data["flows"]) == 1
    assert data["flows"][0] == {
        "direction": "RX", "src": "1.1.1.1", "dst": "10.0.0.1",
        "total_bytes": 100, "total_packets": 1, "peak_bytes": 100,
    }
    assert data["total_tx_bytes"] == 200


def test_snapshot_limit_param(client):
    data = client.get("/api/snapshot?limit=5").get_json()
    assert len(data["flows"]) == 2


@pytest.mark.parametrize("limit", ["-1", "abc"])
def test_snapshot_bad_limit(client, limit):
    r = client.get(f"/api/snapshot?limit={limit}")
    assert r.status_code == 400


def test_counters_endpoint(client):
    data = client.get("/api/counters").get_json()
    assert data == {
        "total_rx_bytes": 100, "total_tx_bytes": 200, "total_bytes": 300,
        "global_peak_bytes": 200, "stop_bytes": 10_000_000,
    }
