import html as _html

HTML = """
<!doctype html>
<html>
<head>
  <meta charset="utf-8"/>
  <title>Live traffic</title>
  <style>
    body { background:#14181d; color:#e8eaed; font-family: ui-sans-serif,system-ui,Segoe UI,Arial; }
    table { border-collapse: collapse; margin-top: 8px; }
    td, th { padding: 2px 10px; border-bottom: 1px solid #2a2f36; text-align: left; }
    .rx { color:#6aa84f; } .tx { color:#ff9900; }
    .num { text-align: right; font-variant-numeric: tabular-nums; }
  </style>
</head>
<body>
  <h2>Live traffic [interface: __IFACE__]</h2>
  <div id="summary"></div>
  <h3>Average rate</h3>
  <div id="rates"></div>
  <h3 id="flowhdr">Flows</h3>
  <table>
    <thead><tr><th>Dir</th><th>Source</th><th>Destination</th><th class="num">Bytes</th><th class="num">Pkts</th><th class="num">Peak</th></tr></thead>
    <tbody id="flows"></tbody>
  </table>

  <script>
  const kb = (bps) => (bps / 1024).toFixed(2) + " KB/s";

  function row(f) {
    const tr = document.createElement("tr");
    const cls = f.direction === "RX" ? "rx" : "tx";
    [[f.direction, cls], [f.src, ""], [f.dst, ""],
     [f.total_bytes, "num"], [f.total_packets, "num"], [f.peak_bytes, "num"]].forEach(([v, c]) => {
      const td = document.createElement("td");
      td.textContent = v;
      if (c) td.className = c;
      tr.appendChild(td);
    });
    return tr;
  }

  async function refresh() {
    try {
      const r = await fetch("/api/snapshot", { cache: "no-store" });
      const s = await r.json();
      document.getElementById("summary").textContent =
        `Local IP: ${s.local_address} | RX: ${s.total_rx_bytes} bytes | TX: ${s.total_tx_bytes} bytes | Peak: ${s.global_peak_bytes} bytes/packet`;
      document.getElementById("rates").textContent =
        `2s: ${kb(s.rates.short.bps)}  10s: ${kb(s.rates.medium.bps)}  40s: ${kb(s.rates.long.bps)}`;
      document.getElementById("flowhdr").textContent = `Flows (first ${s.flows.length} of ${s.flow_count})`;
      const body = document.getElementById("flows");
      body.replaceChildren(...s.flows.map(row));
    } catch (e) { console.error(e); }
  }

  setInterval(refresh, __INTERVAL_MS__);
  refresh();
  </script>
</body>
</html>
"""

def render_html(interface: str, interval: float) -> str:
    html = HTML.replace("__IFACE__", _html.escape(interface))
    return html.replace("__INTERVAL_MS__", str(int(interval * 1000)))
