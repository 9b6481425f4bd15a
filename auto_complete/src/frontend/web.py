from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify, Response
from autocompletor.engine import Engine
from autocompletor import config as CFG

log = logging.getLogger(__name__)

app = Flask(__name__)
_engine: Engine | None = None


def _not_ready():
    return jsonify({"error": "engine not initialized"}), 503


# ---------- API ----------
@app.get("/api/complete")
def api_complete():
    if _engine is None or _engine.index is None:
        return _not_ready()
    q = request.args.get("q", None, type=str)
    raw_k = request.args.get("k")
    try:
        k = int(raw_k) if raw_k is not None else CFG.TOP_K
    except ValueError:
        return jsonify({"error": "k must be an integer"}), 400
    if q is None:
        return jsonify([])
    rows = _engine.complete(q, top_k=k)
    return jsonify(rows)


@app.get("/api/top")
def api_top():
    if _engine is None or _engine.index is None:
        return _not_ready()
    q = request.args.get("q", "", type=str)
    return jsonify({"match": _engine.top_match(q)})


@app.get("/health")
def health():
    ready = _engine is not None and _engine.index is not None
    return jsonify({
        "ok": ready,
        "terms": len(_engine) if ready else 0,  # type: ignore[arg-type]
        "impl": _engine.impl if ready else None,  # type: ignore[union-attr]
    }), (200 if ready else 503)


# ---------- UI ----------
@app.get("/")
def home():
    # One input, results fetched from /api/complete on every keystroke.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Autocomplete • Flask UI</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial; }
.container{ max-width:720px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0; }
input{ padding:10px 12px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); font-size:16px; }
#q{ width:70% } #k{ width:70px }
input:focus{ border-color:var(--accent); outline:none }
.row{ display:grid; grid-template-columns:3rem 8rem 1fr; gap:10px; padding:8px 12px; border-top:1px solid var(--border); }
.head{ color:var(--muted); font-weight:600 }
.meta{ color:var(--muted); font-size:13px; margin-top:6px }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Autocomplete</h1>
      <input id="q" type="text" placeholder="Type a prefix…" autocomplete="off" autofocus />
      <input id="k" type="number" min="1" max="50" value="10" />
      <div id="stats" class="meta">Ready.</div>
      <div id="results"></div>
    </div>
  </div>
<script>
const q = document.getElementById("q"), k = document.getElementById("k");
const out = document.getElementById("results"), stats = document.getElementById("stats");
function esc(s){ return s.replace(/[&<>"]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c])); }
async function run(){
  const t0 = performance.now();
  const r = await fetch(`/api/complete?q=${encodeURIComponent(q.value)}&k=${encodeURIComponent(k.value)}`);
  const rows = await r.json();
  if (!Array.isArray(rows)) { stats.textContent = rows.error || "error"; out.innerHTML = ""; return; }
  stats.textContent = `${rows.length} result(s) in ${(performance.now() - t0).toFixed(1)} ms`;
  out.innerHTML = rows.length
    ? '<div class="row head"><div>#</div><div>Weight</div><div>Word</div></div>' +
      rows.map((x, i) => `<div class="row"><div>${i + 1}</div><div>${x.weight}</div><div>${esc(x.word)}</div></div>`).join("")
    : "";
}
q.addEventListener("input", run); k.addEventListener("change", run);
document.addEventListener("keydown", e => { if (e.key === "Escape") { q.value = ""; run(); } });
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("--vocab", required=True, help="Vocabulary file (weight<TAB>word per line)")
    ap.add_argument("--impl", choices=CFG.IMPLEMENTATIONS, default=CFG.DEFAULT_IMPL)
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)
    global _engine
    _engine = Engine()
    _engine.build(args.vocab, impl=args.impl, verbose=args.verbose)
    log.info("Serving %d terms on http://%s:%d", len(_engine), args.host, args.port)
    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
