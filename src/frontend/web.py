from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from anagrams.engine import Engine
from anagrams.config import MAX_RESULTS

app = Flask(__name__)
_engine: Engine | None = None

# ---------- API ----------
@app.get("/api/anagrams")
def api_anagrams():
    s = request.args.get("s", "", type=str)
    k = request.args.get("k", MAX_RESULTS, type=int)
    rows = _engine.sentence_anagrams(s)  # type: ignore
    return jsonify(rows[: max(0, k)])

@app.get("/api/word")
def api_word():
    w = request.args.get("w", "", type=str)
    if not w:
        return jsonify([])
    return jsonify(_engine.word_anagrams(w))  # type: ignore

@app.get("/api/health")
def api_health():
    idx = _engine.index if _engine else None
    return jsonify({"ok": idx is not None, "words": idx.size if idx else 0})

# ---------- UI ----------
@app.get("/")
def home():
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Anagrams • Flask UI</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Arial; }
.container{ max-width:760px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0; }
form{ display:flex; gap:12px; }
input{ flex:1; padding:12px 14px; border-radius:12px; border:1px solid var(--border); background:#0b1117; color:var(--ink); font-size:16px; }
input:focus{ border-color:var(--accent); outline:none }
button{ padding:10px 14px; border-radius:10px; border:1px solid var(--border); background:#0b1117; color:var(--ink); cursor:pointer; }
.meta{ color:var(--muted); font-size:13px; margin-top:6px; }
ol{ margin-top:16px; font-family:ui-monospace,Menlo,Consolas,monospace; }
</style>
</head>
<body>
<div class="container"><div class="card">
  <h1>Sentence anagrams</h1>
  <form id="f">
    <input id="s" placeholder="Type a sentence, e.g. Yes man" autofocus />
    <button type="submit">Find</button>
  </form>
  <div class="meta" id="stats">Ready.</div>
  <ol id="out"></ol>
</div></div>
<script>
const f = document.getElementById("f"), s = document.getElementById("s");
const out = document.getElementById("out"), stats = document.getElementById("stats");
f.addEventListener("submit", async (ev)=>{
  ev.preventDefault();
  stats.textContent = "Searching…";
  const r = await fetch(`/api/anagrams?s=${encodeURIComponent(s.value)}`);
  const rows = await r.json();
  out.innerHTML = rows.map(ws => `<li>${ws.join(" ").replace(/</g,"&lt;")}</li>`).join("");
  stats.textContent = rows.length ? `${rows.length} anagram(s).` : "No anagrams.";
});
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument("--dictionary", default=None)
    mode.add_argument("--load", action="store_true")
    ap.add_argument("--cache", default=None)
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine()
    if args.load:
        if not args.cache:
            ap.error("--load requires --cache")
        _engine.load(cache=args.cache, verbose=args.verbose)
    else:
        _engine.build(args.dictionary, cache=args.cache, verbose=args.verbose)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
