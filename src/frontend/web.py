from __future__ import annotations
import argparse
import logging
import os
from typing import Any

from flask import Flask, request, jsonify

from textmapper import locate, get_text_context, plan_replacement, apply_replacement
from textmapper import config as CFG

log = logging.getLogger(__name__)

app = Flask(__name__)


# ---------- request helpers ----------

def _payload() -> dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object body")
    return data


def _text(data: dict[str, Any], key: str, *, required: bool = True) -> str:
    value = data.get(key)
    if value is None and not required:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string")
    return value


def _int(data: dict[str, Any], key: str, default: int = 0) -> int:
    value = data.get(key, default)
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{key}' must be an integer")
    return value


@app.errorhandler(ValueError)
def bad_request(err: ValueError):
    return jsonify({"ok": False, "error": str(err)}), 400


# ---------- API ----------

@app.get("/api/health")
def api_health():
    return jsonify({"ok": True})


@app.post("/api/locate")
def api_locate():
    data = _payload()
    query = _text(data, "query")
    source = _text(data, "source")
    match = locate(query, source, _int(data, "line"), _int(data, "column"))
    if match is None:
        return jsonify({"ok": True, "match": None})
    return jsonify({
        "ok": True,
        "match": match.to_dict(),
        "low_confidence": match.confidence < CFG.LOW_CONFIDENCE,
        "context": get_text_context(source, match.line, _int(data, "context_lines", CFG.CONTEXT_LINES)),
    })


@app.post("/api/replace")
def api_replace():
    data = _payload()
    source = _text(data, "source")
    old_text = _text(data, "old_text")
    new_text = _text(data, "new_text", required=False)
    plan = plan_replacement(source, old_text, _int(data, "line"), _int(data, "column"))
    return jsonify({
        "ok": True,
        "plan": plan.to_dict(),
        "source": apply_replacement(source, plan, new_text),
    })


@app.post("/api/context")
def api_context():
    data = _payload()
    source = _text(data, "source")
    context = get_text_context(source, _int(data, "line"), _int(data, "context_lines", CFG.CONTEXT_LINES))
    return jsonify({"ok": True, "context": context})


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Serve the textmapper locator over HTTP (JSON)")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    verbose = args.verbose or os.environ.get("TEXTMAPPER_VERBOSE") == "1"
    if verbose:
        logging.basicConfig(level=logging.INFO)
    log.info("Serving on %s:%d", args.host, args.port)
    app.run(host=args.host, port=args.port, debug=verbose)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
