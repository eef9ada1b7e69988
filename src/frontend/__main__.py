from __future__ import annotations
import argparse, json, logging, os
from textmapper import locate, get_text_context
from textmapper import config as CFG


def _print_match(match, source: str, context_lines: int, as_json: bool) -> None:
    if as_json:
        out = match.to_dict() if match else None
        if match and context_lines:
            out["context"] = get_text_context(source, match.line, context_lines)
        print(json.dumps(out, ensure_ascii=False, indent=2))
        return
    if match is None:
        print("(no match)"); return
    flag = "  (low confidence)" if match.confidence < CFG.LOW_CONFIDENCE else ""
    print("Line  Col   Conf   Matcher        Text")
    print(f"{match.line:<5} {match.column:<5} {match.confidence:<6.3f} {match.matcher:<14} {match.text}{flag}")
    if context_lines:
        print(get_text_context(source, match.line, context_lines))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Locate rendered text in a LaTeX source")
    p.add_argument("--source", required=True, help="LaTeX source file")
    p.add_argument("--query", default=None, help="Rendered text to locate (run once)")
    p.add_argument("--line", type=int, default=0, help="0-based anchor line")
    p.add_argument("--column", type=int, default=0, help="0-based anchor column")
    p.add_argument("--context", type=int, default=0, help="Print N lines of context around the hit")
    p.add_argument("--repl", action="store_true", help="Interactive loop, one query per line")
    p.add_argument("--json", action="store_true", help="Emit JSON")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if args.verbose or os.environ.get("TEXTMAPPER_VERBOSE") == "1":
        logging.basicConfig(level=logging.DEBUG)
    if args.query is None and not args.repl:
        p.error("either --query or --repl is required")

    try:
        with open(args.source, "r", encoding="utf-8", errors="replace", newline="") as f:
            source = f.read()
    except OSError as e:
        p.error(f"cannot read {args.source}: {e.strerror or e}")

    def run_query(q: str) -> None:
        match = locate(q, source, args.line, args.column)
        _print_match(match, source, args.context, args.json)

    if args.query is not None:
        run_query(args.query)

    if args.repl:
        print("Type rendered text to locate (empty line to exit).")
        while True:
            try:
                q = input("> ").strip()
            except (EOFError, KeyboardInterrupt):
                break
            if not q:
                break
            run_query(q)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
