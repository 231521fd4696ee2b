from __future__ import annotations
import argparse
from completer.engine import Engine
from .web import app, attach_engine

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Completion records HTTP API (Flask)")
    p.add_argument("--roots", nargs="+", default=[], help="Candidate dumps to build on startup")
    p.add_argument("--extra-space", action="store_true", help='Render calls as "foo( int x )"')
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=5000)
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    eng = Engine(extra_space=args.extra_space)
    if args.roots:
        eng.build(args.roots, verbose=args.verbose)
    attach_engine(eng)
    try:
        app.run(host=args.host, port=args.port, debug=False)
    finally:
        eng.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
