from __future__ import annotations
import argparse, json, sys
from .engine import Engine


def _print_table(records) -> None:
    if not records:
        print("(no candidates)"); return
    print("#   Kind        Return          Main text                          Insert")
    for i, r in enumerate(records, 1):
        kind = r.category.name.lower()
        print(f"{i:<3} {kind:<11} {r.return_type:<15} {r.main_text:<34} {r.insert_text}")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Reduce completion chunk dumps into completion records")
    p.add_argument("--roots", nargs="+", required=True, help="Files or folders with *.json / *.jsonl candidate dumps")
    p.add_argument("--extra-space", action="store_true", help='Render calls as "foo( int x )"')
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    eng = Engine()
    try:
        try:
            eng.build(args.roots, extra_space=args.extra_space, verbose=args.verbose)
        except ValueError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2

        records = eng.records()
        if args.json:
            print(json.dumps([r.as_dict() for r in records], ensure_ascii=False, indent=2))
        else:
            _print_table(records)
        return 0
    finally:
        eng.shutdown()


if __name__ == "__main__":
    raise SystemExit(main())
