from __future__ import annotations

import argparse
import json
from pathlib import Path

from ldgraph.settings import settings


def _configure_logging() -> None:
    import logging

    level = (settings.log_level or "INFO").upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _graph():
    from ldgraph.service import LinkedGraph

    return LinkedGraph.from_settings(settings, with_clients=False)


def _load(path: str):
    return json.loads(Path(path).read_text(encoding="utf-8"))


def _dump(value) -> None:
    print(json.dumps(value, indent=2, ensure_ascii=False))


def cmd_version() -> int:
    from ldgraph import __version__

    print(__version__)
    return 0


def cmd_get(args: argparse.Namespace) -> int:
    _configure_logging()
    g = _graph()
    doc = _load(args.file)
    value = g.get_value(doc, args.key) if args.first else g.get(doc, args.key)
    if value is None:
        return 1
    _dump(value)
    return 0


def cmd_inline(args: argparse.Namespace) -> int:
    _configure_logging()
    g = _graph()
    doc = _load(args.file)
    g.inline(doc)
    _dump(doc)
    return 0


def cmd_subset(args: argparse.Namespace) -> int:
    _configure_logging()
    g = _graph()
    doc = _load(args.file)
    _dump(list(g.get_subset(doc, args.key, element_key=args.element_key)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ldgraph")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("version").set_defaults(func=lambda _a: cmd_version())

    get = sub.add_parser("get", help="Print a predicate of the graph subject")
    get.add_argument("file", help="JSON-LD document")
    get.add_argument("key", help="Short or full predicate key, or 'id'")
    get.add_argument("--first", action="store_true", help="Print only the first value")
    get.set_defaults(func=cmd_get)

    inl = sub.add_parser("inline", help="Print the document with local references inlined")
    inl.add_argument("file")
    inl.set_defaults(func=cmd_inline)

    subset = sub.add_parser("subset", help="Print the elements of a linked collection")
    subset.add_argument("file")
    subset.add_argument("key")
    subset.add_argument("--element-key", default=None)
    subset.set_defaults(func=cmd_subset)

    return p


def app() -> None:
    parser = build_parser()
    args = parser.parse_args()
    rc = args.func(args)
    raise SystemExit(rc)


if __name__ == "__main__":
    app()
