#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CampusSync backend (SQLite)

Commands:
  init                Create the database file and all tables
  serve               Run the HTTP API (uvicorn)
  commands            List the command names accepted by POST /invoke/{command}

Paths come from CAMPUSSYNC_DB_PATH / CAMPUSSYNC_DATA_DIR or config.yaml.
"""
from __future__ import annotations

import argparse
import logging
import sys

from .db import get_data_dir, get_db_path


def cmd_init(args) -> int:
    from .migrations import ensure_schema

    ensure_schema()
    print(f"database ready: {get_db_path()}")
    print(f"data dir: {get_data_dir()}")
    return 0


def cmd_serve(args) -> int:
    import uvicorn

    uvicorn.run("campussync.api:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def cmd_commands(args) -> int:
    from .commands import COMMANDS

    for name in sorted(COMMANDS):
        c = COMMANDS[name]
        print(f"{name:32s} {'write' if c.action else 'read'}")
    return 0


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="campussync")
    ap.add_argument("-v", "--verbose", action="store_true")
    sub = ap.add_subparsers(dest="cmd", required=True)

    sub.add_parser("init", help="create database and tables").set_defaults(func=cmd_init)

    sp = sub.add_parser("serve", help="run the HTTP API")
    sp.add_argument("--host", default="127.0.0.1")
    sp.add_argument("--port", type=int, default=8000)
    sp.add_argument("--reload", action="store_true")
    sp.set_defaults(func=cmd_serve)

    sub.add_parser("commands", help="list invokable commands").set_defaults(func=cmd_commands)

    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
