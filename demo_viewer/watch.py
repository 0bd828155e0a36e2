"""
Terminal live reload: run one demo through a running viewer server and
re-run it whenever its source file changes.

    python -m demo_viewer.watch 01 --url http://127.0.0.1:3000
"""
from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import Any, Dict, Optional

from demo_viewer.client.api import HttpViewerApi
from demo_viewer.client.poller import LiveReloadPoller

RULE = "-" * 60


def print_result(demo_id: str, result: Dict[str, Any]) -> None:
    ok = bool(result.get("success"))
    print(RULE)
    print(f"  {demo_id}: {'✓ Success' if ok else '✗ Error'} ({result.get('duration_ms', 0)}ms)")
    print(RULE)
    if result.get("output"):
        print(result["output"].rstrip("\n"))
    if result.get("error"):
        print(f"\n{'Warnings' if ok else 'Error'}:", file=sys.stderr)
        print(result["error"].rstrip("\n"), file=sys.stderr)
    sys.stdout.flush()


def print_error(demo_id: str, error: Exception) -> None:
    print(f"✗ {demo_id}: {error}", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="python -m demo_viewer.watch", description=__doc__,
                                 formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("demo_id", help="Numeric demo id, e.g. 01")
    ap.add_argument("--url", default="http://127.0.0.1:3000", help="Viewer server base URL")
    ap.add_argument("--interval", type=float, default=2.0, help="Seconds between mtime polls")
    ap.add_argument("--once", action="store_true", help="Run once and exit with the demo's status")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log poller activity")
    return ap


def main(argv: Optional[list[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.interval <= 0:
        ap.error(f"--interval must be positive, got {args.interval:g}")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )

    poller = LiveReloadPoller(
        api=HttpViewerApi(base_url=args.url),
        on_result=print_result,
        on_error=print_error,
        enabled=not args.once,
    )

    result = poller.select(args.demo_id)
    if args.once:
        return 0 if result and result.get("success") else 1

    try:
        while True:
            time.sleep(args.interval)
            poller.tick()
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())
