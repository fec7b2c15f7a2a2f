from __future__ import annotations

import argparse
import logging
import os

import uvicorn


LOG_LEVELS = ["critical", "error", "warning", "info", "debug", "trace"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="wordrank top-ten-words HTTP service")
    parser.add_argument("--host", default=os.getenv("WORDRANK_HOST", "0.0.0.0"))
    parser.add_argument("--port", type=int, default=int(os.getenv("WORDRANK_PORT", "9000")))
    parser.add_argument(
        "--log-level",
        type=str.lower,
        choices=LOG_LEVELS,
        default=os.getenv("WORDRANK_LOG_LEVEL", "info").lower(),
        help="Log level for the service and uvicorn.",
    )
    parser.add_argument("--reload", action="store_true", help="Restart the server when source files change.")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid WORDRANK_LOG_LEVEL: {args.log_level!r}")

    # stdlib logging has no TRACE level; uvicorn's trace output still needs DEBUG handlers
    level = logging.DEBUG if args.log_level == "trace" else args.log_level.upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    uvicorn.run(
        "wordrank.app:app",
        host=args.host,
        port=args.port,
        reload=bool(args.reload),
        log_level=args.log_level,
        access_log=False,
    )


if __name__ == "__main__":
    main()
