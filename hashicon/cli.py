"""
hashicon command line: render an identicon to a file.

Usage:
  hashicon alice                              # writes identicon.png
  hashicon alice -o alice.webp --size 512     # format from the suffix
  hashicon --hash 0123...cdef -o icon.png     # pre-computed 20-byte hash
  hashicon --bench 200 --size 1024            # mean render time over random hashes
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time

from hashicon.engine.compositor import message_digest, render_identicon
from hashicon.engine.config import ConfigError, IdenticonConfig
from hashicon.utils.imaging import save_image

logger = logging.getLogger("hashicon.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hashicon", description="Render deterministic identicons")
    parser.add_argument("message", nargs="?", help="Text to hash with SHA-1")
    parser.add_argument("--hash", dest="hash_hex", help="20-byte hash as 40 hex characters")
    parser.add_argument("-o", "--output", default="identicon.png", help="Output file (default: identicon.png)")
    parser.add_argument("--size", type=int, default=256, help="Width/height in pixels")
    parser.add_argument("--padding", type=float, default=0.08, help="Padding relative to size, 0.0-0.5")
    parser.add_argument("--background", default="#ffffff", help="Background color (any Pillow color string)")
    parser.add_argument("--hue", type=float, action="append", default=[], help="Allowed hue in degrees (repeatable)")
    parser.add_argument("--bench", type=int, metavar="N", help="Render N random hashes and report timing")
    parser.add_argument("--log-level", default="warning", help="Logging level")
    return parser


def _config_from_args(args: argparse.Namespace) -> IdenticonConfig:
    return (
        IdenticonConfig.builder()
        .size(args.size)
        .padding(args.padding)
        .background_color(args.background)
        .hues(args.hue)
        .build()
    )


def _bench(config: IdenticonConfig, count: int) -> float:
    """Mean seconds per render over ``count`` random hashes."""
    start = time.perf_counter()
    for _ in range(count):
        render_identicon(os.urandom(20), config)
    return (time.perf_counter() - start) / count


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        config = _config_from_args(args)
    except ConfigError as e:
        parser.error(str(e))

    if args.bench is not None:
        if args.bench < 1:
            parser.error("--bench must be at least 1")
        mean = _bench(config, args.bench)
        print(f"size {config.size}: {mean * 1000:.3f} ms/identicon over {args.bench} renders")
        return 0

    if args.hash_hex:
        try:
            hash_bytes = bytes.fromhex(args.hash_hex)
        except ValueError:
            parser.error("--hash must be hexadecimal")
        if len(hash_bytes) != 20:
            parser.error("--hash must be exactly 20 bytes (40 hex characters)")
    elif args.message is not None:
        hash_bytes = message_digest(args.message)
    else:
        parser.error("a message or --hash is required")

    try:
        path = save_image(render_identicon(hash_bytes, config), args.output)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    logger.info("Wrote %s", path)
    print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
