import argparse
import logging
import os
import sys

from .consistent import ConsistentHashing
from .ring import NOT_PLACED
from .sharding import InvalidArgumentError


def getenv_int(key: str, default: int) -> int:
    val = os.environ.get(key)
    if val is None:
        return default
    try:
        return int(val)
    except ValueError:
        return default


CAPACITY = getenv_int("SLOTHASH_CAPACITY", 16)
LOG_LEVEL = os.environ.get("SLOTHASH_LOG_LEVEL", "WARNING").upper()

log = logging.getLogger("slothash")

# (flag, env var, global name, type, default, help)
_CLI_CONFIG = [
    ("--capacity", "SLOTHASH_CAPACITY", "CAPACITY", int, 16, "Number of ring slots"),
    ("--log-level", "SLOTHASH_LOG_LEVEL", "LOG_LEVEL", str, "WARNING", "Logging level"),
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slothash", description="slothash — map keys to servers on a fixed-size hash ring"
    )
    for flag, _env, _glob, typ, default, helptext in _CLI_CONFIG:
        parser.add_argument(flag, type=typ, default=default, help=helptext)
    parser.add_argument(
        "--server",
        action="append",
        default=[],
        required=True,
        help="Server to register (repeatable)",
    )
    parser.add_argument(
        "--snapshot", action="store_true", help="Also print the slot array"
    )
    parser.add_argument("keys", nargs="*", help="Keys to map to servers")
    return parser


def run(argv: list[str] | None = None, out=None) -> int:
    global CAPACITY, LOG_LEVEL

    if out is None:
        out = sys.stdout
    args = build_parser().parse_args(argv)

    for flag, env_var, global_name, *_ in _CLI_CONFIG:
        if os.environ.get(env_var) is None:
            attr = flag.lstrip("-").replace("-", "_")
            globals()[global_name] = getattr(args, attr)

    logging.basicConfig(
        level=getattr(logging, str(LOG_LEVEL).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        ch: ConsistentHashing[str] = ConsistentHashing(CAPACITY)
    except InvalidArgumentError as e:
        print(f"slothash: {e}", file=sys.stderr)
        return 2

    log.info("ring: capacity=%d servers=%d", ch.capacity, len(args.server))
    for server in args.server:
        slot = ch.add_server_entry_point(server)
        if slot == NOT_PLACED:
            print(f"server {server} not placed", file=out)
        else:
            print(f"server {server} slot {slot}", file=out)

    for key in args.keys:
        target = ch.find_server_map(key)
        print(f"{key} -> {target if target is not None else '-'}", file=out)

    if args.snapshot:
        for i, value in enumerate(ch.ring.get_snapshot()):
            print(f"[{i}] {value if value is not None else '-'}", file=out)

    return 0


def cli():
    sys.exit(run())


if __name__ == "__main__":
    cli()
