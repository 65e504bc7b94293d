import argparse
import os
import sys
from typing import List, Optional

from .codec import Harsh
from .config import HarshConfig, load_config, save_config
from .log import configure_logging

SALT_ENV_VAR = "HARSH_SALT"


def _write_text(text: str) -> None:
    sys.stdout.write(text + "\n")
    sys.stdout.flush()


def _parse_values(raw_values: List[str]) -> List[int]:
    values = []
    for raw in raw_values:
        if not (raw.isascii() and raw.isdigit()):
            raise ValueError(f"expect non-negative integer, got {raw!r}")
        values.append(int(raw, 10))
    return values


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="harsh", description="Encode integers into hashids and back")
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--salt",
        default=os.environ.get(SALT_ENV_VAR),
        help=f"Salt used to shuffle the alphabet (default: ${SALT_ENV_VAR})",
    )
    common.add_argument("--alphabet")
    common.add_argument("--separators")
    common.add_argument("--min-length", type=int, default=None)
    common.add_argument(
        "--config",
        help="Path to a saved harsh config; explicit options override it",
    )
    common.add_argument(
        "--save-config",
        help="Write the effective config to this path",
    )
    common.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )

    enc = subparsers.add_parser("encode", parents=[common])
    enc.add_argument("values", nargs="+")

    dec = subparsers.add_parser("decode", parents=[common])
    dec.add_argument("hashid")

    enc_hex = subparsers.add_parser("encode-hex", parents=[common])
    enc_hex.add_argument("hex")

    dec_hex = subparsers.add_parser("decode-hex", parents=[common])
    dec_hex.add_argument("hashid")

    return parser


def resolve_config(args) -> HarshConfig:
    config = load_config(args.config) if args.config else HarshConfig()
    if args.salt is not None:
        config.salt = args.salt
    if args.alphabet is not None:
        config.alphabet = args.alphabet
    if args.separators is not None:
        config.separators = args.separators
    if args.min_length is not None:
        if args.min_length < 0:
            raise ValueError("min-length must be >= 0")
        config.min_length = args.min_length
    return config


def build_harsh(args) -> Harsh:
    config = resolve_config(args)
    harsh = config.build()
    if args.save_config:
        save_config(config, args.save_config)
    return harsh


def run_encode(args) -> None:
    values = _parse_values(args.values)
    harsh = build_harsh(args)
    _write_text(harsh.encode(values))


def run_decode(args) -> None:
    harsh = build_harsh(args)
    values = harsh.decode(args.hashid)
    _write_text(" ".join(str(n) for n in values))


def run_encode_hex(args) -> None:
    harsh = build_harsh(args)
    _write_text(harsh.encode_hex(args.hex))


def run_decode_hex(args) -> None:
    harsh = build_harsh(args)
    _write_text(harsh.decode_hex(args.hashid))


COMMANDS = {
    "encode": run_encode,
    "decode": run_decode,
    "encode-hex": run_encode_hex,
    "decode-hex": run_decode_hex,
}


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    command = COMMANDS.get(args.command)
    if command is None:
        parser.error("Unknown command")
    try:
        command(args)
    except ValueError as exc:
        parser.error(str(exc))


__all__ = ["build_arg_parser", "resolve_config", "main"]
