from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from fast_hash.config.settings import AppSettings, SettingsError, SettingsLoader
from fast_hash.core.digest import HashIOError, sha256_file
from fast_hash.core.logging_setup import configure_logging

SUPPORTED_COMMAND = "sha256"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fast-hash",
        usage="%(prog)s [--config PATH] sha256 <path>",
        description="Print the SHA-256 digest and byte count of a file",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("--config", default=None, metavar="PATH", help="YAML settings file")
    return parser


def _load_settings(config_path: str | None) -> AppSettings:
    if config_path is None:
        return AppSettings()
    return SettingsLoader.load(config_path)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    # operands are taken verbatim, so paths may start with "-"
    args, operands = parser.parse_known_args(argv)
    if len(operands) != 2:
        parser.print_usage(sys.stderr)
        return 2
    command, path = operands

    if command != SUPPORTED_COMMAND:
        print(f"unsupported command: {command}", file=sys.stderr)
        return 2

    try:
        settings = _load_settings(args.config)
    except SettingsError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    configure_logging(settings.log_level)

    try:
        result = sha256_file(path, chunk_size=settings.hashing.chunk_size)
    except HashIOError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    print(result.to_line())
    return 0


if __name__ == "__main__":
    sys.exit(main())
