from __future__ import annotations

import argparse
import logging
import re
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from intset import __version__
from intset.bounded import BoundedIntSet, equal
from intset.diagnostics import format_error_with_hint
from intset.errors import IntSetCapacityError, IntSetConfigError

if TYPE_CHECKING:  # pragma: no cover
    from intset.config import IntSetConfig

logger = logging.getLogger("intset.cli")

EXIT_OK = 0
EXIT_FALSE = 1
EXIT_CONFIG_OR_USAGE = 2
EXIT_CAPACITY = 3

_SPLIT_RE = re.compile(r"[\s,]+")

_BINARY_SET_COMMANDS = ("union", "intersect", "subtract")
_PREDICATE_COMMANDS = ("subset", "equal")


def _add_common_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--root",
        type=str,
        default=None,
        help="Project root (defaults to searching upward from cwd for intset.toml).",
    )
    p.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to intset.toml (defaults to <root>/intset.toml).",
    )
    p.add_argument(
        "--capacity",
        type=int,
        default=None,
        help="Capacity of every set built for this command (overrides set.max_size).",
    )
    p.add_argument("--verbose", action="store_true", help="Log debug output to stderr.")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="intset")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    dump_p = subparsers.add_parser("dump", help="Print the set built from VALUES.")
    _add_common_flags(dump_p)
    dump_p.add_argument("values", help="Members in insertion order, e.g. '3,1,4'.")

    helps = {
        "union": "Print LEFT followed by the members of RIGHT it lacks.",
        "intersect": "Print the members of LEFT also in RIGHT.",
        "subtract": "Print the members of LEFT not in RIGHT.",
        "subset": "Exit 0 if every member of LEFT is in RIGHT, else 1.",
        "equal": "Exit 0 if LEFT and RIGHT have the same members, else 1.",
    }
    for name in (*_BINARY_SET_COMMANDS, *_PREDICATE_COMMANDS):
        p = subparsers.add_parser(name, help=helps[name])
        _add_common_flags(p)
        p.add_argument("left", help="Left operand, e.g. '1,2,3'.")
        p.add_argument("right", help="Right operand, e.g. '2 3 4'.")

    return parser


def parse_args(argv: list[str]) -> argparse.Namespace:
    return _build_parser().parse_args(argv)


def parse_members(text: str) -> list[int]:
    """Split a comma/whitespace separated operand into ints (order kept)."""

    out: list[int] = []
    for token in _SPLIT_RE.split(text.strip()):
        if not token:
            continue
        try:
            out.append(int(token))
        except ValueError as e:
            raise IntSetConfigError(f"{token!r} is not an integer") from e
    return out


def _load_config(args: argparse.Namespace) -> IntSetConfig:
    from intset.config import default_config, find_project_root, load_config

    root = Path(args.root).resolve() if args.root else None
    config_path = Path(args.config).resolve() if args.config else None
    if root is None and config_path is None:
        try:
            root = find_project_root(Path.cwd())
        except IntSetConfigError:
            logger.debug("No intset.toml found; using defaults")
            return default_config()
    return load_config(root=root, config_path=config_path)


def _resolve_capacity(args: argparse.Namespace, cfg: IntSetConfig) -> int:
    capacity = args.capacity if args.capacity is not None else cfg.set.max_size
    if capacity < 1:
        raise IntSetConfigError(f"Invalid capacity: {capacity} (must be >= 1).")
    return capacity


def _build_set(text: str, *, capacity: int) -> BoundedIntSet:
    return BoundedIntSet(parse_members(text), capacity=capacity)


def _eprint(msg: str) -> None:
    print(msg, file=sys.stderr)


def _write_dump(s: BoundedIntSet, cfg: IntSetConfig) -> None:
    s.debug_dump(sys.stdout)
    if cfg.dump.trailing_newline:
        sys.stdout.write("\n")
    sys.stdout.flush()


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


def cmd_dump(args: argparse.Namespace) -> int:
    try:
        cfg = _load_config(args)
        s = _build_set(args.values, capacity=_resolve_capacity(args, cfg))
        logger.debug("Built set of %d member(s)", s.size())
        _write_dump(s, cfg)
        return EXIT_OK
    except IntSetConfigError as e:
        _eprint(format_error_with_hint(e))
        return EXIT_CONFIG_OR_USAGE
    except IntSetCapacityError as e:
        _eprint(format_error_with_hint(e))
        return EXIT_CAPACITY


def cmd_binary(args: argparse.Namespace) -> int:
    try:
        cfg = _load_config(args)
        capacity = _resolve_capacity(args, cfg)
        left = _build_set(args.left, capacity=capacity)
        right = _build_set(args.right, capacity=capacity)

        if args.command == "union":
            result = left.union_with(right)
        elif args.command == "intersect":
            result = left.intersect(right)
        else:
            result = left.subtract(right)
        logger.debug(
            "%s: %d and %d member(s) -> %d",
            args.command,
            left.size(),
            right.size(),
            result.size(),
        )
        _write_dump(result, cfg)
        return EXIT_OK
    except IntSetConfigError as e:
        _eprint(format_error_with_hint(e))
        return EXIT_CONFIG_OR_USAGE
    except IntSetCapacityError as e:
        _eprint(format_error_with_hint(e))
        return EXIT_CAPACITY


def cmd_predicate(args: argparse.Namespace) -> int:
    try:
        cfg = _load_config(args)
        capacity = _resolve_capacity(args, cfg)
        left = _build_set(args.left, capacity=capacity)
        right = _build_set(args.right, capacity=capacity)
    except IntSetConfigError as e:
        _eprint(format_error_with_hint(e))
        return EXIT_CONFIG_OR_USAGE
    except IntSetCapacityError as e:
        _eprint(format_error_with_hint(e))
        return EXIT_CAPACITY

    if args.command == "subset":
        ok = left.is_subset_of(right)
    else:
        ok = equal(left, right)
    print("true" if ok else "false")
    return EXIT_OK if ok else EXIT_FALSE


def main(argv: list[str] | None = None) -> int:
    try:
        args = parse_args(list(sys.argv[1:] if argv is None else argv))
    except SystemExit as e:
        # argparse uses SystemExit for --help/--version and parse errors.
        code = e.code
        return int(code) if isinstance(code, int) else EXIT_CONFIG_OR_USAGE

    _configure_logging(bool(args.verbose))

    if args.command == "dump":
        return cmd_dump(args)
    if args.command in _BINARY_SET_COMMANDS:
        return cmd_binary(args)
    if args.command in _PREDICATE_COMMANDS:
        return cmd_predicate(args)

    return EXIT_CONFIG_OR_USAGE


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
