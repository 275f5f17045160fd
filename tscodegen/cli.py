import argparse
import logging
import sys
from pathlib import Path

from .loader import ModelError, load_model, write_output
from .model import render


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[tscodegen] %(levelname)s %(message)s",
    )


def cmd_render(args: argparse.Namespace) -> None:
    model = load_model(Path(args.model))
    text = render(model, args.tab)
    if args.out:
        write_output(model, text, Path(args.out))
    elif args.write:
        target = write_output(model, text)
        print(f"Wrote {target}")
    else:
        print(text, end="")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser("tscodegen")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(required=True)

    s = sub.add_parser("render", help="Render a YAML/JSON model document to TypeScript")
    s.add_argument("model", help="Path to the model document")
    dest = s.add_mutually_exclusive_group()
    dest.add_argument("-o", "--out", help="Write the output to this path instead of stdout")
    dest.add_argument("--write", action="store_true", help="Write the output to the model's file path")
    s.add_argument("--tab", type=int, default=0, help="Starting indentation depth")
    s.set_defaults(func=cmd_render)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    try:
        args.func(args)
    except ModelError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
