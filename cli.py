from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import uvicorn
from rich.console import Console

from umlgen.errors import UmlGenError
from umlgen.filters import FilterPolicy
from umlgen.loader import load_filter_config, load_symbol_model
from umlgen.render import render

logger = logging.getLogger("umlgen")


def report_error(message: str) -> None:
	console = Console(stderr=True)
	console.print(message, style="red", markup=False, highlight=False, soft_wrap=True)


def cmd_render(args: argparse.Namespace) -> int:
	try:
		model = load_symbol_model(args.snapshot)
		policy = FilterPolicy()
		if args.filters:
			policy = FilterPolicy.from_config(load_filter_config(args.filters))
	except UmlGenError as e:
		report_error(str(e))
		return 1

	diagram = render(model, policy)
	if args.output:
		with open(args.output, "w", encoding="utf-8") as fh:
			fh.write(diagram)
		logger.info("Wrote diagram to %s", args.output)
	else:
		sys.stdout.write(diagram)
	print("Class diagram generated successfully.", file=sys.stderr)
	return 0


def cmd_serve(args: argparse.Namespace) -> int:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)
	return 0


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="umlgen")
	parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pr = sub.add_parser("render", help="Render a class diagram from a symbol snapshot")
	pr.add_argument("snapshot", help="Path to the analyzer's JSON symbol snapshot")
	pr.add_argument("--filters", help="Path to a JSON filter configuration")
	pr.add_argument("-o", "--output", help="Write the diagram to this file instead of stdout")
	pr.set_defaults(func=cmd_render)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)
	return parser


def main(argv: Optional[List[str]] = None) -> int:
	args = build_parser().parse_args(argv)
	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.WARNING,
		format="%(levelname)s %(name)s: %(message)s",
		stream=sys.stderr,
	)
	try:
		return args.func(args)
	except Exception as e:
		logger.debug("Unhandled error", exc_info=True)
		report_error(f"An error occurred: {e}")
		return 1


if __name__ == "__main__":
	sys.exit(main())
