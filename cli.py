from __future__ import annotations

import argparse
import logging
import os
import sys

import uvicorn

from codegen_tags.config import DEFAULT_CONFIG_FILE, load_config
from codegen_tags.errors import CodegenTagsError
from codegen_tags.generator import generate

logger = logging.getLogger("codegen_tags")


def cmd_generate(args: argparse.Namespace) -> int:
	root = os.path.abspath(args.root)
	cfg_path = args.cfg_path or os.path.join(root, DEFAULT_CONFIG_FILE)
	# Validation never writes; it only reports whether a write is needed.
	dry_run = args.dry_run or args.validate
	try:
		config = load_config(cfg_path)
		result = generate(config, root=root, dry_run=dry_run, print_diff=args.print_diff)
	except CodegenTagsError as e:
		logger.error("%s", e)
		return 1

	if args.validate and result.changed:
		logger.error("Generated files need to be updated; run codegen-tags generate")
		return 1
	return 0


def cmd_serve(args: argparse.Namespace) -> int:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)
	return 0


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="codegen-tags")
	parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pg = sub.add_parser("generate", help="Index codegen tags and write the generated bzl file")
	pg.add_argument("--root", default=".", help="Root of the source tree to scan")
	pg.add_argument("--cfg-path", default="", help=f"Config file (default: <root>/{DEFAULT_CONFIG_FILE})")
	pg.add_argument("--dry-run", action="store_true", help="Report changes without writing")
	pg.add_argument("--print-diff", action="store_true", help="Print a diff of changed files")
	pg.add_argument("--validate", action="store_true", help="Exit non-zero if the generated file is stale")
	pg.set_defaults(func=cmd_generate)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)
	return parser


def main(argv=None) -> int:
	args = build_parser().parse_args(argv)
	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.INFO,
		format="%(levelname)s %(name)s: %(message)s",
		stream=sys.stderr,
	)
	return args.func(args)


if __name__ == "__main__":
	sys.exit(main())
