"""Command line driver for gleamx.

Usage:
    gleamx                      # compile every .gleamx under ./src
    gleamx src/ lib/page.gleamx # compile directories and single files
    gleamx --check              # fail if any .gleam output is missing or stale
    gleamx --stdout page.gleamx # print instead of writing

Each ``name.gleamx`` compiles to ``name.gleam`` in the same directory.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterator, Sequence
from pathlib import Path

from gleamx import __version__
from gleamx.environment import (
    Environment,
    FileSystemLoader,
    GleamxError,
    RenderError,
    TemplateNotFoundError,
)
from gleamx.environment.loaders import read_template
from gleamx.utils.constants import DEFAULT_GENERATOR_NAME, DEFAULT_SOURCE_DIR, OUTPUT_EXTENSION

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gleamx",
        description="Compile .gleamx templates to Gleam modules",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        default=[Path(DEFAULT_SOURCE_DIR)],
        help=f"Template files or directories to search (default: {DEFAULT_SOURCE_DIR})",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--stdout", action="store_true", help="Print output instead of writing")
    mode.add_argument(
        "--check", action="store_true", help="Write nothing; fail if any output is stale"
    )
    parser.add_argument(
        "--generator-name",
        default=DEFAULT_GENERATOR_NAME,
        help="Program name written in the generated header comment",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More output")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only report errors")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: int, quiet: bool) -> None:
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)


def discover(paths: Sequence[Path]) -> Iterator[Path]:
    """Yield the path of every template under ``paths``.

    Raises:
        TemplateNotFoundError: A path does not exist
    """
    for path in paths:
        if path.is_file():
            yield path
            continue

        if not path.is_dir():
            raise TemplateNotFoundError(f"No such template file or directory: {path}")

        loader = FileSystemLoader(path)
        names = loader.list_templates()
        if not names:
            logger.warning("No templates found in %s", path)
        for name in names:
            yield path / name


def compile_one(env: Environment, template: Path, args: argparse.Namespace) -> bool:
    """Compile one template. Returns False when it failed or is stale."""
    filename = template.as_posix()
    try:
        source = read_template(template)
    except GleamxError as e:
        print(e.format_compact(), file=sys.stderr)
        return False

    try:
        output = env.compile_source(source, filename)
    except RenderError as e:
        print(e.format_compact(source, filename), file=sys.stderr)
        return False
    except GleamxError as e:
        print(e.format_compact(), file=sys.stderr)
        return False

    target = template.with_suffix(OUTPUT_EXTENSION)
    if args.stdout:
        sys.stdout.write(output)
        return True

    if args.check:
        if not target.is_file() or target.read_text("utf-8") != output:
            logger.error("%s is out of date with %s", target.as_posix(), filename)
            return False
        logger.debug("%s is up to date", target.as_posix())
        return True

    target.write_text(output, "utf-8")
    logger.info("Wrote %s", target.as_posix())
    return True


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose, args.quiet)

    env = Environment(generator_name=args.generator_name)
    failures = 0
    try:
        for template in discover(args.paths):
            if not compile_one(env, template, args):
                failures += 1
    except GleamxError as e:
        print(e.format_compact(), file=sys.stderr)
        return 1

    if failures:
        logger.error("%d template(s) failed", failures)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
