"""Command-line interface for slotgen."""

import argparse
import codecs
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

from jinja2 import TemplateError
from pydantic import ValidationError

from . import __version__
from .config import load_manifest, registry_from_manifest
from .io_utils import warn
from .models import ComponentManifest
from .names import is_custom_element
from .renderer import Renderer
from .util_fs import write_output
from .walker import ExpansionDepthError


def _load_manifest_or_exit(path: Path) -> ComponentManifest:
    if not path.exists():
        raise SystemExit(f"Component manifest not found: {path}")
    try:
        return load_manifest(path)
    except ValidationError as exc:
        raise SystemExit(f"Invalid component manifest {path}: {exc}") from exc


def _handle_render(args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    manifest_path = Path(args.components)

    if not input_path.exists():
        raise SystemExit(f"Input HTML not found: {input_path}")

    manifest = _load_manifest_or_exit(manifest_path)
    options = manifest.options()
    if args.body_only:
        options.body_only = True
    if args.encoding:
        options.encoding = args.encoding
    try:
        codecs.lookup(options.encoding)
    except LookupError as exc:
        raise SystemExit(f"Unknown encoding: {options.encoding}") from exc

    try:
        renderer = Renderer(
            registry_from_manifest(manifest, manifest_path.parent),
            body_only=options.body_only,
            max_depth=options.max_depth,
            encoding=options.encoding,
        )
        output = renderer.render_file(input_path)
    except (TemplateError, ExpansionDepthError) as exc:
        raise SystemExit(f"Failed to render {input_path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise SystemExit(f"Cannot decode {input_path} as {options.encoding}: {exc}") from exc

    if args.output:
        written = write_output(args.output, output, options.encoding)
        print(f"Wrote {written}")
    else:
        sys.stdout.write(output)


def _handle_check_name(args: argparse.Namespace) -> None:
    invalid = 0
    for name in args.names:
        valid = is_custom_element(name)
        print(f"{name}: {'valid' if valid else 'invalid'}")
        if not valid:
            invalid += 1
    if invalid:
        raise SystemExit(1)


def _handle_validate(args: argparse.Namespace) -> None:
    manifest_path = Path(args.components)
    manifest = _load_manifest_or_exit(manifest_path)

    errors: list[str] = []
    for component in manifest.components:
        single = manifest.model_copy(update={"components": [component]})
        try:
            registry_from_manifest(single, manifest_path.parent)
        except TemplateError as exc:
            errors.append(f"{manifest_path} <{component.tag}>: {type(exc).__name__}: {exc}")

    if errors:
        for message in errors:
            warn(message)
        raise SystemExit(1)

    if not manifest.components:
        warn(f"{manifest_path}: no components registered.")
    print(f"Validated {len(manifest.components)} component(s) in {manifest_path}.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slotgen",
        description="Server-side rendering of custom elements with slots",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"slotgen {__version__}",
        help="Show the slotgen version and exit.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log expansion details to stderr.",
    )

    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render an HTML page.",
        description="Expand registered custom elements in an HTML page.",
    )
    render_parser.add_argument(
        "--in",
        dest="input",
        required=True,
        help="Path to the HTML page to render.",
    )
    render_parser.add_argument(
        "--components",
        default="components.yaml",
        help="Path to the component manifest (components.yaml).",
    )
    render_parser.add_argument(
        "--encoding",
        default=None,
        help="Character encoding of the input page (defaults to the manifest's, utf-8).",
    )
    render_parser.add_argument(
        "--body-only",
        dest="body_only",
        action="store_true",
        help="Emit only the inner markup of <body>.",
    )
    render_parser.add_argument(
        "--out",
        dest="output",
        default=None,
        help="File to write; prints to stdout when omitted.",
    )
    render_parser.set_defaults(func=_handle_render)

    name_parser = subparsers.add_parser(
        "check-name",
        help="Check custom element names.",
        description="Report whether each name is a valid, non-reserved custom element name.",
    )
    name_parser.add_argument("names", nargs="+", help="Tag names to check.")
    name_parser.set_defaults(func=_handle_check_name)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a component manifest.",
        description="Validate components.yaml and compile every template it names.",
    )
    validate_parser.add_argument(
        "--components",
        default="components.yaml",
        help="Path to the component manifest (components.yaml).",
    )
    validate_parser.set_defaults(func=_handle_validate)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]
