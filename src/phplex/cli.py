"""Command-line interface for phplex: dump the token stream of a PHP file."""

from __future__ import annotations

import argparse
import io
import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from phplex.errors import LexError

log = logging.getLogger(__name__)

FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    format: str
    trivia: bool
    max_keyword_length: int | None
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="phplex",
        description="Tokenize a PHP source file",
    )
    p.add_argument("input", help="Input .php file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default=None,
        help="Output format (default: text)",
    )
    p.add_argument(
        "--no-trivia",
        dest="trivia",
        action="store_false",
        default=None,
        help="Omit whitespace and comment tokens from the output",
    )
    p.add_argument(
        "--max-keyword-length",
        type=int,
        default=None,
        metavar="N",
        help="Longest word looked up as a keyword (default: longest keyword)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover phplex.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Debug logging and token dump to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "phplex.toml"

    if not path.is_file():
        return {}

    log.debug("loading config from %s", path)
    with open(path, "rb") as f:
        return tomllib.load(f)


def _check_keyword_length(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise argparse.ArgumentTypeError(
            f"invalid max_keyword_length (expected a non-negative integer): {value!r}"
        )
    return value


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, input_dir)
    except tomllib.TOMLDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid config file: {exc}") from exc

    # Lexer settings: config < CLI
    max_keyword_length: int | None = None
    cfg_lexer = config.get("lexer")
    if isinstance(cfg_lexer, dict) and "max_keyword_length" in cfg_lexer:
        max_keyword_length = _check_keyword_length(cfg_lexer["max_keyword_length"])
    if args.max_keyword_length is not None:
        max_keyword_length = _check_keyword_length(args.max_keyword_length)

    # Output settings: config < CLI
    fmt = "text"
    trivia = True
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_format = cfg_output.get("format")
        if cfg_format is not None:
            if cfg_format not in FORMATS:
                raise argparse.ArgumentTypeError(
                    f"invalid output format {cfg_format!r} (expected one of {', '.join(FORMATS)})"
                )
            fmt = cfg_format
        cfg_trivia = cfg_output.get("trivia")
        if isinstance(cfg_trivia, bool):
            trivia = cfg_trivia
    if args.format is not None:
        fmt = args.format
    if args.trivia is not None:
        trivia = args.trivia

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        format=fmt,
        trivia=trivia,
        max_keyword_length=max_keyword_length,
        debug=args.debug,
    )


def lex_file(options: CliOptions) -> str:
    """Read and tokenize a PHP file, returning the rendered token dump."""
    from phplex.debug import dump_tokens, dump_tokens_json, strip_trivia
    from phplex.lexer import tokenize
    from phplex.recognizers import RecognizerSet

    source = options.input_file.read_text(encoding="utf-8")
    recognizers = RecognizerSet(max_keyword_length=options.max_keyword_length)
    tokens = tokenize(source, str(options.input_file), recognizers)
    log.debug("%s: %d tokens", options.input_file, len(tokens))

    if options.debug:
        dump_tokens(tokens, file=sys.stderr)

    if not options.trivia:
        tokens = strip_trivia(tokens)

    out = io.StringIO()
    if options.format == "json":
        dump_tokens_json(tokens, file=out)
    else:
        dump_tokens(tokens, file=out)
    return out.getvalue()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        text = lex_file(options)
    except LexError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.output_file:
        options.output_file.write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)

    return 0
