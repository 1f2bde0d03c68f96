# commentstrip/parsing/parser.py
from __future__ import annotations

import argparse

from commentstrip.tokens import DEFAULT_TOKEN_MODEL


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - `-h` is the header flag; help is only available as `--help`.
        - Paths may be files, directories or '-' for stdin.
    """
    from commentstrip import __version__

    p = argparse.ArgumentParser(
        prog="commentstrip",
        formatter_class=argparse.RawTextHelpFormatter,
        usage="%(prog)s [PATH ...] [OPTIONS]",
        add_help=False,
        description=(
            "commentstrip – remove // and /* */ comments from C-like sources\n"
            "String and character literals are copied through untouched."
        ),
    )

    g_loc = p.add_argument_group("Discovery")
    g_out = p.add_argument_group("Output")
    g_rep = p.add_argument_group("Reporting")
    g_misc = p.add_argument_group("Miscellaneous")

    g_loc.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help=(
            "Files or directories to strip. '-' or no PATH reads standard input.\n"
            "Files named here are always stripped; directories are walked."
        ),
    )
    g_loc.add_argument(
        "-s",
        "--suffix",
        metavar="SUF",
        dest="suffixes",
        action="append",
        help=(
            "Only pick files ending in SUF when walking directories (repeatable).\n"
            "Defaults to every suffix with a registered cleaner."
        ),
    )
    g_loc.add_argument(
        "-S",
        "--exclude-suffix",
        metavar="SUF",
        dest="exclude_suf",
        action="append",
        help="Skip files ending in SUF when walking directories (repeatable).",
    )
    g_loc.add_argument(
        "-e",
        "--exclude-dir",
        metavar="DIR",
        dest="exclude_dirs",
        action="append",
        help="Do not descend into DIR (repeatable).",
    )

    g_out.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        dest="output",
        help="Write the stripped text to FILE instead of standard output.",
    )
    g_out.add_argument(
        "-i",
        "--in-place",
        action="store_true",
        dest="in_place",
        help="Rewrite every input file with its stripped text.",
    )
    g_out.add_argument(
        "-h",
        "--header",
        action="store_true",
        dest="header",
        help="Prefix each file's output with a '===== path =====' banner.",
    )

    g_rep.add_argument(
        "--stats",
        action="store_true",
        help="Log characters and tokens before/after stripping.",
    )
    g_rep.add_argument(
        "--report",
        metavar="FILE",
        dest="report_path",
        help="Write a JSON run report to FILE.",
    )
    g_rep.add_argument(
        "--token-model",
        metavar="MODEL",
        dest="token_model",
        help=(
            "Model whose tokenizer --stats/--report use "
            f"(env COMMENTSTRIP_TOKEN_MODEL, default {DEFAULT_TOKEN_MODEL})."
        ),
    )
    g_rep.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 2 when an input ends inside a comment or literal.",
    )

    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit logs as JSON lines (env COMMENTSTRIP_JSON_LOGS=1).",
    )
    verbosity = g_misc.add_mutually_exclusive_group()
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors.")
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log debug details.")
    g_misc.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    g_misc.add_argument("--help", action="help", help="Show this help message and exit.")

    return p
