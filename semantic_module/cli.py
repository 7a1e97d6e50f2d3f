"""Command-line entry point for ``create-semantic-module``.

Usage::

    create-semantic-module my-module
    create-semantic-module my-module --packager yarn
    python -m semantic_module --commitlint-config @commitlint/config-angular
"""

from __future__ import annotations

import argparse
import asyncio
from typing import Any

from .config import GeneratorSettings, OptionKey
from .generator import ScaffoldOrchestrator


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-semantic-module",
        description="Set up commitizen, commitlint and husky for a JavaScript module",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-semantic-module my-module\n"
            "  create-semantic-module my-module --packager yarn\n"
            "  create-semantic-module --commitizen-adapter cz-customizable\n"
        ),
    )

    parser.add_argument(
        "module_name",
        nargs="?",
        default=None,
        help="Directory of the module to configure (default: current directory)",
    )
    for key in OptionKey:
        spellings = [key.flag]
        if f"--{key.value}" != key.flag:
            spellings.append(f"--{key.value}")
        parser.add_argument(
            *spellings,
            dest=key.value,
            default=None,
            help=f"Answer for {key.value!r} without prompting for its default",
        )
    parser.add_argument(
        "--skip-install",
        action="store_true",
        default=None,
        help="Write the configuration but do not install dependencies",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> tuple[str | None, dict[str, Any], bool | None]:
    """Parse *argv*, ignoring flags the generator does not know."""
    args, _unknown = build_arg_parser().parse_known_args(argv)
    flags = {key.value: getattr(args, key.value) for key in OptionKey}
    return args.module_name, flags, args.skip_install


def main(argv: list[str] | None = None) -> None:
    """CLI entry point; errors propagate with their traceback."""
    module_name, flags, skip_install = parse_args(argv)

    overrides: dict[str, Any] = {}
    if skip_install:
        overrides["skip_install"] = True
    settings = GeneratorSettings.from_env(**overrides)

    orchestrator = ScaffoldOrchestrator(settings)
    asyncio.run(orchestrator.run(module_name, flags))


if __name__ == "__main__":
    main()
