from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from pipeline.models import LATEST, RunConfig

VERSION = "1.0.0"

EMPTY_PACKAGES_MESSAGE = "You must provide at least one package to add."


def add_base_args(parser: argparse.ArgumentParser) -> None:
    """Register every flag of the bundle-size CLI.

    This includes:
    - the packages to measure (positional)
    - framework version pinning
    - package.json seeding (boolean-or-path)
    - debug / settings file
    """

    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=VERSION,
        help="Show version number",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Print full error details, log every command and keep the temporary sample app.",
    )
    parser.add_argument(
        "-rnv",
        "--react-native-version",
        dest="react_native_version",
        default=None,
        metavar="VERSION",
        help=(
            f"React Native version for the sample app (default: the version in package.json, "
            f"or '{LATEST}' when package.json is not used)."
        ),
    )

    # Boolean-or-path: absent -> ./package.json, bare -p -> ./package.json,
    # -p PATH -> PATH, --no-package-json -> disabled.
    parser.add_argument(
        "-p",
        "--package-json",
        dest="package_json",
        nargs="?",
        const=True,
        default=True,
        metavar="PATH",
        help=(
            "Use the package.json from the current working directory (or PATH) as default "
            "dependencies for the sample app. Put packages before a bare -p."
        ),
    )
    parser.add_argument(
        "--no-package-json",
        dest="package_json",
        action="store_const",
        const=False,
        help="Start from a pristine sample app instead of your package.json dependencies.",
    )

    parser.add_argument(
        "--config",
        dest="config_path",
        default=None,
        metavar="PATH",
        help="YAML settings file (default: ./bundle-size.yaml if present).",
    )

    parser.add_argument(
        "packages",
        nargs="*",
        metavar="PACKAGE",
        help="Packages to add, optionally with a version (e.g. lodash or dayjs@1.11.10).",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bundle-size",
        description=(
            "A command-line interface to see how adding packages affects your "
            "React Native JavaScript bundle."
        ),
    )
    add_base_args(parser)
    return parser


def config_from_args(args: argparse.Namespace) -> RunConfig:
    """Freeze the parsed namespace into a :class:`RunConfig`.

    Raises ``ValueError`` when no package was given.
    """
    packages = tuple(p for p in (args.packages or []) if p.strip())
    if not packages:
        raise ValueError(EMPTY_PACKAGES_MESSAGE)

    package_json = args.package_json
    if isinstance(package_json, str):
        package_json = Path(package_json).expanduser()

    version: Optional[str] = args.react_native_version
    config_path = Path(args.config_path).expanduser() if args.config_path else None

    return RunConfig(
        packages=packages,
        package_json=package_json,
        react_native_version=version.strip() if version and version.strip() else None,
        debug=bool(args.debug),
        config_path=config_path,
    )


def parse_config(argv: Optional[Sequence[str]] = None) -> RunConfig:
    # Intermixed: `bundle-size lodash -d dayjs` keeps both packages.
    return config_from_args(build_parser().parse_intermixed_args(argv))
