#!/usr/bin/env python3
"""
See how adding packages affects a React Native JavaScript bundle.

A throwaway sample app is generated, bundled once as a baseline, bundled again
with the requested packages imported, and the size difference is reported
together with two source-map-explorer HTML reports.

Usage:
  python bundle_size_cli.py lodash
  python bundle_size_cli.py dayjs@1.11.10 date-fns --no-package-json -rnv 0.73.2
  python bundle_size_cli.py @react-navigation/native -p ../app/package.json --debug
"""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from cli.args.base import parse_config
from pipeline.settings import SettingsError
from pipeline.wiring import build_pipeline, configure_logging


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        config = parse_config(argv)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 1

    configure_logging(config.debug)

    try:
        pipeline = build_pipeline(config_path=config.config_path)
    except SettingsError as e:
        print(str(e), file=sys.stderr)
        return 1

    try:
        pipeline.run(config)
    except SystemExit as e:
        # Stage failures exit through cli.ui.action.
        return int(e.code or 0)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
