"""palettica — nine color variations for a hex code, as script-filter JSON.

Usage: palettica <hex>

Examples:
  palettica ff5500
  palettica '#abc'

Environment variables:
  PALETTICA_LOG_LEVEL  logging level for stderr (default WARNING)
  PALETTICA_ICON_DIR   directory of <RRGGBB>.png swatches to reference as icons
"""

import argparse
import json
import sys

from palettica.config import Settings
from palettica.feedback import script_filter, swatch_path_provider
from palettica.log import setup_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='palettica',
        description='Print nine color variations of a hex code as script-filter JSON.',
        epilog=__doc__.split('\n\n', 1)[1],
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument('query', help='Hex color, 3 or 6 digits, optional leading #')
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = Settings.from_env()
    setup_logging(settings.log_level)

    icon_for = swatch_path_provider(settings.icon_dir) if settings.icon_dir else None
    print(json.dumps(script_filter(args.query, icon_for)))
    return 0


if __name__ == '__main__':
    sys.exit(main())
