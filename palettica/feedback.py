"""Script-filter feedback built from color variations.

Each variation becomes one launcher item::

    {"title": "#FF7733", "subtitle": "Lighter Tint", "arg": "#FF7733",
     "icon": {"path": "/icons/FF7733.png"}}

Icons come from an injected provider. A provider that raises ``SwatchError``
costs the item its icon, nothing more.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Sequence
from typing import Any

from .conversions.hex import normalize_hex
from .variations.palette import ColorVariation, generate_variations

logger = logging.getLogger(__name__)

INVALID_TITLE = 'Invalid Hex Code'

IconProvider = Callable[[str], str]
Item = dict[str, Any]


class SwatchError(RuntimeError):
    """An icon provider could not supply a swatch for a color."""


def swatch_path_provider(directory: str) -> IconProvider:
    """Icon provider mapping ``#RRGGBB`` to ``<directory>/RRGGBB.png``. Never touches the disk."""

    def icon_for(hex_color: str) -> str:
        return os.path.join(directory, f'{hex_color.lstrip("#")}.png')

    return icon_for


def _item(variation: ColorVariation, icon_for: IconProvider | None) -> Item:
    item: Item = {
        'title': variation.hex,
        'subtitle': variation.name,
        'arg': variation.hex,
    }
    if icon_for is None:
        return item
    try:
        item['icon'] = {'path': icon_for(variation.hex)}
    except SwatchError as exc:
        logger.warning('No swatch for %s (%s): %s', variation.hex, variation.name, exc)
    return item


def build_items(variations: Sequence[ColorVariation], icon_for: IconProvider | None = None) -> list[Item]:
    return [_item(v, icon_for) for v in variations]


def invalid_feedback() -> dict[str, list[Item]]:
    return {'items': [{'title': INVALID_TITLE}]}


def script_filter(query: str, icon_for: IconProvider | None = None) -> dict[str, list[Item]]:
    """Normalize ``query`` and return the full feedback document."""
    hex_color = normalize_hex(query)
    if hex_color is None:
        return invalid_feedback()
    logger.debug('Generating variations for %s', hex_color)
    return {'items': build_items(generate_variations(hex_color), icon_for)}
