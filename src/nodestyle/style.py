"""Connection line style loaded from JSON."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from textual.color import Color

from nodestyle.color import TypeColorAssigner, to_color

logger = logging.getLogger(__name__)

DEFAULT_STYLE_PATH = Path(__file__).resolve().parent / "DefaultStyle.json"

SECTION = "ConnectionStyle"

COLOR_FIELDS = {
    "ConstructionColor": "construction_color",
    "NormalColor": "normal_color",
    "SelectedColor": "selected_color",
    "SelectedHaloColor": "selected_halo_color",
    "HoveredColor": "hovered_color",
}

FLOAT_FIELDS = {
    "LineWidth": "line_width",
    "ConstructionLineWidth": "construction_line_width",
    "PointDiameter": "point_diameter",
}

BOOL_FIELDS = {
    "UseDataDefinedColors": "use_data_defined_colors",
}


class ConnectionStyle:
    """Colors and sizes for drawing connections.

    Starts from the bundled DefaultStyle.json, then applies json_text on
    top of it. Every later load overlays the current values: keys that
    are missing or null leave the field alone.

    Each style owns its own TypeColorAssigner, so per-type colors are
    only distinct from other types seen by the same style.
    """

    def __init__(self, json_text: str | None = None) -> None:
        self.construction_color = Color(128, 128, 128)
        self.normal_color = Color(0, 139, 139)
        self.selected_color = Color(100, 100, 100)
        self.selected_halo_color = Color(255, 165, 0)
        self.hovered_color = Color(224, 255, 255)
        self.line_width = 3.0
        self.construction_line_width = 2.0
        self.point_diameter = 10.0
        self.use_data_defined_colors = False
        self.type_colors = TypeColorAssigner()

        self.load_json_file(DEFAULT_STYLE_PATH)
        if json_text is not None:
            self.load_json_text(json_text)

    @classmethod
    def set_connection_style(cls, json_text: str) -> ConnectionStyle:
        """Build a style from json_text and make it the shared default."""
        style = cls(json_text)
        StyleCollection.set_connection_style(style)
        return style

    def load_json_file(self, path: str | Path) -> None:
        """Overlay values from a JSON file. Unreadable files are skipped."""
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            logger.warning("couldn't open style file %s: %s", path, e)
            return
        self.load_json_bytes(data)

    def load_json_text(self, text: str) -> None:
        self.load_json_bytes(text.encode())

    def load_json_bytes(self, data: bytes) -> None:
        try:
            document = json.loads(data)
        except ValueError as e:
            logger.warning("invalid style JSON: %s", e)
            return
        if not isinstance(document, dict):
            logger.warning("style JSON is not an object, ignoring")
            return
        self.load_json(document)

    def load_json(self, document: dict[str, Any]) -> None:
        """Overlay values from the "ConnectionStyle" object of a parsed document."""
        values = document.get(SECTION)
        if not isinstance(values, dict):
            values = {}

        for key, attr in COLOR_FIELDS.items():
            value = _read(values, key)
            if value is None:
                continue
            try:
                setattr(self, attr, to_color(value))
            except ValueError as e:
                logger.warning("bad color for %s: %s", key, e)

        for key, attr in FLOAT_FIELDS.items():
            value = _read(values, key)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                logger.warning("bad number for %s: %r", key, value)
                continue
            setattr(self, attr, float(value))

        for key, attr in BOOL_FIELDS.items():
            value = _read(values, key)
            if value is None:
                continue
            if not isinstance(value, bool):
                logger.warning("bad flag for %s: %r", key, value)
                continue
            setattr(self, attr, value)

    def color_for(self, type_id: str) -> Color:
        """Color for connections of type_id, assigning one on first use."""
        return self.type_colors.color_for(type_id)

    def line_color(self, type_id: str | None = None) -> Color:
        """Color to draw a connection with.

        Uses the per-type color when data defined colors are enabled and
        the connection has a type, otherwise normal_color.
        """
        if self.use_data_defined_colors and type_id:
            return self.color_for(type_id)
        return self.normal_color

    def to_dict(self) -> dict[str, Any]:
        """Current values keyed like the JSON file, colors as hex."""
        values: dict[str, Any] = {}
        for key, attr in COLOR_FIELDS.items():
            values[key] = getattr(self, attr).hex
        for key, attr in FLOAT_FIELDS.items():
            values[key] = getattr(self, attr)
        for key, attr in BOOL_FIELDS.items():
            values[key] = getattr(self, attr)
        return {SECTION: values}


def _read(values: dict[str, Any], key: str) -> Any:
    value = values.get(key)
    if value is None:
        logger.debug("undefined value for parameter: %s", key)
    return value


class StyleCollection:
    """The connection style used by anything that isn't given its own."""

    _connection_style: ConnectionStyle | None = None

    @classmethod
    def connection_style(cls) -> ConnectionStyle:
        if cls._connection_style is None:
            cls._connection_style = ConnectionStyle()
        return cls._connection_style

    @classmethod
    def set_connection_style(cls, style: ConnectionStyle) -> None:
        cls._connection_style = style

    @classmethod
    def reset(cls) -> None:
        """Drop the shared style; the next lookup builds a fresh default."""
        cls._connection_style = None
