"""Shared fixtures for CLI tests."""

import json

import pytest


@pytest.fixture
def style_file(tmp_path):
    """A style file that widens lines and turns on per-type colors."""
    path = tmp_path / "style.json"
    path.write_text(
        json.dumps(
            {
                "ConnectionStyle": {
                    "LineWidth": 7.0,
                    "NormalColor": [1, 2, 3],
                    "UseDataDefinedColors": True,
                }
            }
        )
    )
    return path
