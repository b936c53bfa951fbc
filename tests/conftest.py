"""Shared test fixtures."""

from __future__ import annotations

import pytest


SQUARE_D = "M0,0 L10,0 L10,10 L0,10 Z"

SQUARE_SVG = f'''<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10" viewBox="0 0 10 10">
  <g id="layer1">
    <path fill="none" d="{SQUARE_D}" stroke="black"/>
  </g>
</svg>'''

# Quadratic arch followed by its T-reflection, closed with a line
WAVE_D = "M0,0 Q5,10 10,0 T20,0 L0,0 Z"

# Every supported command, relative and absolute, closing back on (0, 0)
MIXED_D = "m0,0 l10,0 h5 v5 q5,5 0,10 t-5,5 c-2,3-4,3-5,0 s-3-5-5,0 H0 V0 z"

MIXED_SVG = f'''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <g>
    <path d="{MIXED_D}"/>
  </g>
</svg>'''

NO_GROUP_SVG = f'''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10">
  <path d="{SQUARE_D}"/>
</svg>'''


@pytest.fixture
def square_svg() -> str:
    return SQUARE_SVG


@pytest.fixture
def square_file(tmp_path):
    f = tmp_path / "square.svg"
    f.write_text(SQUARE_SVG, encoding="utf-8")
    return f
