"""
pytest configuration: put the project root on sys.path and share fixtures.
"""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)

from editflow.measure import FixedWidthMeasurer  # noqa: E402
from editflow.models import FontSpec  # noqa: E402
from editflow.pdf.pdf_settings import PageGeometry  # noqa: E402


@pytest.fixture
def measurer() -> FixedWidthMeasurer:
    """Six points per character, line height 12 before leading."""
    return FixedWidthMeasurer(char_width=6.0, ascent=9.0, descent=3.0)


@pytest.fixture
def tall_measurer() -> FixedWidthMeasurer:
    """Lines exactly 25 points tall when leading is zero."""
    return FixedWidthMeasurer(char_width=6.0, ascent=20.0, descent=5.0)


@pytest.fixture
def small_geometry() -> PageGeometry:
    """Body height 100 with a 30 point header block on page one.

    An 8 point font makes the title block exactly fill the header.
    """
    return PageGeometry(
        page_width=200.0,
        page_height=120.0,
        margin_left=10.0,
        margin_right=10.0,
        margin_top=10.0,
        margin_bottom=10.0,
        header_height=30.0,
        paragraph_spacing=0.0,
        font=FontSpec(size=8.0, leading=0.0),
    )
