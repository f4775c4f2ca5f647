from pathlib import Path

import pytest
import reportlab
from reportlab.lib import colors

from editflow.errors import GeometryError, LayoutTimeout
from editflow.measure import ReportlabMeasurer
from editflow.models import FontSpec
from editflow.pdf.pdf_settings import LayoutLimits, PageGeometry, register_font_family

VERA = Path(reportlab.__file__).parent / "fonts" / "Vera.ttf"
VERA_BOLD = Path(reportlab.__file__).parent / "fonts" / "VeraBd.ttf"


class TestPageGeometry:
    def test_a4_defaults(self):
        geometry = PageGeometry()
        assert geometry.body_width == pytest.approx(595.2756 - 2 * 56.6929, abs=1e-3)
        assert geometry.first_page_height == pytest.approx(geometry.body_height - 48.0)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"margin_left": 300.0, "margin_right": 300.0},
            {"margin_top": 500.0, "margin_bottom": 400.0},
            {"header_height": 2000.0},
            {"header_height": -1.0},
            {"font": FontSpec(size=0.0)},
        ],
    )
    def test_invalid_geometry(self, overrides):
        with pytest.raises(GeometryError):
            PageGeometry(**overrides)

    def test_header_must_hold_title_block(self):
        with pytest.raises(GeometryError, match="title block"):
            PageGeometry(header_height=0.0)
        with pytest.raises(GeometryError, match="title block"):
            PageGeometry(header_height=30.0, font=FontSpec(size=12.0))

    def test_smallest_header_is_accepted(self):
        geometry = PageGeometry(header_height=39.0, font=FontSpec(size=12.0))
        assert geometry.chrome_height == pytest.approx(39.0)

    def test_logo_must_fit_header(self):
        with pytest.raises(GeometryError, match="Logo"):
            PageGeometry(logo_path=Path("logo.png"), logo_size=60.0)
        assert PageGeometry(logo_path=Path("logo.png"), logo_size=44.0).logo_size == 44.0

    def test_geometry_error_is_value_error(self):
        with pytest.raises(ValueError):
            PageGeometry(margin_left=1000.0)


class TestFromMapping:
    def test_nested_font_and_logo(self):
        geometry = PageGeometry.from_mapping(
            {"font": {"size": 14, "leading": 4}, "logo_path": "assets/logo.png"}
        )
        assert geometry.font == FontSpec(size=14, leading=4)
        assert geometry.logo_path == Path("assets/logo.png")

    def test_rule_colour_by_name(self):
        geometry = PageGeometry.from_mapping({"rule_color": "red"})
        assert geometry.rule_color == colors.red

    def test_unknown_key(self):
        with pytest.raises(GeometryError, match="gutter"):
            PageGeometry.from_mapping({"gutter": 5})

    def test_unknown_font_key(self):
        with pytest.raises(GeometryError, match="family"):
            PageGeometry.from_mapping({"font": {"family": "Times"}})

    def test_bad_colour(self):
        with pytest.raises(GeometryError):
            PageGeometry.from_mapping({"rule_color": "not-a-colour"})

    def test_bad_values_still_validated(self):
        with pytest.raises(GeometryError):
            PageGeometry.from_mapping({"header_height": 10_000})


class TestLayoutLimits:
    def test_pages_within_budget(self):
        LayoutLimits(max_pages=3).start().check_pages(3)

    def test_pages_over_budget(self):
        with pytest.raises(LayoutTimeout, match="pages"):
            LayoutLimits(max_pages=3).start().check_pages(4)

    def test_clock_budget(self):
        ticks = iter([10.0, 10.5, 12.0])
        budget = LayoutLimits(max_seconds=1.0).start(clock=lambda: next(ticks))
        budget.check_time()
        with pytest.raises(LayoutTimeout, match="seconds"):
            budget.check_time()

    def test_disabled_limits(self):
        budget = LayoutLimits(max_pages=None, max_seconds=None).start()
        budget.check_pages(10**6)


class TestRegisterFontFamily:
    def test_registered_faces_are_measurable(self):
        font = register_font_family(
            regular_path=VERA, bold_path=VERA_BOLD, name="EditFlowVera"
        )
        assert font == FontSpec(regular="EditFlowVera", bold="EditFlowVera-Bold")
        measurer = ReportlabMeasurer()
        assert measurer.measure("Hello", font, "bold").width > measurer.measure(
            "Hello", font
        ).width

    def test_registration_is_repeatable(self):
        first = register_font_family(regular_path=VERA, name="EditFlowVeraTwice")
        second = register_font_family(regular_path=VERA, name="EditFlowVeraTwice")
        assert first == second
