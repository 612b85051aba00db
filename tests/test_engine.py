"""
ResponsiveSystem facade and launcher tests.
"""
import json
from dataclasses import replace

import pytest

import main as launcher
from responsive_metrics import (
    DEFAULT_TABLES,
    CategoryTable,
    MetricKind,
    ResponsiveSystem,
    SizeCategory,
    ViewportMetrics,
)
from responsive_metrics.engine import format_report


class TestResponsiveSystem:

    def test_defaults_match_module_functions(self, iphone_se, full_hd):
        system = ResponsiveSystem()
        assert system.tables is DEFAULT_TABLES
        assert system.screen_size(full_hd) is SizeCategory.LARGE_DESKTOP
        assert system.scale_factor(full_hd) == pytest.approx(1.404)
        assert system.font_size(full_hd, 16) == pytest.approx(22.464)
        assert system.transform(full_hd, 10, MetricKind.ELEVATION) == pytest.approx(16.848)
        assert system.dialog_width(iphone_se) == pytest.approx(315.0)
        assert system.dialog_button_width(iphone_se, 2, spacing=12) == pytest.approx(131.5)

    def test_injected_tables(self):
        narrow = ViewportMetrics(width=300, height=600)
        assert ResponsiveSystem().dialog_button_width(narrow, 2, spacing=44) == pytest.approx(100.0)

        # a share of 98 clears the lowered floor
        system = ResponsiveSystem(replace(DEFAULT_TABLES, min_button_width=CategoryTable(50.0)))
        assert system.dialog_button_width(narrow, 2, spacing=44) == pytest.approx(98.0)
        assert system.dialog_action_constraints(narrow, 2, spacing=44).max_width == pytest.approx(98.0)

    def test_responsive_selection(self, tall_phone, full_hd):
        system = ResponsiveSystem()
        assert system.responsive(tall_phone, "one", desktop="three") == "one"
        assert system.responsive(full_hd, "one", desktop="three") == "three"

    def test_shared_instance_is_stateless(self, tall_phone, full_hd):
        system = ResponsiveSystem()
        first = system.describe(tall_phone)
        system.describe(full_hd)
        assert system.describe(tall_phone) == first


class TestDescribe:

    def test_report(self, iphone_se):
        report = ResponsiveSystem().describe(iphone_se)
        assert report["category"] == "mobile"
        assert report["orientation"] == "portrait"
        assert report["scale_factor"] == pytest.approx(0.92)
        assert report["dialog_width"] == pytest.approx(315.0)
        assert report["dialog_padding"] == (16.0, 12.8)
        assert report["dialog_buttons"] == 2
        assert report["grid_columns"] == 1

    def test_format_report_aligns_keys(self):
        text = format_report({"a": 1, "long_key": 2})
        assert text.splitlines() == ["a         1", "long_key  2"]


class TestLauncher:

    def test_prints_report(self, capsys):
        assert launcher.main(["--width", "375", "--height", "667", "--density", "2"]) == 0
        out = capsys.readouterr().out
        assert "category" in out
        assert "mobile" in out

    def test_rejects_invalid_viewport(self):
        assert launcher.main(["--width", "375", "--height", "0"]) == 2

    def test_width_requires_height(self):
        with pytest.raises(SystemExit):
            launcher.main(["--width", "375"])

    def test_tables_override(self, tmp_path, capsys):
        path = tmp_path / "tables.json"
        path.write_text(json.dumps({"grid_columns": {"mobile": 2}}), encoding="utf-8")
        assert launcher.main(["--width", "375", "--height", "667", "--tables", str(path)]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert any(line.startswith("grid_columns") and line.rstrip().endswith("2") for line in lines)

    def test_missing_tables_file(self, tmp_path):
        assert launcher.main(["--width", "375", "--height", "667", "--tables", str(tmp_path / "x.json")]) == 2
