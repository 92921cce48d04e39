from __future__ import annotations

import json
from pathlib import Path

import pytest

from name_overlay.components import ConfigLoadError, EmptyNameError
from name_overlay.data_handler import (
    build_layout_params,
    load_layout_config,
    load_names_csv,
    load_names_json,
    resolve_text_color,
    sanitize_name,
    text_color_from_config,
)
from name_overlay.variables import STYLE_TEXT_COLOR_RGB


class TestSanitizeName:
    def test_strips_whitespace(self):
        assert sanitize_name("  小明 \n") == "小明"

    @pytest.mark.parametrize("raw", ["", "   ", "\t\n", None])
    def test_empty_rejected(self, raw):
        with pytest.raises(EmptyNameError):
            sanitize_name(raw)


class TestLayoutConfig:
    def test_missing_file_returns_empty(self, tmp_path: Path):
        assert load_layout_config(tmp_path / "nope.json") == {}

    def test_known_keys_loaded_unknown_ignored(self, tmp_path: Path):
        p = tmp_path / "layout.json"
        p.write_text(
            json.dumps({"font_size": 96, "top_margin": "150", "text_color": [255, 250, 240], "bogus": 1}),
            encoding="utf-8",
        )
        cfg = load_layout_config(p)
        assert cfg["font_size"] == 96.0
        assert cfg["top_margin"] == 150.0
        assert cfg["text_color"] == pytest.approx((1.0, 250 / 255, 240 / 255))
        assert "bogus" not in cfg

    def test_bom_tolerated(self, tmp_path: Path):
        p = tmp_path / "layout.json"
        p.write_text("\ufeff{\"margin_x\": 40}", encoding="utf-8")
        assert load_layout_config(p) == {"margin_x": 40.0}

    def test_invalid_json_raises(self, tmp_path: Path):
        p = tmp_path / "layout.json"
        p.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigLoadError):
            load_layout_config(p)

    def test_non_numeric_value_raises(self, tmp_path: Path):
        p = tmp_path / "layout.json"
        p.write_text('{"font_size": "big"}', encoding="utf-8")
        with pytest.raises(ConfigLoadError):
            load_layout_config(p)

    def test_build_params_defaults_are_reference_values(self):
        p = build_layout_params(595.28, 841.89)
        assert (p.font_size, p.line_height, p.top_margin, p.margin_x) == (120.0, 1.4, 180.0, 30.0)

    def test_build_params_overrides(self):
        p = build_layout_params(600, 800, {"font_size": 60, "line_height": 1.2})
        assert p.font_size == 60
        assert p.line_gap == pytest.approx(72)
        assert p.top_margin == 180


class TestTextColor:
    def test_unit_interval_kept(self):
        assert resolve_text_color([1, 0.98, 0.94]) == (1.0, 0.98, 0.94)

    def test_byte_range_normalized(self):
        assert resolve_text_color((255, 0, 51)) == pytest.approx((1.0, 0.0, 0.2))

    @pytest.mark.parametrize("bad", [(1, 2), ("a", 0, 0), (-1, 0, 0), (300, 0, 0)])
    def test_invalid(self, bad):
        with pytest.raises(ConfigLoadError):
            resolve_text_color(bad)

    @pytest.mark.parametrize("bad", ["123", "255", 123, {"r": 1, "g": 1, "b": 1}])
    def test_non_sequence_rejected(self, bad):
        # 字符串 "123" 会被拆成三个字符，不能当作颜色
        with pytest.raises(ConfigLoadError):
            resolve_text_color(bad)

    def test_string_color_in_config_file_rejected(self, tmp_path: Path):
        p = tmp_path / "layout.json"
        p.write_text(json.dumps({"text_color": "123"}), encoding="utf-8")
        with pytest.raises(ConfigLoadError):
            load_layout_config(p)

    def test_default_color(self):
        assert text_color_from_config({}) == STYLE_TEXT_COLOR_RGB


class TestBatchNames:
    def test_json_list(self, tmp_path: Path):
        p = tmp_path / "names.json"
        p.write_text(json.dumps(["小明", " ", None, " 小華 "], ensure_ascii=False), encoding="utf-8")
        assert load_names_json(p) == ["小明", "小華"]

    def test_json_object(self, tmp_path: Path):
        p = tmp_path / "names.json"
        p.write_text(json.dumps({"names": ["Ada"]}), encoding="utf-8")
        assert load_names_json(p) == ["Ada"]

    def test_json_bad_structure(self, tmp_path: Path):
        p = tmp_path / "names.json"
        p.write_text('{"people": []}', encoding="utf-8")
        with pytest.raises(ConfigLoadError):
            load_names_json(p)

    def test_csv_with_name_header(self, tmp_path: Path):
        p = tmp_path / "names.csv"
        p.write_text("id,name\n1,小明\n2,\n3,Ada\n", encoding="utf-8")
        assert load_names_csv(p) == ["小明", "Ada"]

    def test_csv_first_column_without_header(self, tmp_path: Path):
        p = tmp_path / "names.csv"
        p.write_text("\ufeff小明\n小華,extra\n", encoding="utf-8")
        assert load_names_csv(p) == ["小明", "小華"]
