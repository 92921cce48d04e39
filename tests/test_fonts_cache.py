from __future__ import annotations

import threading
import time
from pathlib import Path

import pytest

from name_overlay.components import (
    FontCache,
    FontLoadError,
    ReportLabMetrics,
    is_cff_font,
    pick_font_file,
    probe_font_files,
)


class TestFontCache:
    def test_loads_once_and_memoizes(self):
        calls = []

        def loader() -> bytes:
            calls.append(1)
            return b"font-bytes"

        cache = FontCache(loader)
        assert not cache.is_loaded
        assert cache.get_or_load() == b"font-bytes"
        assert cache.get_or_load() == b"font-bytes"
        assert len(calls) == 1
        assert cache.load_count == 1
        assert cache.is_loaded

    def test_concurrent_first_access_single_load(self):
        calls = []
        lock = threading.Lock()

        def slow_loader() -> bytes:
            with lock:
                calls.append(1)
            time.sleep(0.05)
            return b"x" * 16

        cache = FontCache(slow_loader)
        results = []

        def worker():
            results.append(cache.get_or_load())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(calls) == 1
        assert results == [b"x" * 16] * 8

    def test_failed_load_is_retried_on_next_access(self):
        attempts = []

        def flaky() -> bytes:
            attempts.append(1)
            if len(attempts) == 1:
                raise FontLoadError("network down")
            return b"ok"

        cache = FontCache(flaky)
        with pytest.raises(FontLoadError):
            cache.get_or_load()
        assert cache.get_or_load() == b"ok"

    def test_empty_payload_rejected(self):
        with pytest.raises(FontLoadError):
            FontCache(lambda: b"").get_or_load()

    def test_from_path_missing_file(self, tmp_path: Path):
        cache = FontCache.from_path(tmp_path / "missing.ttf")
        with pytest.raises(FontLoadError):
            cache.get_or_load()

    def test_from_path_reads_file(self, tmp_path: Path):
        p = tmp_path / "a.ttf"
        p.write_bytes(b"\x00\x01\x00\x00abc")
        assert FontCache.from_path(p).get_or_load() == b"\x00\x01\x00\x00abc"


class TestReportLabMetrics:
    def test_width_scales_with_size(self, vera_font_bytes):
        m = ReportLabMetrics(vera_font_bytes)
        w12 = m.width_of_text_at_size("Hello", 12)
        w24 = m.width_of_text_at_size("Hello", 24)
        assert w12 > 0
        assert w24 == pytest.approx(2 * w12)

    def test_monotonic_in_prefix_extension(self, vera_font_bytes):
        m = ReportLabMetrics(vera_font_bytes)
        text = "Alexander"
        widths = [m(text[:i], 120) for i in range(1, len(text) + 1)]
        assert widths == sorted(widths)

    def test_same_bytes_register_once(self, vera_font_bytes):
        assert ReportLabMetrics(vera_font_bytes).face_name == ReportLabMetrics(vera_font_bytes).face_name

    def test_corrupt_font_raises_font_load_error(self):
        with pytest.raises(FontLoadError):
            ReportLabMetrics(b"definitely not a font")


def test_pick_font_file_prefers_explicit(vera_font_path):
    assert pick_font_file(vera_font_path) == vera_font_path


def test_pick_font_file_ignores_non_font_suffix(tmp_path, monkeypatch):
    import name_overlay.components.fonts as fonts

    bogus = tmp_path / "font.txt"
    bogus.write_text("x", encoding="utf-8")
    monkeypatch.setattr(fonts, "PATH_FONT_FILE", None)
    monkeypatch.setattr(fonts, "PATH_FONTS_DIR", tmp_path / "nope")
    monkeypatch.setattr(fonts, "CONST_CANDIDATE_CJK_FONT_PATHS", ())
    assert pick_font_file(bogus) is None


class TestCffFonts:
    def test_cff_font_detected(self, cff_font_bytes, vera_font_bytes):
        assert is_cff_font(cff_font_bytes)
        assert not is_cff_font(vera_font_bytes)

    def test_cff_font_rejected_with_font_load_error(self, cff_font_bytes):
        with pytest.raises(FontLoadError, match="CFF"):
            ReportLabMetrics(cff_font_bytes)

    def test_discovery_skips_cff_and_falls_through(self, tmp_path, monkeypatch, cff_font_bytes, vera_font_path):
        import name_overlay.components.fonts as fonts

        # CFF 字体即使以 .ttf 命名也应被跳过，继续尝试下一个候选
        disguised = tmp_path / "cff_named.ttf"
        disguised.write_bytes(cff_font_bytes)
        otf = tmp_path / "cff.otf"
        otf.write_bytes(cff_font_bytes)
        monkeypatch.setattr(fonts, "PATH_FONT_FILE", otf)
        monkeypatch.setattr(fonts, "PATH_FONTS_DIR", tmp_path / "nope")
        monkeypatch.setattr(fonts, "CONST_CANDIDATE_CJK_FONT_PATHS", (str(vera_font_path),))
        assert probe_font_files(disguised) == [vera_font_path]
        assert pick_font_file(disguised) == vera_font_path
