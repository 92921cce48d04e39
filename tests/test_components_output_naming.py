from __future__ import annotations

from pathlib import Path

import pytest

from name_overlay.components import FileHandler, gift_filename, sanitize_filename_part
from name_overlay.variables import PATH_OUTPUT_DIR


def test_gift_filename_wraps_name():
    assert gift_filename("小明") == "給小明的禮物.pdf"


def test_gift_filename_replaces_path_characters():
    assert gift_filename("a/b:c") == "給a_b_c的禮物.pdf"


def test_sanitize_control_characters():
    assert sanitize_filename_part("x\ty") == "x_y"


def test_output_path_default_dir():
    out = FileHandler.output_path_for_name("小明")
    assert out.parent == PATH_OUTPUT_DIR
    assert out.name == "給小明的禮物.pdf"


def test_output_path_custom_dir(tmp_path: Path):
    out = FileHandler.output_path_for_name("Ada", output_dir=tmp_path / "batch")
    assert out == tmp_path / "batch" / "給Ada的禮物.pdf"
    assert out.parent.is_dir()


def test_read_bytes_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        FileHandler.read_bytes(tmp_path / "none.pdf")


def test_write_then_read_bytes(tmp_path: Path):
    target = tmp_path / "nested" / "out.bin"
    FileHandler.write_bytes(target, b"%PDF-1.4")
    assert FileHandler.read_bytes(target) == b"%PDF-1.4"
