import os
import sys

import pytest

from symcalc.errors import MathFileError
from symcalc.mathfs import is_math_exist, normalize_math_path, read_math


def test_normalize_math_path():
    assert normalize_math_path("known") == "known.math"
    assert normalize_math_path("known.math") == "known.math"


def test_existence_check(tmp_path):
    (tmp_path / "known.math").write_text("5x^3", encoding="utf-8")
    assert is_math_exist(str(tmp_path / "known"))
    assert is_math_exist(str(tmp_path / "known.math"))
    assert not is_math_exist(str(tmp_path / "unknown_file"))
    assert not is_math_exist(str(tmp_path / "unknown_file.math"))


def test_read_math_trims_contents(tmp_path):
    (tmp_path / "poly.math").write_text("\n  5x^3 + 3x^2 + -7x \n\n", encoding="utf-8")
    assert read_math(str(tmp_path / "poly")) == "5x^3 + 3x^2 + -7x"
    assert read_math(str(tmp_path / "poly.math")) == "5x^3 + 3x^2 + -7x"


def test_read_missing_file_names_path(tmp_path):
    missing = str(tmp_path / "missing")
    with pytest.raises(MathFileError) as info:
        read_math(missing)
    assert info.value.path == missing + ".math"
    assert "missing.math" in str(info.value)


@pytest.mark.skipif(sys.platform == "win32" or os.geteuid() == 0, reason="needs POSIX permissions as non-root")
def test_permission_error_is_not_absence(tmp_path):
    locked = tmp_path / "locked"
    locked.mkdir()
    (locked / "known.math").write_text("1", encoding="utf-8")
    locked.chmod(0)
    try:
        with pytest.raises(MathFileError):
            is_math_exist(str(locked / "known"))
    finally:
        locked.chmod(0o755)


def test_reading_a_directory_fails(tmp_path):
    (tmp_path / "folder.math").mkdir()
    with pytest.raises(MathFileError):
        read_math(str(tmp_path / "folder"))


@pytest.mark.skipif(sys.platform == "win32", reason="ENOTDIR semantics are POSIX-specific")
def test_access_error_other_than_absence_raises(tmp_path):
    plain = tmp_path / "plain.txt"
    plain.write_text("not a directory", encoding="utf-8")
    with pytest.raises(MathFileError):
        is_math_exist(str(plain / "known"))
