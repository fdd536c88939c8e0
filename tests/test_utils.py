import errno
import gzip
import os
import sys
from unittest import mock

import pytest

from vetero.utils import (
    ApplicationError,
    SystemCallError,
    compress_file,
    dash_decimal_value,
    realpath,
    start_background,
    str_printf,
    str_printf_l,
)


def test_dash_decimal_value_c_locale():
    assert dash_decimal_value("C", 2, 1) == "--.-"


def test_dash_decimal_value_without_fraction():
    assert dash_decimal_value("C", 4) == "----"


def test_dash_decimal_value_empty_locale_without_fraction():
    assert dash_decimal_value("", 2, 0) == "--"


def test_dash_decimal_value_negative_rejected():
    with pytest.raises(ValueError):
        dash_decimal_value("C", -1, 1)


def test_dash_decimal_value_uses_locale_separator():
    with mock.patch("locale.localeconv", return_value={"decimal_point": ","}):
        assert dash_decimal_value("C", 2, 1) == "--,-"


def test_str_printf_integer_and_text():
    assert str_printf("%d items in %s", 3, "box") == "3 items in box"


def test_str_printf_ignores_length_modifier():
    assert str_printf("%.1lf", 2.5) == "2.5"


def test_str_printf_percent_literal():
    assert str_printf("%d%%", 50) == "50%"


def test_str_printf_width_matches_builtin():
    assert str_printf("%5.1f|%-4d|", 3.25, 7) == "%5.1f|%-4d|" % (3.25, 7)


def test_str_printf_star_width():
    assert str_printf("%*d", 5, 42) == "%*d" % (5, 42)


def test_str_printf_not_enough_arguments():
    with pytest.raises(TypeError):
        str_printf("%d %d", 1)


def test_str_printf_too_many_arguments():
    with pytest.raises(TypeError):
        str_printf("%d", 1, 2)


def test_str_printf_bad_spec():
    with pytest.raises(ValueError):
        str_printf("%y", 1)


def test_str_printf_l_c_locale():
    assert str_printf_l("%.1lf", "C", 3.5) == "3.5"


def test_str_printf_l_invalid_locale_falls_back():
    assert str_printf_l("%.1f", "xx_INVALID.nothing", 1.5) == str_printf("%.1f", 1.5)


def test_str_printf_l_comma_only_in_float_conversions():
    with mock.patch("locale.localeconv", return_value={"decimal_point": ","}):
        assert str_printf_l("%d.%d %.1f", "C", 1, 2, 3.5) == "1.2 3,5"


def test_compress_file_round_trip(tmp_path):
    target = tmp_path / "report.svgz"
    content = b"<svg>weather</svg>\n" * 20
    target.write_bytes(content)

    compress_file(target)

    packed = target.read_bytes()
    assert packed[:2] == b"\x1f\x8b"
    assert gzip.decompress(packed) == content


def test_compress_empty_file(tmp_path):
    target = tmp_path / "empty"
    target.write_bytes(b"")
    compress_file(str(target))
    assert gzip.decompress(target.read_bytes()) == b""


def test_compress_missing_file(tmp_path):
    with pytest.raises(SystemCallError) as info:
        compress_file(tmp_path / "missing")
    assert info.value.errno == errno.ENOENT


def test_realpath_resolves_symlink(tmp_path):
    real = tmp_path / "real.txt"
    real.write_text("x")
    link = tmp_path / "link.txt"
    os.symlink(real, link)
    assert realpath(str(link)) == os.path.realpath(real)


def test_realpath_missing_raises_application_error(tmp_path):
    with pytest.raises(ApplicationError):
        realpath(str(tmp_path / "nope"))


def test_start_background_runs_process():
    proc = start_background(sys.executable, ["-c", "raise SystemExit(3)"])
    assert proc.pid > 0
    assert proc.wait(timeout=30) == 3


def test_start_background_missing_program():
    with pytest.raises(SystemCallError) as info:
        start_background("/nonexistent/program-for-test", [])
    assert info.value.errno == errno.ENOENT