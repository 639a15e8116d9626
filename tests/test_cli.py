"""Tests for the command-line entry point."""

from tests.conftest import CIRCLE_SVG

from svgraster.main import main, parse_args


def test_parse_args():
    args = parse_args(["in.svg", "out.png", "-v"])
    assert args.input == "in.svg"
    assert args.output == "out.png"
    assert args.verbose


def test_main_converts(svg_file, tmp_path):
    out = tmp_path / "out.png"
    assert main([str(svg_file(CIRCLE_SVG)), str(out)]) == 0
    assert out.exists()


def test_main_load_failure_exits_non_zero(tmp_path):
    out = tmp_path / "out.png"
    assert main([str(tmp_path / "missing.svg"), str(out)]) == 1
    assert not out.exists()


def test_main_survives_oversized_coordinates(svg_file, tmp_path):
    out = tmp_path / "out.png"
    src = svg_file('<svg width="10" height="10"><circle cx="1e30" r="1"/></svg>')
    assert main([str(src), str(out)]) == 0
    assert out.exists()
