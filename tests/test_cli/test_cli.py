"""Tests for the hashicon command line."""

from __future__ import annotations

import pytest
from PIL import Image

from hashicon.cli import main


def test_render_message(tmp_path, capsys):
    out = tmp_path / "alice.png"
    assert main(["alice", "-o", str(out), "--size", "32"]) == 0
    assert Image.open(out).size == (32, 32)
    assert str(out) in capsys.readouterr().out


def test_render_hash(tmp_path):
    out = tmp_path / "zero.webp"
    assert main(["--hash", "00" * 20, "-o", str(out), "--hue", "120"]) == 0
    assert Image.open(out).format == "WEBP"


def test_bench(capsys):
    assert main(["--bench", "3", "--size", "32"]) == 0
    assert "ms/identicon" in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["alice", "--padding", "0.9"],
        ["--hash", "zz"],
        ["--hash", "00" * 10],
        ["alice", "--background", "no-such-color"],
        ["--bench", "0"],
        ["--bench", "-5"],
    ],
)
def test_bad_arguments_exit(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2


def test_unsupported_output_format(tmp_path):
    assert main(["alice", "-o", str(tmp_path / "icon.svg")]) == 1
