from pathlib import Path

import pytest
from PIL import Image

from framer import cli


@pytest.fixture
def dirs(tmp_path: Path):
    src = tmp_path / "in"
    src.mkdir()
    out = tmp_path / "out"
    out.mkdir()
    Image.new("RGB", (100, 200), (9, 9, 9)).save(src / "tall.png")
    Image.new("RGB", (300, 100), (9, 9, 9)).save(src / "wide.jpg")
    return src, out


def test_folder_with_ratio(dirs):
    src, out = dirs
    rc = cli.main(["-i", str(src), "-o", str(out), "--ratio", "1:1"])
    assert rc == cli.EX_OK
    with Image.open(out / "tall.png") as im:
        assert im.size == (200, 200)
    with Image.open(out / "wide.jpg") as im:
        assert im.size == (300, 300)


def test_single_file_with_dimensions_and_filetype(dirs):
    src, out = dirs
    rc = cli.main(["-i", str(src / "wide.jpg"), "-o", str(out), "--dimensions", "64x48", "webp"])
    assert rc == cli.EX_OK
    with Image.open(out / "wide.webp") as im:
        assert im.format == "WEBP"
        assert im.size == (64, 48)


def test_folder_continues_past_bad_file(dirs):
    src, out = dirs
    (src / "broken.png").write_bytes(b"xx")
    rc = cli.main(["-i", str(src), "-o", str(out), "--aspect-ratio", "4:3"])
    assert rc == cli.EX_OK
    assert sorted(p.name for p in out.iterdir()) == ["tall.png", "wide.jpg"]


def test_single_bad_file_cannot_create(dirs):
    src, out = dirs
    bad = src / "broken.png"
    bad.write_bytes(b"xx")
    assert cli.main(["-i", str(bad), "-o", str(out), "--dim", "10x10"]) == cli.EX_CANTCREAT


def test_missing_output_dir(dirs, tmp_path: Path):
    src, _ = dirs
    rc = cli.main(["-i", str(src), "-o", str(tmp_path / "nope"), "--ratio", "1:1"])
    assert rc == cli.EX_IOERR


def test_unsupported_single_input(dirs):
    src, out = dirs
    gif = src / "anim.gif"
    Image.new("RGB", (5, 5)).save(gif)
    assert cli.main(["-i", str(gif), "-o", str(out), "--ratio", "1:1"]) == cli.EX_CONFIG


def test_single_input_without_extension(dirs):
    src, out = dirs
    noext = src / "README"
    noext.write_text("hi")
    assert cli.main(["-i", str(noext), "-o", str(out), "--ratio", "1:1"]) == cli.EX_DATAERR


@pytest.mark.parametrize(
    "extra",
    [
        [],                                          # no sizing at all
        ["--ratio", "1:1", "--dim", "10x10"],        # both
        ["--ratio", "16x9"],                         # wrong separator
        ["--dim", "0x100"],                          # zero size
        ["--dim", "10x10", "bmp"],                   # unknown filetype
        ["--dim", "10x10", "--quality", "101"],
    ],
)
def test_bad_arguments_exit_with_config(dirs, extra, capsys):
    src, out = dirs
    with pytest.raises(SystemExit) as exc:
        cli.main(["-i", str(src), "-o", str(out)] + extra)
    assert exc.value.code == cli.EX_CONFIG
    assert "error" in capsys.readouterr().err
