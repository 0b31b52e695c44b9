from PIL import Image

from monobmp.app.cli import build_blank, main, to_viewer_order
from monobmp.bitmap import Bitmap
from monobmp.bmp import encode_bmp
from monobmp.canvas import Rectangle
from monobmp.color import BWColor


def _displayed_rows(path):
    with Image.open(path) as img:
        gray = img.convert("L")
        width, height = gray.size
        data = gray.tobytes()
    return [list(data[y * width : (y + 1) * width]) for y in range(height)]


def test_viewer_order_flips_rows_and_inverts_bits() -> None:
    bmp = Bitmap(10, 2)
    bmp.set_pixel(0, 0, BWColor.BLACK)
    out = to_viewer_order(bmp)
    assert out.size == bmp.size
    assert list(out.buffer[:4]) == [0xFF, 0xC0, 0x00, 0x00]
    assert list(out.buffer[4:8]) == [0x7F, 0xC0, 0x00, 0x00]
    assert bmp.get_pixel(0, 0) is BWColor.BLACK


def test_blank_writes_viewer_ordered_bitmap(tmp_path) -> None:
    out = tmp_path / "blank.bmp"
    assert main(["blank", "12", "4", str(out), "--fill", "0,0,3,4", "--fill", "8,1,2,2"]) == 0
    expected = build_blank(12, 4, [Rectangle(0, 0, 3, 4), Rectangle(8, 1, 2, 2)])
    assert out.read_bytes() == encode_bmp(to_viewer_order(expected))
    assert expected.get_pixel(9, 2) is BWColor.BLACK
    assert expected.get_pixel(5, 0) is BWColor.WHITE


def test_blank_displays_black_rectangles_on_white(tmp_path) -> None:
    out = tmp_path / "stripe.bmp"
    assert main(["blank", "8", "4", str(out), "--fill", "0,0,8,1"]) == 0
    rows = _displayed_rows(out)
    assert rows[0] == [0] * 8
    assert rows[1:] == [[255] * 8] * 3


def test_blank_out_of_bounds_fill_reports_error(tmp_path, capsys) -> None:
    out = tmp_path / "bad.bmp"
    assert main(["blank", "4", "4", str(out), "--fill", "2,2,5,5"]) == 2
    assert "outside" in capsys.readouterr().err


def test_blank_invalid_size_reports_error(tmp_path, capsys) -> None:
    assert main(["blank", "0", "4", str(tmp_path / "x.bmp")]) == 2
    assert "Invalid bitmap size" in capsys.readouterr().err


def test_convert_png_all_black(tmp_path) -> None:
    src = tmp_path / "in.png"
    Image.new("L", (16, 8), 0).save(src)
    out = tmp_path / "out.bmp"
    assert main(["convert", str(src), str(out), "--no-dither", "--threshold", "10"]) == 0
    data = out.read_bytes()
    assert data[:2] == b"BM"
    assert len(data) == 62 + 4 * 8
    assert data[62:] == bytes(4 * 8)
    assert _displayed_rows(out) == [[0] * 16] * 8


def test_convert_displays_like_source(tmp_path) -> None:
    src = tmp_path / "top_row.png"
    img = Image.new("L", (8, 4), 255)
    img.paste(0, (0, 0, 8, 1))
    img.paste(0, (6, 2, 8, 4))
    img.save(src)
    out = tmp_path / "top_row.bmp"
    assert main(["convert", str(src), str(out), "--no-dither", "--threshold", "128"]) == 0
    assert _displayed_rows(out) == _displayed_rows(src)


def test_convert_rejects_unknown_extension(tmp_path, capsys) -> None:
    src = tmp_path / "in.txt"
    src.write_text("hello", encoding="utf-8")
    assert main(["convert", str(src), str(tmp_path / "out.bmp")]) == 2
    assert "Supported formats" in capsys.readouterr().err


def test_convert_missing_file(tmp_path, capsys) -> None:
    assert main(["convert", str(tmp_path / "missing.png"), str(tmp_path / "out.bmp")]) == 2
    assert "File not found" in capsys.readouterr().err
