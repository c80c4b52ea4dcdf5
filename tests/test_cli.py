from PIL import Image

from asciiraster.cli import main


def run(tmp_path, image, *extra):
    gray = tmp_path / "gray.png"
    ascii_ = tmp_path / "ascii.png"
    code = main([str(image), "--gray-output", str(gray), "--ascii-output", str(ascii_), *extra])
    return code, gray, ascii_


def test_full_run_writes_both_pngs(tmp_path, gradient_png, capsys):
    code, gray, ascii_ = run(tmp_path, gradient_png)
    assert code == 0

    with Image.open(gray) as img:
        assert img.format == "PNG"
        assert img.size == (20, 10)
    with Image.open(ascii_) as img:
        assert img.format == "PNG"
        assert img.mode == "RGBA"

    out = capsys.readouterr().out
    assert f"Grayscale image saved: {gray}" in out
    assert f"ASCII art saved as image: {ascii_}" in out


def test_missing_input_stops_the_run(tmp_path, capsys):
    code, gray, ascii_ = run(tmp_path, tmp_path / "missing.png")
    assert code == 1
    assert not gray.exists()
    assert not ascii_.exists()
    assert "decode stage failed" in capsys.readouterr().err


def test_grayscale_failure_does_not_stop_ascii_stage(tmp_path, gradient_png, capsys):
    ascii_ = tmp_path / "ascii.png"
    code = main(
        [str(gradient_png), "--gray-output", str(tmp_path / "nope" / "gray.png"), "--ascii-output", str(ascii_)]
    )
    assert code == 1
    assert ascii_.exists()
    captured = capsys.readouterr()
    assert "grayscale stage failed: failed to create output file" in captured.err
    assert "ASCII art saved as image" in captured.out


def test_bad_font_fails_ascii_stage_only(tmp_path, gradient_png, capsys):
    code, gray, ascii_ = run(tmp_path, gradient_png, "--font", str(tmp_path / "missing.ttf"))
    assert code == 1
    assert gray.exists()
    assert not ascii_.exists()
    assert "font stage failed" in capsys.readouterr().err


def test_print_echoes_ascii_lines(tmp_path, capsys):
    image = tmp_path / "source.png"
    Image.new("RGB", (10, 4), (128, 128, 128)).save(image)
    code, _, _ = run(tmp_path, image, "--print")
    assert code == 0
    out = capsys.readouterr().out
    assert "++++++++++\n++++++++++" in out
