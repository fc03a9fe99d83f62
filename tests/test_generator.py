"""End-to-end tests for the frame generator and its command line."""

import logging

import pytest
from PIL import ExifTags, Image

import makeFrames
from metaframer.generator import FrameOptions, main
from metaframer.resolution import Resolution


def _make_image(path, size=(640, 480)):
    exif = Image.Exif()
    exif[ExifTags.Base.Make] = "Canon"
    exif[ExifTags.Base.Model] = "EOS R5"
    Image.new("RGB", size, "gray").save(path, exif=exif)
    return path


def test_generates_frame(tmp_path):
    image = _make_image(tmp_path / "image.jpg")
    assert main([image]) == 0

    frame = tmp_path / "image_frame.svg"
    assert frame.exists()
    assert "Canon EOS R5" in frame.read_text(encoding="utf-8")


def test_generates_pdf_frame(tmp_path):
    image = _make_image(tmp_path / "image.jpg")
    options = FrameOptions(resolution=Resolution.HD, portrait=True, output_format="pdf")
    assert main([image], options) == 0
    assert (tmp_path / "image_frame.pdf").read_bytes().startswith(b"%PDF")


def test_missing_file_is_reported(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        failures = main([tmp_path / "does" / "not" / "exist.jpg"])
    assert failures == 1
    assert "could not read file" in caplog.text


def test_invalid_image_is_reported(tmp_path, caplog):
    plain = tmp_path / "plain.txt"
    plain.write_text("not an image", encoding="utf-8")
    with caplog.at_level(logging.ERROR):
        failures = main([plain])
    assert failures == 1
    assert "is not a valid image" in caplog.text
    assert not (tmp_path / "plain_frame.svg").exists()


def test_failure_does_not_stop_batch(tmp_path, caplog):
    plain = tmp_path / "plain.txt"
    plain.write_text("not an image", encoding="utf-8")
    image = _make_image(tmp_path / "image.jpg")
    with caplog.at_level(logging.ERROR):
        failures = main([plain, tmp_path / "missing.jpg", image])
    assert failures == 2
    assert (tmp_path / "image_frame.svg").exists()


def test_unknown_template_fails_every_file(tmp_path, caplog):
    image = _make_image(tmp_path / "image.jpg")
    with caplog.at_level(logging.ERROR):
        failures = main([image], template_name="fancy")
    assert failures == 1
    assert "unknown template" in caplog.text
    assert not (tmp_path / "image_frame.svg").exists()


def test_missing_font_falls_back(tmp_path, caplog):
    image = _make_image(tmp_path / "image.jpg")
    with caplog.at_level(logging.WARNING):
        assert main([image], font_path=str(tmp_path / "nope.ttf")) == 0
    assert "not found" in caplog.text
    assert "Helvetica" in (tmp_path / "image_frame.svg").read_text(encoding="utf-8")


def test_cli_run(tmp_path):
    image = _make_image(tmp_path / "image.jpg")
    assert makeFrames.run([str(image), "-r", "4k", "--height", "60", "--inset"]) == 0
    assert (tmp_path / "image_frame.svg").exists()


def test_cli_succeeds_when_files_fail(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        assert makeFrames.run([str(tmp_path / "missing.jpg")]) == 0
    assert "could not read file" in caplog.text


def test_cli_arguments():
    args = makeFrames.parse_args(["a.jpg", "b.jpg", "-p", "-r", "UHD", "--format", "pdf", "-vv"])
    assert [str(p) for p in args.paths] == ["a.jpg", "b.jpg"]
    assert args.portrait and not args.inset
    assert args.resolution == "UHD"
    assert args.frame_height == 40
    assert args.output_format == "pdf"
    assert args.template == "default"


def test_log_levels():
    assert makeFrames.log_level(0, 0) == logging.WARNING
    assert makeFrames.log_level(1, 0) == logging.INFO
    assert makeFrames.log_level(2, 0) == logging.DEBUG
    assert makeFrames.log_level(5, 0) == logging.DEBUG
    assert makeFrames.log_level(0, 1) == logging.ERROR
    assert makeFrames.log_level(0, 3) == logging.CRITICAL


def test_strip_height_must_fit_display(tmp_path, caplog):
    image = _make_image(tmp_path / "image.jpg")
    with caplog.at_level(logging.ERROR):
        failures = main([image], FrameOptions(frame_height=2000))
    assert failures == 1
    assert "strip height 2000" in caplog.text
    assert not (tmp_path / "image_frame.svg").exists()


def test_strip_height_must_be_positive(tmp_path, caplog):
    image = _make_image(tmp_path / "image.jpg")
    with caplog.at_level(logging.ERROR):
        assert main([image], FrameOptions(frame_height=0, inset=True)) == 1
    assert not (tmp_path / "image_frame.svg").exists()


def test_portrait_display_allows_taller_strip(tmp_path):
    image = _make_image(tmp_path / "image.jpg")
    assert main([image], FrameOptions(frame_height=1500, portrait=True)) == 0
    assert (tmp_path / "image_frame.svg").exists()


def test_cli_rejects_non_positive_height(capsys):
    with pytest.raises(SystemExit) as exc_info:
        makeFrames.parse_args(["a.jpg", "--height", "-5"])
    assert exc_info.value.code == 2
    assert "positive number of pixels" in capsys.readouterr().err
