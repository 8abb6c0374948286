"""
Test the command-line entry point.
"""

import pytest

from lenscraft.cli.main import build_parser, main, options_from_args


class TestParser:

    def test_defaults(self, tmp_path):
        args = build_parser().parse_args(["-i", str(tmp_path / "a.png"), "-o", str(tmp_path / "b.png")])
        options = options_from_args(args)
        assert options.brightness == 1.0
        assert options.contrast == 0
        assert options.blur == 0
        assert options.sharpen == 0
        assert options.resize == ""
        assert not options.edge_detection

    def test_all_flags(self, tmp_path):
        args = build_parser().parse_args([
            "--input", "in", "--output", "out",
            "--brightness", "1.5", "--contrast", "-20", "--blur", "3", "--sharpen", "0.4",
            "--grayscale", "--sepia", "--edge", "--quality", "75", "--resize", "64x48",
            "--workers", "2", "--recursive",
        ])
        options = options_from_args(args)
        assert options.brightness == 1.5
        assert options.contrast == -20
        assert options.blur == 3
        assert options.sharpen == 0.4
        assert options.grayscale and options.sepia and options.edge_detection
        assert options.quality == 75
        assert options.resize_dimensions == (64, 48)
        assert args.workers == 2 and args.recursive

    def test_input_and_output_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--grayscale"])


class TestMain:

    def test_single_file(self, write_png, gradient_pixels, tmp_path, capsys):
        source = write_png("in.png", gradient_pixels(10, 10))
        code = main(["-i", str(source), "-o", str(tmp_path / "out.png"), "--sepia", "--resize", "5x5"])

        assert code == 0
        assert (tmp_path / "out.png").is_file()
        assert "File processed successfully!" in capsys.readouterr().out

    def test_missing_input(self, tmp_path):
        assert main(["-i", str(tmp_path / "ghost.png"), "-o", str(tmp_path / "out.png")]) == 1

    def test_single_file_failure(self, tmp_path):
        bad = tmp_path / "bad.png"
        bad.write_bytes(b"xx")
        assert main(["-i", str(bad), "-o", str(tmp_path / "out.png")]) == 1

    def test_batch(self, write_png, gradient_pixels, tmp_path, capsys):
        write_png("in/a.png", gradient_pixels(6, 6))
        write_png("in/b.png", gradient_pixels(6, 6))

        code = main(["-i", str(tmp_path / "in"), "-o", str(tmp_path / "out"), "--blur", "1"])

        assert code == 0
        assert (tmp_path / "out" / "a.png").is_file()
        assert (tmp_path / "out" / "b.png").is_file()
        out = capsys.readouterr().out
        assert "Processed: a.png ->" in out
        assert "Batch processing completed successfully!" in out

    def test_batch_with_failure(self, write_png, gradient_pixels, tmp_path):
        write_png("in/a.png", gradient_pixels(6, 6))
        (tmp_path / "in" / "z.png").write_bytes(b"broken")

        code = main(["-i", str(tmp_path / "in"), "-o", str(tmp_path / "out")])

        assert code == 1
        assert (tmp_path / "out" / "a.png").is_file()

    def test_batch_output_uncreatable(self, write_png, gradient_pixels, tmp_path):
        write_png("in/a.png", gradient_pixels(6, 6))
        (tmp_path / "blocker").write_text("file")
        assert main(["-i", str(tmp_path / "in"), "-o", str(tmp_path / "blocker")]) == 1
