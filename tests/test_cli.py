import json

from scripts.build_pdf import main


class TestBuildPdfScript:
    def test_exports_text_file(self, tmp_path):
        source = tmp_path / "notes.txt"
        source.write_text("Hello world.\n\nAnother paragraph here.", encoding="utf-8")
        output = tmp_path / "out" / "notes.pdf"
        code = main(
            ["-i", str(source), "-o", str(output), "--bionic", "--title", "Notes"]
        )
        assert code == 0
        assert output.read_bytes().startswith(b"%PDF")

    def test_geometry_file(self, tmp_path):
        source = tmp_path / "notes.txt"
        source.write_text("Short text.", encoding="utf-8")
        geometry = tmp_path / "geometry.json"
        geometry.write_text(
            json.dumps({"margin_left": 30, "font": {"size": 11}}), encoding="utf-8"
        )
        output = tmp_path / "notes.pdf"
        assert main(["-i", str(source), "-o", str(output), "--geometry", str(geometry)]) == 0
        assert output.exists()

    def test_bad_geometry_reports_failure(self, tmp_path):
        source = tmp_path / "notes.txt"
        source.write_text("Short text.", encoding="utf-8")
        geometry = tmp_path / "geometry.json"
        geometry.write_text(json.dumps({"gutter": 4}), encoding="utf-8")
        output = tmp_path / "notes.pdf"
        assert main(["-i", str(source), "-o", str(output), "--geometry", str(geometry)]) == 1
        assert not output.exists()

    def test_page_limit_reports_failure(self, tmp_path):
        source = tmp_path / "long.txt"
        source.write_text("\n\n".join(["word " * 200] * 20), encoding="utf-8")
        output = tmp_path / "long.pdf"
        assert main(["-i", str(source), "-o", str(output), "--max-pages", "1"]) == 1
        assert not output.exists()

    def test_malformed_geometry_json(self, tmp_path):
        source = tmp_path / "notes.txt"
        source.write_text("Short text.", encoding="utf-8")
        geometry = tmp_path / "geometry.json"
        geometry.write_text("{margin_left: 30", encoding="utf-8")
        output = tmp_path / "notes.pdf"
        assert main(["-i", str(source), "-o", str(output), "--geometry", str(geometry)]) == 1
        assert not output.exists()

    def test_geometry_must_be_an_object(self, tmp_path):
        source = tmp_path / "notes.txt"
        source.write_text("Short text.", encoding="utf-8")
        geometry = tmp_path / "geometry.json"
        geometry.write_text("[1, 2]", encoding="utf-8")
        output = tmp_path / "notes.pdf"
        assert main(["-i", str(source), "-o", str(output), "--geometry", str(geometry)]) == 1

    def test_missing_input_file(self, tmp_path):
        output = tmp_path / "notes.pdf"
        assert main(["-i", str(tmp_path / "absent.txt"), "-o", str(output)]) == 1
        assert not output.exists()

    def test_missing_font_file(self, tmp_path):
        source = tmp_path / "notes.txt"
        source.write_text("Short text.", encoding="utf-8")
        output = tmp_path / "notes.pdf"
        code = main(
            ["-i", str(source), "-o", str(output), "--font-file", str(tmp_path / "absent.ttf")]
        )
        assert code == 1
        assert not output.exists()

    def test_missing_logo(self, tmp_path):
        source = tmp_path / "notes.txt"
        source.write_text("Short text.", encoding="utf-8")
        output = tmp_path / "notes.pdf"
        code = main(["-i", str(source), "-o", str(output), "--logo", str(tmp_path / "logo.png")])
        assert code == 1
        assert not output.exists()

    def test_unreadable_logo(self, tmp_path):
        source = tmp_path / "notes.txt"
        source.write_text("Short text.", encoding="utf-8")
        logo = tmp_path / "logo.png"
        logo.write_bytes(b"not an image")
        output = tmp_path / "notes.pdf"
        assert main(["-i", str(source), "-o", str(output), "--logo", str(logo)]) == 1
