"""Tests for the gleamx command line driver."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from gleamx import Environment, __version__
from gleamx.cli import main

_TEMPLATE = "{> with name as String\nHello {{ name }}"


def _expected(template: Path, generator_name: str = "gleamx") -> str:
    source = template.read_text("utf-8")
    return Environment(generator_name=generator_name).compile_source(source, template.as_posix())


@pytest.fixture
def src(tmp_path: Path) -> Path:
    root = tmp_path / "src"
    (root / "pages").mkdir(parents=True)
    (root / "pages" / "home.gleamx").write_text(_TEMPLATE, "utf-8")
    (root / "layout.gleamx").write_text("{> pub fn header()\n<h1>gleamx</h1>\n{> endfn\n", "utf-8")
    return root


class TestWrite:
    def test_writes_sibling_gleam_files(self, src: Path) -> None:
        assert main([str(src)]) == 0
        for name in ("pages/home", "layout"):
            template = src / f"{name}.gleamx"
            output = src / f"{name}.gleam"
            assert output.read_text("utf-8") == _expected(template)

    def test_single_file(self, src: Path) -> None:
        template = src / "pages" / "home.gleamx"
        assert main([str(template)]) == 0
        assert (src / "pages" / "home.gleam").is_file()
        assert not (src / "layout.gleam").exists()

    def test_generator_name(self, src: Path) -> None:
        template = src / "layout.gleamx"
        assert main(["--generator-name", "build.sh", str(template)]) == 0
        output = (src / "layout.gleam").read_text("utf-8")
        assert output == _expected(template, "build.sh")
        assert output.startswith("// DO NOT EDIT: Code generated by build.sh from ")

    def test_logs_written_files(self, src: Path, caplog) -> None:
        caplog.set_level(logging.INFO, logger="gleamx")
        main([str(src / "layout.gleamx")])
        assert "Wrote " in caplog.text

    def test_default_path_is_src(self, src: Path, monkeypatch) -> None:
        monkeypatch.chdir(src.parent)
        assert main([]) == 0
        assert (src / "layout.gleam").is_file()


class TestStdout:
    def test_prints_instead_of_writing(self, src: Path, capsys) -> None:
        template = src / "pages" / "home.gleamx"
        assert main(["--stdout", str(template)]) == 0
        assert capsys.readouterr().out == _expected(template)
        assert not (src / "pages" / "home.gleam").exists()


class TestCheck:
    def test_missing_output_fails(self, src: Path) -> None:
        assert main(["--check", str(src)]) == 1
        assert not (src / "layout.gleam").exists()

    def test_up_to_date(self, src: Path) -> None:
        assert main([str(src)]) == 0
        assert main(["--check", str(src)]) == 0

    def test_stale_output_fails(self, src: Path, caplog) -> None:
        assert main([str(src)]) == 0
        (src / "layout.gleamx").write_text("changed", "utf-8")
        assert main(["--check", str(src)]) == 1
        assert "is out of date with" in caplog.text

    def test_stdout_and_check_are_exclusive(self, src: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--stdout", "--check", str(src)])
        assert exc_info.value.code == 2


class TestErrors:
    def test_syntax_error(self, src: Path, capsys) -> None:
        (src / "broken.gleamx").write_text("Hello {{ name", "utf-8")
        assert main([str(src)]) == 1
        err = capsys.readouterr().err
        assert "GX-LEX-001: Unclosed expression: expected '}}'" in err
        assert "broken.gleamx:1:6" in err

    def test_render_error_has_snippet(self, src: Path, capsys) -> None:
        (src / "dup.gleamx").write_text("{> with a as Int\n{> with a as Int\n", "utf-8")
        assert main([str(src / "dup.gleamx")]) == 1
        err = capsys.readouterr().err
        assert "GX-REN-001: Duplicate parameter name 'a'" in err
        assert "dup.gleamx:2:0" in err
        assert "Hint:" in err

    def test_one_failure_does_not_stop_others(self, src: Path) -> None:
        (src / "broken.gleamx").write_text("{% if a %}", "utf-8")
        assert main([str(src)]) == 1
        assert (src / "layout.gleam").is_file()
        assert (src / "pages" / "home.gleam").is_file()
        assert not (src / "broken.gleam").exists()

    def test_undecodable_template(self, src: Path, capsys) -> None:
        (src / "binary.gleamx").write_bytes(b"\xff\xfe bad")
        assert main([str(src)]) == 1
        err = capsys.readouterr().err
        assert "GX-TPL-002: Cannot decode" in err
        assert "binary.gleamx as utf-8" in err
        assert (src / "layout.gleam").is_file()
        assert not (src / "binary.gleam").exists()

    def test_undecodable_single_file(self, tmp_path: Path, capsys) -> None:
        template = tmp_path / "binary.gleamx"
        template.write_bytes(b"\x80")
        assert main(["--stdout", str(template)]) == 1
        assert "GX-TPL-002" in capsys.readouterr().err

    def test_missing_path(self, tmp_path: Path, capsys) -> None:
        assert main([str(tmp_path / "absent")]) == 1
        assert "GX-TPL-001: No such template file or directory" in capsys.readouterr().err

    def test_empty_directory(self, tmp_path: Path, caplog) -> None:
        assert main([str(tmp_path)]) == 0
        assert "No templates found" in caplog.text


class TestVersion:
    def test_version(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert capsys.readouterr().out.strip() == f"gleamx {__version__}"
