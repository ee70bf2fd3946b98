from __future__ import annotations

import argparse
import logging
from pathlib import Path

import pytest

from xmlc._log import LOGGER_NAME
from xmlc._settings import load_settings
from xmlc.commands import compile as cmd_compile


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("XMLC_OUTPUT_DIR", "XMLC_LOG_FILE", "XMLC_JOBS", "XMLC_MATCH", "XMLC_CDATA"):
        # setenv rejestruje stan początkowy, więc wartości z .env zostaną cofnięte
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def _run(argv: list[str]) -> None:
    parser = argparse.ArgumentParser(prog="xmlc")
    cmd_compile.add_arguments(parser)
    args = parser.parse_args(argv)
    args.func(args)


def test_compile_writes_outputs_and_processing_log(content_root, tmp_path: Path) -> None:
    root = content_root({
        "KFM/1_main.xml": '<m>\n  <!-- #include file="Wolf\\a.xml" -->\n  <!-- #include file="gone.xml" -->\n</m>',
        "Wolf/a.xml": "<a/>",
    })
    log_file = tmp_path / "processing.log"
    _run([str(root), "--log-file", str(log_file), "--match", r"^\d_", "--jobs", "1"])

    assert (root / "Compiled" / "KFM" / "1_main.xml").read_text(encoding="utf-8") == "<m>\n  <a/>\n</m>"

    log_text = log_file.read_text(encoding="utf-8")
    assert f"Starting processing in {root}" in log_text
    assert "]  Processed: KFM/1_main.xml" in log_text
    assert "]  Included: Wolf/a.xml" in log_text
    assert "]  Missing include: gone.xml" in log_text
    assert "Processing complete. Compiled XMLs saved in" in log_text
    assert log_text.index("Processed:") < log_text.index("Included:")


def test_zero_arguments_use_current_directory(content_root, tmp_path: Path, monkeypatch) -> None:
    root = content_root({"KFM/1_a.xml": "<a/>"})
    monkeypatch.chdir(root)
    _run(["--log-file", str(tmp_path / "run.log"), "--out", "build"])
    assert (root / "build" / "KFM" / "1_a.xml").read_text(encoding="utf-8") == "<a/>"


def test_missing_root_exits_with_error(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as info:
        _run([str(tmp_path / "nope"), "--log-file", str(tmp_path / "x.log")])
    assert info.value.code == 1


def test_failed_document_gives_nonzero_exit(content_root, tmp_path: Path) -> None:
    root = content_root({"KFM/2_ok.xml": "<ok/>"})
    (root / "KFM" / "1_bad.xml").write_bytes(b"\xff\xfe broken")
    log_file = tmp_path / "processing.log"
    with pytest.raises(SystemExit) as info:
        _run([str(root), "--log-file", str(log_file), "--show"])
    assert info.value.code == 1
    assert (root / "Compiled" / "KFM" / "2_ok.xml").exists()
    assert "Error processing KFM/1_bad.xml" in log_file.read_text(encoding="utf-8")


def test_invalid_match_pattern_exits(content_root, tmp_path: Path) -> None:
    root = content_root({})
    with pytest.raises(SystemExit):
        _run([str(root), "--match", "(", "--log-file", str(tmp_path / "x.log")])


def test_settings_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("XMLC_OUTPUT_DIR", "dist")
    monkeypatch.setenv("XMLC_JOBS", "3")
    monkeypatch.setenv("XMLC_CDATA", "off")
    settings = load_settings()
    assert settings.output_dir == "dist"
    assert settings.jobs == 3
    assert settings.cdata is False
    assert settings.override(jobs=None, output_dir="x").output_dir == "x"
    assert settings.override(jobs=None).jobs == 3


def test_dotenv_in_content_root_configures_run(content_root, tmp_path: Path) -> None:
    root = content_root({
        "KFM/1_a.xml": "<a/>",
        ".env": "XMLC_OUTPUT_DIR=dist\nXMLC_JOBS=1\n",
    })
    _run([str(root), "--log-file", str(tmp_path / "run.log")])
    assert (root / "dist" / "KFM" / "1_a.xml").exists()
    assert not (root / "Compiled").exists()


def test_output_dir_equal_to_root_exits(content_root, tmp_path: Path) -> None:
    source = '<m><!-- #include file="p.xml" --></m>'
    root = content_root({"KFM/1_a.xml": source, "p.xml": "<p/>"})
    with pytest.raises(SystemExit) as info:
        _run([str(root), "--out", ".", "--log-file", str(tmp_path / "x.log")])
    assert info.value.code == 1
    assert (root / "KFM" / "1_a.xml").read_text(encoding="utf-8") == source


def test_invalid_jobs_in_environment(monkeypatch) -> None:
    monkeypatch.setenv("XMLC_JOBS", "many")
    with pytest.raises(ValueError, match="XMLC_JOBS"):
        load_settings()


def test_invalid_jobs_in_environment_exits_from_command(content_root, tmp_path: Path, monkeypatch) -> None:
    root = content_root({"KFM/1_a.xml": "<a/>"})
    monkeypatch.setenv("XMLC_JOBS", "many")
    with pytest.raises(SystemExit) as info:
        _run([str(root), "--log-file", str(tmp_path / "x.log")])
    assert info.value.code == 1
