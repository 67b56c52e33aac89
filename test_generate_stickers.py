# test_generate_stickers.py
import logging

import pytest

from generate_stickers import main
from sticker_config import load_settings, parse_workers
from sticker_errors import ConfigError


@pytest.fixture(autouse=True)
def in_tmp(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def test_all_valid_input(tmp_path, write_xlsx, capsys):
    write_xlsx([
        ["012345678901234", "Widget"],
        ["987654321098765", "Gadget"],
    ])

    assert main([]) == 0

    assert capsys.readouterr().out.strip() == "Stickers generated!"
    assert sorted(p.name for p in (tmp_path / "out").iterdir()) == ["109876.png", "890123.png"]


def test_rerun_overwrites(tmp_path, write_xlsx):
    write_xlsx([["012345678901234", "Widget"]])

    assert main([]) == 0
    first = (tmp_path / "out" / "890123.png").read_bytes()
    assert main([]) == 0

    assert (tmp_path / "out" / "890123.png").read_bytes() == first
    assert len(list((tmp_path / "out").iterdir())) == 1


def test_invalid_entry_fails_run_but_keeps_valid_output(tmp_path, write_xlsx, capsys, caplog):
    write_xlsx([
        ["012345678901234", "Widget"],
        ["A", "Bad"],
    ])

    with caplog.at_level(logging.ERROR):
        assert main([]) == 1

    assert "Stickers generated!" not in capsys.readouterr().out
    # caption is code[8:-1] of "012345678901234"
    assert (tmp_path / "out" / "890123.png").exists()
    assert "'A'" in caplog.text
    assert "Failed: A" in caplog.text


def test_missing_input(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        assert main([]) == 1
    assert "data.xlsx" in caplog.text
    # out folder is created before the input is read
    assert (tmp_path / "out").is_dir()


def test_missing_font(tmp_path, write_xlsx):
    write_xlsx([["012345678901234", "Widget"]])
    assert main(["--font", str(tmp_path / "missing.ttf")]) == 1


def test_cli_paths(tmp_path, write_xlsx):
    src = write_xlsx([["012345678901234", "Widget"]], name="products.xlsx")

    assert main(["--input", str(src), "--out", str(tmp_path / "stickers"), "--workers", "2"]) == 0
    assert (tmp_path / "stickers" / "890123.png").exists()


def test_env_settings(tmp_path, write_xlsx, monkeypatch):
    src = write_xlsx([["012345678901234", "Widget"]], name="env.xlsx")
    monkeypatch.setenv("STICKER_INPUT", str(src))
    monkeypatch.setenv("STICKER_OUT_DIR", str(tmp_path / "env_out"))
    monkeypatch.setenv("STICKER_WORKERS", "2")

    settings = load_settings()
    assert settings.input_path == src
    assert settings.workers == 2

    assert main([]) == 0
    assert (tmp_path / "env_out" / "890123.png").exists()


def test_bad_worker_count(write_xlsx):
    write_xlsx([["012345678901234", "Widget"]])
    assert main(["--workers", "zero"]) == 1


@pytest.mark.parametrize("raw", ["0", "-2", "abc"])
def test_parse_workers_rejects(raw):
    with pytest.raises(ConfigError):
        parse_workers(raw)


def test_parse_workers():
    assert parse_workers(None) is None
    assert parse_workers("") is None
    assert parse_workers(" 4 ") == 4
