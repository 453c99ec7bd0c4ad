from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest
from loguru import logger

from ipgrep.cli import main

ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture(autouse=True)
def _plain_env(monkeypatch):
    monkeypatch.delenv("IPGREP_LOG", raising=False)
    monkeypatch.delenv("IPGREP_DEBUG", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")


@pytest.fixture
def write(tmp_path):
    def _write(name: str, data: bytes) -> str:
        p = tmp_path / name
        p.write_bytes(data)
        return str(p)
    return _write


@pytest.mark.parametrize("argv", [[], ["-h"], ["-help"], ["--help"], ["--help", "whatever.txt"]])
def test_help_goes_to_stderr(argv, capsys):
    assert main(argv) == 0
    out, err = capsys.readouterr()
    assert out == ""
    assert "usage: ipgrep [file ...]" in err


def test_results_per_file(write, capsys):
    a = write("a.txt", b"10.10.10.2 https://webserver.com\n")
    b = write("b.json", b'{"ip": "172.16.2.84"}\n')
    assert main([a, b]) == 0
    out, err = capsys.readouterr()
    assert out == (
        f"# results for {a}:\n10.10.10.2\n\n"
        f"# results for {b}:\n172.16.2.84\n\n"
    )
    assert err == ""


def test_file_without_addresses_prints_empty_block(write, capsys):
    p = write("quote.txt", b"There's no place like 127.0.0.1.")
    assert main([p]) == 0
    out, _ = capsys.readouterr()
    assert out == f"# results for {p}:\n\n"


def test_errors_follow_results(write, capsys):
    empty = write("empty.txt", b"")
    good = write("log.txt", b'log -> time=13:10, event=foo, addr=192.168.0.2, desc="a foo went bar"')
    assert main([empty, good]) == 0
    out, err = capsys.readouterr()
    assert out == f"# results for {good}:\n192.168.0.2\n\n"
    assert "# errors:" in err
    assert f"ipgrep: error: {empty}: empty file" in err
    assert err.index("# errors:") < err.index("empty file")


def test_unopenable_source_aborts_without_output(write, tmp_path, capsys):
    good = write("good.txt", b"8.8.8.8")
    missing = str(tmp_path / "missing.txt")
    assert main([good, missing]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert f"ipgrep: error: {missing}: No such file or directory" in err


def test_double_dash_ends_options(write, capsys):
    p = write("a.txt", b"::1")
    assert main(["--", p]) == 0
    out, _ = capsys.readouterr()
    assert out == f"# results for {p}:\n::1\n\n"


def test_log_file_written_when_configured(write, tmp_path, monkeypatch, capsys):
    log_path = tmp_path / "ipgrep.log"
    monkeypatch.setenv("IPGREP_LOG", str(log_path))
    monkeypatch.setenv("IPGREP_DEBUG", "yes")
    p = write("a.txt", b"1.2.3.4")
    try:
        assert main([p]) == 0
    finally:
        logger.remove()
    text = log_path.read_text(encoding="utf-8")
    assert "Logger initialized" in text
    assert "1 addresses" in text
    out, err = capsys.readouterr()
    assert out == f"# results for {p}:\n1.2.3.4\n\n"
    assert err == ""


def test_module_entry_point(write):
    p = write("a.txt", b"addr=2001:DB8::1;")
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(ROOT), env.get("PYTHONPATH")]))
    proc = subprocess.run(
        [sys.executable, "-m", "ipgrep", p],
        check=False, capture_output=True, text=True, env=env,
    )
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout == f"# results for {p}:\n2001:db8::1\n\n"


def test_module_entry_point_missing_file(tmp_path):
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(ROOT), env.get("PYTHONPATH")]))
    proc = subprocess.run(
        [sys.executable, "-m", "ipgrep", str(tmp_path / "nope")],
        check=False, capture_output=True, text=True, env=env,
    )
    assert proc.returncode == 1
    assert proc.stdout == ""
    assert "ipgrep: error:" in proc.stderr


def test_dash_prefixed_file_names_are_sources(write, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    write("a.txt", b"10.0.0.1")
    write("-x.txt", b"10.0.0.2")
    assert main(["a.txt", "-x.txt"]) == 0
    out, err = capsys.readouterr()
    assert out == "# results for a.txt:\n10.0.0.1\n\n# results for -x.txt:\n10.0.0.2\n\n"
    assert err == ""


def test_help_flag_after_first_argument_is_a_source(write, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    write("a.txt", b"10.0.0.1")
    assert main(["a.txt", "-h"]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert "ipgrep: error: -h: No such file or directory" in err
    assert "usage:" not in err


def test_leading_double_dash_allows_dash_names(write, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    write("-h", b"::ffff:192.0.2.1")
    assert main(["--", "-h"]) == 0
    out, _ = capsys.readouterr()
    assert out == "# results for -h:\n192.0.2.1\n\n"
