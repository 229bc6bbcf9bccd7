from __future__ import annotations

import io
import json

import pytest


def test_cli_sort_files(tmp_path, capsys, run_cli):
    data = tmp_path / "names.txt"
    data.write_text("file11.txt\nfile1.txt\nfile2.txt\n", encoding="utf-8")
    assert run_cli(["sort", str(data)]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "file1.txt",
        "file2.txt",
        "file11.txt",
    ]


def test_cli_sort_stdin(monkeypatch, capsys, run_cli):
    monkeypatch.setattr("sys.stdin", io.StringIO("a10\na9\na1\n"))
    assert run_cli(["sort"]) == 0
    assert capsys.readouterr().out == "a1\na9\na10\n"


def test_cli_sort_merges_several_sources(tmp_path, monkeypatch, capsys, run_cli):
    first = tmp_path / "one.txt"
    first.write_text("v2\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("v10\nv1\n"))
    assert run_cli(["sort", str(first), "-"]) == 0
    assert capsys.readouterr().out.splitlines() == ["v1", "v2", "v10"]


def test_cli_sort_reverse_unique_and_blank(tmp_path, capsys, run_cli):
    data = tmp_path / "names.txt"
    data.write_text("x7\n\nx007\nx10\n   \nx1\n", encoding="utf-8")
    assert run_cli(["sort", "-r", "-u", "--ignore-blank", str(data)]) == 0
    assert capsys.readouterr().out.splitlines() == ["x10", "x7", "x1"]


def test_cli_sort_output_file(tmp_path, capsys, run_cli):
    data = tmp_path / "names.txt"
    data.write_text("b2\nb10\nb1\n", encoding="utf-8")
    out = tmp_path / "out" / "sorted.txt"
    assert run_cli(["sort", str(data), "-o", str(out)]) == 0
    assert capsys.readouterr().out == ""
    assert out.read_text(encoding="utf-8") == "b1\nb2\nb10\n"


def test_cli_sort_settings_defaults_and_override(tmp_path, capsys, run_cli):
    settings = tmp_path / "settings.toml"
    settings.write_text("[sort]\nreverse = true\n", encoding="utf-8")
    data = tmp_path / "names.txt"
    data.write_text("n1\nn2\nn10\n", encoding="utf-8")

    assert run_cli(["--settings", str(settings), "sort", str(data)]) == 0
    assert capsys.readouterr().out.splitlines() == ["n10", "n2", "n1"]

    assert run_cli(["--settings", str(settings), "sort", "--no-reverse", str(data)]) == 0
    assert capsys.readouterr().out.splitlines() == ["n1", "n2", "n10"]


def test_cli_sort_missing_file(tmp_path, capsys, run_cli):
    assert run_cli(["sort", str(tmp_path / "absent.txt")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "cannot read input" in captured.err


def test_cli_invalid_settings(tmp_path, capsys, run_cli):
    settings = tmp_path / "settings.json"
    settings.write_text(json.dumps({"sort": {"bogus": 1}}), encoding="utf-8")
    assert run_cli(["--settings", str(settings), "compare", "a", "b"]) == 1
    assert "invalid settings" in capsys.readouterr().err


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        ("file2", "file11", "less"),
        ("file007.txt", "file7.txt", "equal"),
        ("banana", "apple", "greater"),
    ],
)
def test_cli_compare(capsys, run_cli, left, right, expected):
    assert run_cli(["compare", left, right]) == 0
    assert capsys.readouterr().out.strip() == expected


@pytest.mark.parametrize(
    ("left", "right", "code"),
    [("a7", "a07", 0), ("a1", "a2", 1), ("a10", "a2", 2)],
)
def test_cli_compare_exit_status(capsys, run_cli, left, right, code):
    assert run_cli(["compare", "--exit-status", left, right]) == code
    capsys.readouterr()


def test_cli_segments(capsys, run_cli):
    assert run_cli(["segments", "file007.txt"]) == 0
    assert json.loads(capsys.readouterr().out) == [
        {"kind": "text", "text": "file"},
        {"kind": "number", "text": "007"},
        {"kind": "text", "text": ".txt"},
    ]


def test_cli_log_level_and_log_dir(tmp_path, capsys, run_cli):
    settings = tmp_path / "settings.json"
    log_dir = tmp_path / "logs"
    settings.write_text(json.dumps({"log": {"directory": str(log_dir)}}), encoding="utf-8")
    assert run_cli(["--settings", str(settings), "--log-level", "info", "segments", "a1"]) == 0
    capsys.readouterr()
    data = tmp_path / "names.txt"
    data.write_text("a\n", encoding="utf-8")
    assert run_cli(["sort", str(data)]) == 0
    capsys.readouterr()
    entries = [
        json.loads(line)
        for line in (log_dir / "humanorder.jsonl").read_text(encoding="utf-8").splitlines()
    ]
    assert any(entry.get("event") == "SORT_DONE" for entry in entries)


def test_cli_requires_command(capsys, run_cli):
    with pytest.raises(SystemExit) as excinfo:
        run_cli([])
    assert excinfo.value.code == 2
    capsys.readouterr()


def test_cli_entry_point_is_the_function():
    from humanorder.cli import main
    from humanorder.cli.main import main as main_function

    assert main is main_function
    assert callable(main)


def test_cli_sort_keeps_lines_with_form_feeds_and_separators(monkeypatch, capsys, run_cli):
    monkeypatch.setattr("sys.stdin", io.StringIO("b2 page\x0cbreak\na10\u2028x\na1\n"))
    assert run_cli(["sort"]) == 0
    assert capsys.readouterr().out.split("\n") == [
        "a1",
        "a10\u2028x",
        "b2 page\x0cbreak",
        "",
    ]


def test_cli_sort_last_line_without_newline(tmp_path, capsys, run_cli):
    data = tmp_path / "names.txt"
    data.write_bytes(b"r10\r\nr9")
    assert run_cli(["sort", str(data)]) == 0
    assert capsys.readouterr().out == "r9\nr10\n"


def test_cli_unusable_log_directory(tmp_path, capsys, run_cli):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")
    settings = tmp_path / "settings.json"
    settings.write_text(
        json.dumps({"log": {"directory": str(blocker / "logs")}}), encoding="utf-8"
    )
    assert run_cli(["--settings", str(settings), "compare", "a", "b"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "humanorder: error: cannot set up log directory" in captured.err


def test_cli_compare_operands_starting_with_dash(capsys, run_cli):
    assert run_cli(["compare", "--", "-5", "3"]) == 0
    assert capsys.readouterr().out.strip() == "less"
