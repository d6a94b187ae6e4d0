"""
CLI tests: stdin, file and preset sources, sentinel output and exit status.
"""

import io

import pytest

from orienteering import cli


def test_cli_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5 3\nS.#..\n.@#.@\n....G\n"))

    code = cli.main([])

    assert code == 0
    assert capsys.readouterr().out.strip() == "8"


def test_cli_prints_sentinel_when_unsolvable(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 1\nS#G\n"))

    code = cli.main([])

    assert code == 0
    assert capsys.readouterr().out.strip() == "-1"


def test_cli_map_file_with_order(tmp_path, capsys):
    path = tmp_path / "map.txt"
    path.write_text("3 3\nS.@\n...\n..G\n", encoding="utf-8")

    code = cli.main(["--map", str(path), "--show-order"])

    lines = capsys.readouterr().out.strip().splitlines()
    assert code == 0
    assert lines[0] == "4"
    assert lines[1] == "S -> P(0, 2) -> G"


def test_cli_preset_course(capsys):
    code = cli.main(["--course", "dead_end_checkpoints"])

    assert code == 0
    assert capsys.readouterr().out.strip() == "9"


def test_cli_lists_courses(capsys):
    code = cli.main(["--list-courses"])

    out = capsys.readouterr().out
    assert code == 0
    assert "straight_line" in out


def test_cli_invalid_input_exit_status(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 1\nS.G\n"))

    code = cli.main([])

    captured = capsys.readouterr()
    assert code == 2
    assert "row_length_mismatch" in captured.err
    assert captured.out == ""


def test_cli_unknown_course(capsys):
    code = cli.main(["--course", "nowhere"])

    assert code == 2
    assert "unknown_course" in capsys.readouterr().err


def test_cli_invalid_input_reported_once(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 1\nS.G\n"))

    code = cli.main([])

    assert code == 2
    assert capsys.readouterr().err.count("row_length_mismatch") == 1


def test_cli_missing_map_file(tmp_path, capsys):
    code = cli.main(["--map", str(tmp_path / "nowhere.txt")])

    captured = capsys.readouterr()
    assert code == 2
    assert "bad_map_text" in captured.err
    assert captured.out == ""


def test_cli_map_file_not_utf8(tmp_path, capsys):
    path = tmp_path / "map.txt"
    path.write_bytes(b"3 1\nS\xffG\n")

    code = cli.main(["--map", str(path)])

    assert code == 2
    assert "bad_map_text" in capsys.readouterr().err


@pytest.mark.parametrize("flags", [["--course", "straight_line"], ["--list-courses"]])
def test_cli_missing_courses_file(tmp_path, capsys, flags):
    code = cli.main([*flags, "--courses-file", str(tmp_path / "missing.yaml")])

    captured = capsys.readouterr()
    assert code == 2
    assert "bad_course_file" in captured.err
    assert captured.out == ""


@pytest.mark.parametrize(
    "payload",
    [
        "courses: [unclosed\n",
        "courses:\n  half:\n    title: half\n    rows: [\"S.G\"]\n",
        "- just\n- a list\n",
    ],
)
@pytest.mark.parametrize("flags", [["--course", "half"], ["--list-courses"]])
def test_cli_malformed_courses_file(tmp_path, capsys, payload, flags):
    path = tmp_path / "courses.yaml"
    path.write_text(payload, encoding="utf-8")

    code = cli.main([*flags, "--courses-file", str(path)])

    assert code == 2
    assert "bad_course_file" in capsys.readouterr().err
