import pytest

from gpasim import GpaSimulator
from gpasim.cli import main, run_command, resolve_course, resolve_semester


@pytest.fixture
def simulator(sample_page):
    sim = GpaSimulator()
    sim.load_document(sample_page)
    return sim


def test_resolve_references(simulator):
    assert resolve_semester(simulator, "2") == "semester-2"
    assert resolve_semester(simulator, "semester-1") == "semester-1"
    assert resolve_semester(simulator, "3") is None
    assert resolve_course(simulator, "2.3") == "semester-2-course-2"
    assert resolve_course(simulator, "semester-1-course-1") == "semester-1-course-1"
    assert resolve_course(simulator, "1.9") is None
    assert resolve_course(simulator, "1.x") is None
    assert resolve_course(simulator, "nope") is None


def test_commands_drive_the_overlay(simulator, capsys):
    assert run_command(simulator, "grade 1.1 f")
    assert simulator.edits["semester-1-course-0"].new_letter_grade == "F"
    assert run_command(simulator, "exclude 1.2")
    assert run_command(simulator, "undo 1.1")
    assert list(simulator.edits) == ["semester-1-course-1"]
    assert run_command(simulator, "include 1.2")
    assert not simulator.has_edits

    run_command(simulator, "all 2 off")
    assert len(simulator.edits) == 2
    run_command(simulator, "reset")
    assert not simulator.has_edits
    assert "GPA SUMMARY" in capsys.readouterr().out


def test_bad_commands_print_errors(simulator, capsys):
    run_command(simulator, "grade 1.1 Z")
    run_command(simulator, "grade 9.9 A")
    run_command(simulator, "all 1 maybe")
    run_command(simulator, "frobnicate")
    out = capsys.readouterr().out
    assert "Grade must be one of" in out
    assert "No course '9.9'" in out
    assert "Usage: all" in out
    assert "Unknown command" in out
    assert not simulator.has_edits


def test_quit(simulator):
    assert run_command(simulator, "quit") is False
    assert run_command(simulator, "") is True


def test_main_with_file(tmp_path, sample_page, monkeypatch, capsys):
    path = tmp_path / "grades.html"
    path.write_text(sample_page, encoding="utf-8")
    commands = iter(["grade 1.1 F", "edits", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(commands))

    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Pending edits" in out
    assert "grade A → F" in out


def test_main_gives_up_on_bad_file(tmp_path, monkeypatch, capsys):
    path = tmp_path / "photo.html"
    path.write_bytes(b"\x89PNG\r\n\x1a\n")

    def no_more_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_more_input)
    assert main([str(path)]) == 1
    assert "not a VKU transcript page" in capsys.readouterr().out


def test_non_decimal_digits_are_not_references(simulator, capsys):
    assert resolve_semester(simulator, "²") is None
    assert resolve_course(simulator, "1.²") is None
    assert run_command(simulator, "all ² on") is True
    assert "No semester '²'" in capsys.readouterr().out
    assert not simulator.has_edits


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert "usage: gpasim" in out
    assert "--verbose" in out


def test_main_verbose_flag_with_path(tmp_path, sample_page, monkeypatch):
    path = tmp_path / "grades.html"
    path.write_text(sample_page, encoding="utf-8")
    monkeypatch.setattr("builtins.input", lambda prompt="": "quit")
    assert main(["-v", str(path)]) == 0
