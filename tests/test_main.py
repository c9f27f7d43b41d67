import io
import sys

from warcaby.main import main


def test_unknown_mode_is_rejected(capsys):
    assert main(["xyz"]) == 1
    err = capsys.readouterr().err
    assert "Nieznany tryb: xyz. Dostępne tryby: cli, gui." in err


def test_cli_plays_until_input_ends(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n5 0 4 1\n"))
    assert main(["cli"]) == 1
    out = capsys.readouterr().out
    assert "Wybierz poziom trudności:" in out
    assert "  0 1 2 3 4 5 6 7" in out
    assert "AI wykonało ruch" in out


def test_cli_without_input_stops_after_menu(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main(["cli"]) == 1
    captured = capsys.readouterr()
    assert "Podaj ruch (srcRow srcCol dstRow dstCol): " in captured.out
    assert "AI wykonało ruch" not in captured.out


def test_gui_failure_reports_error(monkeypatch, capsys):
    monkeypatch.setenv("SDL_VIDEODRIVER", "no_such_video_driver")
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main(["gui"]) == 1
    assert "Błąd inicjalizacji GUI (SDL)." in capsys.readouterr().err