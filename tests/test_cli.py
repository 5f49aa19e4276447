"""Tests for the command-line interface"""

import io

import pytest

import cli


def test_run_quiet(monkeypatch, capsys):
    monkeypatch.setattr('sys.stdin', io.StringIO("010\n001\n000\n"))

    assert cli.main(['run', '--quiet']) == 0

    out = capsys.readouterr().out
    assert "Enter row" not in out
    assert "Created a 3 x 3 matrix." in out
    assert "R = { (a, b), (b, c) }" in out
    assert "R* = { (a, b), (a, c), (b, c) }" in out


def test_run_interactive_prompts(monkeypatch, capsys):
    monkeypatch.setattr('sys.stdin', io.StringIO("1\n"))

    assert cli.main(['run']) == 0

    out = capsys.readouterr().out
    assert "entering the first row as 1010" in out
    assert "Enter row 1: " in out
    assert "R* = { (a, a) }" in out


def test_run_invalid_size(monkeypatch, capsys):
    monkeypatch.setattr('sys.stdin', io.StringIO("1111\n"))

    assert cli.main(['run', '--quiet', '--max-size', '3']) == 1

    captured = capsys.readouterr()
    assert "exceeds the maximum of 3" in captured.err
    assert "Created" not in captured.out


def test_run_empty_input(monkeypatch, capsys):
    monkeypatch.setattr('sys.stdin', io.StringIO(""))

    assert cli.main(['run', '--quiet']) == 1
    assert "must be positive" in capsys.readouterr().err


def test_command_required():
    with pytest.raises(SystemExit):
        cli.main([])


def test_serve_defaults():
    args = cli.build_parser().parse_args(['serve', '--port', '6000'])
    assert args.port == 6000
    assert args.debug is None
    assert args.func is cli.cmd_serve
