import builtins
import io

import pytest

from loxparse.cli import main, read_entire_file, run, run_file, run_prompt
from loxparse.parser import parse
from loxparse.printer import format_ast
from loxparse.scanner import scan_tokens


def _streams():
    return io.StringIO(), io.StringIO()


def _feed(monkeypatch, lines):
    items = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(items)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


def test_run_prints_tree():
    out, err = _streams()
    assert run("1 + 2 * 3", out, err) == 0
    expected = format_ast(parse(scan_tokens("1 + 2 * 3", io.StringIO())))
    assert out.getvalue() == expected + "\n"
    assert err.getvalue() == ""


def test_run_empty_source_prints_empty():
    out, err = _streams()
    assert run("", out, err) == 0
    assert out.getvalue() == "empty\n"


def test_run_trailing_token_reports_invalid_syntax():
    out, err = _streams()
    assert run("1 2", out, err) == 0
    assert err.getvalue() == "[line 1] Error: Invalid syntax: 2\n"
    assert out.getvalue() == ""


def test_run_trailing_keyword_reports_nothing():
    out, err = _streams()
    assert run("1 and", out, err) == 0
    assert out.getvalue() == ""
    assert err.getvalue() == ""


def test_run_unclosed_group_prints_empty():
    out, err = _streams()
    assert run("(1", out, err) == 0
    assert "Expect ')' after expression." in err.getvalue()
    assert out.getvalue() == "empty\n"


def test_run_unterminated_string_is_data_error():
    out, err = _streams()
    assert run('"abc', out, err) == 65
    assert out.getvalue() == ""


def test_run_stops_at_nul():
    out, err = _streams()
    run("nil\0 1 2", out, err)
    assert out.getvalue() == "nil\n"
    assert err.getvalue() == ""


def test_read_entire_file_round_trip(tmp_path):
    path = tmp_path / "script.lox"
    path.write_text("1 + 2\n(3)")
    assert read_entire_file(str(path)) == "1 + 2\n(3)"


def test_read_entire_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_entire_file(str(tmp_path / "nope"))


def test_run_file_exits_with_status(tmp_path, capsys):
    path = tmp_path / "script.lox"
    path.write_text("true")
    with pytest.raises(SystemExit) as info:
        run_file(str(path))
    assert info.value.code == 0
    assert capsys.readouterr().out == "true\n"


def test_run_file_missing_reports_path(tmp_path, capsys):
    missing = str(tmp_path / "missing.lox")
    with pytest.raises(SystemExit) as info:
        run_file(missing)
    assert info.value.code == 65
    assert capsys.readouterr().err.startswith(missing + ": ")


def test_main_usage_error(capsys):
    with pytest.raises(SystemExit) as info:
        main(["a", "b"])
    assert info.value.code == 64
    assert capsys.readouterr().out == "Usage: jlox [script]\n"


def test_main_with_script(tmp_path, capsys):
    path = tmp_path / "script.lox"
    path.write_text("nil")
    with pytest.raises(SystemExit) as info:
        main([str(path)])
    assert info.value.code == 0
    assert capsys.readouterr().out == "nil\n"


def test_run_prompt_runs_each_line(monkeypatch):
    _feed(monkeypatch, ["nil", "", "true"])
    out, err = _streams()
    run_prompt(out, err)
    assert out.getvalue() == "nil\nempty\ntrue\nexit\n"


def test_main_without_args_uses_prompt(monkeypatch, capsys):
    _feed(monkeypatch, [])
    assert main([]) == 0
    assert capsys.readouterr().out.endswith("exit\n")