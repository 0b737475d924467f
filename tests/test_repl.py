import io

import pytest

from callisp.cmdline import main, run_file
from callisp.interpreter import Interpreter
from callisp.repl import repl


def scripted(lines):
    """An input() replacement feeding `lines`, then signalling EOF."""
    it = iter(lines)

    def _input(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    return _input


def run_repl(lines, interpreter=None):
    out, err = io.StringIO(), io.StringIO()
    repl(interpreter or Interpreter(), input_fn=scripted(lines), out=out, err=err, prompt="> ")
    return out.getvalue(), err.getvalue()


def test_repl_prints_values_but_not_unspecified():
    out, err = run_repl(["(define x 2)", "(+ x 1)", "'(a \"b\")"])
    assert out == '3\n(a "b")\n\n'
    assert err == ""


def test_repl_reports_errors_and_continues():
    out, err = run_repl(["(car 1)", "(+ 1", "(+ 1 1)"])
    assert "CallispUndefinedIdentifier: Undefined identifier: car" in err
    assert "CallispSyntaxError" in err
    assert out == "2\n\n"


def test_repl_skips_blank_lines():
    out, err = run_repl(["", "   ", "1"])
    assert out == "1\n\n"


def test_repl_keeps_state_on_interpreter():
    itp = Interpreter()
    run_repl(["(define kept 7)"], itp)
    assert itp.eval("kept") == 7


def test_repl_exit_propagates():
    with pytest.raises(SystemExit) as exc:
        run_repl(["(exit 4)", "1"])
    assert exc.value.code == 4


def test_repl_uses_configured_prompt(monkeypatch):
    monkeypatch.setenv("CALLISP_PROMPT", "lisp$ ")
    prompts = []

    def _input(prompt):
        prompts.append(prompt)
        raise EOFError

    repl(Interpreter(), input_fn=_input, out=io.StringIO(), err=io.StringIO())
    assert prompts == ["lisp$ "]


def test_run_file_success(tmp_path, capsys):
    src = tmp_path / "hello.lisp"
    src.write_text('(putstr "hello")\n', encoding="utf-8")
    assert run_file(str(src)) == 0
    assert capsys.readouterr().out == "hello\n"


def test_run_file_aborts_on_first_error(tmp_path, capsys):
    src = tmp_path / "bad.lisp"
    src.write_text('(putstr "before")\n(oops)\n(putstr "after")\n', encoding="utf-8")
    assert run_file(str(src)) == 1
    captured = capsys.readouterr()
    assert captured.out == "before\n"
    assert "Undefined identifier: oops" in captured.err


def test_run_file_reports_runaway_recursion(tmp_path, capsys):
    src = tmp_path / "loop.lisp"
    src.write_text("(define f (lambda (n) (f n)))\n(f 1)\n", encoding="utf-8")
    assert run_file(str(src)) == 1
    assert "RecursionError" in capsys.readouterr().err


def test_main_runs_program(tmp_path, capsys):
    src = tmp_path / "prog.lisp"
    src.write_text("(putstr \"ok\")", encoding="utf-8")
    assert main([str(src)]) == 0
    assert capsys.readouterr().out == "ok\n"


def test_main_missing_program(tmp_path, capsys):
    assert main([str(tmp_path / "missing.lisp"), "-v"]) == 1
    assert "CallispIOError" in capsys.readouterr().err
