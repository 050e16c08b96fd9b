import os

import pytest

from negi import termas
from negi.termas import BugError, Level, MasFlag


@pytest.fixture
def plain(monkeypatch):
    monkeypatch.setattr(termas.settings, "use_tercol", False)
    monkeypatch.setattr(termas.settings, "termas_ts", False)
    monkeypatch.setattr(termas.settings, "termas_pid", False)


def test_warn_tag(plain):
    assert termas.format_message(Level.WARN, "boom") == "warn: boom"


def test_error_with_hint(plain):
    text = termas.format_message(Level.ERROR, "boom", "disk")
    assert text == "error: boom; disk"


def test_show_file_and_func(plain):
    flags = MasFlag.SHOW_FILE | MasFlag.SHOW_FUNC
    text = termas.format_message(Level.ERROR, "msg", None, flags, "f.c", 10, "fn")
    assert text == "error:f.c:10:fn: msg"


def test_show_file_only(plain):
    text = termas.format_message(Level.ERROR, "msg", None,
                                 MasFlag.SHOW_FILE, "f.c", 10, "fn")
    assert text == "error:f.c:10: msg"


def test_show_func_detects_caller(plain):
    text = termas.format_message(Level.WARN, "x", flags=MasFlag.SHOW_FUNC)
    assert text.endswith("test_show_func_detects_caller: x")


def test_empty_message_trims_tail(plain):
    assert termas.format_message(Level.ERROR, "") == "error"


def test_empty_message_colored_keeps_reset(monkeypatch):
    monkeypatch.setattr(termas.settings, "use_tercol", True)
    text = termas.format_message(Level.ERROR, "")
    assert text.endswith("error\033[0m")


def test_log_has_timestamp(plain):
    text = termas.format_message(Level.LOG, "hello")
    assert text[0] == "["
    assert text.endswith("] hello")
    stamp = text[1:text.index("]")]
    sec, _, usec = stamp.partition(".")
    assert sec.isdigit() and usec.isdigit()


def test_pid_shown(plain, monkeypatch):
    monkeypatch.setattr(termas.settings, "termas_pid", True)
    text = termas.format_message(Level.WARN, "m")
    assert text.startswith(f">{os.getpid()} ")


def test_colored_tag_contains_escape(monkeypatch):
    monkeypatch.setattr(termas.settings, "use_tercol", True)
    text = termas.format_message(Level.WARN, "m")
    assert "\033[" in text and "warn:" in text


def test_message_truncated(plain):
    text = termas.format_message(Level.WARN, "x" * 10000)
    assert len(text) == termas.MAS_BUF_CAP - 1


def test_replace_bad_control_default():
    assert termas.replace_bad_control("a\x01b\tc\n\033", 100) == "a?b\tc\n\033"


def test_replace_bad_control_untouched():
    assert termas.replace_bad_control("clean", 10) == "clean"


def test_replace_bad_control_long_replacement(monkeypatch):
    monkeypatch.setattr(termas.settings, "control_replacement", "<>")
    assert termas.replace_bad_control("a\x01b", 100) == "a<>b"
    assert termas.replace_bad_control("a\x01b", 3) == "a?b"


def test_warn_writes_stderr(plain, capsys):
    termas.warn("careful")
    captured = capsys.readouterr()
    assert captured.err == "warn: careful\n"
    assert captured.out == ""


def test_mas_writes_stdout(plain, capsys):
    termas.mas("note")
    assert capsys.readouterr().out.rstrip("\n").endswith("] note")


def test_die_exits_128(plain, capsys):
    with pytest.raises(SystemExit) as exc:
        termas.die("dead")
    assert exc.value.code == 128
    assert "fatal: dead" in capsys.readouterr().err


def test_fatal_no_exit_returns(plain, capsys):
    text = termas.termas(Level.FATAL, "soft", flags=MasFlag.NO_EXIT)
    assert text == "fatal: soft"


def test_bug_raises(plain, capsys):
    with pytest.raises(BugError):
        termas.bug("broken")
    assert "BUG: broken" in capsys.readouterr().err


def test_ts_mono_and_now():
    sec, nsec = termas.ts_mono()
    assert 0 <= nsec < 1_000_000_000
    first = termas.ts_now()
    assert termas.ts_now() >= first