import os

from trendminer.common.tlog import tlog, tlog_exception


def test_tlog_caller_and_pid(capsys):
    tlog("hello")
    out = capsys.readouterr().out
    assert out.startswith(f"[test_tlog_caller_and_pid()][{os.getpid()}]")  # nosec
    assert out.rstrip().endswith(":hello")  # nosec


def test_tlog_origin(capsys):
    tlog("hello", "[origin]")
    assert capsys.readouterr().out.startswith("[origin]")  # nosec


def test_tlog_exception(capsys):
    try:
        raise ValueError("boom")
    except ValueError:
        tlog_exception("[miner]")

    captured = capsys.readouterr()
    assert "Traceback" in captured.out  # nosec
    assert "ValueError: boom" in captured.out  # nosec
    assert "ValueError: boom" in captured.err  # nosec
