import io
import re
import time

from toolbench.timer import Timer


def test_timer_reports_elapsed_time():
    out = io.StringIO()
    with Timer(out) as timer:
        time.sleep(0.02)
    assert timer.duration >= 0.02
    assert timer.milliseconds >= 20.0
    assert re.fullmatch(r"Timer took [0-9.e+-]+ ms\n", out.getvalue())


def test_timer_duration_unset_before_exit():
    with Timer(io.StringIO()) as timer:
        assert timer.duration is None
        assert timer.milliseconds is None
    assert timer.end >= timer.start


def test_timer_prints_to_stdout_by_default(capsys):
    with Timer():
        pass
    assert capsys.readouterr().out.startswith("Timer took ")


def test_timer_reports_even_when_block_raises():
    out = io.StringIO()
    try:
        with Timer(out) as timer:
            raise RuntimeError("boom")
    except RuntimeError:
        pass
    assert timer.duration >= 0
    assert "Timer took" in out.getvalue()