from tutorial import Tutorial, main, some_function_that_takes_a_closure
from tutorialbase import get_printable

NAMES_LINE = '["Ewa", "Daniella", "Chris", "Barry", "Alex"]'


def test_run_output_order():
    output = Tutorial(console_output=False).run()
    assert output == [NAMES_LINE] * 6 + [
        "I am a function taking a closure parameter",
        "Closure without argument label",
        '["OneSix", "FiveEight", "FiveOneZero"]',
        "6",
        "200",
        "100",
    ]


def test_escaping_closure_consumed():
    tutorial = Tutorial(console_output=False)
    tutorial.run()
    assert len(tutorial.registry) == 0
    assert tutorial.registry.invoke_count == 1


def test_trailing_closure_called_once():
    calls = []
    some_function_that_takes_a_closure(lambda: calls.append(1))
    assert calls == [1]


def test_main_prints(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-2:] == ["200", "100"]
    assert lines[0] == NAMES_LINE


def test_main_quiet_and_trace(capsys):
    assert main(["--quiet", "--trace"]) == 0
    out = capsys.readouterr().out
    assert "-- sorting by operator method" in out
    assert "200" not in out


def test_get_printable():
    assert get_printable(["a", 1]) == '["a", 1]'
    assert get_printable(True) == "true"
    assert get_printable(6) == "6"
