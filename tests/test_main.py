import main


def feeder(*answers):
    it = iter(answers)
    return lambda prompt="": next(it)


def test_mode_a_prints_banner_and_map(capsys):
    code = main.main([], feeder("a", "2", "0 0", "0 0"))
    assert code == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Exit found", "0 0", "0 0"]


def test_mode_b_prints_success_rate(capsys):
    code = main.main(["--seed", "4"], feeder("B", "3", "1", "5"))
    assert code == 0
    assert capsys.readouterr().out.strip() == "Success for accessibility 1.0000 is 1.0000"


def test_mode_c_sweeps_every_percent(capsys):
    code = main.main(["--seed", "9"], feeder("C", "1", "2"))
    assert code == 0
    lines = [l for l in capsys.readouterr().out.splitlines() if l.startswith("Success")]
    assert len(lines) == 101
    assert lines[0] == "Success for accessibility 0.0000 is 0.0000"
    assert lines[-1] == "Success for accessibility 1.0000 is 1.0000"


def test_closed_input_returns_error_code(capsys):
    def closed(prompt=""):
        raise EOFError

    assert main.main([], closed) == 1
    assert "Input closed" in capsys.readouterr().out


def test_debug_flag_enables_log(capsys):
    main.main(["--debug", "--seed", "1"], feeder("A", "1", "0"))
    out = capsys.readouterr().out
    assert "[debug]" in out
    main.cc.DEBUG_LOG_TO_CONSOLE = False
