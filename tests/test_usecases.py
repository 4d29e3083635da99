from vcpool.usecases import high_func, main, normal_func


def test_normal_func_prints_and_returns_true(capsys):
    assert normal_func("Hello World", 3) is True
    assert capsys.readouterr().out == "normal_func Hello World 3\n"


def test_high_func_prints_lowercase_bool(capsys):
    high_func(True)
    high_func(False)
    assert capsys.readouterr().out == "high_functrue\nhigh_funcfalse\n"


def test_main_runs_every_task(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    normal_lines = sorted(line for line in lines if line.startswith("normal_func"))
    assert normal_lines == [f"normal_func Hello World {n}" for n in range(4)]
    assert lines.count("high_functrue") == 1
    status_lines = [line for line in lines if line.startswith("wait: ")]
    assert len(status_lines) == 3
    # While paused, nothing moves from the queue.
    assert status_lines[0].split(" running")[0] == status_lines[1].split(" running")[0]