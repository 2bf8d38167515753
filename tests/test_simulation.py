import io

from philosim.config import Settings
from philosim.simulation import Philosopher, Table, build_philosophers, main


def test_forks_form_a_ring():
    philosophers = build_philosophers(Settings(4, 800, 200, 200, 3))
    assert [p.id for p in philosophers] == [0, 1, 2, 3]
    assert [p.left_fork for p in philosophers] == [0, 1, 2, 3]
    assert philosophers[-1].right_fork == 0
    assert all(p.number_of_meals == 3 for p in philosophers)


def test_single_philosopher_shares_one_fork():
    (only,) = build_philosophers(Settings(1, 800, 200, 200))
    assert only == Philosopher(0, 800, 200, 200, None, 0, 0)


def test_table_run_output():
    out = io.StringIO()
    table = Table(Settings(3, 800, 200, 200), out)
    result = table.run()
    lines = out.getvalue().splitlines()
    assert lines[0] == "3 is running"
    assert sorted(lines[1:]) == [f"Thread {n} is running" for n in range(3)]
    assert len(result) == 3
    assert len(table.forks) == 3


def test_main_success(capsys):
    status = main(["2", "800", "200", "200"])
    captured = capsys.readouterr()
    assert status == 0
    assert captured.out.startswith("2 is running\n")
    assert captured.out.count("is running") == 3


def test_main_rejects_bad_input(capsys):
    status = main(["1"])
    captured = capsys.readouterr()
    assert status == 255
    assert "Invalid number of arguments" in captured.err
    assert captured.out == ""


def test_main_rejects_short_time(capsys):
    status = main(["3", "800", "20", "200"])
    captured = capsys.readouterr()
    assert status == 255
    assert "Time values must be greater than or equal to 60." in captured.err