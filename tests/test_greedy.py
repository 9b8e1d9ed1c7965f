import pytest

from dsakit.greedy import least_interval


def test_first_worked_example():
    assert least_interval(["A", "A", "A", "B", "B", "B"], 2) == 8


def test_second_worked_example():
    assert least_interval(["A", "C", "A", "B", "D", "B"], 1) == 6


def test_empty_task_list_needs_no_intervals():
    assert least_interval([], 3) == 0


@pytest.mark.parametrize(
    "tasks",
    [list("AAABBB"), list("ACABDB"), list("AAAAAB"), list("ABCDEFG"), list("ZZZ")],
)
def test_no_cooldown_means_no_idle_time(tasks):
    assert least_interval(tasks, 0) == len(tasks)


@pytest.mark.parametrize("n", [0, 1, 2, 5, 10])
def test_distinct_tasks_never_idle(n):
    tasks = list("ABCDEFGHIJKL")
    if n < len(tasks):
        assert least_interval(tasks, n) == len(tasks)
    else:
        assert least_interval(tasks, n) >= len(tasks)


@pytest.mark.parametrize("tasks", [list("AAABBB"), list("AAAABBC"), list("AAB"), list("QQQQ")])
def test_result_never_shrinks_as_cooldown_grows(tasks):
    results = [least_interval(tasks, n) for n in range(6)]
    assert results == sorted(results)
    assert all(result >= len(tasks) for result in results)


def test_accepts_string_of_labels():
    assert least_interval("AAABBB", 2) == least_interval(list("AAABBB"), 2)


@pytest.mark.parametrize("bad", [["a"], ["A", "1"], ["AB"], [""]])
def test_rejects_invalid_labels(bad):
    with pytest.raises(ValueError):
        least_interval(bad, 1)