import pytest

from parlab.task_farm import MAX_TASKS, compute, farm, main


def test_compute_multiplies_by_ten():
    assert compute(3) == 30


def test_compute_non_positive_values():
    assert compute(0) == 0
    assert compute(-2) == -20


def test_farm_returns_results_in_task_order():
    tasks = list(range(1, MAX_TASKS + 1))
    assert farm(tasks, 3) == [compute(t) for t in tasks]


@pytest.mark.parametrize("workers", [1, 2, 4, 10])
def test_farm_independent_of_worker_count(workers):
    tasks = [7, 2, 9, 4, 1, 6]
    assert farm(tasks, workers) == farm(tasks, 1)


def test_farm_more_workers_than_tasks(capsys):
    assert farm([5], 3) == [50]
    out = capsys.readouterr().out
    assert "No initial task for Worker Rank 2" in out
    assert "No initial task for Worker Rank 3" in out


def test_farm_no_tasks():
    assert farm([], 2) == []


def test_farm_rejects_no_workers():
    with pytest.raises(ValueError):
        farm([1, 2], 0)


def test_farm_prints_phases(capsys):
    farm([1, 2, 3], 2)
    out = capsys.readouterr().out
    assert out.index("Starting Phase 1") < out.index("Starting Phase 2")
    assert out.index("Starting Phase 2") < out.index("Starting Phase 3")
    assert "Farmer: Sending Terminate Signal to Worker 2" in out
    assert out.count("Exiting.") == 2


def test_main_success_and_failure(capsys):
    assert main(["--workers", "2", "--tasks", "4"]) == 0
    assert main(["--workers", "0"]) == 1
    err = capsys.readouterr().err
    assert "requires at least 2 processes" in err