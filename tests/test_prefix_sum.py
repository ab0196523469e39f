import random

import pytest

from parlab.prefix_sum import (
    Chunk,
    check_result,
    main,
    monitor_prefix_sum,
    parallel_prefix_sum,
    sequential_prefix_sum,
    split_chunks,
)


def _random_data(n, seed=1):
    rng = random.Random(seed)
    return [rng.randrange(5) for _ in range(n)]


def test_sequential_small_example():
    assert sequential_prefix_sum([1, 2, 3, 4]) == [1, 3, 6, 10]


def test_sequential_does_not_modify_input():
    data = [3, 1, 4]
    sequential_prefix_sum(data)
    assert data == [3, 1, 4]


def test_sequential_last_is_total():
    data = _random_data(500)
    result = sequential_prefix_sum(data)
    assert result[-1] == sum(data)
    assert len(result) == len(data)


@pytest.mark.parametrize("n,threads", [(10, 3), (100, 25), (7, 7), (1, 1), (1000, 32)])
def test_split_chunks_cover_range(n, threads):
    chunks = split_chunks(n, threads)
    assert len(chunks) == threads
    assert chunks[0].start == 0
    assert chunks[-1].end == n
    for prev, cur in zip(chunks, chunks[1:]):
        assert prev.end == cur.start
    assert [c.worker_id for c in chunks] == list(range(threads))
    assert sum(c.size for c in chunks) == n


def test_split_chunks_last_takes_surplus():
    chunks = split_chunks(10, 3)
    assert chunks[-1] == Chunk(2, 6, 10)
    assert chunks[-1].size >= chunks[0].size
    assert chunks[0].size == chunks[1].size


@pytest.mark.parametrize("n,threads", [(5, 0), (3, 4)])
def test_split_chunks_rejects_bad_sizes(n, threads):
    with pytest.raises(ValueError):
        split_chunks(n, threads)


@pytest.mark.parametrize("n,threads", [(10, 3), (100, 25), (25, 25), (1, 1), (997, 8)])
def test_parallel_matches_sequential(n, threads):
    data = _random_data(n, seed=n + threads)
    assert parallel_prefix_sum(data, threads) == sequential_prefix_sum(data)


@pytest.mark.parametrize("n,threads", [(10, 3), (100, 25), (25, 25), (1, 1), (997, 8)])
def test_monitor_matches_sequential(n, threads):
    data = _random_data(n, seed=n * threads)
    assert monitor_prefix_sum(data, threads) == sequential_prefix_sum(data)


def test_parallel_does_not_modify_input():
    data = _random_data(50)
    copy = list(data)
    parallel_prefix_sum(data, 5)
    assert data == copy


def test_parallel_too_many_threads():
    with pytest.raises(ValueError):
        parallel_prefix_sum([1, 2], 3)


def test_monitor_zero_threads():
    with pytest.raises(ValueError):
        monitor_prefix_sum([1, 2, 3], 0)


def test_check_result():
    assert check_result([1, 2, 3], [1, 2, 3]) is True
    assert check_result([1, 2, 3], [1, 2, 4]) is False
    assert check_result([1, 2], [1, 2, 3]) is False


def test_main_reports_match(capsys):
    assert main(["--items", "100", "--threads", "7", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "Well done, the sequential and parallel prefix sum arrays match." in out
    assert out.startswith("initial data          : ")


def test_main_monitor_quiet(capsys):
    assert main(["--items", "60", "--threads", "6", "--monitor", "--quiet"]) == 0
    out = capsys.readouterr().out
    assert "initial data" not in out
    assert "Well done" in out


def test_main_rejects_too_many_threads(capsys):
    assert main(["--threads", "33"]) == 1
    assert "may not be a good idea" in capsys.readouterr().out