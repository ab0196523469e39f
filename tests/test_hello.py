import pytest

from parlab.hello import hello_threads, main


def test_distinct_ids_without_sharing():
    ids = hello_threads(10, 0, False)
    assert sorted(ids) == list(range(10))


def test_shared_ids_stay_in_range():
    count = 10
    ids = hello_threads(count, 0, True)
    assert len(ids) == count
    assert all(0 <= i <= count for i in ids)


def test_output_matches_returned_ids(capsys):
    ids = hello_threads(4, 0, False)
    lines = capsys.readouterr().out.splitlines()
    assert lines == [f"Hello from thread {i}" for i in ids]


def test_zero_threads():
    assert hello_threads(0, 0, False) == []


@pytest.mark.parametrize("count,max_sleep", [(-1, 0), (3, -1)])
def test_invalid_arguments(count, max_sleep):
    with pytest.raises(ValueError):
        hello_threads(count, max_sleep, False)


def test_main_frames_greetings(capsys):
    assert main(["--threads", "3", "--max-sleep", "0"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Hello from the main thread"
    assert lines[-1] == "Goodbye from the main thread"
    assert sorted(lines[1:-1]) == [f"Hello from thread {i}" for i in range(3)]