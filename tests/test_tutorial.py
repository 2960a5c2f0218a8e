import threading

import pytest

from circletasks.tutorial import Counter, condition_variable_example, main, mutex_example


def test_counter_increment_single_thread():
    counter = Counter()
    counter.increment(25)
    counter.increment(5)
    assert counter.value == 30


def test_counter_increment_concurrent():
    counter = Counter()
    threads = [threading.Thread(target=counter.increment, args=(500,)) for _ in range(6)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert counter.value == 6 * 500


@pytest.mark.parametrize("num_threads, iterations", [(1, 10), (4, 1000), (8, 250)])
def test_mutex_example_total(num_threads, iterations):
    assert mutex_example(num_threads, iterations) == num_threads * iterations


def test_mutex_example_output(capsys):
    mutex_example(3, 100)
    out = capsys.readouterr().out
    assert "Starting 3 threads to increment counter..." in out
    assert f"Final counter value: {3 * 100}..." in out


@pytest.mark.parametrize("num_threads", [1, 2, 3, 6])
def test_condition_variable_wakes_all_waiters(num_threads, capsys):
    assert condition_variable_example(num_threads) == num_threads - 1
    out = capsys.readouterr().out
    assert out.count("Lock re-acquired after wait()...") == num_threads - 1


@pytest.mark.parametrize("func", [mutex_example, condition_variable_example])
def test_invalid_thread_count(func):
    with pytest.raises(ValueError):
        func(0)


def test_main_runs_both_examples(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert f"Final counter value: {10000 * 8}..." in out
    assert "Starting 3 threads for signal-and-waiting..." in out
    assert out.count("Lock re-acquired after wait()...") == 3 - 1


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--bogus"])