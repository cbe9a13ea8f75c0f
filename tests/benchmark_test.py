import csv
import random

import pytest

from mergeheap import benchmark
from mergeheap.datastructures import count_nodes


@pytest.mark.parametrize("name", sorted(benchmark.OPERATIONS))
def test_operations_leave_expected_queue(name):
    data = benchmark.generate_random_list(64)
    pq = benchmark.OPERATIONS[name](data)
    expected = 0 if name == "pop" else 64
    assert pq.size() == expected
    assert count_nodes(pq._root) == expected


def test_generate_random_list_is_reproducible_with_rng():
    a = benchmark.generate_random_list(20, random.Random(5))
    b = benchmark.generate_random_list(20, random.Random(5))
    assert a == b
    assert all(0 <= k <= benchmark.MAX_KEY for k in a)


def test_measure_operation_time_returns_avg_and_std():
    avg, std = benchmark.measure_operation_time(benchmark.bench_push, 50, iterations=3)
    assert avg >= 0.0 and std >= 0.0
    _, std_one = benchmark.measure_operation_time(benchmark.bench_push, 10, iterations=1)
    assert std_one == 0.0


def test_space_grows_with_input():
    small = benchmark.measure_space_efficiency(benchmark.bench_push, 10, iterations=1)
    large = benchmark.measure_space_efficiency(benchmark.bench_push, 200, iterations=1)
    empty = benchmark.measure_space_efficiency(benchmark.bench_pop, 200, iterations=1)
    assert large > small > empty


def test_run_benchmarks_writes_csv(tmp_path, capsys):
    out = tmp_path / "bench.csv"
    rows = benchmark.run_benchmarks(str(out), base_input=8, levels=2, iterations=2)

    with open(out, newline="") as f:
        table = list(csv.reader(f))
    assert table[0] == benchmark.CSV_HEADER
    assert table[1:] == rows
    assert len(rows) == len(benchmark.OPERATIONS) * 2
    assert {r[0] for r in rows} == {"8", "16"}
    assert "Benchmark completed" in capsys.readouterr().out


def test_run_benchmarks_rejects_bad_sizes(tmp_path):
    with pytest.raises(ValueError):
        benchmark.run_benchmarks(str(tmp_path / "x.csv"), base_input=0)
