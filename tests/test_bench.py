import pytest

import bench
from cons_cell import Cons


def test_build_list_orders_values_head_to_tail():
    head = bench.build_list(Cons, 4)
    values = []
    current = head
    while current is not None:
        values.append(current.value)
        current = current.next
    assert values == [0, 1, 2, 3]


def test_build_list_rejects_empty():
    with pytest.raises(AssertionError):
        bench.build_list(Cons, 0)


@pytest.mark.parametrize("target", [-1, 0, 1, 25, 49, 50])
def test_recursive_member_agrees_with_loop(target):
    head = bench.build_list(Cons, 50)
    assert bench.recursive_member(head, target) == head.member(target)


def test_bench_reports_ns_per_query(capsys):
    head = bench.build_list(Cons, 10)
    ns = bench.bench("Loop, tail hit", bench.loop_member, head, 9, 10)
    assert ns >= 0
    assert "Loop, tail hit" in capsys.readouterr().out


def test_main_runs(monkeypatch, capsys):
    monkeypatch.setattr(bench, "N", 20)
    monkeypatch.setattr(bench, "M", 50)
    bench.main()
    out = capsys.readouterr().out
    assert "Correctness: both implementations agree on 0..19" in out
    assert "Ratios (recursion / loop)" in out
