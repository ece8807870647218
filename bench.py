"""Membership benchmark: cons cell chain traversal.

Measures the cost of Cons.member against a literally recursive rendition
of the same query, for three positions of the target:
  - head hit (no traversal)
  - tail hit (full traversal, then match)
  - miss (full traversal, exhausted)
"""

import platform
import sys
import time

from cons_cell import Cons

N = 500        # list length, kept under the default recursion limit
M = 10_000     # iterations


def build_list(NodeClass, n):
    """Build a linked list of n nodes with values 0..n-1."""
    assert n > 0, f"List length must be positive, got {n}"
    head = NodeClass(value=n - 1, next=None)
    for i in range(n - 2, -1, -1):
        head = NodeClass(value=i, next=head)
    return head


def recursive_member(cell, target):
    """Recursive membership query. Same code, any node type.

    Needs only .value and .next on each node. Recursion depth equals the
    number of cells visited.
    """
    if cell.value == target:
        return True
    if cell.next is None:
        return False
    return recursive_member(cell.next, target)


def loop_member(cell, target):
    return cell.member(target)


def bench(label, fn, head, target, iterations):
    """Run a benchmark with warmup and timing."""
    assert iterations > 0, f"Iterations must be positive, got {iterations}"
    assert callable(fn), f"fn must be callable, got {type(fn)}"

    # Warmup
    for _ in range(1000):
        fn(head, target)

    # Timed run
    t0 = time.perf_counter_ns()
    for _ in range(iterations):
        fn(head, target)
    elapsed_ns = time.perf_counter_ns() - t0

    ns_per = elapsed_ns / iterations
    print(f"{label:40s}  {ns_per:8.0f} ns/query")
    return ns_per


def main():
    # --- Environment ---
    print("=" * 60)
    print("Cons Cell Membership Benchmark")
    print("=" * 60)
    print(f"Python:   {sys.version}")
    print(f"Platform: {platform.platform()}")
    print()

    # --- Build list ---
    head = build_list(Cons, N)
    first, last, missing = 0, N - 1, -1

    # --- Correctness verification ---
    for fn in (loop_member, recursive_member):
        assert fn(head, first), f"{fn.__name__} missed head value {first}"
        assert fn(head, last), f"{fn.__name__} missed tail value {last}"
        assert not fn(head, missing), \
            f"{fn.__name__} reported absent value {missing}"
    print(f"Correctness: both implementations agree on 0..{N-1}")
    print()

    # --- Benchmark ---
    print(f"Membership query: {N} nodes, {M:,} iterations")
    print(f"{'Benchmark':40s}  {'ns/query':>14s}")
    print("-" * 56)

    print("\n--- Loop (Cons.member) ---")
    loop_head = bench("Loop, head hit", loop_member, head, first, M)
    loop_tail = bench("Loop, tail hit", loop_member, head, last, M)
    loop_miss = bench("Loop, miss", loop_member, head, missing, M)

    print("\n--- Recursion (recursive_member) ---")
    rec_head = bench("Recursion, head hit", recursive_member, head, first, M)
    rec_tail = bench("Recursion, tail hit", recursive_member, head, last, M)
    rec_miss = bench("Recursion, miss", recursive_member, head, missing, M)

    # --- Summary ratios ---
    print("\n--- Ratios (recursion / loop) ---")
    print(f"  Head hit:  {rec_head / loop_head:6.2f}x")
    print(f"  Tail hit:  {rec_tail / loop_tail:6.2f}x")
    print(f"  Miss:      {rec_miss / loop_miss:6.2f}x")
    print(f"\nLoop miss cost per node: {loop_miss / N:.1f} ns")


if __name__ == "__main__":
    main()
