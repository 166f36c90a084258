from timeit import timeit

from hcons.types.table import InternTable


def _nested(depth: int, leaf: int):
    # right-leaning tuple chain: (leaf, (leaf, (... )))
    node = (leaf,)
    for _ in range(depth):
        node = (leaf, node)
    return node


def bench_structural_eq(depth: int = 200, rounds: int = 20000) -> float:
    """Time == on two equal but distinct nested values (recursive compare)."""
    a = _nested(depth, 1)
    b = _nested(depth, 1)
    # Warmup
    for _ in range(100):
        a == b
    return timeit(lambda: a == b, number=rounds)


def bench_identity_eq(depth: int = 200, rounds: int = 20000) -> float:
    """Time == on two Handles interned from equal nested values."""
    with InternTable() as table:
        a = table.intern(_nested(depth, 1))
        b = table.intern(_nested(depth, 1))
        for _ in range(100):
            a == b
        t = timeit(lambda: a == b, number=rounds)
        a.release()
        b.release()
    return t


def bench_intern_hit(n_values: int = 1000, rounds: int = 20) -> float:
    """Time interning values that are already live (recycle path)."""
    values = [(i, i + 1) for i in range(n_values)]
    table = InternTable()
    keep = [table.intern(v) for v in values]

    def run():
        for v in values:
            table.intern(v).release()

    t = timeit(run, number=rounds)
    for h in keep:
        h.release()
    table.release()
    return t


def bench_intern_miss(n_values: int = 1000, rounds: int = 20) -> float:
    """Time interning fresh values that are reclaimed right away."""
    values = [(i, i + 1) for i in range(n_values)]
    table = InternTable()

    def run():
        for v in values:
            table.intern(v).release()

    t = timeit(run, number=rounds)
    table.release()
    return t


if __name__ == "__main__":
    print("Benchmark: equality on nested tuples (depth 200)")
    print(f"  structural: {bench_structural_eq():.6f}s  |  handle identity: {bench_identity_eq():.6f}s")
    print("Benchmark: intern 1000 values x 20 rounds")
    print(f"  hit (recycle): {bench_intern_hit():.6f}s  |  miss (allocate + free): {bench_intern_miss():.6f}s")
