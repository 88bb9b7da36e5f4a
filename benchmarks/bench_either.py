"""Benchmarks for Either, Result and the collection helpers.

Run with: uv run pytest benchmarks/ --benchmark-only -v
"""

from klaw_monad import Err, Left, Ok, Right, sequence, traverse

# =============================================================================
# Method call benchmarks
# =============================================================================


class TestEitherMethods:
    """Benchmark Either method calls."""

    def test_right_map(self, benchmark):
        """Benchmark Right.map."""
        right = Right(5)
        benchmark(right.map, lambda x: x * 2)

    def test_left_map(self, benchmark):
        """Benchmark Left.map (short-circuit)."""
        left = Left('e')
        benchmark(left.map, lambda x: x * 2)

    def test_right_flat_map(self, benchmark):
        """Benchmark Right.flat_map."""
        right = Right(5)
        benchmark(right.flat_map, lambda x: Right(x * 2))


class TestResultMethods:
    """Benchmark Result method calls."""

    def test_ok_and_then(self, benchmark):
        """Benchmark Ok.and_then."""
        ok = Ok(5)
        benchmark(ok.and_then, lambda x: Ok(x * 2))

    def test_err_unwrap_or_else(self, benchmark):
        """Benchmark Err.unwrap_or_else."""
        err = Err('e')
        benchmark(err.unwrap_or_else, len)


# =============================================================================
# Collection benchmarks
# =============================================================================


class TestCollections:
    """Benchmark sequence and traverse."""

    def test_sequence_all_right(self, benchmark):
        """Benchmark sequence over 100 Rights."""
        items = [Right(i) for i in range(100)]
        benchmark(sequence, items)

    def test_sequence_early_left(self, benchmark):
        """Benchmark sequence stopping at an early Left."""
        items = [Right(0), Left('x'), *(Right(i) for i in range(100))]
        benchmark(sequence, items)

    def test_traverse(self, benchmark):
        """Benchmark traverse over 100 items."""
        items = list(range(100))
        benchmark(traverse, items, Right)
