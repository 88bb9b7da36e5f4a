"""Benchmarks for Option and LazyOption.

Run with: uv run pytest benchmarks/ --benchmark-only -v
"""

from klaw_monad import LazyOption, Nothing, Some, from_key, from_nullable, lift

# =============================================================================
# Creation benchmarks
# =============================================================================


class TestOptionCreation:
    """Benchmark Option creation."""

    def test_some_creation(self, benchmark):
        """Benchmark Some creation."""
        benchmark(Some, 42)

    def test_from_nullable(self, benchmark):
        """Benchmark from_nullable on a present value."""
        benchmark(from_nullable, 42)

    def test_from_key_mapping(self, benchmark):
        """Benchmark from_key on a dict hit."""
        data = {'a': 1, 'b': 2}
        benchmark(from_key, data, 'a')


# =============================================================================
# Method call benchmarks
# =============================================================================


class TestOptionMethods:
    """Benchmark Option method calls."""

    def test_some_map(self, benchmark):
        """Benchmark Some.map."""
        some = Some(5)
        benchmark(some.map, lambda x: x * 2)

    def test_nothing_map(self, benchmark):
        """Benchmark Nothing.map."""
        benchmark(Nothing.map, lambda x: x * 2)

    def test_some_flat_map(self, benchmark):
        """Benchmark Some.flat_map (includes the return type check)."""
        some = Some(5)
        benchmark(some.flat_map, lambda x: Some(x * 2))

    def test_some_contains(self, benchmark):
        """Benchmark strict contains."""
        some = Some('value')
        benchmark(some.contains, 'value')


# =============================================================================
# Chain and lazy benchmarks
# =============================================================================


class TestOptionChains:
    """Benchmark chained operations."""

    def test_map_filter_chain(self, benchmark):
        """Benchmark map -> filter -> unwrap_or."""

        def chain():
            return Some(5).map(lambda x: x + 1).filter(lambda x: x > 3).unwrap_or(0)

        benchmark(chain)

    def test_lifted_call(self, benchmark):
        """Benchmark a lifted two-argument function."""
        add = lift(lambda a, b: a + b)
        left, right = Some(1), Some(2)
        benchmark(add, left, right)

    def test_lazy_forced_access(self, benchmark):
        """Benchmark access to an already forced LazyOption."""
        lazy = LazyOption(lambda: Some(1))
        lazy.force()
        benchmark(lazy.unwrap)
