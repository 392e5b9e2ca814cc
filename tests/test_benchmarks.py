"""Performance benchmarks for ansicut module."""
# local
import ansicut

PLAIN_LONG = 'The quick brown fox jumps over the lazy dog. ' * 20
STYLED_LONG = ''.join(
    f'\x1b[{30 + n % 8};1mword{n}\x1b[0m \x1b[38;5;{n}m\U0001F600\x1b[39m '
    for n in range(100))


def test_cut_plain(benchmark):
    """Benchmark cut() on text without sequences."""
    benchmark(ansicut.cut, PLAIN_LONG, 100, 200)


def test_cut_styled(benchmark):
    """Benchmark cut() on heavily styled text."""
    benchmark(ansicut.cut, STYLED_LONG, 100, 200)


def test_cut_styled_bytes(benchmark):
    """Benchmark cut() counting UTF-8 bytes."""
    benchmark(ansicut.cut, STYLED_LONG, unit='byte')


def test_chunks_styled(benchmark):
    """Benchmark chunks() on heavily styled text."""
    benchmark(ansicut.chunks, STYLED_LONG, 80)


def test_strip_sequences(benchmark):
    """Benchmark strip_sequences() on heavily styled text."""
    benchmark(ansicut.strip_sequences, STYLED_LONG)


def test_sgr_state_update(benchmark):
    """Benchmark sgr_state_update() with a compound sequence."""
    benchmark(ansicut.sgr_state_update, ansicut.SGR_STATE_DEFAULT,
              [1, 3, 4, 38, 2, 255, 128, 0, 48, 5, 17, 58, 5, 1])
