"""Core tests for ansicut module."""
# std imports
import importlib.metadata as importmeta

# local
import ansicut


def test_package_version():
    """ansicut.__version__ is expected value."""
    # given,
    expected = importmeta.version('ansicut')

    # exercise,
    result = ansicut.__version__

    # verify.
    assert result == expected


def test_public_api():
    """Every name in __all__ is importable from the top-level module."""
    for name in ansicut.__all__:
        assert hasattr(ansicut, name), name


def test_cut_colored_phrase():
    """
    Cut the middle word out of a phrase colored word by word.

    Each word carries its own foreground color, and the phrase ends with a
    full reset.  Cutting the middle word keeps the color of the first word
    as it was opened and closed before the cut, and closes the color of the
    middle word, which the cut separates from its own closing sequence.
    """
    # given,
    phrase = '\x1b[31mred\x1b[39m \x1b[32mgreen\x1b[0m'
    expected = '\x1b[31m\x1b[39m\x1b[32mgre\x1b[39m'

    # exercise,
    result = ansicut.cut(phrase, 4, 7)

    # verify.
    assert result == expected
    assert ansicut.strip_sequences(result) == 'gre'
