"""
Cut styled text at a range of positions while keeping its SGR styling intact.

Positions are counted over the text with escape sequences removed.  Every
escape sequence met before the end of the range is carried into the result,
so the styling active at the start of the range is re-established, and the
result ends with the sequences that close whatever styling is still open.
"""
from __future__ import annotations

# std imports
from typing import Iterator

# local
from .sgr_state import SGR_STATE_DEFAULT, sgr_closing_sequence, sgr_state_update
from .tokens import Escape, iter_tokens, text_length

_UNITS = ('char', 'byte')


class CharBoundaryError(ValueError):
    """A byte offset falls inside a multi-byte character."""

    def __init__(self, offset: int, char: str, char_start: int, char_end: int):
        super().__init__(
            f"byte offset {offset} is not a character boundary, "
            f"it falls inside {char!r} (bytes {char_start} to {char_end})")
        self.offset = offset
        self.char = char


def _slice_chars(text: str, idx: int, start: int,
                 end: int | None) -> tuple[str, int, bool]:
    """Return ``(kept, next_idx, past_end)`` for a text block at char offset idx."""
    block_len = len(text)
    stop = block_len
    past_end = False
    if end is not None and idx + block_len > end:
        stop = end - idx
        past_end = True
    begin = max(0, start - idx)
    return text[begin:stop], idx + block_len, past_end


def _slice_bytes(text: str, idx: int, start: int,
                 end: int | None) -> tuple[str, int, bool]:
    """Return ``(kept, next_idx, past_end)`` for a text block at byte offset idx."""
    kept = []
    for char in text:
        char_end = idx + len(char.encode('utf-8', 'surrogatepass'))
        if end is not None and idx >= end:
            return ''.join(kept), idx, True
        for bound in (start, end):
            if bound is not None and idx < bound < char_end:
                raise CharBoundaryError(bound, char, idx, char_end)
        if idx >= start:
            kept.append(char)
        idx = char_end
    return ''.join(kept), idx, False


def cut(text: str, start: int | None = None, end: int | None = None, *,
        unit: str = 'char', close_empty: bool = True) -> str:
    r"""
    Return text between positions [start, end), keeping its SGR styling.

    :param text: String to cut, may contain terminal sequences.
    :param start: Starting position (inclusive, 0-indexed), or None for 0.
    :param end: Ending position (exclusive), or None for the end of text.
        Positions past the end of text are clamped.
    :param unit: ``'char'`` to count positions in characters, ``'byte'`` to
        count them in UTF-8 encoded bytes.
    :param close_empty: When False, a cut that selects no characters, and in
        which no escape sequence falls within the range, returns ``''``
        instead of the escape sequences leading up to ``start`` and their
        closing sequences.
    :returns: The selected characters, every escape sequence found before the
        cut point, and the SGR sequences that close any styling left open.
    :raises ValueError: ``start`` or ``end`` is negative, ``start`` is
        greater than ``end``, or ``unit`` is unknown.
    :raises CharBoundaryError: ``unit='byte'`` and ``start`` or ``end`` falls
        inside a multi-byte character.

    Escape sequences that follow the last selected character are kept until
    the next character of text, so ``cut(text)`` returns ``text`` unchanged.

    Example::

        >>> cut('\x1b[30mTEXT\x1b[39m', 1, 3)
        '\x1b[30mEX\x1b[39m'
        >>> cut('\x1b[31;40mTEXT\x1b[0m', 0, 3)
        '\x1b[31;40mTEX\x1b[39m\x1b[49m'
        >>> cut('TEXT', 1, 50)
        'EXT'
    """
    if unit not in _UNITS:
        raise ValueError(f"unit must be 'char' or 'byte', got {unit!r}")
    if start is None:
        start = 0
    if start < 0:
        raise ValueError(f"start must be non-negative, got {start}")
    if end is not None:
        if end < 0:
            raise ValueError(f"end must be non-negative, got {end}")
        if end < start:
            raise ValueError(f"end must be >= start, got start={start}, end={end}")

    slice_block = _slice_chars if unit == 'char' else _slice_bytes
    state = SGR_STATE_DEFAULT
    output = []
    idx = 0
    saw_text = False
    saw_escape_in_range = False

    for token in iter_tokens(text):
        if isinstance(token, Escape):
            output.append(token.raw)
            if token.is_sgr:
                state = sgr_state_update(state, token.params)
            if idx >= start and (end is None or idx < end):
                saw_escape_in_range = True
            continue

        kept, idx, past_end = slice_block(token.text, idx, start, end)
        if kept:
            output.append(kept)
            saw_text = True
        if past_end:
            break

    if not close_empty and not saw_text and not saw_escape_in_range:
        return ''

    output.append(sgr_closing_sequence(state))
    return ''.join(output)


def iter_chunks(text: str, size: int) -> Iterator[str]:
    r"""
    Iterate over successive cuts of ``size`` characters each.

    :param text: String to split, may contain terminal sequences.
    :param size: Number of characters in each chunk, the last chunk may be
        shorter.
    :raises ValueError: ``size`` is less than 1.
    :returns: Iterator of self-contained styled chunks, see :func:`cut`.
        Text without visible characters yields no chunks.

    Example::

        >>> list(iter_chunks('\x1b[31mabc\x1b[0m', 2))
        ['\x1b[31mab\x1b[39m', '\x1b[31mc\x1b[0m']
    """
    if size < 1:
        raise ValueError(f"size must be positive, got {size}")
    return _iter_chunks(text, size)


def _iter_chunks(text: str, size: int) -> Iterator[str]:
    for begin in range(0, text_length(text), size):
        yield cut(text, begin, begin + size)


def chunks(text: str, size: int) -> list[str]:
    """
    Split text into chunks of ``size`` characters each.

    Example::

        >>> chunks('something', 3)
        ['som', 'eth', 'ing']
    """
    return list(iter_chunks(text, size))
