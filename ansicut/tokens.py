"""
Split text into plain text runs and terminal escape sequences.

Concatenating the ``raw`` form of every token yielded by :func:`iter_tokens`
reproduces the original text exactly.
"""
from __future__ import annotations

# std imports
from typing import Iterator, NamedTuple, Union

# local
from .escape_seqs import ESC, SGR_PATTERN, TERM_SEQ_PATTERN


class TextBlock(NamedTuple):
    """A maximal run of literal, non-escape characters."""
    text: str

    @property
    def raw(self) -> str:
        return self.text


class Escape(NamedTuple):
    """
    A single terminal escape sequence.

    :param raw: The escape sequence exactly as it appeared in the text.
    :param params: Parameter list when this is an SGR (graphics mode)
        sequence, or ``None`` for any other kind of escape sequence.
    """
    raw: str
    params: tuple[int, ...] | None = None

    @property
    def is_sgr(self) -> bool:
        return self.params is not None


Token = Union[TextBlock, Escape]

# Parameters wider than this many significant digits are read as
# _PARAM_OVERFLOW, which no SGR code or color component uses.
_MAX_PARAM_DIGITS = 5
_PARAM_OVERFLOW = 10 ** _MAX_PARAM_DIGITS


def _parse_param(param: str) -> int:
    digits = param.lstrip('0')
    if len(digits) > _MAX_PARAM_DIGITS:
        return _PARAM_OVERFLOW
    return int(digits) if digits else 0


def parse_sgr_params(sequence: str) -> list[int]:
    r"""
    Parse SGR sequence and return list of parameter values.

    Handles compound sequences like ``\x1b[1;31;4m`` -> [1, 31, 4].
    Empty params (e.g., ``\x1b[m``) are treated as [0] (reset).  A parameter
    with more than five significant digits is read as 100000, an
    unrecognized code.

    :param sequence: SGR escape sequence string.
    :returns: List of integer parameters, empty if ``sequence`` is not SGR.
    """
    match = SGR_PATTERN.fullmatch(sequence)
    if not match:
        return []
    params_str = match.group(1)
    if not params_str:
        return [0]  # \x1b[m is equivalent to \x1b[0m
    return [_parse_param(param) for param in params_str.split(';')]


def _make_escape(sequence: str) -> Escape:
    if SGR_PATTERN.fullmatch(sequence):
        return Escape(sequence, tuple(parse_sgr_params(sequence)))
    return Escape(sequence)


def iter_tokens(text: str) -> Iterator[Token]:
    r"""
    Iterate over text, yielding :class:`TextBlock` and :class:`Escape` tokens.

    :param text: String that may contain terminal escape sequences.
    :yields: Tokens in left-to-right order.  Runs of plain text are yielded
        whole; an ``ESC`` that does not begin a recognized sequence is part
        of the surrounding text.

    Example::

        >>> list(iter_tokens('\x1b[31mred'))
        [Escape(raw='\x1b[31m', params=(31,)), TextBlock(text='red')]
    """
    idx = 0
    text_len = len(text)
    while idx < text_len:
        if text[idx] == ESC:
            match = TERM_SEQ_PATTERN.match(text, idx)
            if match:
                yield _make_escape(match.group())
                idx = match.end()
                continue
        # Collect non-sequence characters into a single run
        start = idx
        idx += 1
        while idx < text_len:
            if text[idx] == ESC and TERM_SEQ_PATTERN.match(text, idx):
                break
            idx += 1
        yield TextBlock(text[start:idx])


def strip_sequences(text: str) -> str:
    """
    Return text with all terminal escape sequences removed.

    Example::

        >>> strip_sequences('\\x1b[1mbold\\x1b[0m text')
        'bold text'
    """
    return ''.join(token.text for token in iter_tokens(text)
                   if isinstance(token, TextBlock))


def text_length(text: str, unit: str = 'char') -> int:
    """
    Return the length of text with escape sequences excluded.

    :param text: String that may contain terminal escape sequences.
    :param unit: ``'char'`` to count code points, ``'byte'`` to count
        UTF-8 encoded bytes.
    :raises ValueError: ``unit`` is not ``'char'`` or ``'byte'``.
    """
    stripped = strip_sequences(text)
    if unit == 'char':
        return len(stripped)
    if unit == 'byte':
        return len(stripped.encode('utf-8', 'surrogatepass'))
    raise ValueError(f"unit must be 'char' or 'byte', got {unit!r}")
