"""
SGR (Select Graphic Rendition) state tracking for terminal escape sequences.

This module tracks the cumulative effect of SGR sequences seen so far in a
string, and synthesizes the sequences needed to close whatever styling is
still active, so that a fragment of styled text does not bleed into the text
that follows it.
"""
from __future__ import annotations

# std imports
import logging

from typing import TYPE_CHECKING, NamedTuple, Union

if TYPE_CHECKING:
    from typing import Sequence

logger = logging.getLogger(__name__)


class Color4(NamedTuple):
    """4-bit indexed color, stored as its SGR code (30-37, 90-97, 40-47, 100-107)."""
    code: int


class Color8(NamedTuple):
    """8-bit (256-color) palette index."""
    index: int


class Color24(NamedTuple):
    """24-bit RGB color."""
    red: int
    green: int
    blue: int


Color = Union[Color4, Color8, Color24]


class SGRState(NamedTuple):
    """
    Track active SGR terminal attributes by category (immutable).

    :param foreground: Foreground color (SGR 30-38, 90-97), or None for default.
    :param background: Background color (SGR 40-48, 100-107), or None for default.
    :param underline_color: Underline color (SGR 58), or None for default.
    :param bold: Bold attribute (SGR 1).
    :param faint: Faint/dim attribute (SGR 2).
    :param italic: Italic attribute (SGR 3).
    :param underline: Underline attribute (SGR 4).
    :param double_underline: Double underline attribute (SGR 21).
    :param slow_blink: Slow blink attribute (SGR 5).
    :param rapid_blink: Rapid blink attribute (SGR 6).
    :param inverse: Inverse/reverse attribute (SGR 7).
    :param hidden: Hidden/invisible attribute (SGR 8).
    :param crossed_out: Crossed-out attribute (SGR 9).
    :param font: Alternate font code (SGR 11-19), or None for primary font.
    :param fraktur: Fraktur attribute (SGR 20).
    :param proportional_spacing: Proportional spacing attribute (SGR 26).
    :param framed: Framed attribute (SGR 51).
    :param encircled: Encircled attribute (SGR 52).
    :param overlined: Overlined attribute (SGR 53).
    :param ideogram_underline: Ideogram underline (SGR 60).
    :param ideogram_double_underline: Ideogram double underline (SGR 61).
    :param ideogram_overline: Ideogram overline (SGR 62).
    :param ideogram_double_overline: Ideogram double overline (SGR 63).
    :param ideogram_stress_marking: Ideogram stress marking (SGR 64).
    :param superscript: Superscript attribute (SGR 73).
    :param subscript: Subscript attribute (SGR 74).
    :param saw_unrecognized_code: An SGR code outside the known set was seen
        since the last full reset.
    :param saw_full_reset: A full reset (SGR 0) was the most recent reset.
    """
    foreground: Color | None = None
    background: Color | None = None
    underline_color: Color | None = None
    bold: bool = False
    faint: bool = False
    italic: bool = False
    underline: bool = False
    double_underline: bool = False
    slow_blink: bool = False
    rapid_blink: bool = False
    inverse: bool = False
    hidden: bool = False
    crossed_out: bool = False
    font: int | None = None
    fraktur: bool = False
    proportional_spacing: bool = False
    framed: bool = False
    encircled: bool = False
    overlined: bool = False
    ideogram_underline: bool = False
    ideogram_double_underline: bool = False
    ideogram_overline: bool = False
    ideogram_double_overline: bool = False
    ideogram_stress_marking: bool = False
    superscript: bool = False
    subscript: bool = False
    saw_unrecognized_code: bool = False
    saw_full_reset: bool = False


# Default state with no attributes set
SGR_STATE_DEFAULT = SGRState()

# Fields that only record parsing history, not styling.
_BOOKKEEPING_FIELDS = frozenset(('saw_unrecognized_code', 'saw_full_reset'))

# SGR code lookup tables
_SGR_ATTR_ON = {
    1: 'bold', 2: 'faint', 3: 'italic', 4: 'underline',
    5: 'slow_blink', 6: 'rapid_blink', 7: 'inverse', 8: 'hidden',
    9: 'crossed_out', 20: 'fraktur', 21: 'double_underline',
    26: 'proportional_spacing', 51: 'framed', 52: 'encircled',
    53: 'overlined', 60: 'ideogram_underline',
    61: 'ideogram_double_underline', 62: 'ideogram_overline',
    63: 'ideogram_double_overline', 64: 'ideogram_stress_marking',
    73: 'superscript', 74: 'subscript',
}
_SGR_ATTR_OFF = {
    22: ('bold', 'faint'),
    23: ('italic',),
    24: ('underline', 'double_underline'),
    25: ('slow_blink', 'rapid_blink'),
    28: ('inverse',),
    29: ('crossed_out',),
    50: ('proportional_spacing',),
    54: ('framed', 'encircled'),
    55: ('overlined',),
    65: ('ideogram_underline', 'ideogram_double_underline',
         'ideogram_overline', 'ideogram_double_overline',
         'ideogram_stress_marking'),
    75: ('superscript', 'subscript'),
}
_SGR_COLOR_DEFAULT = {39: 'foreground', 49: 'background', 59: 'underline_color'}
_SGR_COLOR_EXTENDED = {38: 'foreground', 48: 'background', 58: 'underline_color'}


def _is_component(value: int) -> bool:
    return 0 <= value <= 255


def parse_color(params: Sequence[int]) -> tuple[Color, int] | None:
    """
    Parse extended color (256-color or RGB) from a parameter list.

    :param params: Remaining SGR parameters, starting at the introducer
        (38 for foreground, 48 for background, 58 for underline color).
    :returns: Tuple of ``(color, consumed)`` where ``consumed`` counts the
        introducer, or None if the color sub-sequence is truncated, uses an
        unknown mode, or has a component outside 0-255.

    Example::

        >>> parse_color([38, 5, 208, 1])
        (Color8(index=208), 3)
        >>> parse_color([48, 2, 255, 128, 0])
        (Color24(red=255, green=128, blue=0), 5)
        >>> parse_color([38, 2, 255]) is None
        True
    """
    if len(params) < 2:
        return None
    mode = params[1]
    if mode == 5 and len(params) >= 3:
        index = params[2]
        if _is_component(index):
            return Color8(index), 3
    elif mode == 2 and len(params) >= 5:
        red, green, blue = params[2:5]
        if _is_component(red) and _is_component(green) and _is_component(blue):
            return Color24(red, green, blue), 5
    return None


def sgr_state_update(state: SGRState, params: Sequence[int]) -> SGRState:
    """
    Return new state with the given SGR parameters applied.

    :param state: Current SGR state.
    :param params: SGR parameters in order, as returned by
        :func:`ansicut.tokens.parse_sgr_params`.
    :returns: New SGRState with updates applied.

    A malformed color sub-sequence leaves its color channel unchanged, and the
    parameters following its introducer are processed as ordinary codes.
    """
    pos = 0
    while pos < len(params):
        p = params[pos]
        if p == 0:
            state = SGR_STATE_DEFAULT._replace(saw_full_reset=True)
        elif p in _SGR_ATTR_ON:
            state = state._replace(**{_SGR_ATTR_ON[p]: True})
        elif p in _SGR_ATTR_OFF:
            state = state._replace(**dict.fromkeys(_SGR_ATTR_OFF[p], False))
        elif p == 10:
            state = state._replace(font=None)
        elif 11 <= p <= 19:
            state = state._replace(font=p)
        elif 30 <= p <= 37 or 90 <= p <= 97:
            state = state._replace(foreground=Color4(p))
        elif 40 <= p <= 47 or 100 <= p <= 107:
            state = state._replace(background=Color4(p))
        elif p in _SGR_COLOR_DEFAULT:
            state = state._replace(**{_SGR_COLOR_DEFAULT[p]: None})
        elif p in _SGR_COLOR_EXTENDED:
            parsed = parse_color(params[pos:])
            if parsed is not None:
                color, consumed = parsed
                state = state._replace(**{_SGR_COLOR_EXTENDED[p]: color})
                pos += consumed
                continue
            logger.debug('malformed color sub-sequence at %d in %r', pos, params)
        else:
            logger.debug('unrecognized SGR code %d', p)
            state = state._replace(saw_unrecognized_code=True)
        pos += 1
    return state


def sgr_state_is_active(state: SGRState) -> bool:
    """
    Return True if any styling attribute is set.

    :param state: The SGR state to check.
    :returns: True if any attribute differs from default, ignoring the
        ``saw_unrecognized_code`` and ``saw_full_reset`` bookkeeping flags.

    Hidden and fraktur count as active even though :func:`sgr_closers` emits
    nothing for them, so text that sets either stays active after its
    closing sequence is applied.
    """
    return any(value != default
               for field, value, default in zip(SGRState._fields, state, SGR_STATE_DEFAULT)
               if field not in _BOOKKEEPING_FIELDS)


def sgr_closers(state: SGRState) -> list[int]:
    """
    Return the SGR codes that close every attribute active in ``state``.

    Closers are grouped by the reset code of each attribute family, so a
    single code may close several attributes (22 closes both bold and faint).
    Hidden and fraktur have no closer.

    :param state: The SGR state to close.
    :returns: List of SGR codes in a fixed order, empty if nothing is active.
    """
    closers = []
    if state.saw_unrecognized_code and state.saw_full_reset:
        closers.append(0)
    if state.font is not None:
        closers.append(10)
    if state.bold or state.faint:
        closers.append(22)
    if state.italic:
        closers.append(23)
    if state.underline or state.double_underline:
        closers.append(24)
    if state.slow_blink or state.rapid_blink:
        closers.append(25)
    if state.inverse:
        closers.append(28)
    if state.crossed_out:
        closers.append(29)
    if state.foreground is not None:
        closers.append(39)
    if state.background is not None:
        closers.append(49)
    if state.proportional_spacing:
        closers.append(50)
    if state.encircled or state.framed:
        closers.append(54)
    if state.overlined:
        closers.append(55)
    if (state.ideogram_underline or state.ideogram_double_underline
            or state.ideogram_overline or state.ideogram_double_overline
            or state.ideogram_stress_marking):
        closers.append(65)
    if state.underline_color is not None:
        closers.append(59)
    if state.subscript or state.superscript:
        closers.append(75)
    # catch-all for unrecognized codes, fires independently of the first rule
    if state.saw_unrecognized_code:
        closers.append(0)
    return closers


def sgr_closing_sequence(state: SGRState) -> str:
    r"""
    Generate the SGR sequences that close every attribute active in ``state``.

    :param state: The SGR state to close.
    :returns: One escape sequence per closing code, or empty string.

    Example::

        >>> sgr_closing_sequence(SGRState(foreground=Color4(31), background=Color4(40)))
        '\x1b[39m\x1b[49m'
    """
    return ''.join(f'\x1b[{code}m' for code in sgr_closers(state))
