"""
ansicut module.

Cut strings containing ANSI escape sequences without losing their colors.
"""
# re-export all public functions & definitions from the top-level module path,
# flattening the statement 'from ansicut.cut import cut' into
# 'from ansicut import cut'.

# local
from .cut import (
    cut,
    chunks,
    iter_chunks,
    CharBoundaryError)
from .tokens import (
    Escape,
    TextBlock,
    iter_tokens,
    parse_sgr_params,
    strip_sequences,
    text_length)
from .sgr_state import (
    Color4,
    Color8,
    Color24,
    SGRState,
    SGR_STATE_DEFAULT,
    parse_color,
    sgr_closers,
    sgr_closing_sequence,
    sgr_state_is_active,
    sgr_state_update)

# The __all__ attribute defines the items exported from statement, 'from ansicut
# import *', but also to say, "This is the public API".
__all__ = ('cut', 'chunks', 'iter_chunks', 'CharBoundaryError',
           'iter_tokens', 'strip_sequences', 'text_length')
__version__ = '0.1.0'
