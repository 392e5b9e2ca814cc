"""
Terminal escape sequence patterns.

This module provides the compiled patterns used to split text into plain
text runs and escape sequences, and to recognize which of those escape
sequences are SGR (Select Graphic Rendition) sequences.
"""
import re

# Escape character, introduces every sequence matched below.
ESC = '\x1b'

# Control Sequence Introducer.
CSI = ESC + '['

# Pattern to match terminal escape sequences.
# Matches CSI, OSC, Fe sequences, Fp sequences, and character set designations.
TERM_SEQ_PATTERN = re.compile(
    r'\x1b\['                               # CSI introducer
    r'[\x30-\x3f]*'                          # Parameter bytes (0-9:;<=>?)
    r'[\x20-\x2f]*'                          # Intermediate bytes (space through /)
    r'[\x40-\x7e]'                           # Final byte (@-~)
    r'|'
    r'\x1b\]'                                # OSC introducer
    r'[^\x07\x1b]*'                          # String content (until BEL or ESC)
    r'(?:\x07|\x1b\\)'                       # String terminator (BEL or ST)
    r'|'
    r'\x1b[()].'                             # Character set designation
    r'|'
    r'\x1b[\x40-\x5f]'                       # Fe sequences (ESC + 0x40-0x5F)
    r'|'
    r'\x1b[78=>]'                            # Fp sequences: DECSC(7), DECRC(8), DECKPAM(=), DECKPNM(>)
)

# Pattern for SGR (Select Graphic Rendition) sequences: CSI ... m
# Only these affect styling; the parameter string is captured in group 1.
# Colon sub-parameter forms (such as CSI 4:3 m) do not match and stay opaque.
SGR_PATTERN = re.compile(r'\x1b\[([\d;]*)m')
