# -*- coding: utf-8 -*-
import numpy as np

PUNCTUATION, SPACE, TEXT = 'P', 'S', 'T'
REPLACEMENT = 0xFFFD


def sequence_length(lead):
    if lead < 0x80: return 1
    if 0xC2 <= lead <= 0xDF: return 2
    if 0xE0 <= lead <= 0xEF: return 3
    if 0xF0 <= lead <= 0xF4: return 4
    return 0


def decode(data, pos):
    """Decode the codepoint starting at byte `pos` of `data`.

    Returns (codepoint, length). Malformed or truncated sequences yield
    (U+FFFD, 1) so a scan always moves forward one byte at a time through
    bad input.
    """
    size = sequence_length(data[pos])
    if size == 0 or pos + size > len(data):
        return REPLACEMENT, 1
    if size == 1:
        return data[pos], 1
    try:
        char = data[pos:pos + size].decode('utf8')
    except UnicodeDecodeError:
        return REPLACEMENT, 1
    return ord(char), size


def is_punctuation(cp):
    return (0x3000 < cp <= 0x3020) or \
           (0xFF1A <= cp <= 0xFF1B) or \
           (0xFF0C <= cp <= 0xFF0E) or (cp == 0x20)


def classify(cp):
    if cp == 0x20:
        return SPACE
    if is_punctuation(cp):
        return PUNCTUATION
    return TEXT


def codepoint_flags(data):
    """Mark codepoint starts and punctuation starts for every byte offset.

    Both arrays have len(data) + 1 entries; the last offset is always a
    valid boundary.
    """
    T = len(data)
    is_start = np.zeros(T + 1, dtype=bool)
    is_punc = np.zeros(T + 1, dtype=bool)
    is_start[T] = True
    pos = 0
    while pos < T:
        cp, size = decode(data, pos)
        is_start[pos] = True
        is_punc[pos] = classify(cp) != TEXT
        pos += size
    return is_start, is_punc
