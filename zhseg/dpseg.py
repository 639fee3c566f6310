# -*- coding: utf-8 -*-
import numpy as np
from nltk.tokenize.api import TokenizerI

from zhseg.codepoint import codepoint_flags
from zhseg.errors import SegmentationError

MAX_WORD_SIZE = 6
MAX_WORD_BYTES = MAX_WORD_SIZE * 3
OOV_SCORE = 0.3
UNREACHED = -1999999.0
SPACE_BYTE = 0x20


def join_tokens(tokens, space):
    # a space token is already a separator
    out = []
    for k, token in enumerate(tokens):
        if k > 0 and token != space and tokens[k - 1] != space:
            out.append(space)
        out.append(token)
    return space[:0].join(out)


class Segmenter(TokenizerI):
    """Maximum-score segmentation of a line over a frequency dictionary.

    Works on the UTF-8 bytes of the line. `bytes` input gives `bytes`
    tokens and never raises on malformed UTF-8. `str` input gives `str`
    tokens and must be encodable as UTF-8.

    Space tokens are kept so the tokens always concatenate back to the line.
    """

    def __init__(self, table, max_word_size=MAX_WORD_SIZE, oov_score=OOV_SCORE):
        if max_word_size < 2:
            raise ValueError('max_word_size must be at least 2, got %r' % max_word_size)
        self.table = table
        self.max_word_bytes = max_word_size * 3
        self.oov_score = oov_score
        # favor longer matches, unless the dictionary has no mass at all
        self.bonus_scale = table.total * 2 if np.isfinite(table.total) else 0.0

    def best_path(self, data):
        """Fill the boundary table for `data` and return the back lengths.

        back[k] is the byte length of the last token of the best
        segmentation of data[:k], score[k] its total score.
        """
        T = len(data)
        is_start, is_punc = codepoint_flags(data)
        back = np.zeros(T + 1, dtype=np.int64)
        score = np.full(T + 1, UNREACHED)
        score[0] = 0.0
        for i in range(T):
            if not is_start[i]:
                continue
            # spaces are forced breaks
            if data[i] == SPACE_BYTE:
                back[i + 1] = 1
                score[i + 1] = score[i]
                continue
            end = min(i + self.max_word_bytes, T)
            is_first = True
            for j in range(i, end):
                if not is_first and is_punc[j]:
                    break
                if not is_start[j + 1]:
                    continue
                if data[j] == SPACE_BYTE:
                    break
                if is_first:
                    is_first = False
                    # always segment punctuation
                    if is_punc[i]:
                        back[j + 1] = j - i + 1
                        score[j + 1] = score[i]
                        break
                cand = data[i:j + 1]
                freq = self.table.get(cand.decode('utf8', 'surrogateescape'))
                if freq is None:
                    freq, bonus = self.oov_score, 0.0
                else:
                    bonus = (len(cand) // 3 - 1) * self.bonus_scale
                cand_score = freq + score[i] + bonus
                if cand_score > score[j + 1]:
                    back[j + 1] = j - i + 1
                    score[j + 1] = cand_score
        return back, score

    def byte_spans(self, data):
        back, _ = self.best_path(data)
        spans = []
        j = len(data)
        while j > 0:
            size = int(back[j])
            if size == 0:
                raise SegmentationError('byte offset %d of %r was never reached' % (j, data))
            spans.append((j - size, j))
            j -= size
        spans.reverse()
        return spans

    def tokenize(self, s):
        if isinstance(s, str):
            data = s.encode('utf8', 'surrogateescape')
            return [data[a:b].decode('utf8', 'surrogateescape') for a, b in self.byte_spans(data)]
        return [s[a:b] for a, b in self.byte_spans(s)]

    def span_tokenize(self, s):
        if not isinstance(s, str):
            yield from self.byte_spans(s)
            return
        start = 0
        for token in self.tokenize(s):
            yield start, start + len(token)
            start += len(token)

    def segment(self, line):
        tokens = self.tokenize(line)
        return join_tokens(tokens, ' ' if isinstance(line, str) else b' ')


def segment(line, table):
    return Segmenter(table).segment(line)
