# -*- coding: utf-8 -*-
import re
import math
import logging

from zhseg.errors import DictionaryEncodingError, DictionaryFormatError

logger = logging.getLogger(__name__)

# leading decimal number, the part of the count field atof would read
_COUNT = re.compile(r'(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')


def parse_count(text):
    m = _COUNT.match(text.lstrip())
    return float(m.group()) if m else 0.0


class FrequencyTable(dict):
    "Word -> ln(count + 1), plus the bonus factor `total` over all words."

    def __init__(self):
        super().__init__()
        self.total = float('-inf')

    @classmethod
    def from_counts(cls, pairs):
        table = cls()
        for word, count in pairs:
            table.add(word, count)
        table.finalize()
        return table

    def add(self, word, count):
        score = math.log(count + 1)
        if word in self:
            # first count wins
            if self[word] != score:
                logger.warning('%s has multiple counts!', word)
            return False
        self[word] = score
        return True

    def finalize(self):
        mass = sum(self.values())
        self.total = math.log(mass) if mass > 0 else float('-inf')
        return self.total

    def score(self, word):
        return self.get(word)


def load(filename, strict=True):
    """Read a frequency dictionary with lines like

        12 哎哟 ai1yo1

    Everything after the second space is ignored. Empty lines and lines
    starting with '#' are comments.
    """
    table = FrequencyTable()
    with open(filename, 'rb') as f:
        for lineno, raw in enumerate(f, 1):
            try:
                line = raw.decode('utf8')
            except UnicodeDecodeError as e:
                raise DictionaryEncodingError(filename, lineno, e.reason) from e
            line = line.rstrip('\n')
            if line.endswith('\r'): line = line[:-1]
            if not line or line[0] == '#':
                continue
            s1 = line.find(' ')
            if s1 < 0:
                if strict:
                    raise DictionaryFormatError(filename, lineno, line)
                logger.warning('%s:%d: skipping malformed line %r', filename, lineno, line)
                continue
            s2 = line.find(' ', s1 + 1)
            word = line[s1 + 1:] if s2 < 0 else line[s1 + 1:s2]
            table.add(word, parse_count(line[:s1]))
    table.finalize()
    logger.info('dictionary %s: %d words, total=%f', filename, len(table), table.total)
    return table
