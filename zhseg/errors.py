# -*- coding: utf-8 -*-


class ZhsegError(Exception):
    pass


class DictionaryFormatError(ZhsegError, ValueError):
    "A dictionary line without the space between count and word."

    def __init__(self, filename, lineno, line):
        self.filename = filename
        self.lineno = lineno
        self.line = line
        super().__init__('%s:%d: expected "<count> <word>", got %r' % (filename, lineno, line))


class SegmentationError(ZhsegError, RuntimeError):
    pass


class DictionaryEncodingError(ZhsegError, ValueError):
    "A dictionary line that is not valid UTF-8."

    def __init__(self, filename, lineno, reason):
        self.filename = filename
        self.lineno = lineno
        super().__init__('%s:%d: not valid UTF-8 (%s)' % (filename, lineno, reason))
