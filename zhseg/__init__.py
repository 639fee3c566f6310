# -*- coding: utf-8 -*-
from zhseg.codepoint import PUNCTUATION, SPACE, TEXT, classify, decode, is_punctuation, codepoint_flags
from zhseg.dpseg import MAX_WORD_SIZE, MAX_WORD_BYTES, OOV_SCORE, Segmenter, segment
from zhseg.errors import ZhsegError, DictionaryEncodingError, DictionaryFormatError, SegmentationError
from zhseg.freqdict import FrequencyTable, load, parse_count

__version__ = '0.1.0'
