# -*- coding: utf-8 -*-
import sys
import logging

from zhseg.dpseg import Segmenter
from zhseg.errors import ZhsegError
from zhseg.freqdict import load

logger = logging.getLogger('zhseg')

USAGE = '''
Usage: zhseg chinese.freq

  Simple Chinese segmenter.  Input (STDIN) and frequency dictionary
  must be in UTF-8 encoding.

'''


def main(argv=None, stdin=None, stdout=None):
    argv = sys.argv if argv is None else argv
    stdin = sys.stdin.buffer if stdin is None else stdin
    stdout = sys.stdout.buffer if stdout is None else stdout

    if len(argv) != 2:
        sys.stderr.write(USAGE)
        return 1

    logging.basicConfig(format='%(asctime)s : %(levelname)s : %(message)s', level=logging.INFO)
    try:
        table = load(argv[1])
    except (OSError, ZhsegError) as e:
        logger.error('cannot load dictionary: %s', e)
        return 1

    segmenter = Segmenter(table)
    for line in stdin:
        if line.endswith(b'\n'): line = line[:-1]
        if line.endswith(b'\r'): line = line[:-1]
        if line:
            stdout.write(segmenter.segment(line))
        stdout.write(b'\n')
        stdout.flush()
    return 0


if __name__ == '__main__':
    sys.exit(main())
