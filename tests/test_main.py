# -*- coding: utf-8 -*-
import io

import pytest

from zhseg.__main__ import main


@pytest.fixture
def dict_path(write_dict):
    return write_dict('100 中国 zhong1guo2', '50 人 ren2')


def run(argv, data):
    stdout = io.BytesIO()
    status = main(argv, io.BytesIO(data), stdout)
    return status, stdout.getvalue()


def test_segments_each_line(dict_path):
    status, out = run(['zhseg', dict_path], '中国人\n中国，人\n'.encode('utf8'))
    assert status == 0
    assert out.decode('utf8') == '中国 人\n中国 ， 人\n'


def test_last_line_without_newline(dict_path):
    status, out = run(['zhseg', dict_path], '中国人\n人中国'.encode('utf8'))
    assert out.decode('utf8') == '中国 人\n人 中国\n'


def test_empty_lines_are_kept(dict_path):
    status, out = run(['zhseg', dict_path], '\n中国人\n\n'.encode('utf8'))
    assert out.decode('utf8') == '\n中国 人\n\n'


def test_crlf_input(dict_path):
    status, out = run(['zhseg', dict_path], '中国人\r\n'.encode('utf8'))
    assert out.decode('utf8') == '中国 人\n'


def test_malformed_input_passes_through(dict_path):
    status, out = run(['zhseg', dict_path], b'\xff\xfe\n')
    assert status == 0
    assert out == b'\xff \xfe\n'


def test_no_input(dict_path):
    assert run(['zhseg', dict_path], b'') == (0, b'')


@pytest.mark.parametrize('argv', [['zhseg'], ['zhseg', 'a.freq', 'b.freq']])
def test_usage(argv, capsys):
    status, out = run(argv, b'')
    assert status == 1
    assert out == b''
    assert 'Usage: zhseg chinese.freq' in capsys.readouterr().err


def test_missing_dictionary(tmp_path, caplog):
    status, out = run(['zhseg', str(tmp_path / 'missing.freq')], '中国'.encode('utf8'))
    assert status == 1
    assert out == b''
    assert 'cannot load dictionary' in caplog.text


def test_malformed_dictionary(write_dict, caplog):
    status, out = run(['zhseg', write_dict('100中国')], '中国'.encode('utf8'))
    assert status == 1
    assert 'expected "<count> <word>"' in caplog.text


def test_dictionary_not_utf8(tmp_path, caplog):
    path = tmp_path / 'bad.freq'
    path.write_bytes(b'5 \xff\xfe\n')
    status, out = run(['zhseg', str(path)], '中国'.encode('utf8'))
    assert status == 1
    assert out == b''
    assert 'not valid UTF-8' in caplog.text


class CountingOutput(io.BytesIO):

    def __init__(self):
        super().__init__()
        self.flushed = []

    def flush(self):
        self.flushed.append(self.getvalue())
        super().flush()


def test_flushes_after_every_line(dict_path):
    stdout = CountingOutput()
    status = main(['zhseg', dict_path], io.BytesIO('中国人\n\n人'.encode('utf8')), stdout)
    assert status == 0
    assert [b.decode('utf8') for b in stdout.flushed] == ['中国 人\n', '中国 人\n\n', '中国 人\n\n人\n']
