# -*- coding: utf-8 -*-
import pytest


@pytest.fixture
def write_dict(tmp_path):
    def _write(*lines, name='chinese.freq'):
        path = tmp_path / name
        path.write_text(''.join(line + '\n' for line in lines), encoding='utf8')
        return str(path)
    return _write
