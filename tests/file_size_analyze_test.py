import argparse
import time

import pytest

import file_size_analyze
from file_size_analyze import ProgressTicker, main, parse_block_size
from stat_counter import StatCounter


@pytest.mark.parametrize('value, expected', [
    ('4096', 4096), ('0', 0), ('8k', 8192), ('1k', 1024),
])
def test_parse_block_size(value, expected):
    assert parse_block_size(value) == expected


@pytest.mark.parametrize('value', [
    '', '4K', '-1', '4kb', '1.5k', 'k', ' 4096', '4096\n',
    '\u0664k', '\uff14\uff10\uff19\uff16',
])
def test_parse_block_size_rejects(value):
    with pytest.raises(argparse.ArgumentTypeError):
        parse_block_size(value)


def test_invalid_block_size_exits_before_scan(tmp_path, monkeypatch):
    monkeypatch.setattr(file_size_analyze, 'LocalFS', None)
    with pytest.raises(SystemExit) as exc:
        main(['--block', '4x', str(tmp_path)])
    assert exc.value.code == 2


def test_end_to_end_simple_output(tmp_path, capsys):
    (tmp_path / 'empty').write_bytes(b'')
    (tmp_path / 'exact').write_bytes(b'x' * 4096)
    (tmp_path / 'bigger').write_bytes(b'x' * 5000)

    assert main(['--out', 'tab', '--block', '4k', str(tmp_path)]) == 0

    out = capsys.readouterr().out
    lines = [line for line in out.splitlines() if '\t' in line]
    assert lines[0].startswith('0\t0 - 1 B\t1\t0\t')
    assert lines[-1].startswith('12\t4 - 8 kB\t2\t9096\t')
    assert 'Scanned 3 files in ' in out
    assert 'is 18.62% worse.' in out


def test_end_to_end_formatted_output(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv('COLUMNS', '80')
    (tmp_path / 'a').write_bytes(b'x' * 3)
    (tmp_path / 'b').write_bytes(b'x' * 5000)
    assert main([str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert '…' not in out
    row = next(line for line in out.splitlines() if line.split() and line.split()[0] == '12')
    assert row.split()[:7] == ['12', '4', '-', '8', 'kB', '1', '5000']
    assert '3192.00' in row
    assert 'TOTAL' in out
    assert 'Scanned 2 files in ' in out


def test_missing_root_still_reports(tmp_path, capsys):
    assert main(['--out', 'tab', str(tmp_path / 'missing')]) == 1
    out = capsys.readouterr().out
    assert '0\t0 - 1 B\t0\t0\t' in out
    assert 'Scanned 0 files in ' in out


def test_progress_ticker_logs_file_count(caplog):
    stats = StatCounter(4096)
    stats.add_file(10)
    ticker = ProgressTicker(stats, interval=0.01)
    with caplog.at_level('INFO'):
        ticker.start()
        time.sleep(0.1)
        ticker.stop()
    assert not ticker.is_alive()
    assert any('scanned 1 files' in r.getMessage() for r in caplog.records)


def test_file_root_is_reported_as_one_file(tmp_path, capsys):
    (tmp_path / 'single').write_bytes(b'x' * 10)
    assert main(['--out', 'tab', str(tmp_path / 'single')]) == 0
    out = capsys.readouterr().out
    lines = [line for line in out.splitlines() if '\t' in line]
    assert lines[-1].startswith('3\t8 - 15 B\t1\t10\t')
    assert 'Scanned 1 files in ' in out
