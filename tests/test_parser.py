"""Tests for reading and writing INI files."""

import asyncio
import logging

import pytest

from typedini import IniParser, InvalidLocation, UnknownSection, loads

from samples import TEST1, TEST2, Config, Sample


@pytest.fixture
def test1(tmp_path):
    path = tmp_path / 'Test1.ini'
    path.write_text(TEST1, encoding='utf-8')
    return path


# ---------------------------------------------------------------------------
# read
# ---------------------------------------------------------------------------

def test_read(test1):
    doc = IniParser(test1, Config, 'utf-8').read()
    assert doc == loads(Config, TEST1)

def test_read_missing_header(tmp_path):
    path = tmp_path / 'Test2.ini'
    path.write_text(TEST2, encoding='utf-8')
    doc = IniParser(str(path), Config).read()
    assert doc.A is not None
    assert doc.B is None

def test_wrong_location_returns_none(caplog):
    with caplog.at_level(logging.WARNING):
        assert IniParser('', Config).read() is None
    assert 'nothing to parse' in caplog.text

def test_wrong_file_returns_none(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        assert IniParser(tmp_path / 'TestNone.ini', Config).read() is None
    assert 'TestNone.ini' in caplog.text

def test_directory_returns_none(tmp_path):
    assert IniParser(tmp_path, Config).read() is None

def test_read_fatal_error_propagates(tmp_path):
    path = tmp_path / 'bad.ini'
    path.write_text('[C]\n', encoding='utf-8')
    with pytest.raises(UnknownSection):
        IniParser(path, Config).read()

def test_read_guesses_codec(tmp_path):
    path = tmp_path / 'utf16.ini'
    path.write_text(TEST1, encoding='utf-16')
    doc = IniParser(path, Config, 'utf-8').read()
    assert doc == loads(Config, TEST1)


# ---------------------------------------------------------------------------
# read_async
# ---------------------------------------------------------------------------

def test_read_async(test1):
    doc = asyncio.run(IniParser(test1, Config, 'utf-8').read_async())
    assert doc == loads(Config, TEST1)

def test_read_async_missing():
    assert asyncio.run(IniParser('', Config).read_async()) is None

def test_read_async_guesses_codec(tmp_path):
    path = tmp_path / 'utf16.ini'
    path.write_text(TEST1, encoding='utf-16')
    doc = asyncio.run(IniParser(path, Config, 'utf-8').read_async())
    assert doc == loads(Config, TEST1)


# ---------------------------------------------------------------------------
# write
# ---------------------------------------------------------------------------

def test_write_then_read(tmp_path):
    doc = loads(Config, TEST1)
    path = tmp_path / 'out.ini'
    parser = IniParser(path, Config, 'utf-8')
    parser.write(doc)
    assert parser.read() == doc
    assert path.read_text(encoding='utf-8').startswith('[A]\nMyBool = true\n')

def test_write_creates_directories(tmp_path):
    path = tmp_path / 'a' / 'b' / 'out.ini'
    IniParser(path, Config).write(Config(A=Sample(MyInt=1)))
    assert path.exists()

def test_write_requires_ini_suffix(tmp_path):
    with pytest.raises(InvalidLocation):
        IniParser(tmp_path / 'out.txt', Config).write(Config())

def test_suffix_checked_before_none_document(tmp_path):
    with pytest.raises(InvalidLocation):
        IniParser(tmp_path / 'out.txt', Config).write(None)

def test_write_nothing(tmp_path):
    IniParser('', Config).write(Config())
    path = tmp_path / 'none.ini'
    IniParser(path, Config).write(None)
    assert not path.exists()

def test_str(test1):
    assert str(test1) in str(IniParser(test1, Config, 'utf-8'))
