import pytest
import yaml

from pyminiini import IniParser
from pyminiini.cli import main
from conftest import NOT_WELL_FORMED, WELL_FORMED


@pytest.fixture
def ini_file(write_ini):
    return str(write_ini('data.ini', NOT_WELL_FORMED))


def test_prints_normalized_document(ini_file, capsys):
    assert main([ini_file, '--encoding', 'utf-8']) == 0
    out = capsys.readouterr().out
    assert out.startswith('[fruit]\napple=good\nbanana=very good\n')
    assert 'GARBAGE' not in out
    assert '[nuts]\nalmond=false\n' in out


def test_prints_one_section(ini_file, capsys):
    assert main([ini_file, 'VEGETABLES']) == 0
    assert capsys.readouterr().out == (
        '[vegetables]\ngarlic=-3\npepper=0.76\npumpkin=-2\n')


def test_missing_section_prints_nothing(ini_file, capsys):
    assert main([ini_file, 'meat']) == 0
    assert capsys.readouterr().out == ''


@pytest.mark.parametrize('section, key, kind, expected', [
    ('fruit', 'banana', 'str', 'very good'),
    ('vegetables', 'garlic', 'int', '-3'),
    ('vegetables', 'garlic', 'uint', '0'),
    ('vegetables', 'pepper', 'float', '0.76'),
    ('nuts', 'coconut', 'bool', 'true'),
    ('nuts', 'peanut', 'bool', 'false'),
    ('nuts', 'missing', 'str', ''),
])
def test_prints_typed_value(ini_file, capsys, section, key, kind, expected):
    assert main([ini_file, section, key, '--type', kind]) == 0
    assert capsys.readouterr().out == expected + '\n'


def test_size(ini_file, capsys):
    main([ini_file, '--size'])
    main([ini_file, 'fruit', '--size'])
    main([ini_file, 'meat', '--size'])
    assert capsys.readouterr().out.split() == ['3', '4', '0']


def test_yaml_dump(ini_file, capsys):
    assert main([ini_file, '--yaml']) == 0
    dumped = yaml.safe_load(capsys.readouterr().out)
    assert dumped == IniParser.readlines(WELL_FORMED).to_dict()
    assert list(dumped) == ['fruit', 'vegetables', 'nuts']
    assert dumped['vegetables']['garlic'] == '-3'


def test_missing_file_is_empty(tmp_path, capsys):
    assert main([str(tmp_path / 'nope.ini'), '--size']) == 0
    assert capsys.readouterr().out == '0\n'


def test_bad_type_is_usage_error(ini_file):
    with pytest.raises(SystemExit) as e:
        main([ini_file, 'fruit', 'apple', '--type', 'list'])
    assert e.value.code == 2


def test_verbose_logs_dropped_lines(ini_file, caplog):
    assert main([ini_file, '--size', '-v']) == 0
    assert 'garbage skipped' in caplog.text
    assert "'GARBAGE'" in caplog.text


def test_quiet_by_default(ini_file, caplog):
    assert main([ini_file, '--size']) == 0
    assert 'garbage skipped' not in caplog.text
