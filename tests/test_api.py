import logging

import pytest

import pcjson


def test_public_parse_json():
    assert pcjson.parse_json('{"foo": [1, "two", null]}') == {'foo': [1, 'two', None]}


def test_public_errors():
    with pytest.raises(pcjson.UnmatchedInputError):
        pcjson.parse_json('[]')
    with pytest.raises(pcjson.TrailingInputError):
        pcjson.parse_json('1 2')


def test_combinators_build_other_grammars():
    # key=value pairs separated by ';'
    word = pcjson.one_or_more(pcjson.any_char().filter(str.isalpha)).map(''.join)
    entry = pcjson.pair(pcjson.left(word, pcjson.literal('=')), word)
    config = pcjson.separate_by(entry, ';').map(dict)

    result = config.run('host=local;mode=fast')
    assert result.is_success
    assert result.value == {'host': 'local', 'mode': 'fast'}
    assert len(result.remaining) == 0


def test_json_parser_is_reusable_inside_other_grammars():
    assignment = pcjson.right(pcjson.literal('let x ='), pcjson.json_parser())
    result = assignment.run('let x = [1, 2];')
    assert result.value == [1, 2]
    assert result.remaining.rest == ';'


def test_init_configures_logging():
    pcjson.init(log_level='WARNING', log_rich=False)
    assert logging.getLogger().level == logging.WARNING
    pcjson.init(log_level='INFO', log_rich=False)
    assert logging.getLogger().level == logging.INFO
    logging.getLogger().handlers.clear()
