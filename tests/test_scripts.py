import pytest

from filters.scripts import (ScriptFamily,
                             classify_script,
                             has_cyrillic,
                             has_han,
                             has_latin,
                             segment_word)


@pytest.mark.parametrize('string, expected', [
    ('hello', ScriptFamily.LATIN),
    ('Привет', ScriptFamily.CYRILLIC),
    ('你好', ScriptFamily.HAN),
    ('123!?', ScriptFamily.NONE),
    ('', ScriptFamily.NONE),
    ('приветhi', ScriptFamily.LATIN),
    ('привет你好', ScriptFamily.CYRILLIC),
    ('äöå', ScriptFamily.LATIN),
])
def test_classify_script(string, expected):
    assert classify_script(string) is expected


def test_presence_helpers():
    assert has_latin('123a')
    assert not has_latin('абв')
    assert has_cyrillic('abcж')
    assert has_han('abc中')
    assert not has_han('abc')


@pytest.mark.parametrize('token, expected', [
    ('word!!!', ['word']),
    ('hello,world', ['hello', 'world']),
    ('при-вет', ['при', 'вет']),
    ('!!!', ['!!!']),
    ('1!', ['1!']),
    ('', []),
    ('abcпривет', ['abc']),
    ('(你好)', ['你好']),
    ('1\t2', ['1', '2']),
])
def test_segment_word(token, expected):
    assert segment_word(token) == expected


def test_segment_word_with_explicit_family():
    assert segment_word('abcпривет', ScriptFamily.CYRILLIC) == ['привет']
    assert segment_word(' 12-34 ', ScriptFamily.NONE) == ['12-34']
