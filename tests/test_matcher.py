import pytest

from filters import matcher
from filters.matcher import (Language,
                             MatchResult,
                             anchor_allows,
                             parse_languages,
                             search,
                             select_patterns)


def test_select_cyrillic_uses_only_ru_table(patterns):
    languages = set(Language)
    assert select_patterns('дурак', languages, patterns) == list(
        patterns[Language.RU])


def test_select_cyrillic_without_ru_is_empty(patterns):
    languages = {Language.EN, Language.FI, Language.SV, Language.ZH}
    assert select_patterns('дурак', languages, patterns) == []


def test_select_latin_keeps_en_fi_sv_order(patterns):
    languages = {Language.SV, Language.FI, Language.EN}
    expected = [*patterns[Language.EN],
                *patterns[Language.FI],
                *patterns[Language.SV]]
    assert select_patterns('word', languages, patterns) == expected


def test_select_latin_skips_inactive_languages(patterns):
    assert select_patterns(
        'word', {Language.SV}, patterns) == list(
        patterns[Language.SV])


def test_select_han(patterns):
    assert select_patterns(
        '笨蛋', {Language.ZH}, patterns) == [r'笨蛋']
    assert select_patterns('笨蛋', {Language.RU}, patterns) == []


def test_select_without_script_is_empty(patterns):
    assert select_patterns('1234', set(Language), patterns) == []


def test_select_missing_table_entry(patterns):
    assert select_patterns('word', {Language.EN}, {}) == []


@pytest.mark.parametrize('pattern, letter, expected', [
    ('^foo', 'f', True),
    ('^foo', 'b', False),
    ('^Foo', 'f', True),
    ('bar', 'x', True),
    ('^[fф]oo', 'f', False),
])
def test_anchor_allows(pattern, letter, expected):
    assert anchor_allows(pattern, letter) is expected


def test_search_returns_match_result():
    result = search('xwordx', ['word'])
    assert result == MatchResult(word='xwordx', matched='word', pattern='word')


def test_search_is_case_insensitive():
    assert search('WORD', ['word']).matched == 'WORD'
    assert search('Foobar', ['^foo']).pattern == '^foo'


def test_search_first_match_wins():
    result = search('foobar', ['bar', 'foobar', '^foo'])
    assert result.pattern == 'bar'


def test_search_no_match():
    assert search('hello', ['^foo', 'word']) is None
    assert search('hello', []) is None


def test_anchored_patterns_never_reach_regex_engine(monkeypatch):
    compiled: list[str] = []
    original = matcher.compile_pattern
    
    def recording_compile(pattern):
        compiled.append(pattern)
        return original(pattern)
    
    monkeypatch.setattr(matcher, 'compile_pattern', recording_compile)
    
    assert search('zap', ['^foo', '^bar', 'nothing', '^zap']).pattern == '^zap'
    assert compiled == ['nothing', '^zap']


def test_search_trace_only_in_debug():
    calls: list[tuple[str, str]] = []
    
    def trace(word, pattern):
        calls.append((word, pattern))
    
    search('foo', ['^foo'], debug=False, trace=trace)
    assert calls == []
    
    search('foo', ['^foo'], debug=True, trace=trace)
    assert calls == [('foo', '^foo')]
    
    search('bar', ['^foo'], debug=True, trace=trace)
    assert calls == [('foo', '^foo')]


def test_parse_languages():
    assert parse_languages(['ru', 'zh']) == {Language.RU, Language.ZH}
    with pytest.raises(ValueError):
        parse_languages(['de'])
