import pytest

from filters.filters import ProfanityFilter
from filters.matcher import Language

FIXTURE_PATTERNS = {
    Language.RU: (r'^дурак', r'балбес'),
    Language.EN: (r'^foo', r'word', r'^zap'),
    Language.FI: (r'^hupsis', r'wo.d'),
    Language.SV: (r'^tusan', r'w.rd'),
    Language.ZH: (r'笨蛋',)}

FIXTURE_REPLACES = {
    r'дурак': 'глупыш',
    r'балбес': 'оболтус',
    r'ты': 'вы'}


@pytest.fixture
def make_filter():
    def factory(**options) -> ProfanityFilter:
        options.setdefault('patterns', FIXTURE_PATTERNS)
        options.setdefault('replaces', FIXTURE_REPLACES)
        return ProfanityFilter(**options)
    
    return factory


@pytest.fixture
def profanity_filter(make_filter) -> ProfanityFilter:
    return make_filter()


@pytest.fixture
def patterns():
    return FIXTURE_PATTERNS
