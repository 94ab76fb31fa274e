from filters.filters import ProfanityFilter


def test_fix_without_match_returns_input(profanity_filter):
    assert profanity_filter.fix('hello world') == 'hello world'


def test_fix_single_substitution(profanity_filter):
    assert profanity_filter.fix('дурак и дурак') == 'глупыш и дурак'


def test_fix_restores_uppercase_first_letter(profanity_filter):
    assert profanity_filter.fix('Дурак же') == 'Глупыш же'


def test_fix_keeps_lowercase_first_letter(profanity_filter):
    assert profanity_filter.fix('дурак же') == 'глупыш же'


def test_fix_earliest_declared_entry_wins(profanity_filter):
    # Совпадают 'дурак' и 'ты': побеждает 'дурак', объявленный раньше
    assert profanity_filter.fix('ты дурак') == 'ты глупыш'
    assert profanity_filter.fix('Ты балбес') == 'Ты оболтус'


def test_fix_is_case_insensitive(profanity_filter):
    assert profanity_filter.fix('ДУРАК') == 'Глупыш'


def test_fix_with_group_reference(make_filter):
    pf = make_filter(replaces={r'\bох[уy]енн(о|ый)\b': r'офигенн\1'})
    assert pf.fix('Охуенный день') == 'Офигенный день'


def test_fix_default_table():
    pf = ProfanityFilter()
    assert pf.fix('Пиздец') == 'Капец'
    assert pf.fix('это охуенно') == 'это офигенно'
    assert pf.fix('иди нахуй') == 'иди нафиг'
    assert pf.fix('мне похуй') == 'мне пофиг'
    assert pf.fix('Доброе утро') == 'Доброе утро'
