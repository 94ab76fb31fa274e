# Шаблон → замена для ProfanityFilter.fix.
# Порядок объявления важен: при нескольких совпадениях побеждает запись,
# объявленная раньше, поэтому длинные формы идут перед корнями.
REPLACE_RU: dict[str, str] = {
    r'\bнахуй\b': 'нафиг',
    r'\bпох[уy]й\b': 'пофиг',
    r'\bох[уy]енн(о|ый|ая|ое|ые)\b': r'офигенн\1',
    r'\bох[уy]еть\b': 'офигеть',
    r'\bх[уy]йн(я|ю|и|ей)\b': r'фигн\1',
    r'\bх[уy]ёв(о|ый|ая|ое)\b': r'хренов\1',
    r'\bх[уy]й\b': 'хрен',
    r'\bпи[зс]дец\b': 'капец',
    r'\bпи[зс]д[её]ж\b': 'враньё',
    r'\bпизд[ие]ть\b': 'врать',
    r'\bзаеб(ал|ала|али|ало)\b': r'достал\1',
    r'\bеб[ау]ть\b': 'блин',
    r'\bёбан(ый|ая|ое|ые)\b': r'долбан\1',
    r'\bеб[ао]н(ый|ая|ое|ые)\b': r'долбан\1',
    r'\bбля(дь|ть)?\b': 'блин',
    r'\bсука\b': 'зараза',
    r'\bмудак\b': 'дурак',
    r'\bгавно\b': 'говно',
}
