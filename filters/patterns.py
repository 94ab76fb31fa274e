from dataclasses import dataclass

from filters.matcher import Language, PatternTable


@dataclass(frozen=True)
class DataProfanity:
    # Шаблоны, начинающиеся с '^x', проверяются только для слов на букву 'x'.
    # Привязанные и узкие шаблоны стоят раньше широких: побеждает первое совпадение.
    ru: tuple[str, ...] = (
        r'^ху[йеёияю]',
        r'^пизд',
        r'^пезд',
        r'^бля(д|т|$)',
        r'^еб(ан|ат|ал|ёт|ет|ну|ли|у|лан|лив|ыр)',
        r'^ёб',
        r'^муд(ак|ач|ил|о[зх])',
        r'^гандон',
        r'^гондон',
        r'^манд(а|у|ой|ав)',
        r'^залуп',
        r'^шлюх',
        r'^сук(а|и|ин|у|ой)$',
        r'^сучк',
        r'^дроч',
        r'^пидор',
        r'^пидар',
        r'^пидр',
        r'^шалав',
        r'^срать',
        r'^дерьм',
        r'^говн',
        r'(на|по|от|за|вы|до|пере|под|раз|рас|об|у|с)ху[йеёия]',
        r'(на|по|от|за|вы|до|пере|под|рас|с|у)пизд',
        r'(за|от|вы|на|по|до|пере|под|раз|рас|об|у|с|про)[ъь]?[её]б(а|ы|у|ну|ись|ыв)',
        r'(долбо|распиздо|трах)[её]б',
        r'(у|раз|за|от)[ъь]?[её]бищ',
        r'(о|при|на|за)хуе[вн]',
    )
    en: tuple[str, ...] = (
        r'^fuck',
        r'^fck',
        r'^fuk',
        r'^shit',
        r'^bitch',
        r'^bastard',
        r'^cunt',
        r'^dick(head|s)?$',
        r'^cock(sucker)?s?$',
        r'^asshole',
        r'^arsehole',
        r'^wank',
        r'^twat',
        r'^slut',
        r'^whore',
        r'^prick$',
        r'^pussy',
        r'^motherf',
        r'^jackass',
        r'(mother|mutha|brain|dumb|clus?ter)fuck',
        r'(bull|horse|dip|chicken|bat|ape)shit',
        r'(dumb|jack|smart|kick)ass',
        r'fuck(ing|er|ed|s|in)$',
    )
    fi: tuple[str, ...] = (
        r'^vittu',
        r'^vitu',
        r'^perkele',
        r'^paska',
        r'^kusipää',
        r'^huora',
        r'^helvet',
        r'^saatana',
        r'^jumalauta',
        r'^mulkku',
        r'^kyrpä',
        r'^runkk',
        r'(perse|paska)reikä',
        r'vittu(mainen|ilu|ile)',
    )
    sv: tuple[str, ...] = (
        r'^fitta',
        r'^kuk(en|ar|jävel)?$',
        r'^hora$',
        r'^horun',
        r'^jävl',
        r'^jävel',
        r'^helvete',
        r'^knull',
        r'^skit(ig|snack|stövel)',
        r'^röv(hål|slick)',
        r'(fitt|kuk|skit|röv)(huvud|unge|stövel)',
    )
    zh: tuple[str, ...] = (
        r'操你',
        r'肏',
        r'屌',
        r'傻[逼屄比]',
        r'[他她]妈的',
        r'妈的',
        r'你妈',
        r'婊子',
        r'贱人',
        r'王八蛋',
        r'狗屎',
        r'混蛋',
        r'鸡巴',
        r'去死',
    )


_data = DataProfanity()

PATTERNS: PatternTable = {
    Language.RU: _data.ru,
    Language.EN: _data.en,
    Language.FI: _data.fi,
    Language.SV: _data.sv,
    Language.ZH: _data.zh}
