"""Ukrainian lexicon."""

ENTRIES: dict[str, str] = {
    "now": "зараз",
    "today": "сьогодні",
    "tomorrow": "завтра",
    "yesterday": "вчора",
    "next": "наступний|наступна|наступне|наступну",
    "last": "минулий|минула|минуле|минулу|останній",
    "this": "цей|ця|це|цю",
    "in": "через",
    "and": "і|та",
    "at": "о|об",
    "from": "з|із",
    "to": "по|до",
    "minute": "хвилина|хвилини|хвилин|хвилину|хв",
    "hour": "година|години|годин|годину",
    "day": "день|дні|днів",
    "week": "тиждень|тижні|тижнів",
    "month": "місяць|місяці|місяців",
    "year": "рік|роки|років",
    "sunday": "неділя|неділю",
    "monday": "понеділок",
    "tuesday": "вівторок",
    "wednesday": "середа|середу",
    "thursday": "четвер",
    "friday": "п'ятниця|п'ятницю|пʼятниця",
    "saturday": "субота|суботу",
    "indays": "через %{timeDelta} днів",
}
