"""Russian lexicon."""

ENTRIES: dict[str, str] = {
    "now": "сейчас",
    "today": "сегодня",
    "tomorrow": "завтра",
    "yesterday": "вчера",
    "next": "следующий|следующая|следующее|следующую",
    "last": "прошлый|прошлая|прошлое|прошлую|последний",
    "this": "этот|эта|это|эту",
    "in": "через",
    "and": "и",
    "at": "в|во",
    "from": "с|со",
    "to": "по|до",
    "minute": "минута|минуты|минут|минуту|мин",
    "hour": "час|часа|часов",
    "day": "день|дня|дней",
    "week": "неделя|недели|недель|неделю",
    "month": "месяц|месяца|месяцев",
    "year": "год|года|лет",
    "sunday": "воскресенье",
    "monday": "понедельник",
    "tuesday": "вторник",
    "wednesday": "среда|среду",
    "thursday": "четверг",
    "friday": "пятница|пятницу",
    "saturday": "суббота|субботу",
    "indays": "через %{timeDelta} дней",
}
