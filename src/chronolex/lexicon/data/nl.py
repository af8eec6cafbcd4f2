"""Dutch lexicon."""

ENTRIES: dict[str, str] = {
    "now": "nu",
    "today": "vandaag",
    "tomorrow": "morgen",
    "yesterday": "gisteren",
    "next": "volgende|komende",
    "last": "vorige|afgelopen",
    "this": "deze",
    "in": "over|binnen",
    "and": "en",
    "at": "om",
    "from": "van|vanaf",
    "to": "tot|t/m",
    "minute": "minuut|minuten|min",
    "hour": "uur|uren",
    "day": "dag|dagen",
    "week": "week|weken",
    "month": "maand|maanden",
    "year": "jaar|jaren",
    "sunday": "zondag",
    "monday": "maandag",
    "tuesday": "dinsdag",
    "wednesday": "woensdag",
    "thursday": "donderdag",
    "friday": "vrijdag",
    "saturday": "zaterdag",
    "indays": "over %{timeDelta} dagen",
}
