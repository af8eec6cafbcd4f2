"""German lexicon."""

ENTRIES: dict[str, str] = {
    "now": "jetzt|sofort",
    "today": "heute",
    "tomorrow": "morgen",
    "yesterday": "gestern",
    "next": "nächster|nächste|nächsten|nächstes|kommender|kommende|kommenden",
    "last": "letzter|letzte|letzten|letztes|vergangener|vergangene|vergangenen",
    "this": "dieser|diese|diesen|dieses",
    "in": "in",
    "and": "und",
    "at": "um",
    "from": "von|ab",
    "to": "bis",
    "minute": "minute|minuten|min",
    "hour": "stunde|stunden|std",
    "day": "tag|tage|tagen",
    "week": "woche|wochen",
    "month": "monat|monate|monaten",
    "year": "jahr|jahre|jahren",
    "sunday": "sonntag",
    "monday": "montag",
    "tuesday": "dienstag",
    "wednesday": "mittwoch",
    "thursday": "donnerstag",
    "friday": "freitag",
    "saturday": "samstag|sonnabend",
    "indays": "in %{timeDelta} Tagen",
}
