"""Italian lexicon."""

ENTRIES: dict[str, str] = {
    "now": "adesso|ora",
    "today": "oggi",
    "tomorrow": "domani",
    "yesterday": "ieri",
    "next": "prossimo|prossima",
    "last": "scorso|scorsa|ultimo|ultima",
    "this": "questo|questa",
    "in": "tra|fra",
    "and": "e",
    "at": "alle|all'|a",
    "from": "da|dal",
    "to": "a|al|fino a",
    "minute": "minuto|minuti|min",
    "hour": "ora|ore",
    "day": "giorno|giorni",
    "week": "settimana|settimane",
    "month": "mese|mesi",
    "year": "anno|anni",
    "sunday": "domenica|dom",
    "monday": "lunedì|lunedi|lun",
    "tuesday": "martedì|martedi|mar",
    "wednesday": "mercoledì|mercoledi|mer",
    "thursday": "giovedì|giovedi|gio",
    "friday": "venerdì|venerdi|ven",
    "saturday": "sabato|sab",
    "indays": "tra %{timeDelta} giorni",
}
