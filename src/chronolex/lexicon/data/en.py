"""English lexicon."""

ENTRIES: dict[str, str] = {
    "now": "now|right now",
    "today": "today",
    "tomorrow": "tomorrow|tmrw|tmr",
    "yesterday": "yesterday",
    "next": "next|following|coming",
    "last": "last|previous|past",
    "this": "this",
    "in": "in|within",
    "and": "and|&",
    "at": "at|@",
    "from": "from",
    "to": "to|until|till|through",
    "minute": "minute|minutes|min|mins",
    "hour": "hour|hours|hr|hrs|h",
    "day": "day|days|d",
    "week": "week|weeks|wk|wks|w",
    "month": "month|months|mo|mos",
    "year": "year|years|yr|yrs|y",
    "sunday": "sunday|sun",
    "monday": "monday|mon",
    "tuesday": "tuesday|tue|tues",
    "wednesday": "wednesday|wed",
    "thursday": "thursday|thu|thur|thurs",
    "friday": "friday|fri",
    "saturday": "saturday|sat",
    "indays": "in %{timeDelta} days",
}
