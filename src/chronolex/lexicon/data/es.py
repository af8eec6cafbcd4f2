"""Spanish lexicon."""

ENTRIES: dict[str, str] = {
    "now": "ahora",
    "today": "hoy",
    "tomorrow": "mañana",
    "yesterday": "ayer",
    "next": "próximo|próxima|proximo|proxima|siguiente",
    "last": "último|última|ultimo|ultima|pasado|pasada",
    "this": "este|esta",
    "in": "en|dentro de",
    "and": "y",
    "at": "a las|a la|a",
    "from": "de|desde",
    "to": "a|hasta",
    "minute": "minuto|minutos|min",
    "hour": "hora|horas|h",
    "day": "día|días|dia|dias",
    "week": "semana|semanas",
    "month": "mes|meses",
    "year": "año|años",
    "sunday": "domingo|dom",
    "monday": "lunes|lun",
    "tuesday": "martes|mar",
    "wednesday": "miércoles|miercoles|mié|mie",
    "thursday": "jueves|jue",
    "friday": "viernes|vie",
    "saturday": "sábado|sabado|sáb|sab",
    "indays": "en %{timeDelta} días",
}
