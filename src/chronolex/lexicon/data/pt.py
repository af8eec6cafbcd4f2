"""Portuguese lexicon."""

ENTRIES: dict[str, str] = {
    "now": "agora",
    "today": "hoje",
    "tomorrow": "amanhã|amanha",
    "yesterday": "ontem",
    "next": "próximo|próxima|proximo|proxima|seguinte",
    "last": "último|última|ultimo|ultima|passado|passada",
    "this": "este|esta|neste|nesta",
    "in": "em|daqui a|dentro de",
    "and": "e",
    "at": "às|as|à|a",
    "from": "de|desde",
    "to": "até|ate|a",
    "minute": "minuto|minutos|min",
    "hour": "hora|horas|h",
    "day": "dia|dias",
    "week": "semana|semanas",
    "month": "mês|mes|meses",
    "year": "ano|anos",
    "sunday": "domingo|dom",
    "monday": "segunda-feira|segunda|seg",
    "tuesday": "terça-feira|terca-feira|terça|terca|ter",
    "wednesday": "quarta-feira|quarta|qua",
    "thursday": "quinta-feira|quinta|qui",
    "friday": "sexta-feira|sexta|sex",
    "saturday": "sábado|sabado|sáb|sab",
    "indays": "em %{timeDelta} dias",
}
