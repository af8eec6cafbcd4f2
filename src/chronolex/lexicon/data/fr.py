"""French lexicon."""

ENTRIES: dict[str, str] = {
    "now": "maintenant|tout de suite",
    "today": "aujourd'hui|aujourd’hui",
    "tomorrow": "demain",
    "yesterday": "hier",
    "next": "prochain|prochaine|suivant|suivante",
    "last": "dernier|dernière|précédent|précédente",
    "this": "ce|cet|cette",
    "in": "dans|d'ici",
    "and": "et",
    "at": "à|a",
    "from": "de|du",
    "to": "à|au|a|jusqu'à",
    "minute": "minute|minutes|min|mn",
    "hour": "heure|heures|h",
    "day": "jour|jours|j",
    "week": "semaine|semaines|sem",
    "month": "mois",
    "year": "an|ans|année|années",
    "sunday": "dimanche|dim",
    "monday": "lundi|lun",
    "tuesday": "mardi|mar",
    "wednesday": "mercredi|mer",
    "thursday": "jeudi|jeu",
    "friday": "vendredi|ven",
    "saturday": "samedi|sam",
    "indays": "dans %{timeDelta} jours",
}
