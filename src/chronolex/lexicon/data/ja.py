"""Japanese lexicon."""

ENTRIES: dict[str, str] = {
    "now": "今",
    "today": "今日",
    "tomorrow": "明日",
    "yesterday": "昨日",
    "next": "次|翌|来",
    "last": "前|去|先|昨",
    "this": "今|本|当",
    "in": "あと|ato",
    "and": "と|および",
    "at": "に|で",
    "from": "から|より",
    "to": "まで|までに",
    "minute": "分|ふん|ぷん|fun",
    "hour": "時間|じかん|時|じ",
    "day": "日|にち",
    "week": "週|週間|しゅう|しゅうかん",
    "month": "月|ヶ月|かげつ|がつ",
    "year": "年|ねん",
    "sunday": "日曜日|日曜",
    "monday": "月曜日|月曜",
    "tuesday": "火曜日|火曜",
    "wednesday": "水曜日|水曜",
    "thursday": "木曜日|木曜",
    "friday": "金曜日|金曜",
    "saturday": "土曜日|土曜",
    "indays": "%{timeDelta}日後",
}
