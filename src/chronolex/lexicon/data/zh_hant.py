"""Traditional Chinese lexicon."""

ENTRIES: dict[str, str] = {
    "now": "現在",
    "today": "今天|今日",
    "tomorrow": "明天|明日",
    "yesterday": "昨天|昨日",
    "next": "下個|下一個|下",
    "last": "上個|上一個|上",
    "this": "這個|這|本",
    "in": "再過|過",
    "and": "和|又",
    "at": "在|於",
    "from": "從|由",
    "to": "到|至",
    "minute": "分鐘|分",
    "hour": "小時|個小時|鐘頭",
    "day": "天|日",
    "week": "星期|個星期|週|周",
    "month": "個月|月",
    "year": "年",
    "sunday": "星期日|星期天|週日|禮拜天",
    "monday": "星期一|週一|禮拜一",
    "tuesday": "星期二|週二|禮拜二",
    "wednesday": "星期三|週三|禮拜三",
    "thursday": "星期四|週四|禮拜四",
    "friday": "星期五|週五|禮拜五",
    "saturday": "星期六|週六|禮拜六",
    "indays": "%{timeDelta}天後",
}
