"""Traditional Chinese (default) translations."""

TRANSLATIONS = {
    # Menu
    "label.title": "台灣麻將 算台練習",
    "label.subtitle": "十六張麻將台數計算",
    "mode.select": "請選擇模式：",
    "mode.quiz": "測驗模式",
    "mode.answer": "顯示答案模式",
    "mode.language": "切換語言",
    "mode.quit": "離開",
    "lang.select": "選擇語言：",
    "lang.zh": "繁體中文",
    "lang.en": "English",

    # Table
    "label.prevailing_wind": "{wind}風場",
    "label.dealer": "莊",
    "label.seat_marker": "門",
    "label.streak": "連{n}",

    # Hand
    "label.hand": "手牌",
    "label.flowers": "花牌",
    "label.revealed": "明牌",
    "label.in_hand": "手中",
    "label.winning_tile": "胡牌",
    "label.none": "無",
    "kong.concealed": "暗槓",
    "kong.revealed": "明槓",

    "win.self_draw": "自摸",
    "win.kong_draw": "槓上開花",
    "win.from_next": "下家放槍",
    "win.from_prev": "上家放槍",
    "win.from_opp": "對家放槍",
    "win.robbing_kong_next": "搶下家槓",
    "win.robbing_kong_prev": "搶上家槓",
    "win.robbing_kong_opp": "搶對家槓",

    # Fans
    "label.fans": "台數",
    "label.fan_name": "台名",
    "label.fan_points": "台",
    "label.points_unit": "{points}台",
    "label.total": "總台數：{points}台",
    "label.dealer_pays": "莊家支付",
    "label.others_pay": "閒家支付",
    "label.no_fans": "（無台）",

    # Quiz
    "prompt.guess": "總共幾台？",
    "prompt.guess_dealer": "莊家支付幾台？",
    "prompt.guess_non_dealer": "閒家支付幾台？",
    "prompt.next": "按 Enter 下一題，輸入 s 跳過，q 離開",
    "prompt.invalid_input": "輸入無效，請輸入數字",
    "prompt.choose": "請輸入 (0-{n})：",
    "msg.correct": "正確！",
    "msg.incorrect": "錯誤！",
    "msg.split_hint": "閒家自摸：請分別回答莊家與閒家的台數",
    "msg.tally": "答對 {correct} 題，答錯 {incorrect} 題",
    "msg.skipped": "已跳過",
    "msg.log_saved": "紀錄已儲存：{path}",
    "msg.goodbye": "再見！",
    "msg.exit": "已離開練習",
}
