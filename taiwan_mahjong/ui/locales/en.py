"""English translations."""

TRANSLATIONS = {
    # Menu
    "label.title": "Taiwanese Mahjong Scoring Trainer",
    "label.subtitle": "Count the tai of 16-tile winning hands",
    "mode.select": "Choose a mode:",
    "mode.quiz": "Quiz mode",
    "mode.answer": "Answer mode",
    "mode.language": "Language",
    "mode.quit": "Quit",
    "lang.select": "Choose a language:",
    "lang.zh": "繁體中文",
    "lang.en": "English",

    # Table
    "label.prevailing_wind": "{wind} round",
    "label.dealer": "Dealer",
    "label.seat_marker": "Seat",
    "label.streak": "x{n}",

    # Hand
    "label.hand": "Hand",
    "label.flowers": "Flowers",
    "label.revealed": "Revealed",
    "label.in_hand": "In hand",
    "label.winning_tile": "Winning tile",
    "label.none": "none",
    "kong.concealed": "Concealed kong",
    "kong.revealed": "Kong",

    "win.self_draw": "Self-draw",
    "win.kong_draw": "Win after kong",
    "win.from_next": "Discard from the right",
    "win.from_prev": "Discard from the left",
    "win.from_opp": "Discard from across",
    "win.robbing_kong_next": "Robbing the right player's kong",
    "win.robbing_kong_prev": "Robbing the left player's kong",
    "win.robbing_kong_opp": "Robbing the kong across",

    # Fans
    "label.fans": "Fans",
    "label.fan_name": "Fan",
    "label.fan_points": "Tai",
    "label.points_unit": "{points} tai",
    "label.total": "Total: {points} tai",
    "label.dealer_pays": "Dealer pays",
    "label.others_pay": "Others pay",
    "label.no_fans": "(no fans)",

    "fan.dealer": "Dealer",
    "fan.continuing_dealer": "Continuing dealer",
    "fan.pull_dealer": "Pull dealer",
    "fan.fully_concealed": "Fully concealed",
    "fan.no_melds_self_draw": "Concealed self-draw",
    "fan.self_draw": "Self-draw",
    "fan.seat_wind": "Seat wind ({detail})",
    "fan.prevailing_wind": "Prevailing wind ({detail})",
    "fan.flower_season": "Season flower (seat {detail})",
    "fan.flower_plant": "Plant flower (seat {detail})",
    "fan.robbing_kong": "Robbing a kong",
    "fan.white_dragon": "White dragon",
    "fan.green_dragon": "Green dragon",
    "fan.red_dragon": "Red dragon",
    "fan.single_wait": "Single wait",
    "fan.half_call": "Half call",
    "fan.kong_draw": "Win after kong",
    "fan.flat_win": "Flat win",
    "fan.full_call": "Full call",
    "fan.complete_seasons": "All four seasons",
    "fan.complete_plants": "All four plants",
    "fan.three_concealed": "Three concealed triplets",
    "fan.all_triplets": "All triplets",
    "fan.small_three_dragons": "Small three dragons",
    "fan.half_flush": "Half flush ({detail})",
    "fan.four_concealed": "Four concealed triplets",
    "fan.five_concealed": "Five concealed triplets",
    "fan.big_three_dragons": "Big three dragons",
    "fan.small_four_winds": "Small four winds",
    "fan.full_flush": "Full flush ({detail})",
    "fan.all_honors": "All honors",
    "fan.eight_flowers": "Eight flowers",
    "fan.big_four_winds": "Big four winds",

    "detail.east": "East",
    "detail.south": "South",
    "detail.west": "West",
    "detail.north": "North",
    "detail.character": "characters",
    "detail.dot": "dots",
    "detail.bamboo": "bamboo",

    # Quiz
    "prompt.guess": "How many tai?",
    "prompt.guess_dealer": "Tai paid by the dealer?",
    "prompt.guess_non_dealer": "Tai paid by the others?",
    "prompt.next": "Enter for the next hand, s to skip, q to quit",
    "prompt.invalid_input": "Invalid input, please enter a number",
    "prompt.choose": "Enter (0-{n}):",
    "msg.correct": "Correct!",
    "msg.incorrect": "Wrong!",
    "msg.split_hint": "Non-dealer self-draw: answer the dealer's and the others' totals",
    "msg.tally": "{correct} correct, {incorrect} wrong",
    "msg.skipped": "Skipped",
    "msg.log_saved": "Log saved: {path}",
    "msg.goodbye": "Goodbye!",
    "msg.exit": "Trainer closed",
}
