# app/customers/options.py
# 폼 선택지 (프론트와 id 동일하게 유지)

CATEGORY_VIDEO_GAMES = "video_games"
CATEGORY_GIFT_CARDS = "gift_cards"
SHOP_CATEGORIES = [CATEGORY_VIDEO_GAMES, CATEGORY_GIFT_CARDS]

GIFT_CARD_OPTIONS = {
    "roblox": "Roblox",
    "amazon": "Amazon",
    "itunes": "Apple iTunes",
    "fortnite": "Fortnite V-Bucks",
    "freefire": "FreeFire Diamonds",
    "playstation": "PlayStation Network",
    "xbox": "Microsoft XBOX",
    "nintendo": "Nintendo eShop",
    "pubg": "PUBG UC",
    "riot": "RIOT Points",
    "steam": "Steam",
    "other": "Other",
}

# username 자리에 이메일을 받는 카드
EMAIL_USERNAME_GIFT_CARDS = {"amazon", "itunes"}

CONSOLE_OPTIONS = {
    "xboxone": "Xbox One",
    "xbox360": "Xbox 360",
    "ps4": "PlayStation 4",
    "ps5": "PlayStation 5",
    "nintendoswitch": "Nintendo Switch / Switch OLED",
    "nintendoswitch2": "Nintendo Switch 2",
    "pc": "PC",
    "retro": "Retro",
}

RETRO_CONSOLE_OPTIONS = {
    "ps1": "PS1/PS2",
    "ps2": "PS3",
    "xbox": "Xbox",
    "psp": "PSP/PS Vita",
    "nintendo64-snes": "Nintendo 64/SNES",
    "nintendo3ds-ds-wii": "Nintendo 3DS/DS/WII/Gamecube",
}

ADULT_AGE = 18
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 80
GIFT_CARD_USERNAME_MAX_LENGTH = 40
