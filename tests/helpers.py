"""Тестовые данные: небольшой датасет в формате emoji.json и символы эмодзи."""


def make_entry(short_names, unified, non_qualified=None, platforms=("apple", "google", "twitter", "facebook"), **extra):
    entry = {
        "short_names": list(short_names),
        "unified": unified,
        "non_qualified": non_qualified,
        "has_img_apple": "apple" in platforms,
        "has_img_google": "google" in platforms,
        "has_img_twitter": "twitter" in platforms,
        "has_img_facebook": "facebook" in platforms,
    }
    entry.update(extra)
    return entry


SMILE = "\U0001F604"
HEART = "\u2764"
THUMBSUP = "\U0001F44D"
TONE1 = "\U0001F3FB"
TONE2 = "\U0001F3FC"
TONE5 = "\U0001F3FF"
REGIONAL_U = "\U0001F1FA"
FLAG_US = "\U0001F1FA\U0001F1F8"
FAMILY = "\U0001F468\u200d\U0001F469\u200d\U0001F466"
HANDSHAKE = "\U0001F91D"
HANDSHAKE_TONE1_TONE2 = "\U0001FAF1\U0001F3FB\u200d\U0001FAF2\U0001F3FC"


def sample_entries():
    return [
        make_entry(["smile"], "1F604"),
        make_entry(["heart"], "2764-FE0F", non_qualified="2764", platforms=("apple",)),
        make_entry(
            ["+1", "thumbsup"], "1F44D",
            skin_variations={
                "1F3FB": make_entry([], "1F44D-1F3FB"),
                "1F3FC": make_entry([], "1F44D-1F3FC"),
            },
        ),
        make_entry(["regional_indicator_u"], "1F1FA"),
        make_entry(["flag-us", "us"], "1F1FA-1F1F8"),
        make_entry(["family"], "1F468-200D-1F469-200D-1F466"),
        make_entry(
            ["handshake"], "1F91D",
            skin_variations={
                "1F3FB-1F3FC": make_entry([], "1FAF1-1F3FB-200D-1FAF2-1F3FC"),
                "ABCDE": make_entry([], "1F91D-1F3FD"),
            },
        ),
        make_entry(["broken"], "NOT-HEX"),
        make_entry([], "1F600"),
    ]


# Записи, которые остаются после загрузки sample_entries()
LOADED_SHORT_CODES = [
    "smile", "heart", "+1", "+1_tone1", "+1_tone2", "regional_indicator_u",
    "flag-us", "family", "handshake", "handshake_tone1-tone2",
]
