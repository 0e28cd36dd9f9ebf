"""Create demo game catalogs for development/testing."""

from card_draw.library import GameLibrary
from card_draw.models import GameData

DIFFICULTY_COLORS = {
    "beginner": "#98aafd",
    "basic": "#2BC856",
    "difficult": "#F2F52C",
    "expert": "#F64D8B",
    "challenge": "#0191F2",
}

ABBREVIATIONS = {
    "beginner": "Beg",
    "basic": "Bas",
    "difficult": "Dif",
    "expert": "Exp",
    "challenge": "Cha",
}

DEMO_SONGS = [
    # (name, artist, bpm, flags, base level)
    ("Paranoia Eternal", "STM 200", "185", None, 3),
    ("Afronova", "RE-VENGE", "200", None, 4),
    ("Max 300", "Ω", "300", None, 6),
    ("Healing Vision", "dj TAKA", "160", None, 2),
    ("Sakura Storm", "Ryu☆", "150", None, 1),
    ("Pluto Relinquish", "Black Rock", "111-222", ["unlock"], 7),
    ("Tohoku Evolved", "PON", "180", None, 5),
    ("Valkyrie Dimension", "Spriggan", "60-1150", ["unlock"], 8),
]

TIER_COLORS = [
    {"key": "white", "color": "#f8f6d8"},
    {"key": "blue", "color": "#0e68ab"},
    {"key": "red", "color": "#d3202a"},
]


def _demo_game(tiered: bool) -> GameData:
    songs = []
    lvl_max = 0
    for index, (name, artist, bpm, flags, base) in enumerate(DEMO_SONGS):
        charts = []
        for offset, diff_class in enumerate(DIFFICULTY_COLORS):
            for style, bump in (("single", 0), ("double", 1)):
                chart: dict = {
                    "lvl": base + offset * 3 + bump,
                    "style": style,
                    "diffClass": diff_class,
                }
                if tiered:
                    chart["drawGroup"] = index % 4 + 1
                    chart["mtgColor"] = TIER_COLORS[offset % len(TIER_COLORS)]["key"]
                lvl_max = max(lvl_max, chart["drawGroup"] if tiered else chart["lvl"])
                charts.append(chart)
        song: dict = {
            "name": name,
            "artist": artist,
            "bpm": bpm,
            "jacket": f"demo/{index:02d}.jpg",
            "charts": charts,
        }
        if flags:
            song["flags"] = flags
        songs.append(song)

    en: dict = {
        "name": "Demo Pack (tiers)" if tiered else "Demo Pack",
        "single": "Single",
        "double": "Double",
        "$abbr": ABBREVIATIONS,
    }
    meta: dict = {
        "menuParent": "demo",
        "styles": ["single", "double"],
        "difficulties": [{"key": k, "color": c} for k, c in DIFFICULTY_COLORS.items()],
        "flags": ["unlock"],
        "lvlMax": lvl_max,
        "usesDrawGroups": tiered,
    }
    if tiered:
        meta["mtgColor"] = TIER_COLORS
        en["$mtgAbbr"] = {"white": "W", "blue": "U", "red": "R", "UNC": "C"}

    return GameData.model_validate({
        "meta": meta,
        "defaults": {
            "style": "single",
            "difficulties": ["difficult", "expert", "challenge"],
            "flags": [],
            "lowerLvlBound": 1,
            "upperLvlBound": lvl_max,
        },
        "i18n": {"en": en},
        "songs": songs,
    })


def create_demo_data(library: GameLibrary) -> None:
    """Write the demo and demo-tiers catalogs, replacing existing copies."""
    library.save_game("demo", _demo_game(tiered=False))
    library.save_game("demo-tiers", _demo_game(tiered=True))
    print("Created 2 demo games (demo, demo-tiers) with "
          f"{len(DEMO_SONGS)} songs each.")
