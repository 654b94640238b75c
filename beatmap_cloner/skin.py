# beatmap_cloner/skin.py

# Filenames osu! lets a skin (or a beatmap folder) override. Matching is done
# on the lower-cased name with its extension removed. Every table below is a
# list of prefixes unless noted otherwise; order follows the check order in
# is_skin_file().

HITCIRCLE_ELEMENTS = (
    "approachcircle",
    "hit",
    "hitcircle",
    "hitcircleoverlay",
    "hitcircleselect",
    "followpoint",
    "lighting",
)

SLIDER_ELEMENTS = (
    "sliderstartcircle",
    "sliderstartcircleoverlay",
    "sliderendcircle",
    "sliderendcircleoverlay",
    "reversearrow",
    "sliderfollowcircle",
    "sliderb",
    "sliderb-nd",
    "sliderb-spec",
    "sliderpoint10",
    "sliderpoint30",
    "sliderscorepoint",
)

SPINNER_ELEMENTS = (
    "spinner-background",
    "spinner-circle",
    "spinner-metre",
    "spinner-osu",
    "spinner-glow",
    "spinner-bottom",
    "spinner-top",
    "spinner-middle",
    "spinner-middle2",
    "spinner-approachcircle",
    "spinner-rpm",
    "spinner-clear",
    "spinner-spin",
)

# Exact names, not prefixes
MISS_ELEMENTS = (
    "sliderendmiss",
    "slidertickmiss",
)

TAIKO_ELEMENTS = (
    "taiko-bar-left",
    "taiko-bar-right",
    "taiko-bar-right-glow",
    "taiko-drum-inner",
    "taiko-drum-outer",
    "taiko-barline",
    "taiko-hit0",
    "taiko-hit100",
    "taiko-hit100k",
    "taiko-hit300",
    "taiko-hit300k",
    "taiko-hit300g",
    "taiko-flower-group",
    "taikobigcircle",
    "taikohitcircle",
    "taikohitcircleoverlay",
    "taiko-glow",
    "taiko-slider",
    "taiko-slider-fail",
    "pippidon",
    "taiko-roll-middle",
    "taiko-roll-end",
)

CATCH_ELEMENTS = (
    "fruit-apple",
    "fruit-bananas",
    "fruit-grapes",
    "fruit-orange",
    "fruit-pear",
    "fruit-apple-overlay",
    "fruit-bananas-overlay",
    "fruit-grapes-overlay",
    "fruit-orange-overlay",
    "fruit-pear-overlay",
    "fruit-drop",
    "fruit-drop-overlay",
    "fruit-catcher-idle",
    "fruit-catcher-kiai",
    "fruit-catcher-fail",
    "fruit-ryuuta",
    "lighting",
)

MANIA_ELEMENTS = (
    "mania-stage-left",
    "mania-stage-right",
    "mania-stage-bottom",
    "mania-stage-light",
    "mania-stage-hint",
    "mania-note1",
    "mania-note2",
    "mania-note3",
    "mania-key1",
    "mania-key2",
    "mania-key3",
    "mania-hit0",
    "mania-hit50",
    "mania-hit100",
    "mania-hit200",
    "mania-hit300",
    "mania-hit300g",
    "lightingn",
    "lightingl",
)

INTERFACE_ELEMENTS = (
    "menu-back",
    "menu-button",
    "selection-",
    "button-",
    "mode-",
    "mode-osu",
    "mode-taiko",
    "mode-catch",
    "mode-mania",
    "cursor",
    "cursortrail",
    "cursormiddle",
    "star",
    "star2",
    "scorebar-",
    "score-",
    "ranking-",
    "pause-",
    "fail-",
    "ready",
    "section-",
    "multi-",
    "play-",
    "count",
    "go",
    "inputoverlay-",
    "arrow-",
    "hitcircle-",
    "reversearrow",
    "selection-mode",
    "selection-mods",
    "selection-random",
    "selection-options",
    "options-offset-tick",
)

HITSOUND_SAMPLE_SETS = ("normal-", "soft-", "drum-", "taiko-")

# Exact remainders after the sample-set prefix
HITSOUND_NAMES = (
    "hitnormal",
    "hitclap",
    "hitfinish",
    "hitwhistle",
    "slidertick",
    "sliderslide",
    "sliderwhistle",
)

GAMEPLAY_SOUNDS = (
    "comboburst",
    "combobreak",
    "failsound",
    "sectionpass",
    "sectionfail",
    "applause",
    "pause-loop",
    "metronomelow",
    "nightcore-kick",
    "nightcore-clap",
    "nightcore-hat",
    "nightcore-finish",
)

INTERFACE_SOUNDS = (
    "heartbeat",
    "seeya",
    "welcome",
    "key-",
    "back-button-",
    "check-",
    "click-",
    "menuback",
    "menuhit",
    "menu-",
    "pause-",
    "select-",
    "shutter",
    "sliderbar",
    "whoosh",
    "match-",
)

# Checked in order after the comboburst/default- prefixes
_ELEMENT_TABLES = (
    HITCIRCLE_ELEMENTS,
    SLIDER_ELEMENTS,
    SPINNER_ELEMENTS,
)

_MODE_TABLES = (
    TAIKO_ELEMENTS,
    CATCH_ELEMENTS,
    MANIA_ELEMENTS,
    INTERFACE_ELEMENTS,
)


def _strip_extension(filename: str) -> str:
    lower = filename.lower()
    name, dot, _ = lower.rpartition(".")
    return name if dot else lower


def is_hitsound(name: str) -> bool:
    """`name` is already lower-cased and extensionless."""
    for prefix in HITSOUND_SAMPLE_SETS:
        if name.startswith(prefix):
            remainder = name[len(prefix):]
            if remainder.startswith(("hit", "slider")) or remainder in HITSOUND_NAMES:
                return True
    return False


def is_skin_file(filename: str) -> bool:
    """
    Returns True if `filename` names a skinnable element or sound rather than
    beatmap-specific media. Only the name is inspected, never the file.
    """
    name = _strip_extension(filename)

    if name.startswith(("comboburst", "default-")):
        return True

    for table in _ELEMENT_TABLES:
        if name.startswith(table):
            return True

    if name.startswith("particle"):
        return True
    if name in MISS_ELEMENTS:
        return True

    for table in _MODE_TABLES:
        if name.startswith(table):
            return True

    if is_hitsound(name):
        return True

    if name.startswith("spinner"):
        return True

    return name.startswith(GAMEPLAY_SOUNDS) or name.startswith(INTERFACE_SOUNDS)
