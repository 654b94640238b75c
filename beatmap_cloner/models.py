# beatmap_cloner/models.py

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, List, Union

# osu! game mode codes as written to the [General] Mode: field
GAME_MODES = {
    "osu": 0,
    "taiko": 1,
    "catch": 2,
    "mania": 3,
}

# Conventional difficulty names offered per mode
DIFFICULTY_PRESETS = {
    "osu": ["Easy", "Normal", "Hard", "Insane", "Expert"],
    "taiko": ["Kantan", "Futsuu", "Muzukashii", "Oni", "Inner Oni"],
    "catch": ["Cup", "Salad", "Platter", "Rain", "Overdose"],
    "mania": ["Easy", "Normal", "Hard", "Insane", "Expert"],
}


def game_mode_code(mode: Union[str, int]) -> int:
    """Accepts a mode name ("taiko") or code (1, "1") and returns the code."""
    if isinstance(mode, int):
        if mode in GAME_MODES.values():
            return mode
        raise ValueError(f"Unknown game mode code: {mode}")

    key = str(mode).strip().lower()
    if key in GAME_MODES:
        return GAME_MODES[key]
    if key.isdigit() and int(key) in GAME_MODES.values():
        return int(key)
    raise ValueError(f"Unknown game mode: {mode!r}")


@dataclass
class TimingPoint:
    time: str
    beat_length: str
    meter: str
    sample_set: str
    sample_index: str
    volume: str
    uninherited: str
    effects: int = 0

    @classmethod
    def parse(cls, line: str) -> Optional["TimingPoint"]:
        """Parses one [TimingPoints] line. Lines with fewer than 8 fields give None."""
        parts = [p.strip() for p in line.strip().split(",")]
        if len(parts) < 8:
            return None
        try:
            effects = int(parts[7])
        except ValueError:
            effects = 0
        return cls(*parts[:7], effects=effects)

    @property
    def is_uninherited(self) -> bool:
        return self.uninherited == "1"

    @property
    def kiai(self) -> bool:
        return (self.effects & 1) == 1

    def to_line(self) -> str:
        return ",".join([
            self.time, self.beat_length, self.meter, self.sample_set,
            self.sample_index, self.volume, self.uninherited, str(self.effects),
        ])


@dataclass
class BeatmapMetadata:
    title: str = ""
    title_unicode: str = ""
    artist: str = ""
    artist_unicode: str = ""
    creator: str = ""
    source: str = ""
    tags: str = ""

    def with_fallbacks(self, template: "BeatmapMetadata") -> "BeatmapMetadata":
        """
        Fills empty fields from the template chart's metadata. Unicode
        variants fall back to the (possibly just filled) romanised value.
        """
        title = self.title or template.title
        artist = self.artist or template.artist
        return BeatmapMetadata(
            title=title,
            title_unicode=self.title_unicode or title,
            artist=artist,
            artist_unicode=self.artist_unicode or artist,
            creator=self.creator or template.creator,
            source=self.source or "",
            tags=self.tags or "",
        )


@dataclass
class CloneRequest:
    songs_folder: Path
    source_beatmap: str  # folder name under songs_folder
    game_mode: int
    difficulties: List[str]
    metadata: BeatmapMetadata
    keep_timing_points: bool = True
    remove_skin_files: bool = True
    reset_sample_set: bool = True
    reset_difficulty: bool = True
    remove_colours: bool = True

    @property
    def source_path(self) -> Path:
        return Path(self.songs_folder) / self.source_beatmap


@dataclass
class BeatmapSummary:
    folder_name: str
    title: str
    artist: str = "Unknown"
    creator: str = "Unknown"
    beatmap_id: str = ""
    beatmap_set_id: str = ""
    background_path: Optional[Path] = None
    chart_files: List[str] = field(default_factory=list)
