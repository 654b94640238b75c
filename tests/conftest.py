"""
Shared fixtures for the beatmap cloner tests.

Sample charts are kept as plain strings with "\n" endings; tests that need
CRLF charts convert them with to_crlf().
"""

from pathlib import Path

import pytest

from beatmap_cloner.models import BeatmapMetadata

SAMPLE_CHART = """osu file format v14

[General]
AudioFilename: audio.mp3
AudioLeadIn: 0
PreviewTime: 45000
SampleSet: Soft
Mode: 0

[Editor]
DistanceSpacing: 1.2
BeatDivisor: 4

[Metadata]
Title:Foo
TitleUnicode:Foo Unicode
Artist:Someone
ArtistUnicode:Someone Unicode
Creator:OriginalMapper
Version:Hard
Source:Some Game
Tags:tag1 tag2
BeatmapID:1234
BeatmapSetID:567

[Difficulty]
HPDrainRate:6
CircleSize:4
OverallDifficulty:7
ApproachRate:8
SliderMultiplier:1.8
SliderTickRate:2

[Events]
//Background and Video events
0,0,"bg.jpg",0,0
Video,0,"video.avi"
//Break Periods
2,10000,12000
//Storyboard Sound Samples
Sample,500,0,"clap.wav",70

[TimingPoints]
0,500,4,2,1,60,1,0
1000,-100,4,2,1,60,0,1
2000,-50,4,2,1,80,0,1
3000,-100,4,2,1,60,0,0

[Colours]
Combo1 : 255,0,0
Combo2 : 0,255,0

[HitObjects]
256,192,0,1,0,0:0:0:0:
256,192,500,1,0,0:0:0:0:
"""

SIMPLE_CHART = """osu file format v14

[General]
AudioFilename: audio.mp3
Mode: 0

[Metadata]
Title:Foo
Artist:Someone
Creator:creator
Version:Normal
BeatmapID:1
BeatmapSetID:2

[Events]
0,0,"bg.jpg",0,0

[TimingPoints]
0,500,4,1,0,100,1,0

[HitObjects]
256,192,0,1,0,0:0:0:0:
"""


def to_crlf(text: str) -> str:
    return text.replace("\n", "\r\n")


def write_bytes_chart(path: Path, text: str):
    """Writes chart text exactly as given, with no newline translation."""
    path.write_bytes(text.encode("utf-8"))


@pytest.fixture
def sample_metadata():
    return BeatmapMetadata(
        title="Bar",
        title_unicode="Bar Unicode",
        artist="Baz",
        artist_unicode="Baz Unicode",
        creator="creator",
        source="New Source",
        tags="new tags",
    )


@pytest.fixture
def songs_folder(tmp_path):
    songs = tmp_path / "Songs"
    songs.mkdir()
    return songs


@pytest.fixture
def source_beatmap(songs_folder):
    """A source set with two charts, music, a background and some skin files."""
    folder = songs_folder / "1234 Someone - Foo"
    folder.mkdir()
    write_bytes_chart(folder / "Someone - Foo (OriginalMapper) [Hard].osu", SAMPLE_CHART)
    write_bytes_chart(
        folder / "Someone - Foo (OriginalMapper) [Normal].osu",
        SAMPLE_CHART.replace("Version:Hard", "Version:Normal").replace('"bg.jpg"', '"normal-bg.png"'),
    )
    (folder / "audio.mp3").write_bytes(b"ID3 audio")
    (folder / "bg.jpg").write_bytes(b"jpeg")
    (folder / "normal-bg.png").write_bytes(b"png")
    (folder / "hitcircle@2x.png").write_bytes(b"skin")
    (folder / "soft-hitclap.wav").write_bytes(b"skin sound")
    (folder / "video.avi").write_bytes(b"video")
    (folder / "storyboard.osb").write_text("[Events]\n", encoding="utf-8")
    return folder
