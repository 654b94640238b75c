# beatmap_cloner/rewriter.py

from typing import List, Optional

from beatmap_cloner.models import BeatmapMetadata
from beatmap_cloner.timing import compress_timing_points
from beatmap_cloner.utils import BACKGROUND_PREFIXES, detect_line_ending

# Sections never carried into a cloned chart
DROPPED_SECTIONS = ("[Editor]", "[HitObjects]")

# [Difficulty] values written when reset_difficulty is set.
# Unlike [General], osu! writes these without a space after the colon.
DIFFICULTY_DEFAULTS = (
    ("HPDrainRate:", "5"),
    ("CircleSize:", "2"),
    ("OverallDifficulty:", "5"),
    ("ApproachRate:", "5"),
    ("SliderMultiplier:", "1.4"),
    ("SliderTickRate:", "1"),
)


class ChartRewriter:
    """
    Rewrites one .osu chart into a clone in a single pass over its lines.

    The rewriter tracks which section it is in, whether that section is being
    skipped, and the buffered [TimingPoints] lines waiting to be compressed.
    An instance is good for one chart; use rewrite_chart() for the common case.
    """

    def __init__(self, metadata: BeatmapMetadata, game_mode: int, difficulty: str,
                 keep_timing_points: bool = True, reset_sample_set: bool = True,
                 reset_difficulty: bool = True, remove_colours: bool = True,
                 background: Optional[str] = None):
        self.metadata = metadata
        self.game_mode = game_mode
        self.difficulty = difficulty
        self.keep_timing_points = keep_timing_points
        self.reset_sample_set = reset_sample_set
        self.reset_difficulty = reset_difficulty
        self.remove_colours = remove_colours
        self.background = background

        self.output: List[str] = []
        self.section = ""
        self.skip_section = False
        self.in_timing_section = False
        self.timing_lines: List[str] = []

        self._metadata_fields = (
            ("Title:", f"Title:{metadata.title}"),
            ("TitleUnicode:", f"TitleUnicode:{metadata.title_unicode}"),
            ("Artist:", f"Artist:{metadata.artist}"),
            ("ArtistUnicode:", f"ArtistUnicode:{metadata.artist_unicode}"),
            ("Creator:", f"Creator:{metadata.creator}"),
            ("Version:", f"Version:{difficulty}"),
            ("Source:", f"Source:{metadata.source}"),
            ("Tags:", f"Tags:{metadata.tags}"),
            ("BeatmapID:", "BeatmapID:-1"),
            ("BeatmapSetID:", "BeatmapSetID:-1"),
        )

    def rewrite(self, content: str) -> str:
        eol = detect_line_ending(content)
        for line in content.split(eol):
            self.feed(line)
        self.finish()
        return eol.join(self.output)

    def feed(self, line: str):
        trimmed = line.strip()

        if trimmed.startswith("[") and trimmed.endswith("]"):
            self._open_section(line, trimmed)
            return

        if self.skip_section:
            return

        if self.in_timing_section:
            if self.keep_timing_points:
                self.timing_lines.append(line)
            return

        rewritten = self._rewrite_line(line, trimmed)
        if rewritten is not None:
            self.output.append(rewritten)

    def finish(self):
        if self.in_timing_section and self.timing_lines:
            self._flush_timing_points()
        self.in_timing_section = False

    def _open_section(self, line: str, header: str):
        if self.in_timing_section:
            self._flush_timing_points()
            self.in_timing_section = False

        self.section = header

        if header in DROPPED_SECTIONS or (header == "[Colours]" and self.remove_colours):
            self.skip_section = True
            return

        self.skip_section = False
        self.output.append(line)
        self.in_timing_section = header == "[TimingPoints]"

    def _flush_timing_points(self):
        if self.keep_timing_points:
            self.output.extend(compress_timing_points(self.timing_lines))
        self.timing_lines = []

    def _rewrite_line(self, line: str, trimmed: str) -> Optional[str]:
        """Returns the line to emit, or None to drop it."""
        if self.section == "[Events]":
            return self._rewrite_event(line, trimmed)

        if self.section == "[General]":
            if trimmed.startswith("Mode:"):
                return f"Mode: {self.game_mode}"
            if self.reset_sample_set and trimmed.startswith("SampleSet:"):
                return "SampleSet: Normal"

        elif self.section == "[Metadata]":
            for prefix, replacement in self._metadata_fields:
                if trimmed.startswith(prefix):
                    return replacement

        elif self.section == "[Difficulty]" and self.reset_difficulty:
            for prefix, value in DIFFICULTY_DEFAULTS:
                if trimmed.startswith(prefix):
                    return f"{prefix}{value}"

        return line

    def _rewrite_event(self, line: str, trimmed: str) -> Optional[str]:
        # Only comments, blanks and the background survive; storyboard,
        # video, break and sample events are dropped.
        if not trimmed or trimmed.startswith("//"):
            return line
        if trimmed.startswith(BACKGROUND_PREFIXES):
            if self.background is not None:
                return f'0,0,"{self.background}",0,0'
            return line
        return None


def rewrite_chart(source_text: str, metadata: BeatmapMetadata, game_mode: int, difficulty: str,
                  keep_timing_points: bool = True, reset_sample_set: bool = True,
                  reset_difficulty: bool = True, remove_colours: bool = True,
                  background: Optional[str] = None) -> str:
    """Returns the text of a cloned chart built from `source_text`."""
    rewriter = ChartRewriter(
        metadata, game_mode, difficulty,
        keep_timing_points=keep_timing_points,
        reset_sample_set=reset_sample_set,
        reset_difficulty=reset_difficulty,
        remove_colours=remove_colours,
        background=background,
    )
    return rewriter.rewrite(source_text)
