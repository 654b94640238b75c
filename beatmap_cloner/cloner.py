# beatmap_cloner/cloner.py

import logging
import re
import shutil
from pathlib import Path
from typing import Dict, List, Optional

from beatmap_cloner.config import AppConfig, DEFAULT_CLONE_OPTIONS
from beatmap_cloner.errors import BeatmapIOError, BeatmapNotFoundError, NoChartFilesError
from beatmap_cloner.models import BeatmapMetadata, BeatmapSummary, CloneRequest, game_mode_code
from beatmap_cloner.rewriter import rewrite_chart
from beatmap_cloner.skin import is_skin_file
from beatmap_cloner.utils import find_background, sanitize_title, scrape

CHART_EXTENSION = ".osu"
AUDIO_EXTENSIONS = (".mp3", ".ogg", ".wav")
IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png")

BEATMAP_FOLDER_PATTERN = re.compile(r"^beatmap-(\d+)(?:-|$)")

# Attempts at claiming a folder number when another clone takes it first
MAX_FOLDER_ATTEMPTS = 10

# [Metadata] keys read back from a template chart
_METADATA_KEYS = {
    "Title": "title",
    "TitleUnicode": "title_unicode",
    "Artist": "artist",
    "ArtistUnicode": "artist_unicode",
    "Creator": "creator",
    "Source": "source",
    "Tags": "tags",
}


def list_chart_files(folder: Path) -> List[Path]:
    """Returns the .osu files directly inside `folder`, sorted by name."""
    folder = Path(folder)
    if not folder.is_dir():
        raise BeatmapNotFoundError("Folder not found", str(folder))
    try:
        return sorted(
            p for p in folder.iterdir()
            if p.is_file() and p.suffix.lower() == CHART_EXTENSION
        )
    except OSError as e:
        raise BeatmapIOError("read directory", folder, e) from e


def read_chart(path: Path) -> str:
    """Reads a chart without newline translation so CRLF files stay CRLF."""
    path = Path(path)
    if not path.is_file():
        raise BeatmapNotFoundError("Chart file not found", str(path))
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise BeatmapIOError("read chart", path, e) from e


def write_chart(path: Path, content: str):
    try:
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(content)
    except OSError as e:
        raise BeatmapIOError("write chart", path, e) from e


def parse_metadata_section(content: str) -> BeatmapMetadata:
    """Reads the [Metadata] key/value pairs a clone form is pre-filled with."""
    metadata = BeatmapMetadata()
    in_metadata = False

    for line in content.splitlines():
        trimmed = line.strip()

        if re.fullmatch(r"\[Metadata\]", trimmed, re.IGNORECASE):
            in_metadata = True
            continue
        if re.fullmatch(r"\[[A-Za-z]+\]", trimmed):
            in_metadata = False
            continue
        if not in_metadata or not trimmed or trimmed.startswith("//"):
            continue

        key, sep, value = trimmed.partition(":")
        if not sep:
            continue
        attr = _METADATA_KEYS.get(key.strip())
        if attr:
            setattr(metadata, attr, value.strip())

    return metadata


def read_template_metadata(folder: Path) -> BeatmapMetadata:
    """Metadata of the first chart in `folder`, the one clones are built from."""
    charts = list_chart_files(folder)
    if not charts:
        raise NoChartFilesError("No .osu files found in source beatmap", str(folder))
    return parse_metadata_section(read_chart(charts[0]))


def summarize_beatmap(folder: Path) -> Optional[BeatmapSummary]:
    """Display details scraped from the first chart, or None without charts."""
    folder = Path(folder)
    charts = list_chart_files(folder)
    if not charts:
        return None

    data = read_chart(charts[0])
    title = scrape(data, "Title:", "\n")
    artist = scrape(data, "Artist:", "\n")
    creator = scrape(data, "Creator:", "\n")
    background = scrape(data, '0,0,"', '"')

    if title and artist:
        display_title = f"{artist} - {title}"
    else:
        # Downloaded sets are named "<setid> <artist> - <title>"
        _, _, rest = folder.name.partition(" ")
        display_title = rest or folder.name

    return BeatmapSummary(
        folder_name=folder.name,
        title=display_title,
        artist=artist or "Unknown",
        creator=creator or "Unknown",
        beatmap_id=scrape(data, "BeatmapID:", "\n"),
        beatmap_set_id=scrape(data, "BeatmapSetID:", "\n"),
        background_path=folder / background if background else None,
        chart_files=[p.name for p in charts],
    )


def next_beatmap_number(songs_folder: Path) -> int:
    """One more than the highest N among existing beatmap-N-* folders."""
    songs_folder = Path(songs_folder)
    try:
        names = [entry.name for entry in songs_folder.iterdir()]
    except OSError as e:
        raise BeatmapIOError("read songs directory", songs_folder, e) from e

    max_num = 0
    for name in names:
        match = BEATMAP_FOLDER_PATTERN.match(name)
        if match:
            max_num = max(max_num, int(match.group(1)))
    return max_num + 1


def is_media_file(path: Path) -> bool:
    return path.suffix.lower() in AUDIO_EXTENSIONS + IMAGE_EXTENSIONS


def chart_filename(metadata: BeatmapMetadata, difficulty: str) -> str:
    return f"{metadata.artist} - {metadata.title} ({metadata.creator}) [{difficulty}].osu"


class BeatmapCloner:
    def __init__(self, config: Optional[AppConfig] = None):
        self.config = config
        self.logger = logging.getLogger(__name__)

    def build_request(self, source_folder: Path, game_mode, difficulties: List[str],
                      metadata: Optional[BeatmapMetadata] = None, **options) -> CloneRequest:
        """
        Builds a CloneRequest for `source_folder`, filling blanks the way the
        clone form does: empty metadata fields come from the template chart
        and unset flags come from the configured clone options. Clones land in
        the configured songs directory, or next to the source if none is set.
        """
        source_folder = Path(source_folder)
        songs_folder = source_folder.parent
        if self.config is not None and self.config.songs_directory:
            songs_folder = self.config.songs_directory

        unknown = set(options) - set(DEFAULT_CLONE_OPTIONS)
        if unknown:
            raise TypeError(f"Unknown clone options: {', '.join(sorted(unknown))}")
        flags = dict(DEFAULT_CLONE_OPTIONS)
        if self.config is not None:
            stored = self.config.clone_options
            flags.update((key, bool(stored[key])) for key in DEFAULT_CLONE_OPTIONS)
        flags.update(options)

        template = read_template_metadata(source_folder)
        resolved = (metadata or BeatmapMetadata()).with_fallbacks(template)

        if source_folder.parent == songs_folder:
            source_beatmap = source_folder.name
        else:
            source_beatmap = str(source_folder.resolve())

        return CloneRequest(
            songs_folder=songs_folder,
            source_beatmap=source_beatmap,
            game_mode=game_mode_code(game_mode),
            difficulties=list(difficulties),
            metadata=resolved,
            **flags,
        )

    def clone_beatmap(self, request: CloneRequest) -> str:
        """
        Creates a new beatmap folder next to the source one, holding one
        rewritten chart per requested difficulty and the source's audio and
        image files. Returns the new folder's name.

        Nothing is rolled back on failure: files written before the error stay.
        """
        songs_folder = Path(request.songs_folder)
        source_path = request.source_path

        if not source_path.is_dir():
            raise BeatmapNotFoundError("Source beatmap not found", request.source_beatmap)

        charts = list_chart_files(source_path)
        if not charts:
            raise NoChartFilesError("No .osu files found in source beatmap", request.source_beatmap)

        self.logger.info(f"--- Cloning {source_path.name} into {len(request.difficulties)} difficulties ---")

        folder_path = self._create_beatmap_folder(songs_folder, request.metadata.title)

        backgrounds = self._collect_backgrounds(charts)
        self._copy_assets(source_path, folder_path, request.remove_skin_files)

        template = read_chart(charts[0])
        self.logger.info(f"Using {charts[0].name} as template")

        for difficulty in request.difficulties:
            new_content = rewrite_chart(
                template,
                request.metadata,
                request.game_mode,
                difficulty,
                keep_timing_points=request.keep_timing_points,
                reset_sample_set=request.reset_sample_set,
                reset_difficulty=request.reset_difficulty,
                remove_colours=request.remove_colours,
                background=backgrounds.get(difficulty),
            )
            chart_path = folder_path / chart_filename(request.metadata, difficulty)
            write_chart(chart_path, new_content)
            self.logger.info(f"Wrote difficulty [{difficulty}]: {chart_path.name}")

        self.logger.info(f"Successfully created beatmap: {folder_path.name}")
        return folder_path.name

    def _create_beatmap_folder(self, songs_folder: Path, title: str) -> Path:
        safe_title = sanitize_title(title)
        folder_path = None

        for _ in range(MAX_FOLDER_ATTEMPTS):
            number = next_beatmap_number(songs_folder)
            folder_path = songs_folder / f"beatmap-{number}-{safe_title}"
            try:
                folder_path.mkdir()
            except FileExistsError:
                self.logger.warning(f"{folder_path.name} already exists, picking another number")
                continue
            except OSError as e:
                self.logger.error(f"Failed to create folder {folder_path}: {e}")
                raise BeatmapIOError("create folder", folder_path, e) from e
            self.logger.info(f"Created beatmap folder: {folder_path}")
            return folder_path

        raise BeatmapIOError("create folder", folder_path,
                             FileExistsError(f"gave up after {MAX_FOLDER_ATTEMPTS} attempts"))

    def _collect_backgrounds(self, charts: List[Path]) -> Dict[str, str]:
        """Maps each chart's Version: to its background image filename."""
        backgrounds = {}
        for chart in charts:
            content = read_chart(chart)
            version = scrape(content, "Version:", "\n")
            background = find_background(content)
            if background is not None:
                backgrounds[version] = background
        self.logger.debug(f"Backgrounds by difficulty: {backgrounds}")
        return backgrounds

    def _copy_assets(self, source_path: Path, folder_path: Path, remove_skin_files: bool):
        try:
            entries = sorted(source_path.iterdir())
        except OSError as e:
            raise BeatmapIOError("read source folder", source_path, e) from e

        copied = 0
        for entry in entries:
            if not entry.is_file() or not is_media_file(entry):
                continue
            if remove_skin_files and is_skin_file(entry.name):
                self.logger.debug(f"Skipping skin file: {entry.name}")
                continue
            try:
                shutil.copy(entry, folder_path / entry.name)
            except OSError as e:
                self.logger.error(f"Error copying {entry}: {e}")
                raise BeatmapIOError("copy file", entry, e) from e
            copied += 1

        self.logger.info(f"Copied {copied} asset(s) into {folder_path.name}")
