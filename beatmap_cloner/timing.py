# beatmap_cloner/timing.py

import logging
from typing import Iterable, List, Optional

from beatmap_cloner.models import TimingPoint

logger = logging.getLogger(__name__)

# sample set, sample index, volume written on every compressed point
DEFAULT_SAMPLE_FIELDS = ("0", "100")
DEFAULT_SAMPLE_SET = "1"


def _kiai_flag(kiai: bool) -> int:
    return 1 if kiai else 0


def compress_timing_points(lines: Iterable[str]) -> List[str]:
    """
    Reduces a [TimingPoints] section to its BPM changes and kiai on/off edges.

    Uninherited points are kept with sample set/index/volume reset. Inherited
    points survive only where kiai toggles, rebuilt from the last BPM point's
    beat length and meter. Kiai toggles seen before any BPM point are dropped.
    """
    result = []
    in_kiai = False
    last_bpm: Optional[TimingPoint] = None

    for line in lines:
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("//"):
            continue

        point = TimingPoint.parse(trimmed)
        if point is None:
            logger.debug(f"Dropping malformed timing point: {trimmed!r}")
            continue

        if point.is_uninherited:
            last_bpm = TimingPoint(
                point.time, point.beat_length, point.meter, DEFAULT_SAMPLE_SET,
                *DEFAULT_SAMPLE_FIELDS, "1", _kiai_flag(point.kiai),
            )
            result.append(last_bpm.to_line())
            in_kiai = point.kiai
            continue

        if point.kiai != in_kiai:
            if last_bpm is not None:
                kiai_point = TimingPoint(
                    point.time, last_bpm.beat_length, last_bpm.meter, DEFAULT_SAMPLE_SET,
                    *DEFAULT_SAMPLE_FIELDS, "0", _kiai_flag(point.kiai),
                )
                result.append(kiai_point.to_line())
            else:
                logger.debug(f"Dropping kiai toggle at {point.time} before the first BPM point")
            in_kiai = point.kiai

    return result
