"""
Tests for timing point compression: BPM points are normalised, inherited
points survive only at kiai edges.
"""

from beatmap_cloner.models import TimingPoint
from beatmap_cloner.timing import compress_timing_points


class TestTimingPoint:
    def test_parse_fields(self):
        point = TimingPoint.parse("1000, -100,4,2,1,60,0,1")
        assert point.time == "1000"
        assert point.beat_length == "-100"
        assert not point.is_uninherited
        assert point.kiai

    def test_short_line_is_none(self):
        assert TimingPoint.parse("0,500,4,2,1,60,1") is None

    def test_bad_effects_count_as_zero(self):
        point = TimingPoint.parse("0,500,4,2,1,60,1,x")
        assert point.effects == 0
        assert not point.kiai

    def test_kiai_is_bit_zero(self):
        assert TimingPoint.parse("0,500,4,2,1,60,1,9").kiai
        assert not TimingPoint.parse("0,500,4,2,1,60,1,8").kiai


class TestCompressTimingPoints:
    def test_kiai_edges_only(self):
        lines = [
            "0,500,4,2,1,60,1,0",
            "1000,-100,4,2,1,60,0,1",
            "2000,-50,4,2,1,80,0,1",
            "3000,-100,4,2,1,60,0,0",
        ]
        assert compress_timing_points(lines) == [
            "0,500,4,1,0,100,1,0",
            "1000,500,4,1,0,100,0,1",
            "3000,500,4,1,0,100,0,0",
        ]

    def test_every_line_has_eight_fields(self):
        lines = ["0,500,4,2,1,60,1,0", "500,-100,3,2,1,60,0,1", "900,400,3,2,1,60,1,1"]
        for line in compress_timing_points(lines):
            assert len(line.split(",")) == 8

    def test_bpm_change_uses_latest_beat_length(self):
        lines = [
            "0,500,4,2,1,60,1,0",
            "4000,375,3,2,1,60,1,0",
            "5000,-100,4,2,1,60,0,1",
        ]
        assert compress_timing_points(lines)[-1] == "5000,375,3,1,0,100,0,1"

    def test_bpm_line_carries_kiai(self):
        lines = ["0,500,4,2,1,60,1,1", "100,-100,4,2,1,60,0,1"]
        assert compress_timing_points(lines) == ["0,500,4,1,0,100,1,1"]

    def test_kiai_before_first_bpm_dropped(self):
        lines = [
            "-500,-100,4,2,1,60,0,1",
            "0,500,4,2,1,60,1,1",
        ]
        assert compress_timing_points(lines) == ["0,500,4,1,0,100,1,1"]

    def test_skips_blank_comment_and_malformed(self):
        lines = ["", "   ", "// comment", "0,500,4", "0,500,4,2,1,60,1,0"]
        assert compress_timing_points(lines) == ["0,500,4,1,0,100,1,0"]

    def test_strips_whitespace(self):
        assert compress_timing_points([" 0, 500 ,4,2,1,60,1,0\r"]) == ["0,500,4,1,0,100,1,0"]

    def test_empty_input(self):
        assert compress_timing_points([]) == []
