"""
Tests for the skin file classifier. Each category table gets at least one
positive case, plus the beatmap media that must never be flagged.
"""

import pytest

from beatmap_cloner import skin
from beatmap_cloner.skin import is_hitsound, is_skin_file


class TestKnownExamples:
    @pytest.mark.parametrize("filename", [
        "hitcircle@2x.png",
        "DEFAULT-0.png",
        "normal-hitnormal.wav",
        "applause.mp3",
    ])
    def test_skin_files(self, filename):
        assert is_skin_file(filename) is True

    @pytest.mark.parametrize("filename", [
        "song.mp3",
        "audio.ogg",
        "bg.jpg",
        "background.png",
        "normal-bg.png",
        "Someone - Foo (mapper) [Hard].osu",
    ])
    def test_beatmap_media(self, filename):
        assert is_skin_file(filename) is False


class TestCategories:
    @pytest.mark.parametrize("table", [
        skin.HITCIRCLE_ELEMENTS,
        skin.SLIDER_ELEMENTS,
        skin.SPINNER_ELEMENTS,
        skin.TAIKO_ELEMENTS,
        skin.CATCH_ELEMENTS,
        skin.MANIA_ELEMENTS,
        skin.INTERFACE_ELEMENTS,
        skin.GAMEPLAY_SOUNDS,
        skin.INTERFACE_SOUNDS,
    ])
    def test_every_prefix_matches(self, table):
        for prefix in table:
            assert is_skin_file(f"{prefix}.png"), prefix
            assert is_skin_file(f"{prefix}@2x.png"), prefix

    def test_comboburst(self):
        assert is_skin_file("comboburst-3.png")

    def test_particles(self):
        assert is_skin_file("particle300.png")

    def test_miss_names_are_exact(self):
        assert is_skin_file("sliderendmiss.png")
        assert is_skin_file("slidertickmiss.png")

    def test_spinner_catch_all(self):
        assert is_skin_file("spinner-warning.png")
        assert is_skin_file("spinnerbonus.wav")


class TestHitsounds:
    @pytest.mark.parametrize("filename", [
        "soft-hitclap.wav",
        "drum-hitfinish2.ogg",
        "taiko-hitwhistle.wav",
        "normal-slidertick.wav",
        "soft-sliderslide3.wav",
    ])
    def test_hitsounds(self, filename):
        assert is_skin_file(filename)

    def test_requires_sample_set_prefix(self):
        assert not is_hitsound("loud-hitclap")

    def test_other_sample_set_names_not_hitsounds(self):
        assert not is_hitsound("soft-intro")
        assert not is_skin_file("soft-intro.mp3")


class TestNameHandling:
    def test_case_insensitive(self):
        assert is_skin_file("HitCircleOverlay.PNG")

    def test_only_last_extension_stripped(self):
        assert is_skin_file("cursor.backup.png")

    def test_no_extension(self):
        assert is_skin_file("cursor")
        assert not is_skin_file("song")
