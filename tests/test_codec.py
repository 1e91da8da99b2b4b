"""Tests for the four-word codec."""

import math
import random
import unicodedata

import pytest

from b39geo import (
    BitWidthViolation,
    ExactlyFourWordsRequired,
    InvalidInput,
    UnknownOrAmbiguousWord,
    WordlistError,
    cell_size,
    decode,
    encode,
    pack,
    try_parse,
    unpack,
)
from b39geo.dictionary import available_languages, load_wordlist

TOLERANCE = 1e-9


def assert_within_cell(decoded, lat, lon):
    size = cell_size()
    assert abs(decoded.lat - lat) <= size.lat_degrees + TOLERANCE
    assert abs(decoded.lon - lon) <= size.lon_degrees + TOLERANCE


class TestPacking:
    @pytest.mark.parametrize("code,indices", [
        (0, [0, 0, 0, 0]),
        (1, [0, 0, 0, 1]),
        (1 << 11, [0, 0, 1, 0]),
        (1 << 22, [0, 1, 0, 0]),
        (1 << 33, [1, 0, 0, 0]),
        ((1 << 44) - 1, [2047, 2047, 2047, 2047]),
    ])
    def test_known_values(self, code, indices):
        assert pack(code) == indices
        assert unpack(indices) == code

    def test_round_trip(self):
        rng = random.Random(7)
        for _ in range(500):
            code = rng.randrange(1 << 44)
            indices = pack(code)
            assert all(0 <= i <= 2047 for i in indices)
            assert unpack(indices) == code

    @pytest.mark.parametrize("code", [-1, 1 << 44])
    def test_pack_rejects_wide_code(self, code):
        with pytest.raises(BitWidthViolation):
            pack(code)

    def test_unpack_rejects_wide_index(self):
        with pytest.raises(BitWidthViolation):
            unpack([0, 0, 0, 2048])

    def test_unpack_needs_four_indices(self):
        with pytest.raises(ExactlyFourWordsRequired):
            unpack([0, 0, 0])


class TestEncode:
    def test_returns_four_words(self, wordlist):
        words = encode(37.7749, -122.4194)
        assert len(words) == 4
        assert all(word in wordlist for word in words)

    def test_extremes(self):
        assert encode(-90, -180) == ["abandon"] * 4
        assert encode(90, 180) == ["zoo"] * 4

    def test_out_of_range_clamped(self):
        assert encode(95, 200) == encode(90, 180)

    def test_deterministic(self, sample_coordinates):
        for lat, lon in sample_coordinates:
            for rounding in ("nearest", "floor", "ceil"):
                assert encode(lat, lon, rounding) == encode(lat, lon, rounding)

    def test_rounding_modes_differ_between_grid_lines(self):
        assert encode(0.0, 0.0, "floor") != encode(0.0, 0.0, "ceil")

    @pytest.mark.parametrize("lat,lon", [
        (math.nan, 0.0),
        (0.0, math.inf),
        (-math.inf, 10.0),
    ])
    def test_rejects_non_finite(self, lat, lon):
        with pytest.raises(InvalidInput):
            encode(lat, lon)

    def test_rejects_unknown_rounding(self):
        with pytest.raises(InvalidInput):
            encode(1.0, 2.0, "banker")

    def test_injected_wordlist(self, synthetic_wordlist):
        assert encode(-90, -180, wordlist=synthetic_wordlist) == ["aaazz"] * 4
        assert encode(90, 180, wordlist=synthetic_wordlist) == ["datzz"] * 4


class TestDecode:
    def test_round_trip(self, sample_coordinates):
        for lat, lon in sample_coordinates:
            assert_within_cell(decode(encode(lat, lon)), lat, lon)

    def test_random_round_trip(self):
        rng = random.Random(2024)
        for _ in range(200):
            lat = rng.uniform(-90, 90)
            lon = rng.uniform(-180, 180)
            assert_within_cell(decode(encode(lat, lon)), lat, lon)

    def test_extremes_stay_in_range(self):
        low = decode(encode(-90, -180))
        high = decode(encode(90, 180))
        assert -90 <= low.lat <= 90 and -180 <= low.lon <= 180
        assert -90 <= high.lat <= 90 and -180 <= high.lon <= 180
        assert high == (90.0, 180.0)

    def test_corner(self):
        assert decode(["abandon"] * 4, center=False) == (-90.0, -180.0)
        center = decode(["abandon"] * 4)
        assert center.lat == pytest.approx(-90 + cell_size().lat_degrees / 2)
        assert center.lon == pytest.approx(-180 + cell_size().lon_degrees / 2)

    def test_case_and_width_insensitive(self):
        assert decode(["ZOO", "Zoo", "ｚｏｏ", " zoo "]) == decode(["zoo"] * 4)

    def test_four_letter_prefixes(self, sample_coordinates):
        for lat, lon in sample_coordinates:
            words = encode(lat, lon)
            assert_within_cell(decode([word[:4] for word in words]), lat, lon)

    def test_dropped_last_letter(self, wordlist, sample_coordinates):
        altered = 0
        for lat, lon in sample_coordinates:
            words = encode(lat, lon)
            for i, word in enumerate(words):
                shortened = word[:-1]
                # Long enough to be a unique prefix and not another word
                if len(word) < 5 or shortened in wordlist:
                    continue
                typo_words = list(words)
                typo_words[i] = shortened
                assert_within_cell(decode(typo_words), lat, lon)
                altered += 1
        assert altered > 0

    def test_prefix_and_deletion_together(self):
        # Same alterations as a user might make by hand
        lat, lon = 37.7749, -122.4194
        words = encode(lat, lon)
        typo_words = [words[0][:4], words[1], words[2], words[3].upper()]
        assert_within_cell(decode(typo_words), lat, lon)

    def test_ambiguous_word_fails(self):
        words = encode(51.5074, -0.1278)
        with pytest.raises(UnknownOrAmbiguousWord):
            decode(["ar"] + words[1:])

    def test_unknown_word_fails(self):
        with pytest.raises(UnknownOrAmbiguousWord):
            decode(["zoo", "zoo", "zoo", "xqzvwk"])

    @pytest.mark.parametrize("words", [
        [],
        ["zoo"],
        ["zoo", "zoo", "zoo"],
        ["zoo", "zoo", "zoo", "zoo", "zoo"],
        "zoo zoo zoo zoo",
    ])
    def test_requires_four_words(self, words):
        with pytest.raises(ExactlyFourWordsRequired):
            decode(words)

    def test_injected_wordlist(self, synthetic_wordlist):
        words = encode(12.5, 45.25, wordlist=synthetic_wordlist)
        assert_within_cell(decode(words, wordlist=synthetic_wordlist), 12.5, 45.25)


class TestTryParse:
    def test_text(self):
        words = encode(-33.8688, 151.2093)
        assert_within_cell(try_parse("  " + "  ".join(words) + "\n"), -33.8688, 151.2093)

    def test_list(self):
        assert try_parse(["zoo"] * 4) == (90.0, 180.0)

    @pytest.mark.parametrize("value", ["", "zoo zoo zoo", "ar zoo zoo zoo", ["xqzvwk"] * 4])
    def test_invalid_returns_none(self, value):
        assert try_parse(value) is None


def test_cell_size():
    size = cell_size()
    assert size.lat_degrees == pytest.approx(180 / 4194303)
    assert size.lon_degrees == pytest.approx(360 / 4194303)


class TestLanguages:
    @pytest.mark.parametrize("language", available_languages())
    def test_every_accepted_language_round_trips(self, language, sample_coordinates):
        try:
            wordlist = load_wordlist(language)
        except WordlistError as e:
            pytest.skip(f"{language} wordlist rejected: {e}")
        for lat, lon in sample_coordinates:
            words = encode(lat, lon, wordlist=wordlist)
            assert all(word in wordlist for word in words)
            assert_within_cell(decode(words, wordlist=wordlist), lat, lon)
            # Composed and decomposed spellings decode alike
            for form in ("NFC", "NFD"):
                typed = [unicodedata.normalize(form, word) for word in words]
                assert_within_cell(decode(typed, wordlist=wordlist), lat, lon)

    def test_turkish_phrase_round_trips(self):
        wordlist = load_wordlist("turkish")
        words = encode(41.0082, 28.9784, wordlist=wordlist)
        assert_within_cell(decode(words, wordlist=wordlist), 41.0082, 28.9784)
