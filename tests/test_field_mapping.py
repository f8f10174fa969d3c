import pytest

from schema_detection.field_mapping import (
    ADDRESS_PATTERNS,
    COMBINED_COORDINATE_PATTERNS,
    COORDINATE_BOUNDS,
    FIELD_PATTERNS,
    LATITUDE_PATTERNS,
    LONGITUDE_PATTERNS,
    detect_field_mappings,
    find_field_by_pattern,
    get_patterns,
)
from schema_detection.field_mapping.normalize import leaf_name, split_path
from schema_detection.field_mapping.patterns import pattern_confidence
from schema_detection.field_mapping.values import is_non_text_value, parse_float

LANGUAGES = ["eng", "deu", "fra", "spa", "ita", "nld", "por"]


def matches(patterns, name):
    return any(p.search(name) for p in patterns)


class TestDetectFieldMappings:
    def test_english_title(self, make_field_stats):
        stats = {"title": make_field_stats("title"), "count": make_field_stats("count", type_distribution={"integer": 100})}

        result = detect_field_mappings(stats, "eng")

        assert result.title.path == "title"
        assert result.title.confidence == pytest.approx(1.0)

    def test_german_title_and_description(self, make_field_stats):
        stats = {"titel": make_field_stats("titel"), "beschreibung": make_field_stats("beschreibung")}

        result = detect_field_mappings(stats, "deu")

        assert result.title.path == "titel"
        assert result.description.path == "beschreibung"

    def test_timestamp_requires_date_or_string(self, make_field_stats):
        stats = {
            "date": make_field_stats("date", formats={"date": 100}),
            "time": make_field_stats("time", type_distribution={"integer": 100}),
        }

        result = detect_field_mappings(stats, "eng")

        assert result.timestamp.path == "date"

    def test_location_name(self, make_field_stats):
        result = detect_field_mappings({"venue": make_field_stats("venue")}, "eng")

        assert result.location_name.path == "venue"
        assert result.location_name.confidence == pytest.approx(1.0)

    def test_unmatched_fields_are_none(self, make_field_stats):
        stats = {"foo": make_field_stats("foo"), "bar": make_field_stats("bar")}

        result = detect_field_mappings(stats, "eng")

        assert result.title is None
        assert result.description is None
        assert result.timestamp is None
        assert result.location_name is None
        assert result.geo is None

    def test_unknown_language_uses_english(self, make_field_stats):
        result = detect_field_mappings({"title": make_field_stats("title")}, "xyz")

        assert result.title.path == "title"

    def test_non_text_column_is_not_a_title(self, make_field_stats):
        stats = {"name": make_field_stats("name", type_distribution={"integer": 100})}

        assert detect_field_mappings(stats, "eng").title is None


class TestFindFieldByPattern:
    def test_earlier_pattern_wins(self, make_field_stats):
        stats = {"name": make_field_stats("name"), "title": make_field_stats("title")}

        found = find_field_by_pattern(stats, get_patterns("title", "eng"))

        assert found.path == "title"
        assert found.confidence == pytest.approx(1.0)

    def test_tie_keeps_first_column(self, make_field_stats):
        stats = {"event.title": make_field_stats("event.title"), "venue.title": make_field_stats("venue.title")}

        found = find_field_by_pattern(stats, get_patterns("title", "eng"))

        assert found.path == "event.title"

    def test_confidence_formula(self, make_field_stats):
        patterns = get_patterns("title", "eng")

        found = find_field_by_pattern({"name": make_field_stats("name")}, patterns)

        assert found.confidence == pytest.approx(0.5 + 0.5 * (1 - 1 / len(patterns)))

    def test_validator_rejects(self, make_field_stats):
        found = find_field_by_pattern({"title": make_field_stats("title")}, get_patterns("title", "eng"), lambda s: False)
        assert found is None

    def test_empty_patterns(self, make_field_stats):
        assert find_field_by_pattern({"title": make_field_stats("title")}, ()) is None


class TestPatternBanks:
    def test_field_types_and_languages(self):
        for field_type in ("title", "description", "locationName", "timestamp", "location"):
            for lang in LANGUAGES:
                assert FIELD_PATTERNS[field_type][lang]

    def test_expected_names_match(self):
        assert matches(FIELD_PATTERNS["title"]["eng"], "title")
        assert matches(FIELD_PATTERNS["title"]["eng"], "name")
        assert matches(FIELD_PATTERNS["title"]["deu"], "titel")
        assert matches(FIELD_PATTERNS["description"]["deu"], "beschreibung")
        assert matches(FIELD_PATTERNS["title"]["fra"], "titre")
        assert matches(FIELD_PATTERNS["description"]["fra"], "description")

    def test_patterns_are_case_insensitive(self):
        assert matches(FIELD_PATTERNS["title"]["eng"], "Title")
        assert matches(LATITUDE_PATTERNS, "LATITUDE")

    @pytest.mark.parametrize("name", ["lat", "latitude", "lat_coord", "geo_lat", "breitengrad"])
    def test_latitude_names(self, name):
        assert matches(LATITUDE_PATTERNS, name)

    @pytest.mark.parametrize("name", ["lng", "longitude", "lon"])
    def test_latitude_patterns_reject_longitude(self, name):
        assert not matches(LATITUDE_PATTERNS, name)

    @pytest.mark.parametrize("name", ["lng", "lon", "longitude", "geo_lng", "lon_coord", "längengrad"])
    def test_longitude_names(self, name):
        assert matches(LONGITUDE_PATTERNS, name)

    @pytest.mark.parametrize("name", ["lat", "latitude"])
    def test_longitude_patterns_reject_latitude(self, name):
        assert not matches(LONGITUDE_PATTERNS, name)

    @pytest.mark.parametrize("name", ["coordinates", "coords", "latlng", "geolocation", "position", "geo"])
    def test_combined_names(self, name):
        assert matches(COMBINED_COORDINATE_PATTERNS, name)

    @pytest.mark.parametrize(
        "lang, names",
        [
            ("eng", ["address", "location", "city", "street", "venue"]),
            ("deu", ["adresse", "ort", "stadt", "strasse", "straße"]),
            ("fra", ["adresse", "lieu", "ville", "rue"]),
            ("spa", ["dirección", "lugar", "ciudad", "calle"]),
            ("ita", ["indirizzo", "luogo", "città", "via"]),
            ("nld", ["adres", "locatie", "stad", "straat"]),
            ("por", ["endereço", "local", "cidade", "rua"]),
        ],
    )
    def test_location_banks(self, lang, names):
        for name in names:
            assert matches(FIELD_PATTERNS["location"][lang], name)

    @pytest.mark.parametrize("name", ["address", "addr", "street", "city", "postal_code", "zip", "country", "place", "location"])
    def test_address_patterns(self, name):
        assert matches(ADDRESS_PATTERNS, name)

    def test_coordinate_bounds(self):
        assert COORDINATE_BOUNDS["latitude"] == {"min": -90, "max": 90}
        assert COORDINATE_BOUNDS["longitude"] == {"min": -180, "max": 180}

    def test_pattern_confidence_range(self):
        assert pattern_confidence(0, 6) == 1.0
        assert pattern_confidence(5, 6) > 0.5
        assert pattern_confidence(5, 6) < pattern_confidence(4, 6)


class TestValues:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("52.52", 52.52),
            ("  -13.4 ", -13.4),
            ("52.52 N", 52.52),
            (".5", 0.5),
            ("1e3", 1000.0),
            (7, 7.0),
            ("abc", None),
            ("", None),
            (True, None),
            (None, None),
            (float("nan"), None),
        ],
    )
    def test_parse_float(self, value, expected):
        assert parse_float(value) == expected

    @pytest.mark.parametrize(
        "value",
        ["test@example.com", "https://example.com", "2024-01-15", "2024-01-15T10:00:00", "42", "-3.5",
         "52.52,13.405", "550e8400-e29b-41d4-a716-446655440000", "12.03.2024"],
    )
    def test_non_text_values(self, value):
        assert is_non_text_value(value)

    @pytest.mark.parametrize("value", ["Summer festival", "Berlin", "café au lait"])
    def test_text_values(self, value):
        assert not is_non_text_value(value)

    def test_leaf_name(self):
        assert leaf_name("venue.address.city") == "city"
        assert leaf_name("title") == "title"
        assert leaf_name("") == ""
        assert split_path("a..b") == ["a", "b"]
