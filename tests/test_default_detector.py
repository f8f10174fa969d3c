import polars as pl
import pytest

from schema_detection.config import DetectionSettings
from schema_detection.detectors import DefaultDetector
from schema_detection.inference import build_detection_context


@pytest.fixture
def detector():
    return DefaultDetector(DetectionSettings())


def test_metadata(detector):
    assert detector.name == "default"
    assert detector.label
    assert detector.description


def test_can_handle_everything(detector, make_context):
    assert detector.can_handle(make_context({})) is True


def test_detects_english(detector, make_field_stats, make_context):
    context = make_context(
        {"title": make_field_stats("title"), "description": make_field_stats("description")},
        sample_data=[
            {"title": "Summer Music Festival", "description": "A wonderful outdoor concert event"},
            {"title": "Art Exhibition Opening", "description": "Contemporary art showcase in the gallery"},
            {"title": "Food and Wine Tasting", "description": "Explore local wines and cuisine"},
        ],
    )

    result = detector.detect(context)

    assert result.language.code == "eng"
    assert result.language.name == "English"


def test_detects_german(detector, make_field_stats, make_context):
    context = make_context(
        {"titel": make_field_stats("titel"), "beschreibung": make_field_stats("beschreibung")},
        sample_data=[
            {"titel": "Sommermusikfestival", "beschreibung": "Ein wunderbares Konzert im Freien"},
            {"titel": "Kunstausstellung Eröffnung", "beschreibung": "Zeitgenössische Kunst in der Galerie"},
            {"titel": "Wein und Speisen Verkostung", "beschreibung": "Entdecken Sie lokale Weine und Küche"},
        ],
    )

    result = detector.detect(context)

    assert result.language.code == "deu"
    assert result.language.name == "German"


def test_field_mappings_follow_language(detector, make_field_stats, make_context):
    context = make_context(
        {
            "titel": make_field_stats("titel"),
            "beschreibung": make_field_stats("beschreibung"),
            "datum": make_field_stats("datum", formats={"date": 100}),
            "ort": make_field_stats("ort"),
        },
        sample_data=[
            {
                "titel": "Konzert im Stadtpark",
                "beschreibung": "Ein wunderbares Konzert mit klassischer Musik",
                "datum": "2024-06-15",
                "ort": "Stadtpark Berlin",
            },
            {
                "titel": "Theaterpremiere",
                "beschreibung": "Die neue Produktion des Stadttheaters",
                "datum": "2024-06-20",
                "ort": "Stadttheater München",
            },
        ],
    )

    mappings = detector.detect(context).field_mappings

    assert mappings.title.path == "titel"
    assert mappings.description.path == "beschreibung"
    assert mappings.timestamp.path == "datum"
    assert mappings.location_name.path == "ort"


def test_detects_geo_fields(detector, make_field_stats, make_context):
    context = make_context(
        {
            "title": make_field_stats("title"),
            "lat": make_field_stats(
                "lat",
                type_distribution={"number": 100},
                numeric_stats={"min": -90, "max": 90, "avg": 45, "isInteger": False},
            ),
            "lng": make_field_stats(
                "lng",
                type_distribution={"number": 100},
                numeric_stats={"min": -180, "max": 180, "avg": 10, "isInteger": False},
            ),
        },
        sample_data=[{"title": "Berlin Event", "lat": 52.52, "lng": 13.405}],
    )

    geo = detector.detect(context).field_mappings.geo

    assert geo.type == "separate"
    assert geo.latitude.path == "lat"
    assert geo.longitude.path == "lng"


def test_detects_id_and_enum_fields(detector, make_field_stats, make_context):
    context = make_context(
        {
            "id": make_field_stats("id", type_distribution={"number": 100}),
            "title": make_field_stats("title"),
            "status": make_field_stats("status", unique_values=3, unique_samples=["active", "cancelled", "completed"]),
        },
        sample_data=[{"id": 1, "title": "Event 1", "status": "active"}],
    )

    patterns = detector.detect(context).patterns

    assert "id" in patterns.id_fields
    assert patterns.enum_fields == ["status"]


def test_options_override_settings(make_field_stats, make_context):
    detector = DefaultDetector(DetectionSettings(enum_threshold=50))
    stats = {"category": make_field_stats("category", unique_values=30, unique_samples=["a", "b"])}

    assert detector.detect(make_context(stats)).patterns.enum_fields == ["category"]
    assert detector.detect(make_context(stats, options={"enum_threshold": 10})).patterns.enum_fields == []
    percentage = make_context(stats, options={"enum_mode": "percentage", "enum_threshold": 40})
    assert detector.detect(percentage).patterns.enum_fields == ["category"]


def test_settings_threshold_is_used(make_field_stats, make_context):
    detector = DefaultDetector(DetectionSettings(enum_threshold=10, enum_mode="percentage"))
    stats = {"category": make_field_stats("category", unique_values=30, unique_samples=["a", "b"])}

    assert detector.detect(make_context(stats)).patterns.enum_fields == []


def test_result_structure(detector, make_field_stats, make_context):
    context = make_context({"title": make_field_stats("title")}, sample_data=[{"title": "Test Event"}])

    data = detector.detect(context).to_dict()

    assert set(data) == {"language", "fieldMappings", "patterns"}
    assert set(data["language"]) == {"code", "name", "confidence", "isReliable"}
    assert set(data["fieldMappings"]) == {"title", "description", "timestamp", "locationName", "geo"}
    assert set(data["patterns"]) == {"idFields", "enumFields"}


def test_end_to_end_title_and_id(detector, make_field_stats, make_context):
    context = make_context(
        {
            "title": make_field_stats("title", unique_values=40),
            "id": make_field_stats("id", type_distribution={"number": 100}),
        },
    )

    result = detector.detect(context)

    assert result.language.code == "eng"
    assert result.field_mappings.title.path == "title"
    assert "id" in result.patterns.id_fields


def test_confidences_within_unit_interval(detector, events_df):
    result = detector.detect(build_detection_context(events_df))

    mappings = result.field_mappings
    confidences = [result.language.confidence, mappings.geo.confidence]
    confidences += [m.confidence for m in (mappings.title, mappings.description, mappings.timestamp, mappings.location_name)]
    assert all(0 <= c <= 1 for c in confidences)


def test_detects_events_dataset(detector, events_df):
    result = detector.detect(build_detection_context(events_df))

    assert result.language.code == "eng"
    assert result.language.is_reliable
    mappings = result.field_mappings
    assert mappings.title.path == "title"
    assert mappings.description.path == "description"
    assert mappings.timestamp.path == "date"
    assert mappings.location_name.path == "venue"
    assert mappings.geo.type == "separate"
    assert mappings.geo.latitude.path == "latitude"
    assert mappings.geo.longitude.path == "longitude"
    assert mappings.geo.location_field.path == "venue"
    assert "id" in result.patterns.id_fields
    assert "status" in result.patterns.enum_fields


def test_nested_rows_feed_geo_and_location_detection(detector):
    df = pl.from_dicts([
        {"title": "Jazz Night", "venue": {"city": "Berlin", "geo": {"lat": 52.52, "lng": 13.405}}},
        {"title": "Open Air", "venue": {"city": "Paris", "geo": {"lat": 48.8566, "lng": 2.3522}}},
    ])

    geo = detector.detect(build_detection_context(df)).field_mappings.geo

    assert geo.type == "separate"
    assert geo.latitude.path == "venue.geo.lat"
    assert geo.longitude.path == "venue.geo.lng"
    assert geo.location_field.path == "venue.city"


@pytest.mark.parametrize(
    "options",
    [
        {"enum_threshold": "lots"},
        {"enum_threshold": None},
        {"enum_threshold": -5},
        {"enum_mode": "ratio"},
        {"enum_mode": "ratio", "enum_threshold": "lots"},
    ],
)
def test_invalid_options_fall_back_to_settings(detector, make_field_stats, make_context, options, caplog):
    stats = {"category": make_field_stats("category", unique_values=30, unique_samples=["a", "b"])}

    result = detector.detect(make_context(stats, options=options))

    assert result.patterns.enum_fields == ["category"]
    assert "Ignoring invalid" in caplog.text


def test_default_settings_do_not_read_environment(monkeypatch):
    monkeypatch.setenv("SCHEMA_DETECTION_ENUM_MODE", "bogus")
    monkeypatch.setenv("SCHEMA_DETECTION_ENUM_THRESHOLD", "3")

    detector = DefaultDetector()

    assert detector.settings == DetectionSettings()
