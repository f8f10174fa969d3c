import pytest
import polars as pl

from schema_detection.types import DetectionContext, DetectorConfig, FieldStatistics, NumericStats


@pytest.fixture
def make_field_stats():
    """Factory for FieldStatistics: 100 unique string values unless overridden."""

    def _make(path="test", **overrides):
        numeric = overrides.pop("numeric_stats", None)
        if isinstance(numeric, dict):
            numeric = NumericStats.from_dict(numeric)
        values = {
            "occurrences": 100,
            "unique_values": 100,
            "type_distribution": {"string": 100},
        }
        values.update(overrides)
        return FieldStatistics(path=path, numeric_stats=numeric, **values)

    return _make


@pytest.fixture
def make_context():
    def _make(field_stats, sample_data=None, headers=None, options=None):
        return DetectionContext(
            field_stats=field_stats,
            sample_data=list(sample_data or []),
            headers=list(headers if headers is not None else field_stats),
            config=DetectorConfig(options=dict(options or {})),
        )

    return _make


@pytest.fixture
def events_df():
    """A small English events dataset with separate coordinates."""
    return pl.DataFrame({
        "id": [1, 2, 3, 4, 5, 6],
        "title": [
            "Summer Music Festival",
            "Art Exhibition Opening",
            "Food and Wine Tasting",
            "Guided Walk Through the Old Town",
            "Theatre Premiere",
            "Farmers Market",
        ],
        "description": [
            "A wonderful outdoor concert event for the whole family",
            "Contemporary art showcase in the gallery with painting and photography",
            "Explore local wines and cuisine by the river",
            "Join a guided walk through the old town with a local expert",
            "The theatre presents a new production that tells the story of a young woman",
            "The market is open from morning until late with fresh bread, cheese and flowers",
        ],
        "date": ["2024-06-15", "2024-06-20", "2024-07-01", "2024-07-04", "2024-07-10", "2024-07-12"],
        "venue": ["City Park", "Modern Gallery", "Riverside Hall", "Old Town", "City Theatre", "City Park"],
        "latitude": [52.52, 48.8566, 40.7128, 51.5074, 41.9028, 52.52],
        "longitude": [13.405, 2.3522, -74.006, -0.1278, 12.4964, 13.405],
        "status": ["active", "active", "cancelled", "active", "completed", "active"],
    })
