"""
Tests für config.tolerances und config.version.
"""

from config.tolerances import (
    Tolerances,
    area_unit_threshold,
    compare_tolerance,
    validate_tolerances,
)
from config.version import VERSION, VERSION_MAJOR, VERSION_MINOR, VERSION_PATCH
from omnimeasure import __version__
from omnimeasure.formatting import format_surface_area


class TestTolerances:

    def test_default_tolerances_are_valid(self):
        assert validate_tolerances() == []

    def test_convenience_functions(self):
        assert area_unit_threshold() == Tolerances.AREA_CM2_THRESHOLD
        assert compare_tolerance() == Tolerances.COMPARE_AREA_REL

    def test_unit_threshold_drives_formatting(self, monkeypatch):
        monkeypatch.setattr(Tolerances, "AREA_CM2_THRESHOLD", 1.0)

        assert area_unit_threshold() == 1.0
        assert format_surface_area(0.5) == "5000.0 cm²"

    def test_complexity_thresholds_ordered(self):
        assert Tolerances.COMPLEXITY_MODERATE < Tolerances.COMPLEXITY_HIGHLY_DETAILED

    def test_invalid_threshold_is_reported(self, monkeypatch):
        monkeypatch.setattr(Tolerances, "COMPLEXITY_MODERATE", 3.0)

        issues = validate_tolerances()

        assert len(issues) == 1
        assert "COMPLEXITY_MODERATE" in issues[0]

    def test_parallel_min_parts_reported(self, monkeypatch):
        monkeypatch.setattr(Tolerances, "PARALLEL_MIN_PARTS", 1)
        assert any("PARALLEL_MIN_PARTS" in issue for issue in validate_tolerances())


class TestVersion:

    def test_package_version(self):
        assert __version__ == VERSION
        assert VERSION == f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH}"
