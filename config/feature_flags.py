"""
OmniMeasure - Feature Flags
===========================

Feature Flags ermöglichen inkrementelle Rollouts und einfaches Rollback.
Neue Features werden mit Flag=False eingeführt und nach Validierung aktiviert.
"""

from typing import Dict

# Feature Flag Registry
# =====================
# Die Flags unten sind für aktives Debugging oder experimentelle Features.

FEATURE_FLAGS: Dict[str, bool] = {
    # Debug-Modi
    "analysis_debug_logging": False,  # Per-Part Statistiken im MeshAnalyzer (sehr verbose bei großen Scans)
    "loader_debug_logging": False,  # Block-für-Block Logging im Asset Loader

    # Performance
    "parallel_part_analysis": False,  # Parts auf ThreadPoolExecutor verteilen (ab Tolerances.PARALLEL_MIN_PARTS)

    # Report
    "analysis_summary_logging": True,  # INFO-Zusammenfassung nach jeder Analyse
}


def is_enabled(flag: str) -> bool:
    """
    Prüft ob ein Feature-Flag aktiviert ist.

    Args:
        flag: Name des Feature-Flags

    Returns:
        True wenn aktiviert, False wenn nicht aktiviert oder unbekannt
    """
    return FEATURE_FLAGS.get(flag, False)


def set_flag(flag: str, value: bool) -> None:
    """
    Setzt ein Feature-Flag zur Laufzeit.
    Nützlich für Tests und Debugging.

    Args:
        flag: Name des Feature-Flags
        value: Neuer Wert
    """
    FEATURE_FLAGS[flag] = value


def get_all_flags() -> Dict[str, bool]:
    """Gibt alle Feature-Flags zurück."""
    return FEATURE_FLAGS.copy()
