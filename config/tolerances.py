"""
OmniMeasure - Zentralisierte Toleranz-Konfiguration
===================================================

Alle Schwellwerte und Toleranzen der Mesh-Analyse an einem Ort.

Einheiten-Philosophie:
- Positionen kommen aus der Rekonstruktion in Metern
- Flächen werden in m² gerechnet und erst bei der Anzeige umgerechnet
- Der Complexity Ratio ist dimensionslos

Verwendung:
    from config.tolerances import Tolerances

    # Direkt als Klassenvariablen
    threshold = Tolerances.AREA_CM2_THRESHOLD

    # Oder via Convenience-Funktionen
    from config.tolerances import area_unit_threshold
    threshold = area_unit_threshold()
"""


class Tolerances:
    """
    Zentrale Toleranz-Konstanten für OmniMeasure.

    Kategorien:
    - AREA_*: Flächen-Anzeige (Einheitenwechsel)
    - COMPLEXITY_*: Klassifizierung des Complexity Ratio
    - PARALLEL_*: Parallele Part-Analyse
    - COMPARE_*: Vergleichs-Toleranzen (Tests, Regressionen)
    """

    # =========================================================================
    # Flächen-Anzeige
    # =========================================================================

    # Unterhalb dieser Fläche wird in cm² statt m² angezeigt
    AREA_CM2_THRESHOLD = 0.01  # m²

    # Umrechnungsfaktor m² -> cm²
    AREA_M2_TO_CM2 = 10000.0

    # =========================================================================
    # Complexity Ratio (Mesh-Fläche / Bounding-Box-Fläche)
    # =========================================================================

    # Ratio ≈ 1 entspricht einer Box, höhere Werte = mehr Oberflächendetail
    COMPLEXITY_HIGHLY_DETAILED = 2.0
    COMPLEXITY_MODERATE = 1.5

    # =========================================================================
    # Parallele Analyse
    # =========================================================================

    # Erst ab so vielen Parts lohnt sich der ThreadPool-Overhead
    PARALLEL_MIN_PARTS = 4

    # None = ThreadPoolExecutor Default
    PARALLEL_MAX_WORKERS = None

    # =========================================================================
    # Vergleichs-Toleranzen
    # =========================================================================

    # Relative Toleranz für Flächen-Vergleiche (Summationsreihenfolge)
    COMPARE_AREA_REL = 1e-6


# =============================================================================
# Convenience-Funktionen
# =============================================================================

def area_unit_threshold() -> float:
    """Gibt die Schwelle für den cm²/m² Wechsel zurück."""
    return Tolerances.AREA_CM2_THRESHOLD


def compare_tolerance() -> float:
    """Gibt die relative Standard-Vergleichstoleranz für Flächen zurück."""
    return Tolerances.COMPARE_AREA_REL


# =============================================================================
# Toleranz-Validierung (für Debugging)
# =============================================================================

def validate_tolerances():
    """
    Validiert dass alle Toleranzen sinnvolle Werte haben.
    Nützlich für Tests und Debugging.
    """
    issues = []

    if Tolerances.AREA_CM2_THRESHOLD <= 0:
        issues.append(f"AREA_CM2_THRESHOLD muss positiv sein: {Tolerances.AREA_CM2_THRESHOLD}")

    # Moderate-Schwelle muss unter der Highly-Detailed-Schwelle liegen
    if Tolerances.COMPLEXITY_MODERATE >= Tolerances.COMPLEXITY_HIGHLY_DETAILED:
        issues.append(
            f"COMPLEXITY_MODERATE ({Tolerances.COMPLEXITY_MODERATE}) nicht kleiner als "
            f"COMPLEXITY_HIGHLY_DETAILED ({Tolerances.COMPLEXITY_HIGHLY_DETAILED})"
        )

    if Tolerances.PARALLEL_MIN_PARTS < 2:
        issues.append(f"PARALLEL_MIN_PARTS unter 2 ist sinnlos: {Tolerances.PARALLEL_MIN_PARTS}")

    if not (0 < Tolerances.COMPARE_AREA_REL < 1e-2):
        issues.append(f"COMPARE_AREA_REL außerhalb sinnvoller Grenzen: {Tolerances.COMPARE_AREA_REL}")

    return issues


# Automatische Validierung beim Import (nur Warnung, kein Fehler)
_validation_issues = validate_tolerances()
if _validation_issues:
    from loguru import logger
    for issue in _validation_issues:
        logger.warning(f"Toleranz-Validierung: {issue}")
