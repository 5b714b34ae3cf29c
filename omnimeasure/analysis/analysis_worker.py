"""
OmniMeasure - Background Analysis Worker
========================================

Die Analyse läuft asynchron zur UI: der Aufrufer lädt das Asset, startet den
Worker und bekommt das Ergebnis über ein Future zurück.

Features:
- Non-blocking Analyse (ThreadPoolExecutor)
- Progress-Updates (Prozent + Status-Text)
- Cancel-Support, geprüft nur ZWISCHEN Parts

Usage:
    worker = MeshAnalysisWorker(mesh, box, progress_callback=update_bar)
    future = worker.start()
    ...
    worker.cancel()
    result = future.result()  # wirft AnalysisCancelledError nach cancel()
"""

import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Callable, Optional, Union, Iterable

from loguru import logger

from omnimeasure.analysis.mesh_analyzer import BoxLike, MeshAnalyzer, as_bounding_box
from omnimeasure.core.errors import AnalysisCancelledError
from omnimeasure.core.geometry import Mesh, MeshPart
from omnimeasure.core.result_types import AnalysisResult


ProgressCallback = Callable[[int, str], None]


class MeshAnalysisWorker:
    """
    Background Worker für eine einzelne Mesh-Analyse.

    Ein Worker ist für genau einen Lauf gedacht. Für eine Neuberechnung
    einen neuen Worker erzeugen.
    """

    def __init__(
        self,
        mesh: Union[Mesh, Iterable[MeshPart]],
        bounding_box: BoxLike,
        progress_callback: Optional[ProgressCallback] = None,
    ):
        self.parts = list(mesh)
        self.bounding_box = as_bounding_box(bounding_box)
        self.progress_callback = progress_callback
        self._cancel_event = threading.Event()
        self._started = False

    @property
    def cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def cancel(self):
        """Request cancellation of analysis."""
        self._cancel_event.set()
        logger.info("Mesh-Analyse abgebrochen durch Benutzer")

    def _emit(self, percent: int, message: str):
        if self.progress_callback is not None:
            self.progress_callback(percent, message)

    def run(self) -> AnalysisResult:
        """
        Analysiert Part für Part (läuft im aufrufenden Thread).

        Raises:
            AnalysisCancelledError: wenn cancel() vor oder zwischen Parts kam
        """
        total_parts = len(self.parts)
        stats = []

        for i, part in enumerate(self.parts):
            if self.cancelled:
                raise AnalysisCancelledError(f"Analyse nach {i}/{total_parts} Parts abgebrochen")

            progress_pct = int((i / total_parts) * 100)
            self._emit(progress_pct, f"Analysiere Part {i + 1}/{total_parts}...")

            stats.append(MeshAnalyzer.analyze_part(part))

        if self.cancelled:
            raise AnalysisCancelledError(f"Analyse nach {total_parts}/{total_parts} Parts abgebrochen")

        result = MeshAnalyzer.finalize(stats, self.bounding_box)
        self._emit(100, "Fertig!")
        return result

    def start(self, executor: Optional[Executor] = None) -> Future:
        """
        Startet run() im Hintergrund.

        Args:
            executor: Vorhandener Executor. None = eigener Single-Thread Pool,
                der nach dem Lauf heruntergefahren wird.

        Returns:
            Future mit AnalysisResult

        Raises:
            RuntimeError: wenn der Worker bereits gestartet wurde
        """
        if self._started:
            raise RuntimeError("MeshAnalysisWorker wurde bereits gestartet - neuen Worker erzeugen")
        self._started = True

        if executor is not None:
            return executor.submit(self.run)

        owned = ThreadPoolExecutor(max_workers=1, thread_name_prefix="mesh-analysis")
        future = owned.submit(self.run)
        future.add_done_callback(lambda _f: owned.shutdown(wait=False))
        return future


def analyze_in_background(
    mesh: Union[Mesh, Iterable[MeshPart]],
    bounding_box: BoxLike,
    executor: Optional[Executor] = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> Future:
    """Convenience: Worker erzeugen und sofort starten."""
    worker = MeshAnalysisWorker(mesh, bounding_box, progress_callback=progress_callback)
    return worker.start(executor)
