"""
Background Workers (Threading)
==============================
This module contains QThread subclasses for handling long-running tasks.

Why is this file needed?
------------------------
1. Responsiveness: Reading a large sample table on the main thread would
   freeze the GUI. The loader pushes ingestion and extraction to a background
   thread.
2. Signals: Results cross back to the GUI thread through Qt Signals; the
   worker never writes to ProjectState itself.

Classes:
    LoadWorker: Reads the CSV and extracts the boundary layer points.
"""
import logging
from PySide6.QtCore import QThread, Signal

from boundarylayer.model.extraction import extract_with_report
from boundarylayer.model.io import SampleIngestor

logger = logging.getLogger(__name__)


class LoadWorker(QThread):
    # Signals to update the UI from the background
    progress_updated = Signal(int, str)  # e.g., (50, "Extracting boundary layer...")
    results_ready = Signal(object, object)  # (samples, ExtractionReport)
    error_occurred = Signal(str)

    def __init__(self, filepath: str, free_stream_velocity: float):
        super().__init__()
        self.filepath = filepath
        self.free_stream_velocity = free_stream_velocity

    def run(self):
        try:
            logger.info("Starting sample loader in background thread...")
            self.progress_updated.emit(0, "Reading samples...")

            samples = SampleIngestor.read_samples(self.filepath)

            self.progress_updated.emit(50, "Extracting boundary layer...")
            report = extract_with_report(samples, self.free_stream_velocity)

            self.progress_updated.emit(100, "Done.")
            self.results_ready.emit(samples, report)

        except Exception as e:
            logger.error(f"Error in LoadWorker: {e}")
            self.error_occurred.emit(str(e))
