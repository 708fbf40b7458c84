"""Tests for the background sample loader."""

import pytest
from PySide6.QtCore import QCoreApplication

from boundarylayer.config import DEFAULT_DATA_PATH, FREE_STREAM_VELOCITY
from boundarylayer.controller.workers import LoadWorker
from boundarylayer.model.extraction import ExtractionReport


@pytest.fixture(scope="module")
def qt_app():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


def run_worker(filepath):
    """Run the worker body on the calling thread and collect its signals."""
    worker = LoadWorker(filepath, FREE_STREAM_VELOCITY)
    received = {"results": [], "errors": [], "progress": []}
    worker.results_ready.connect(lambda samples, report: received["results"].append((samples, report)))
    worker.error_occurred.connect(received["errors"].append)
    worker.progress_updated.connect(lambda percent, msg: received["progress"].append(percent))
    worker.run()
    return received


class TestLoadWorker:
    def test_missing_file_emits_error(self, qt_app, tmp_path):
        missing = tmp_path / "does_not_exist.csv"
        received = run_worker(str(missing))

        assert received["results"] == []
        assert len(received["errors"]) == 1
        assert "does_not_exist.csv" in received["errors"][0]

    def test_bundled_data_emits_results(self, qt_app):
        received = run_worker(DEFAULT_DATA_PATH)

        assert received["errors"] == []
        assert len(received["results"]) == 1
        samples, report = received["results"][0]
        assert isinstance(report, ExtractionReport)
        assert len(samples) == 1220
        assert len(report.points) == 20
        assert received["progress"] == [0, 50, 100]
