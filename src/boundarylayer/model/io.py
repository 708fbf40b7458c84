"""
Input Manager (CSV)
Decodes the velocity-sample table into VelocitySample records.

Malformed fields never abort a read; they become None on the sample and are
dealt with by the extractor. Only transport problems (missing file, unreadable
bytes, broken CSV framing) raise IngestionError.
"""
import csv
import io
import logging
from typing import Iterable

from boundarylayer.model.samples import VelocitySample

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS: tuple[str, ...] = ("x", "y", "u", "Re")


class IngestionError(IOError):
    """Raised when the sample table cannot be obtained or framed as CSV."""


class SampleIngestor:

    @staticmethod
    def read_samples(filepath: str) -> list[VelocitySample]:
        """Read and decode a CSV file of velocity samples."""
        logger.info(f"Reading velocity samples from: {filepath}")
        try:
            with open(filepath, mode='r', encoding='utf-8-sig', newline='') as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"CSV Import failed: {e}")
            raise IngestionError(f"Failed to read CSV '{filepath}': {e}") from e

        samples = SampleIngestor.parse_samples(text)
        logger.info(f"Loaded {len(samples)} samples from {filepath}")
        return samples

    @staticmethod
    def parse_samples(text: str) -> list[VelocitySample]:
        """
        Decode CSV text with a header row naming x, y, u, Re.

        The delimiter is ';' if the header line contains one, otherwise ','.
        With ';' a decimal comma is accepted in the values.
        """
        text = text.lstrip('\ufeff')
        header_line = text.split('\n', 1)[0]
        delimiter = ';' if ';' in header_line else ','

        reader = csv.DictReader(io.StringIO(text, newline=''), delimiter=delimiter)
        try:
            SampleIngestor._check_columns(reader.fieldnames or [])
            rows: Iterable[dict] = reader
            if delimiter == ';':
                rows = (SampleIngestor._decimal_comma(row) for row in reader)
            return [VelocitySample.from_row(row) for row in rows]
        except csv.Error as e:
            logger.error(f"CSV Import failed at line {reader.line_num}: {e}")
            raise IngestionError(f"Malformed CSV at line {reader.line_num}: {e}") from e

    @staticmethod
    def _check_columns(fieldnames: list[str]) -> None:
        missing = [name for name in REQUIRED_COLUMNS if name not in fieldnames]
        if missing:
            logger.warning(f"CSV header is missing column(s) {missing}; values will be treated as absent.")

    @staticmethod
    def _decimal_comma(row: dict) -> dict:
        return {
            key: value.replace(',', '.') if isinstance(value, str) else value
            for key, value in row.items()
        }
