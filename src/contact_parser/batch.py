"""Batch processing for multiple OCR text files."""

import csv
import io
import json
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

from contact_parser.export import CSV_FIELDS, sanitize_csv_value
from contact_parser.models.contact import ParsedContact
from contact_parser.parser import ContactParser

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """Result of parsing multiple text files."""

    results: list[dict] = field(default_factory=list)
    contacts: list[ParsedContact] = field(default_factory=list)
    errors: list[dict] = field(default_factory=list)
    total_time_ms: float = 0.0

    @property
    def total(self) -> int:
        """Total number of processed files."""
        return len(self.results) + len(self.errors)

    @property
    def succeeded(self) -> int:
        """Number of files parsed into a contact."""
        return len(self.results)

    @property
    def failed(self) -> int:
        """Number of files that could not be read."""
        return len(self.errors)

    @property
    def ready_to_save(self) -> int:
        """Number of parsed contacts that pass the save gate."""
        return sum(1 for r in self.results if r.get("is_valid_for_saving"))


class BatchProcessor:
    """Parse multiple OCR text files with error isolation."""

    TEXT_EXTENSIONS = {".txt"}

    CSV_COLUMNS = [
        "source_path",
        "full_name",
        "job_title",
        "organization",
        "email",
        "phone",
        "website",
        "confidence",
        "valid_for_saving",
        "error",
    ]

    def __init__(self, parser: ContactParser):
        """
        Initialize batch processor.

        Args:
            parser: ContactParser used for every file.
        """
        self._parser = parser

    def process(self, paths: list[Path]) -> BatchResult:
        """
        Parse every file, isolating read errors per file.

        Parsing itself never fails; only reading a file can.

        Args:
            paths: Text files holding OCR output.

        Returns:
            BatchResult with one entry per file.
        """
        start_time = time.perf_counter()
        results: list[dict] = []
        contacts: list[ParsedContact] = []
        errors: list[dict] = []

        for path in paths:
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.debug("Skipping %s: %s", path, e)
                errors.append({
                    "source_path": str(path),
                    "error": str(e),
                })
                continue

            contact = self._parser.parse(text)
            result = contact.model_dump(mode="json", exclude={"raw_text"})
            result["source_path"] = str(path)
            results.append(result)
            contacts.append(contact)

        elapsed_ms = (time.perf_counter() - start_time) * 1000

        return BatchResult(
            results=results,
            contacts=contacts,
            errors=errors,
            total_time_ms=round(elapsed_ms, 2),
        )

    def collect_files(self, inputs: list[Path]) -> list[Path]:
        """
        Collect text files from files and directories.

        Args:
            inputs: List of file paths or directories.

        Returns:
            Sorted, de-duplicated list of text files.
        """
        files: list[Path] = []

        for path in inputs:
            if path.is_dir():
                for ext in self.TEXT_EXTENSIONS:
                    files.extend(path.glob(f"*{ext}"))
                    files.extend(path.glob(f"*{ext.upper()}"))
            elif path.is_file() and path.suffix.lower() in self.TEXT_EXTENSIONS:
                files.append(path)

        return sorted(set(files))

    def to_json(self, result: BatchResult) -> str:
        """
        Format batch result as JSON.

        Args:
            result: BatchResult to format.

        Returns:
            JSON string with metadata, results, and errors.
        """
        output = {
            "metadata": {
                "total": result.total,
                "succeeded": result.succeeded,
                "failed": result.failed,
                "ready_to_save": result.ready_to_save,
                "total_time_ms": result.total_time_ms,
            },
            "results": result.results,
            "errors": result.errors,
        }
        return json.dumps(output, indent=2, ensure_ascii=False)

    def to_csv(self, result: BatchResult) -> str:
        """
        Format batch result as CSV, one row per file.

        Args:
            result: BatchResult to format.

        Returns:
            CSV string with all results and errors.
        """
        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=self.CSV_COLUMNS)
        writer.writeheader()

        for item, contact in zip(result.results, result.contacts):
            row = {k: "" for k in self.CSV_COLUMNS}
            row["source_path"] = item["source_path"]
            for column in self.CSV_COLUMNS:
                if column in CSV_FIELDS:
                    row[column] = sanitize_csv_value(CSV_FIELDS[column][1](contact))
            writer.writerow(row)

        for item in result.errors:
            row = {k: "" for k in self.CSV_COLUMNS}
            row["source_path"] = item["source_path"]
            row["error"] = item["error"]
            writer.writerow(row)

        return output.getvalue()
