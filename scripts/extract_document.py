"""Run the extraction pipeline on a local file and print the normalized text.

Usage:
    python scripts/extract_document.py notes.pdf --summary
"""

import argparse
import mimetypes
import os
import sys

# Add backend to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "backend"))

from studyaid.core.exceptions import StudyAidError
from studyaid.core.logging import setup_logging
from studyaid.services.document_service import DocumentService
from studyaid.services.summarizer import summarize_text


def main():
    parser = argparse.ArgumentParser(description="Extract normalized text from a .pdf, .txt or .md file")
    parser.add_argument("path", type=str)
    parser.add_argument("--summary", action="store_true",
                        help="Also print the offline extractive summary")
    args = parser.parse_args()

    setup_logging()

    with open(args.path, "rb") as f:
        file_data = f.read()
    filename = os.path.basename(args.path)
    mime_type, _ = mimetypes.guess_type(filename)

    def report(page_number: int, total_pages: int) -> None:
        print(f"Extracting text from page {page_number} of {total_pages}...", file=sys.stderr)

    try:
        processed = DocumentService().process(file_data, filename, mime_type, on_progress=report)
    except StudyAidError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)

    if processed.rejected:
        print(processed.rejection_reason, file=sys.stderr)
        sys.exit(2)

    print(f"# {filename}: {processed.page_count} page(s) via {processed.method.value}", file=sys.stderr)
    if processed.is_partial:
        print(f"# OCR failed on pages {processed.failed_pages}", file=sys.stderr)
    print(processed.text)

    if args.summary:
        print("\nSummary:")
        print(summarize_text(processed.text))


if __name__ == "__main__":
    main()
