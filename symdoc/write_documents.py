"""Logic for writing rendered documents to disk."""

from collections.abc import Sequence
from pathlib import Path

from symdoc.document import Document


def output_file_for_document(out_root: Path, rel_path: str) -> Path:
    """Determine the output file for a document path, creating its directory."""
    p = out_root / rel_path.lstrip("/")
    p.parent.mkdir(parents=True, exist_ok=True)
    return p


def write_documents(documents: Sequence[Document], out_root: Path) -> int:
    """Write all documents to disk and return how many were written."""
    written = 0
    total = len(documents)
    print(f"Writing {total} documents...")
    for doc in documents:
        out_file = output_file_for_document(out_root, doc.path)
        out_file.write_text(doc.content, encoding="utf-8")
        written += 1
        if written % 50 == 0:
            print(f"  ... wrote {written}/{total} documents")
    return written
