"""Documentation file discovery."""

import re
from pathlib import Path
from typing import List

from go2rpm.exceptions import DocFileError


DOC_SUFFIX_PATTERN = re.compile(r'\.(md|txt)$')
DOC_NAME_PATTERN = re.compile(r'^[A-Z]+$')


def is_doc_name(name: str) -> bool:
    """README.md, NOTES.txt, LICENSE, AUTHORS and the like."""
    return bool(DOC_SUFFIX_PATTERN.search(name) or DOC_NAME_PATTERN.match(name))


def find_doc_files(checkout: Path) -> List[str]:
    """Top-level documentation files of a checkout, relative and sorted."""
    return sorted(
        entry.name for entry in checkout.iterdir()
        if not entry.name.startswith('.') and entry.is_file() and is_doc_name(entry.name)
    )


def read_doc(path: Path) -> str:
    """Read a documentation file; any failure is fatal."""
    try:
        return path.read_text(encoding='utf-8', errors='replace')
    except OSError as e:
        raise DocFileError(f"{path.name}: {e.strerror or e}")
