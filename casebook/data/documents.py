"""
Markdown case study documents: path resolution and section splitting.

Every document follows the same template: a `# Title` heading followed by
`## ` sections named in `TEMPLATE_SECTIONS`. Documents are read as opaque
text; only headings and fenced SQL blocks are recognised.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from casebook.data.catalog import CaseStudyEntry

log = logging.getLogger("casebook.documents")

TEMPLATE_SECTIONS = (
    "Business Problem",
    "Schema Reference",
    "SQL Query",
    "Explanation",
    "Sample Output",
    "Database Compatibility",
    "Performance Notes",
)

_TITLE_RE = re.compile(r"^#\s+(.+?)\s*$")
_SECTION_RE = re.compile(r"^##\s+(.+?)\s*$")
_SQL_BLOCK_RE = re.compile(r"```sql[^\n]*\n(.*?)```", re.DOTALL | re.IGNORECASE)


@dataclass
class CaseStudyDocument:
    title: Optional[str]
    sections: Dict[str, str] = field(default_factory=dict)
    path: Optional[Path] = None

    def section(self, name: str) -> str:
        return self.sections.get(name, "")


def study_path(root: Path, entry: CaseStudyEntry) -> Path:
    return Path(root) / entry.category / entry.file


def parse_document(text: str) -> CaseStudyDocument:
    title: Optional[str] = None
    sections: Dict[str, str] = {}
    current: Optional[str] = None
    buffer: List[str] = []
    in_fence = False

    def _flush() -> None:
        if current is not None:
            sections[current] = "\n".join(buffer).strip()

    for line in text.splitlines():
        # headings inside code fences (e.g. SQL comments starting with #) are content
        if line.lstrip().startswith("```"):
            in_fence = not in_fence
        if not in_fence:
            section_match = _SECTION_RE.match(line)
            if section_match:
                _flush()
                current = section_match.group(1)
                buffer = []
                continue
            title_match = _TITLE_RE.match(line)
            if title_match and title is None and current is None:
                title = title_match.group(1)
                continue
        if current is not None:
            buffer.append(line)
    _flush()
    return CaseStudyDocument(title=title, sections=sections)


def missing_sections(doc: CaseStudyDocument) -> List[str]:
    return [name for name in TEMPLATE_SECTIONS if name not in doc.sections]


def extract_sql(markdown: str) -> List[str]:
    return [block.strip() for block in _SQL_BLOCK_RE.findall(markdown)]


def read_document(root: Path, entry: CaseStudyEntry) -> Optional[CaseStudyDocument]:
    """Load and parse the document behind a catalog entry; None when missing."""
    path = study_path(root, entry)
    if not path.is_file():
        log.warning("case study document missing: %s", path)
        return None
    try:
        text = path.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as exc:
        log.warning("case study document unreadable: %s (%s)", path, exc)
        return None
    doc = parse_document(text)
    doc.path = path
    gaps = missing_sections(doc)
    if gaps:
        log.info("document %s lacks template sections: %s", path, gaps)
    return doc


def strip_sql(markdown: str) -> str:
    """The markdown with fenced SQL blocks removed."""
    return _SQL_BLOCK_RE.sub("", markdown).strip()
