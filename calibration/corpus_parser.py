"""
Corpus Parser — Reads Tagged Calibration Samples

Calibration corpora are plain text files of bill passages. Each passage
sits between '---' lines and opens with a few "key: value" headers:

    ---
    tags: memorial_bridge, stadium_arena
    source: H.R. 1234, Sec. 105
    notes: Classic hometown stadium earmark

    The passage itself, possibly over
    several lines.
    ---

Tags name the item categories a reviewer expects the analyzer to emit.
"clean" marks a passage that should get no pork verdict at all, and is
assumed when a block carries no tags header.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


CLEAN_TAG = "clean"

# Reviewer tag -> analyzer item category
TAG_TO_CATEGORY = {
    "memorial_bridge": "Memorial/Bridge",
    "stadium_arena": "Stadium/Arena",
    "museum_cultural": "Museum/Cultural Center",
    "tourism_visitor": "Tourism/Visitor Center",
    "research_university": "Research/University",
    "community_misc": "Community/Miscellaneous",
}

CATEGORY_TO_TAG = {v: k for k, v in TAG_TO_CATEGORY.items()}

_DELIMITER = re.compile(r"^\s*---\s*$", re.MULTILINE)
_HEADER = re.compile(r"^(tags|source|notes)\s*:\s*(.+)$", re.IGNORECASE)


class CorpusFormatError(ValueError):
    """A corpus block uses a tag the benchmark cannot score."""


@dataclass
class CalibrationSample:
    """One reviewer-labeled passage."""
    text: str
    tags: list[str]
    source: str
    notes: str
    is_clean: bool

    # Filled in by the benchmark
    engine_result: Optional[dict] = None

    @property
    def expected_categories(self) -> set[str]:
        return {TAG_TO_CATEGORY[t] for t in self.tags if t in TAG_TO_CATEGORY}


def parse_corpus(filepath: str | Path) -> list[CalibrationSample]:
    """
    Parse one corpus file.

    Raises:
        FileNotFoundError: the file does not exist.
        CorpusFormatError: a block is tagged with an unknown category.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Corpus file not found: {filepath}")

    samples = []
    for number, block in enumerate(_DELIMITER.split(filepath.read_text(encoding="utf-8"))):
        block = block.strip()
        if not block or block.startswith("#"):
            continue
        sample = _parse_block(block)
        if sample is None:
            continue
        unknown = [t for t in sample.tags if t != CLEAN_TAG and t not in TAG_TO_CATEGORY]
        if unknown:
            raise CorpusFormatError(
                f"{filepath.name} block {number}: unknown tag(s) {', '.join(unknown)}"
            )
        samples.append(sample)
    return samples


def _parse_block(block: str) -> Optional[CalibrationSample]:
    """Headers first, then the passage. None if the block has no passage."""
    headers: dict[str, str] = {}
    lines = block.splitlines()
    body_start = len(lines)

    for i, line in enumerate(lines):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        match = _HEADER.match(stripped)
        if not match:
            body_start = i
            break
        headers[match.group(1).lower()] = match.group(2).strip()

    text = "\n".join(
        line for line in lines[body_start:] if not line.strip().startswith("#")
    ).strip()
    if not text:
        return None

    tags = [t.strip().lower() for t in headers.get("tags", "").split(",") if t.strip()]
    tags = tags or [CLEAN_TAG]

    return CalibrationSample(
        text=text,
        tags=tags,
        source=headers.get("source", "unknown"),
        notes=headers.get("notes", ""),
        is_clean=CLEAN_TAG in tags,
    )


def parse_all_corpora(corpus_dir: str | Path) -> list[CalibrationSample]:
    """Every *.txt corpus in a directory, files in name order."""
    samples = []
    for filepath in sorted(Path(corpus_dir).glob("*.txt")):
        samples.extend(parse_corpus(filepath))
    return samples
