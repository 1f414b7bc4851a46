"""
Entry extraction from generator source files.

The generator builds each record inside an index-keyed branch ladder:

    if (ii == 0)
    {
        item.Name = new LocalText("Apple");
        item.Desc = new LocalText("A food item that somewhat fills the belly.");
        item.Sprite = "Apple_Red";
        item.Price = 50;
    }
    else if (ii == 1)
    ...

Rather than parsing C#, the extractor replays the ladder line by line. The
only state is the record currently open: a branch guard closes it and opens
the next one, field assignments fill it in.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from ..config import ProjectPaths
from .categories import Category
from .files import read_text
from .types import Entry

logger = logging.getLogger(__name__)

# Name prefix for content that is not released yet
WIP_MARKER = "**"

# Name prefixes for released content that was changed from the source game
MODIFIED_MARKERS = ("-", "=")

# Quoted C# string literal body, allowing escaped characters
_LITERAL = r'"((?:[^"\\]|\\.)+)"'


def derive_name(raw_name: str) -> tuple[str, bool]:
    """Strip the structural prefix from a raw name.

    Args:
        raw_name: Name text exactly as written in the generator

    Returns:
        Tuple of (display_name, is_unreleased)
    """
    if raw_name.startswith(WIP_MARKER):
        return raw_name[len(WIP_MARKER):], True
    if raw_name.startswith(MODIFIED_MARKERS):
        return raw_name[1:], False
    return raw_name, False


def slugify(name: str) -> str:
    """Derive a lookup id: lower-case, non-alphanumeric runs become one underscore."""
    return re.sub(r"[^a-z0-9]+", "_", name.lower()).strip("_")


def _unescape(text: str) -> str:
    return re.sub(r"\\(.)", r"\1", text)


@dataclass(frozen=True)
class SourcePatterns:
    """Text patterns the generator uses for its branch ladder.

    Attributes:
        index_var: Loop variable compared in each branch guard
        constructors: Literal constructors recognized around name/description text
    """

    index_var: str = "ii"
    constructors: tuple[str, ...] = ("LocalText",)

    def compile(self) -> "_Recognizers":
        ctor = "|".join(re.escape(c) for c in self.constructors)
        localized = rf"\s*=\s*(?:new\s+)?(?:{ctor})\s*\(\s*{_LITERAL}\s*\)"
        return _Recognizers(
            guard=re.compile(rf"\bif\s*\(\s*{re.escape(self.index_var)}\s*==\s*(\d+)\s*\)"),
            name=re.compile(r"\.Name" + localized),
            desc=re.compile(r"\.Desc" + localized),
            sprite=re.compile(r"\.Sprite\s*=\s*" + _LITERAL),
            price=re.compile(r"\.Price\s*=\s*(\d+)"),
            file_name=re.compile(r"\bfileName\s*=\s*" + _LITERAL),
        )


@dataclass(frozen=True)
class _Recognizers:
    guard: re.Pattern[str]
    name: re.Pattern[str]
    desc: re.Pattern[str]
    sprite: re.Pattern[str]
    price: re.Pattern[str]
    file_name: re.Pattern[str]


DEFAULT_PATTERNS = SourcePatterns()


@dataclass
class _OpenRecord:
    """Record under construction between two branch guards."""

    index: int
    line: int
    raw_name: str = ""
    display_name: str = ""
    is_unreleased: bool = False
    description: str = ""
    sprite: str | None = None
    price: int | None = None
    explicit_id: str | None = None

    def close(self, category: str, source_file: str | None) -> Entry | None:
        # An empty name marks a reserved slot, not real content
        if not self.display_name:
            return None
        return Entry(
            sequence_index=self.index,
            id=self.explicit_id or slugify(self.display_name),
            display_name=self.display_name,
            raw_name=self.raw_name,
            category=category,
            description=self.description,
            sprite=self.sprite,
            price=self.price,
            is_unreleased=self.is_unreleased,
            source_file=source_file,
            source_line=self.line,
        )


def _apply_fields(record: _OpenRecord, text: str, rx: _Recognizers) -> None:
    match = rx.name.search(text)
    if match:
        record.raw_name = _unescape(match.group(1))
        record.display_name, record.is_unreleased = derive_name(record.raw_name)

    match = rx.desc.search(text)
    if match:
        record.description = _unescape(match.group(1))

    match = rx.sprite.search(text)
    if match:
        record.sprite = _unescape(match.group(1))

    match = rx.price.search(text)
    if match:
        record.price = int(match.group(1))

    match = rx.file_name.search(text)
    if match:
        record.explicit_id = _unescape(match.group(1))


def parse_source_text(
    content: str,
    category: str,
    source_file: str | None = None,
    patterns: SourcePatterns = DEFAULT_PATTERNS,
) -> list[Entry]:
    """Reconstruct entries from generator source text.

    Args:
        content: Source text (byte-order mark already stripped)
        category: Category name stamped on every entry
        source_file: Display path recorded as each entry's source
        patterns: Branch ladder patterns

    Returns:
        Entries in branch-index order
    """
    rx = patterns.compile()
    entries: list[Entry] = []
    current: _OpenRecord | None = None

    for line_no, line in enumerate(content.splitlines(), start=1):
        guard = rx.guard.search(line)
        if guard:
            if current is not None:
                entry = current.close(category, source_file)
                if entry:
                    entries.append(entry)
            current = _OpenRecord(index=int(guard.group(1)), line=line_no)
            # Single-line branches carry their assignments after the guard
            line = line[guard.end():]

        if current is None:
            continue

        _apply_fields(current, line, rx)

    if current is not None:
        entry = current.close(category, source_file)
        if entry:
            entries.append(entry)

    entries.sort(key=lambda e: e.sequence_index)
    return entries


def extract_source_entries(
    category: Category,
    paths: ProjectPaths,
    patterns: SourcePatterns = DEFAULT_PATTERNS,
) -> list[Entry]:
    """Extract entries for a source-distributed category.

    Every declared file is read fresh. Missing files contribute nothing.

    Returns:
        Entries from all files, in branch-index order
    """
    entries: list[Entry] = []

    for rel_path in category.files:
        path: Path = paths.data_gen_dir / rel_path
        content = read_text(path)
        if content is None:
            continue

        file_entries = parse_source_text(
            content,
            category.name,
            source_file=paths.relative_to_root(path),
            patterns=patterns,
        )
        logger.debug(f"{path}: {len(file_entries)} entries")
        entries.extend(file_entries)

    entries.sort(key=lambda e: e.sequence_index)
    return entries
