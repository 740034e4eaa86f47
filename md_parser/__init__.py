"""
md_parser — parsowanie plików reguł Markdown.

Publiczne API:
  parse_frontmatter(text)   → (Frontmatter, body)
  normalize_text(text)      → tekst bez BOM, z końcami linii LF
  dump_frontmatter(fields)  → blok `--- ... ---`
  find_code_blocks(text)    → list[str]
  count_fences(text)        → int
  INCORRECT, CORRECT        znaczniki sekcji przykładów
  FrontmatterError          błąd strukturalny
"""

from .frontmatter import (
    FrontmatterError,
    FrontmatterErrorKind,
    dump_frontmatter,
    has_opening_delimiter,
    normalize_text,
    parse_fields,
    parse_frontmatter,
    split_frontmatter,
)
from .markers import CORRECT, INCORRECT, MarkerRole, SectionMarker
from .code_blocks import FENCE, count_fences, find_code_blocks

__all__ = [
    "FrontmatterError",
    "FrontmatterErrorKind",
    "dump_frontmatter",
    "has_opening_delimiter",
    "normalize_text",
    "parse_fields",
    "parse_frontmatter",
    "split_frontmatter",
    "CORRECT",
    "INCORRECT",
    "MarkerRole",
    "SectionMarker",
    "FENCE",
    "count_fences",
    "find_code_blocks",
]
