"""
md_parser/code_blocks.py — bloki kodu ``` w treści Markdown.
"""

from __future__ import annotations

import re

FENCE = "```"

# Nieżarłoczny blok od ``` do najbliższego ```.
_CODE_BLOCK_RE = re.compile(r"```.*?```", re.DOTALL)

# Ogrodzenie z opcjonalną etykietą języka, np. "```vue\n".
_FENCE_RE = re.compile(r"```\w*\n?")


def count_fences(text: str) -> int:
    """Liczba (nienachodzących) wystąpień ```."""
    return text.count(FENCE)


def find_code_blocks(text: str) -> list[str]:
    """
    Zwraca kod z kolejnych bloków ``` w tekście.

    Ogrodzenia i etykiety języka są usuwane, wynik przycięty z białych znaków.
    """
    return [
        _FENCE_RE.sub("", block).strip()
        for block in _CODE_BLOCK_RE.findall(text)
    ]
