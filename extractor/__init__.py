"""
extractor — wyciąganie przypadków testowych (test-cases.json) z plików reguł.

Publiczne API:
  extract_test_cases(rules_dir)  → ExtractionResult
  extract_code_pair(body)        → (bloki błędne, bloki poprawne)
  rule_to_test_case(rule)        → TestCase | None
  dump_test_cases(test_cases)    → str (JSON)
"""

from .snippets import (
    ExtractionResult,
    dump_test_cases,
    extract_code_pair,
    extract_test_cases,
    rule_to_test_case,
)

__all__ = [
    "ExtractionResult",
    "dump_test_cases",
    "extract_code_pair",
    "extract_test_cases",
    "rule_to_test_case",
]
