"""
validator — walidator plików reguł i metadanych projektu.

Interfejs publiczny:
    RuleValidator       — walidator pojedynczego pliku (etapy A–D)
    validate_directory  — walidacja całego katalogu reguł
    MetadataIndex       — wczytany i sprawdzony metadata.json
    ValidationReport, DirectoryReport, ValidationError, ErrorCode — typy raportu

Typowe użycie:
    from validator import RuleValidator, validate_directory

    result = validate_directory(Path("rules"), RuleValidator())
    for report in result.invalid:
        for e in report.errors:
            print(report.filename, e.code, e.message)
"""

from .types import DirectoryReport, ErrorCode, ValidationError, ValidationReport
from .metadata_index import METADATA_SCHEMA, MetadataError, MetadataIndex
from .rule_validator import RuleValidator, validate_directory

__all__ = [
    "DirectoryReport",
    "ErrorCode",
    "ValidationError",
    "ValidationReport",
    "METADATA_SCHEMA",
    "MetadataError",
    "MetadataIndex",
    "RuleValidator",
    "validate_directory",
]
