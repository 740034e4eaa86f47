"""
validator/metadata_index.py — indeks metadanych projektu (metadata.json).

MetadataIndex wczytuje metadata.json, sprawdza go schematem JSON
(jsonschema, Draft 2020-12) i buduje:
  metadata — ProjectMetadata (nagłówek AGENTS.md, kategorie po kluczu)
"""

from __future__ import annotations

import json
import pathlib
from typing import Any

import jsonschema

from data_model import CATEGORY_ORDER, Category, ProjectMetadata

METADATA_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["title", "abstract", "version", "lastUpdated", "categories"],
    "properties": {
        "title":       {"type": "string", "minLength": 1},
        "abstract":    {"type": "string"},
        "version":     {"type": "string", "minLength": 1},
        "lastUpdated": {"type": "string"},
        "categories": {
            "type": "object",
            "additionalProperties": {
                "type": "object",
                "required": ["name", "description"],
                "properties": {
                    "name":        {"type": "string", "minLength": 1},
                    "description": {"type": "string"},
                    "impact":      {"type": "string"},
                },
            },
        },
    },
}


class MetadataError(ValueError):
    """metadata.json nie istnieje, nie jest poprawnym JSON-em lub łamie schemat."""


def _schema_errors(data: Any) -> list[str]:
    validator = jsonschema.Draft202012Validator(METADATA_SCHEMA)
    messages: list[str] = []
    for e in validator.iter_errors(data):
        path = (
            "/" + "/".join(str(p) for p in e.absolute_path)
            if e.absolute_path
            else "/"
        )
        messages.append(f"{path}: {e.message}")
    return messages


class MetadataIndex:
    """
    Metadane projektu wraz z kontrolą kompletności kategorii.

    Atrybuty publiczne:
      metadata — ProjectMetadata
    """

    def __init__(self, data: dict) -> None:
        errors = _schema_errors(data)
        if errors:
            raise MetadataError("Niepoprawny metadata.json: " + "; ".join(errors))

        categories = {
            key: Category(
                key=key,
                name=c["name"],
                description=c.get("description", ""),
                impact=c.get("impact", ""),
            )
            for key, c in data["categories"].items()
        }

        self.metadata = ProjectMetadata(
            title=data["title"],
            abstract=data["abstract"],
            version=data["version"],
            last_updated=data["lastUpdated"],
            categories=categories,
        )

    # ------------------------------------------------------------------
    # Kompletność kategorii
    # ------------------------------------------------------------------

    def missing_categories(self) -> list[str]:
        """Klucze z CATEGORY_ORDER bez wpisu w metadata.json."""
        return [k for k in CATEGORY_ORDER if k not in self.metadata.categories]

    def unknown_categories(self) -> list[str]:
        """Klucze w metadata.json spoza CATEGORY_ORDER (nigdy nie renderowane)."""
        return [k for k in self.metadata.categories if k not in CATEGORY_ORDER]

    # ------------------------------------------------------------------
    # Konstruktory fabryczne
    # ------------------------------------------------------------------

    @classmethod
    def from_file(cls, path: str | pathlib.Path) -> "MetadataIndex":
        """Ładuje metadane z pliku JSON."""
        path = pathlib.Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise MetadataError(f"Brak pliku metadanych: {path}") from exc
        except json.JSONDecodeError as exc:
            raise MetadataError(f"Błąd parsowania JSON w {path.name}: {exc}") from exc
        return cls(data)

    @classmethod
    def from_dict(cls, data: dict) -> "MetadataIndex":
        """Buduje indeks z już wczytanego słownika."""
        return cls(data)
