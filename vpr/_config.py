"""Konfiguracja ścieżek — zmienne środowiskowe (opcjonalnie z pliku .env)."""

from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass(slots=True)
class Settings:
    root:        pathlib.Path
    rules_dir:   pathlib.Path
    metadata:    pathlib.Path
    agents_out:  pathlib.Path
    tests_out:   pathlib.Path


def _path(name: str, default: pathlib.Path) -> pathlib.Path:
    value = os.getenv(name)
    return pathlib.Path(value) if value else default


def load_settings(root: pathlib.Path | None = None) -> Settings:
    """
    Ścieżki domyślne względem katalogu roboczego (lub VPR_ROOT).

    Plik .env z katalogu roboczego nie nadpisuje zmiennych już ustawionych
    w środowisku.
    """
    load_dotenv(pathlib.Path.cwd() / ".env", override=False)

    root = root or _path("VPR_ROOT", pathlib.Path.cwd())
    return Settings(
        root       = root,
        rules_dir  = _path("VPR_RULES_DIR",  root / "rules"),
        metadata   = _path("VPR_METADATA",   root / "metadata.json"),
        agents_out = _path("VPR_AGENTS_OUT", root / "AGENTS.md"),
        tests_out  = _path("VPR_TESTS_OUT",  root / "test-cases.json"),
    )
