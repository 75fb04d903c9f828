"""Shared test fixtures — sample locale documents, files, edit journals."""

from __future__ import annotations

import json
import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def en_doc() -> dict:
    """Reference (English) locale."""
    return {
        "app": {
            "title": "My App",
            "welcome": "Welcome, {name}!",
            "menu": {"file": "File", "edit": "Edit"},
        },
        "errors": {"notFound": "Not found", "server": "Server error"},
        "languages": ["en", "fr"],
        "version": 2,
    }


@pytest.fixture
def fr_doc() -> dict:
    """Partial French translation of ``en_doc``."""
    return {
        "app": {
            "title": "Mon Appli",
            "welcome": "Welcome, {name}!",
            "menu": {"file": "Fichier"},
            "footer": "Tous droits réservés",
        },
        "errors": "Erreur",
        "languages": ["fr", "en"],
        "version": 2,
    }


@pytest.fixture
def write_json(tmp_path: Path):
    """Write a dict as a JSON file under tmp_path and return its path."""

    def _write(name: str, data) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def en_file(write_json, en_doc) -> Path:
    return write_json("en.json", en_doc)


@pytest.fixture
def fr_file(write_json, fr_doc) -> Path:
    return write_json("fr.json", fr_doc)


@pytest.fixture
def sample_journal() -> str:
    """Edits that bring fr.json in line with en.json's key set."""
    return textwrap.dedent("""\
        edits:
          - slot: slot2
            path: app.menu.edit
            value: Modifier
            type: add
          - slot: slot2
            path: errors
            value:
              notFound: Introuvable
              server: Erreur serveur
          - slot: slot1
            path: app.footer
            value: All rights reserved
            type: add
    """)


@pytest.fixture
def journal_file(tmp_path: Path, sample_journal: str) -> Path:
    path = tmp_path / "edits.yaml"
    path.write_text(sample_journal, encoding="utf-8")
    return path
