"""Shared test fixtures for the Kore duplicate-check test suite."""

import pytest

from kore.models.document import CorpusDocument


@pytest.fixture
def gcv_documents() -> list[CorpusDocument]:
    """Foundation plans: an exact copy, an accent-free copy, and an unrelated spec."""
    rows = [
        ("1", "P100-GCV-PLN-0001", "Plan de Fondations Bâtiment 100"),
        ("2", "P100-GCV-PLN-0002", "Plan de Fondations Batiment 100"),
        ("3", "P100-GCV-SPE-0003", "Spécification Électrique Générale"),
    ]
    return [
        CorpusDocument(id=doc_id, doc_number=doc_number, title=title, discipline_code="GCV")
        for doc_id, doc_number, title in rows
    ]
