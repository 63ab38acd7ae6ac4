"""Tests for title normalisation and tokenisation."""

import re

from kore.utils.text_normalization import normalize_title, tokenize


def test_normalize_title_strips_accents_case_and_punctuation():
    assert normalize_title("Procédé  Industriel!") == "procede industriel"
    assert normalize_title("ÉLECTRIQUE / Générale") == "electrique generale"


def test_accented_and_uppercase_titles_give_same_tokens():
    assert tokenize("Procédé Industriel") == tokenize("PROCEDE INDUSTRIEL")
    assert tokenize("Procédé Industriel") == ["procede", "industriel"]


def test_punctuation_splits_tokens_and_short_tokens_are_dropped():
    assert tokenize("Réseau d'eau: DN-150/PVC") == ["reseau", "eau", "150", "pvc"]


def test_duplicate_tokens_keep_first_position():
    assert tokenize("Plan de plan 100 PLAN") == ["plan", "100"]


def test_empty_or_punctuation_only_titles_have_no_tokens():
    assert tokenize("") == []
    assert tokenize(None) == []
    assert tokenize("!!! --- ???") == []
    assert tokenize("a b de le") == []


def test_tokens_are_lowercase_ascii_of_at_least_three_characters():
    tokens = tokenize("Fiche Technique — Pompe Centrifuge n°3 (Révision B2) ½ œil")
    assert tokens
    for token in tokens:
        assert len(token) >= 3
        assert re.fullmatch(r"[a-z0-9]+", token)
