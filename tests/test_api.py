"""Tests for the public update functions."""
import json
import pytest
from yamledit.api import (
    format_key,
    format_yaml,
    update_document,
    update_document_from_json,
    update_documents,
    update_key,
)
from yamledit.errors import DecodeError
from yamledit.options import UpdateOptions

TRAVIS = (
    "dist: trusty\n"
    "sudo: false\n"
    "language: java\n"
)

def test_update_key_scenarios():
    """Test inserting, updating and deleting single keys."""
    assert update_key("artist", "Arcade Fire", "") == "artist: Arcade Fire\n"
    assert update_key("artist", "Arcade Fire", "# not unknown\nartist: Unknown\n\n") == \
        "# not unknown\nartist: Arcade Fire\n"
    assert update_key("label", None, "label: false\nartist: Arcade Fire\n") == "artist: Arcade Fire\n"

def test_update_document_and_json_agree():
    """Test that decoded updates behave like the same mapping."""
    updates = {"sudo": "required"}
    expected = "dist: trusty\nsudo: required\nlanguage: java\n"
    assert update_document(updates, TRAVIS) == expected
    assert update_document_from_json(json.dumps(updates), TRAVIS) == expected

def test_update_document_from_json_on_empty_document():
    """Test applying JSON updates to an empty document."""
    assert update_document_from_json('{"artist": "Arcade Fire"}', "") == "artist: Arcade Fire\n"

def test_update_document_from_json_deletes():
    """Test that JSON null deletes a key."""
    assert update_document_from_json('{"sudo": null}', TRAVIS) == "dist: trusty\nlanguage: java\n"

def test_update_document_from_invalid_json():
    """Test that malformed JSON fails before touching the text."""
    with pytest.raises(DecodeError) as excinfo:
        update_document_from_json("{sudo: required", TRAVIS)
    assert "{sudo: required" in str(excinfo.value)

def test_later_keys_see_earlier_updates():
    """Test that keys are applied in order to the mutated text."""
    updates = {"artist": "Arcade Fire", "label": "Merge Records", "genre": "indie"}
    expected = "artist: Arcade Fire\nlabel: Merge Records\ngenre: indie\n"
    assert update_document(updates, "") == expected

def test_update_documents_first_match():
    """Test that only the document defining a key is modified."""
    original = "artist: Arcade Fire\n---\nartist: Broken Social Scene\nalbums:\n- Feel Good Lost\n"
    expected = "artist: Arcade Fire\n---\nartist: Broken Social Scene\nalbums:\n- Feel Good Lost\n- Hug of Thunder\n"
    assert update_documents({"albums": ["Feel Good Lost", "Hug of Thunder"]}, original) == expected

def test_update_documents_all():
    """Test that update_all applies a key to every document."""
    original = "artist: Arcade Fire\n---\nartist: Broken Social Scene\n"
    expected = "artist: Arcade Fire\ngenre: indie\n---\nartist: Broken Social Scene\ngenre: indie\n"
    assert update_documents({"genre": "indie"}, original, {"updateAll": True}) == expected
    assert update_documents({"genre": "indie"}, original, UpdateOptions(update_all=True)) == expected

def test_format_helpers():
    """Test the serialization helpers."""
    albums = ["Funeral", "Neon Bible"]
    assert format_key("albums", albums) == "albums:\n- Funeral\n- Neon Bible\n"
    assert format_key("albums", albums, {"keepArrayIndent": True}) == "albums:\n  - Funeral\n  - Neon Bible\n"
    assert format_yaml({"albums": albums}) == "albums:\n- Funeral\n- Neon Bible\n"
    assert format_yaml(albums) == "- Funeral\n- Neon Bible\n"
