"""Invariants that hold for every key update."""
import pytest
from yamledit.text.span import KeySpanMatcher
from yamledit.updater.key import KeyUpdater

DOCUMENT = (
    "# release notes\n"
    "artist: Arcade Fire\n"
    "\n"
    "albums:\n"
    "  Funeral: 2004\n"
    "# misplaced\n"
    "  Neon Bible: 2007\n"
    "tracks:\n"
    "- Wake Up\n"
    "- Rebellion\n"
    "label: Merge Records\n"
)

UPDATES = [
    ("artist", "Win Butler"),
    ("artist", None),
    ("albums", {"Neon Bible": 2008}),
    ("albums", {"Reflektor": 2013, "Funeral": None}),
    ("albums", ["Funeral"]),
    ("tracks", ["Wake Up"]),
    ("tracks", {"side": "A"}),
    ("label", False),
    ("label", None),
]

@pytest.mark.parametrize("key,value", UPDATES)
def test_text_outside_span_is_unchanged(key, value):
    """Test that only the key's own span changes."""
    span = KeySpanMatcher.find(key, DOCUMENT)
    updated = KeyUpdater().update_key(key, value, DOCUMENT)
    assert updated.startswith(DOCUMENT[:span.start] + span.prefix)
    assert updated.endswith(DOCUMENT[span.end:])

@pytest.mark.parametrize("key,value", UPDATES + [("genre", "indie"), ("year", 2004)])
def test_update_is_idempotent(key, value):
    """Test that applying an update twice equals applying it once."""
    updater = KeyUpdater()
    once = updater.update_key(key, value, DOCUMENT)
    assert updater.update_key(key, value, once) == once

@pytest.mark.parametrize("key,value", [
    ("artist", "Arcade Fire"),
    ("albums", {"Funeral": 2004}),
    ("tracks", ["Wake Up", "Rebellion"]),
    ("label", "Merge Records"),
])
def test_equal_value_is_noop(key, value):
    """Test that setting a key to its current value returns the input."""
    assert KeyUpdater().update_key(key, value, DOCUMENT) == DOCUMENT

@pytest.mark.parametrize("value", ["indie", 2004, True, ["Funeral", "Neon Bible"], {"year": 2004}])
def test_insert_then_delete_round_trips(value):
    """Test that deleting a freshly inserted key restores the text."""
    updater = KeyUpdater()
    inserted = updater.update_key("genre", value, DOCUMENT)
    assert inserted != DOCUMENT
    assert updater.update_key("genre", None, inserted) == DOCUMENT
