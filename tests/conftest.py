# tests/conftest.py
import sys
from pathlib import Path
import pytest

# Make "src" importable
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from palette import FieldPalette
from composer import Composer, Field


class RecordingHost:
    """Host double: keeps every doc change snapshot and save payload."""

    def __init__(self):
        self.docs = []
        self.saves = []

    def on_doc_change(self, draft):
        self.docs.append(draft)

    def save_form(self, payload):
        self.saves.append(payload)


@pytest.fixture(scope="session")
def palette():
    # Loads built-in field types from palette/specs.py
    return FieldPalette()


@pytest.fixture
def host():
    return RecordingHost()


@pytest.fixture
def abc_fields():
    return [
        Field(id="1", type="input", payload={"text": "A"}),
        Field(id="2", type="select", payload={"text": "B"}),
        Field(id="3", type="check", payload={"text": "C"}),
    ]


@pytest.fixture
def composer(host, palette, abc_fields):
    # Fresh composer per test, seeded with three fields
    return Composer.create(fields=abc_fields, form_type="lead", listener=host, palette=palette)
