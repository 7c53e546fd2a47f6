"""Shared fixtures for the analysis pipeline tests."""

import json

import pytest

from core.observer import PipelineObserver


class RecordingObserver(PipelineObserver):
    """Keeps stage events in memory so tests can assert on the path taken."""

    def __init__(self):
        self.events = []

    def stage_completed(self, stage, **details):
        self.events.append(("completed", stage, details))

    def stage_failed(self, stage, error):
        self.events.append(("failed", stage, error.kind))

    def stages(self):
        return [(outcome, stage) for outcome, stage, _ in self.events]

    def details(self, stage):
        """Details reported by the last completion of stage."""
        for outcome, name, details in reversed(self.events):
            if outcome == "completed" and name == stage:
                return details
        raise AssertionError(f"stage {stage} never completed")


@pytest.fixture
def observer():
    return RecordingObserver()


@pytest.fixture
def sample_document():
    """A complete, well-formed analysis in the boundary shape."""
    return {
        "characters": [
            {"name": "Alice", "description": "A curious girl who follows a rabbit"},
            {"name": "White Rabbit", "description": "A hurried rabbit with a pocket watch"},
            {"name": "Queen of Hearts", "description": ""},
        ],
        "interactions": [
            {
                "source": "Alice",
                "target": "White Rabbit",
                "description": "Alice chases the rabbit down the hole",
                "strength": 8
            },
            {
                "source": "Queen of Hearts",
                "target": "Alice",
                "description": "The Queen puts Alice on trial",
                "strength": 6
            },
        ],
        "genre": "Fantasy",
        "writingStyle": {
            "formality": "Formal Victorian prose",
            "approach": "Episodic third-person narration",
            "notes": "Heavy use of wordplay and nonsense verse"
        }
    }


@pytest.fixture
def arabic_document():
    return {
        "characters": [
            {"name": "أليس", "description": "فتاة فضولية تتبع أرنبا"},
            {"name": "الأرنب الأبيض", "description": "أرنب مستعجل يحمل ساعة جيب"},
        ],
        "interactions": [
            {
                "source": "أليس",
                "target": "الأرنب الأبيض",
                "description": "تطارد أليس الأرنب",
                "strength": 8
            },
        ],
        "genre": "فانتازيا",
        "writingStyle": {
            "formality": "رسمي",
            "approach": "سرد بضمير الغائب",
            "notes": "تلاعب بالألفاظ"
        }
    }


@pytest.fixture
def sample_json(sample_document):
    return json.dumps(sample_document)
