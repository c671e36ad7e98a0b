"""
Shared fixtures for the engine tests.
"""

import pytest

from medibot.config import reset_config
from medibot.schemas import Document


@pytest.fixture
def flu() -> Document:
    return Document(
        name="Flu",
        symptoms=["fever", "cough"],
        causes=["virus"],
        diagnosis="clinical exam",
        treatment=["rest", "fluids"],
    )


@pytest.fixture
def small_collection(flu) -> list[Document]:
    """Three conditions with partly shared vocabulary."""
    return [
        flu,
        Document(
            name="Cold",
            symptoms=["sneezing", "cough"],
            causes=["rhinovirus"],
            diagnosis="clinical exam",
            treatment=["rest"],
        ),
        Document(
            name="Migraine",
            symptoms=["headache", "nausea"],
            causes=["stress"],
            diagnosis="neurological exam",
            treatment=["triptans"],
        ),
    ]


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Isolate tests from MEDIBOT_* variables and the cached config."""
    for name in (
        "MEDIBOT_DATASET_PATH",
        "MEDIBOT_TOP_K",
        "MEDIBOT_LOCAL_ONLY",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()
