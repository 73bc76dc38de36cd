import pytest
from fastapi.testclient import TestClient

from predictor_backend.config import Settings
from predictor_backend.main import create_app

FRONTEND = "http://frontend.test"


class FakePredictor:
    """Records what it was asked and answers with a fixed label (or raises)."""

    def __init__(self, label="positive", error=None):
        self.label = label
        self.error = error
        self.records = []

    def predict(self, record):
        self.records.append(record)
        if self.error is not None:
            raise self.error
        return self.label


class FakeTextExtractor:
    """Returns canned OCR text and remembers the image it was handed."""

    def __init__(self, text="", error=None):
        self.text = text
        self.error = error
        self.seen = []

    def extract(self, image_path):
        with open(image_path, "rb") as f:
            self.seen.append((image_path, f.read()))
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def settings() -> Settings:
    return Settings(
        ml_url="http://ml.test",
        frontend_url=FRONTEND,
        enable_extract_route=True,
    )


@pytest.fixture
def predictor() -> FakePredictor:
    return FakePredictor()


@pytest.fixture
def text_extractor() -> FakeTextExtractor:
    return FakeTextExtractor()


@pytest.fixture
def client(settings, predictor, text_extractor) -> TestClient:
    app = create_app(settings, predictor=predictor, text_extractor=text_extractor)
    return TestClient(app)
