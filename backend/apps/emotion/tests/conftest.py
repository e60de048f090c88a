import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Make 'apps' importable when running from the repository root
backend_root = Path(__file__).parent.parent.parent.parent
sys.path.insert(0, str(backend_root))

from apps.core.config import AppwriteConfig, Settings, WatsonConfig  # noqa: E402
from apps.core.retry import RetryPolicy  # noqa: E402
from apps.emotion.engine import EmotionEngine  # noqa: E402


@pytest.fixture
def test_settings():
    """Fully configured settings that never touch the environment."""
    return Settings(
        watson=WatsonConfig(
            WATSON_API_KEY="watson-key",
            WATSON_URL="https://api.example.watson.cloud.ibm.com",
        ),
        appwrite=AppwriteConfig(
            APPWRITE_ENDPOINT="https://cloud.example.io/v1",
            APPWRITE_PROJECT_ID="survey-project",
            APPWRITE_API_KEY="appwrite-key",
            APPWRITE_DATABASE_ID="survey-db",
            APPWRITE_ANALYSIS_COLLECTION_ID="analysis",
        ),
    )


@pytest.fixture
def watson_result():
    """Watson NLU result with document-level emotion and sentiment."""
    return {
        "language": "en",
        "emotion": {
            "document": {
                "emotion": {
                    "joy": 0.81,
                    "sadness": 0.05,
                    "anger": 0.02,
                    "fear": 0.03,
                    "disgust": 0.01,
                }
            }
        },
        "sentiment": {"document": {"score": 0.92, "label": "positive"}},
    }


@pytest.fixture
def nlu(watson_result):
    client = Mock()
    client.analyze.return_value = watson_result
    return client


@pytest.fixture
def store():
    s = Mock()
    s.create.return_value = "analysis_1"
    return s


@pytest.fixture
def engine(nlu, store, test_settings):
    return EmotionEngine(
        nlu=nlu,
        store=store,
        settings=test_settings,
        retry_policy=RetryPolicy(attempts=2, delay_seconds=0),
    )
