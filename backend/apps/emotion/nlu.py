"""Watson Natural Language Understanding client."""
import logging
from typing import Any

from ibm_cloud_sdk_core import ApiException
from ibm_cloud_sdk_core.authenticators import IAMAuthenticator
from ibm_watson import NaturalLanguageUnderstandingV1
from ibm_watson.natural_language_understanding_v1 import (
    EmotionOptions,
    Features,
    SentimentOptions,
)

from apps.core.config import WatsonConfig, require_setting
from apps.core.errors import UpstreamFailure

logger = logging.getLogger(__name__)


class WatsonEmotionClient:
    """Requests document-level emotion and sentiment for a piece of text."""

    def __init__(self, config: WatsonConfig) -> None:
        self.config = config
        self._service: NaturalLanguageUnderstandingV1 | None = None

    @property
    def service(self) -> NaturalLanguageUnderstandingV1:
        """SDK client, built on first use."""
        if self._service is None:
            authenticator = IAMAuthenticator(
                apikey=require_setting(self.config.api_key, "WATSON_API_KEY")
            )
            service = NaturalLanguageUnderstandingV1(
                version=self.config.version,
                authenticator=authenticator,
            )
            url = require_setting(self.config.url, "WATSON_URL")
            service.set_service_url(url)
            logger.info(f"Connected Watson NLU client to {url}")
            self._service = service
        return self._service

    def check_config(self) -> None:
        """Build the SDK client; raises ConfigurationMissing without credentials."""
        self.service

    def analyze(self, text: str, language: str) -> dict[str, Any]:
        service = self.service
        try:
            response = service.analyze(
                text=text,
                language=language,
                features=Features(emotion=EmotionOptions(), sentiment=SentimentOptions()),
            )
        except ApiException as e:
            raise UpstreamFailure(f"Watson NLU request failed ({e.code}): {e.message}") from e
        return response.get_result() or {}
