"""Appwrite document store for analysis records."""
import logging

from appwrite.client import Client
from appwrite.exception import AppwriteException
from appwrite.id import ID
from appwrite.services.databases import Databases

from apps.core.config import AppwriteConfig, require_setting
from apps.core.errors import PersistenceFailure
from apps.emotion.models import AnalysisRecord

logger = logging.getLogger(__name__)


class AnalysisStore:
    """Writes analysis records; never updates or deletes them."""

    def __init__(self, config: AppwriteConfig) -> None:
        self.config = config
        self._databases: Databases | None = None

    @property
    def databases(self) -> Databases:
        """SDK service, built on first use."""
        if self._databases is None:
            client = (
                Client()
                .set_endpoint(require_setting(self.config.endpoint, "APPWRITE_ENDPOINT"))
                .set_project(require_setting(self.config.project_id, "APPWRITE_PROJECT_ID"))
                .set_key(require_setting(self.config.api_key, "APPWRITE_API_KEY"))
            )
            self._databases = Databases(client)
        return self._databases

    def check_config(self) -> None:
        """Fail fast on missing connection settings or ids before any external call is made."""
        self.databases
        require_setting(self.config.database_id, "APPWRITE_DATABASE_ID")
        require_setting(self.config.analysis_collection_id, "APPWRITE_ANALYSIS_COLLECTION_ID")

    def create(self, record: AnalysisRecord) -> str:
        """Create one document with a fresh unique id and return that id."""
        database_id = require_setting(self.config.database_id, "APPWRITE_DATABASE_ID")
        collection_id = require_setting(
            self.config.analysis_collection_id, "APPWRITE_ANALYSIS_COLLECTION_ID"
        )
        databases = self.databases
        try:
            document = databases.create_document(
                database_id,
                collection_id,
                ID.unique(),
                record.to_document(),
            )
        except AppwriteException as e:
            raise PersistenceFailure(f"Failed to save analysis: {e.message}") from e
        logger.debug(f"Created analysis document {document['$id']}")
        return document["$id"]
