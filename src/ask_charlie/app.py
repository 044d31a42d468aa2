"""
Public application facade for Ask Charlie.

This is the single stable entry point for the transports.
All dependency wiring is encapsulated here.
"""
from datetime import date
from typing import Optional

from .config import AskCharlieConfig
from .data_loader import CsvRecordSupplier, RecordSupplier
from .exceptions import AgentNotInitializedError
from .interaction import ChatResponse, WELCOME_MESSAGE
from .service import AskCharlieService, KnowledgeSnapshot


class AskCharlieApp:
    """
    Public application facade.

    Usage:
        config = load_config_from_env()
        app = AskCharlieApp(config)
        app.initialize()
        response = app.chat("leave balance for akhil")
    """

    def __init__(self, config: AskCharlieConfig, supplier: Optional[RecordSupplier] = None):
        """
        :param config: AskCharlieConfig instance
        :param supplier: Record supplier; CSV files from config when omitted
        """
        self._config = config
        self._supplier = supplier
        self._service: Optional[AskCharlieService] = None

    @property
    def config(self) -> AskCharlieConfig:
        return self._config

    @property
    def is_initialized(self) -> bool:
        return self._service is not None

    def initialize(self) -> None:
        """
        Wire the supplier and build the service. Safe to call twice.
        """
        if self._service:
            return

        supplier = self._supplier or CsvRecordSupplier(
            qna_path=self._config.qna_csv_path,
            holidays_path=self._config.holidays_csv_path,
            leave_path=self._config.leave_csv_path,
        )
        self._service = AskCharlieService(supplier, self._config)

    def chat(self, query: str, today: Optional[date] = None) -> ChatResponse:
        """
        Answer a user query.

        :param query: User query string
        :param today: Reference date; defaults to the local calendar date
        """
        return self._require_service().respond(query, today or date.today())

    def welcome(self) -> str:
        return WELCOME_MESSAGE

    def reload(self) -> KnowledgeSnapshot:
        return self._require_service().reload()

    def _require_service(self) -> AskCharlieService:
        if not self._service:
            raise AgentNotInitializedError("App is not initialized. Call initialize() first.")
        return self._service
