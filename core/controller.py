"""
Top-level controller
Turns form submissions and export requests into new app state and banners
"""

import logging
from dataclasses import replace
from typing import Optional

from models.record import AppState, GenerationForm
from utils.output_processor import ExportError, ExportFile, OutputProcessor
from .notifier import Notifier
from .pipeline import GenerationError, RecordGenerationPipeline

logger = logging.getLogger(__name__)


class CNPJController:
    """
    Stateless apart from its services: the record set lives in the AppState
    value that is passed in and returned.
    """

    def __init__(self, notifier: Notifier, pipeline: Optional[RecordGenerationPipeline] = None,
                 output_processor: Optional[OutputProcessor] = None):
        self.notifier = notifier
        self.pipeline = pipeline or RecordGenerationPipeline()
        self.output_processor = output_processor or OutputProcessor()

    def generate(self, state: AppState, form: GenerationForm) -> AppState:
        """
        Run a generation and return the new state.
        On failure the error banner is posted and the previous state is kept.
        """
        self.notifier.clear()

        try:
            result = self.pipeline.run(form)
        except GenerationError as e:
            logger.info("Generation rejected: %s", e)
            self.notifier.error(str(e))
            return state

        if result.invalid_identifiers:
            self.notifier.error(f"CNPJs inválidos encontrados: {', '.join(result.invalid_identifiers)}")

        if result.invalid_emails:
            self.notifier.error(f"Emails inválidos encontrados: {', '.join(result.invalid_emails)}")

        self.notifier.success(f"{len(result.records)} registros gerados com sucesso!")
        return replace(state, records=tuple(result.records))

    def export(self, state: AppState, mode: str) -> Optional[ExportFile]:
        """Return the file to download, or None (with an error banner) when there is no data"""
        try:
            return self.output_processor.export(state.records, mode)
        except ExportError as e:
            logger.info("Export (%s) refused: %s", mode, e)
            self.notifier.error(str(e))
            return None

    def notify_downloaded(self, filename: str):
        logger.info("Downloaded %s", filename)
        self.notifier.success(f"Arquivo {filename} baixado com sucesso!")
