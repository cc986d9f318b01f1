"""
Record generation pipeline
Coordinates input guards, validation and the CNPJ x email cross-join
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from models.record import GenerationForm, Record
from utils.config import Config, config as default_config
from .processor import partition_emails, partition_identifiers

logger = logging.getLogger(__name__)


class GenerationError(ValueError):
    """Raised when the form input cannot produce any record. The message is user-facing."""


@dataclass
class GenerationResult:
    records: List[Record] = field(default_factory=list)
    invalid_identifiers: List[str] = field(default_factory=list)
    invalid_emails: List[str] = field(default_factory=list)


class RecordGenerationPipeline:
    def __init__(self, settings: Optional[Config] = None):
        self.settings = settings or default_config

    def run(self, form: GenerationForm) -> GenerationResult:
        """
        Main generation pipeline
        Raises GenerationError when a required minimum is not met;
        invalid entries alone do not abort the run.
        """
        # Step 1: Both lists are required
        if not form.cnpj_text.strip():
            raise GenerationError("Por favor, insira pelo menos um CNPJ.")

        if not form.email_text.strip():
            raise GenerationError("Por favor, insira pelo menos um email.")

        # Step 2: Partition into valid / invalid
        identifiers = partition_identifiers(form.cnpj_text)
        emails = partition_emails(form.email_text)

        if identifiers.invalid:
            logger.warning("Skipping %d invalid CNPJ(s): %s",
                           len(identifiers.invalid), identifiers.invalid)
        if emails.invalid:
            logger.warning("Skipping %d invalid email(s): %s",
                           len(emails.invalid), emails.invalid)

        # Step 3: At least one valid entry of each kind must remain
        if not identifiers.valid:
            raise GenerationError("Nenhum CNPJ válido encontrado.")

        if not emails.valid:
            raise GenerationError("Nenhum email válido encontrado.")

        # Step 4: Cross-join
        records = self.build_records(
            identifiers.valid, emails.valid,
            action=form.action,
            vendor_name=form.vendor_name,
            country=form.country,
        )

        logger.info("Generated %d records (%d CNPJs x %d emails)",
                    len(records), len(identifiers.valid), len(emails.valid))

        return GenerationResult(
            records=records,
            invalid_identifiers=identifiers.invalid,
            invalid_emails=emails.invalid,
        )

    def build_records(self, identifiers: List[str], emails: List[str], action: str = "",
                      vendor_name: str = "", country: str = "") -> List[Record]:
        """
        Cartesian product of identifiers x emails, identifier-major.
        Blank vendor name / country fall back to the configured defaults.
        """
        vendor_id = self.vendor_id()
        vendor_name = (vendor_name if vendor_name.strip() else self.settings.DEFAULT_VENDOR_NAME).upper()
        country = (country if country.strip() else self.settings.DEFAULT_COUNTRY).upper()

        return [
            Record(
                user=email,
                country=country,
                vendor_account_id=cnpj,
                vendor_id=vendor_id,
                vendor_name=vendor_name,
                action=action,
            )
            for cnpj in identifiers
            for email in emails
        ]

    def vendor_id(self) -> str:
        """The vendorId shared by every record of a run. Fixed, not generated."""
        return self.settings.VENDOR_ID
