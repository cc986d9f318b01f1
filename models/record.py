"""
Record data model for CNPJ x email generation
Immutable rows plus the form input and app state that produce them
"""

from dataclasses import dataclass
from typing import Dict, Tuple

# Output column order for the table and both export formats
RECORD_FIELDS = ("user", "country", "vendorAccountId", "vendorId", "vendorName", "action")


@dataclass(frozen=True)
class Record:
    """
    One output row: a valid CNPJ joined with a valid email
    """
    user: str
    country: str
    vendor_account_id: str  # 14 digits, no punctuation
    vendor_id: str
    vendor_name: str
    action: str

    def to_row(self) -> Dict[str, str]:
        """Return the record keyed by its exported column names"""
        return {
            "user": self.user,
            "country": self.country,
            "vendorAccountId": self.vendor_account_id,
            "vendorId": self.vendor_id,
            "vendorName": self.vendor_name,
            "action": self.action,
        }


@dataclass(frozen=True)
class GenerationForm:
    """
    Raw values collected from the form
    """
    cnpj_text: str = ""
    email_text: str = ""
    action: str = ""
    vendor_name: str = ""
    country: str = ""


@dataclass(frozen=True)
class AppState:
    """
    Application state owned by the controller.
    Replaced as a whole on every successful generation run.
    """
    records: Tuple[Record, ...] = ()

    def has_records(self) -> bool:
        return len(self.records) > 0
