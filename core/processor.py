"""
Line-based input processing
Splits raw multi-line form text and partitions it into valid and invalid entries
"""

from dataclasses import dataclass, field
from typing import Callable, List

from .validators import digits_only, is_valid_email, is_valid_identifier


@dataclass
class Partition:
    """
    Result of validating one list of entries, both sides in input order
    """
    valid: List[str] = field(default_factory=list)
    invalid: List[str] = field(default_factory=list)


def split_lines(text: str) -> List[str]:
    """Split on newlines, trim each line and drop the empty ones"""
    lines = (line.strip() for line in text.split("\n"))
    return [line for line in lines if line]


def _partition(text: str, is_valid: Callable[[str], bool],
               normalize: Callable[[str], str]) -> Partition:
    result = Partition()

    for entry in split_lines(text):
        if is_valid(entry):
            result.valid.append(normalize(entry))
        else:
            result.invalid.append(entry)

    return result


def partition_identifiers(text: str) -> Partition:
    """
    Partition CNPJ lines.
    Valid entries are reduced to their 14 digits; invalid ones keep the trimmed text.
    """
    return _partition(text, is_valid_identifier, digits_only)


def partition_emails(text: str) -> Partition:
    """
    Partition email lines.
    Valid entries keep their original (trimmed) casing.
    """
    return _partition(text, is_valid_email, lambda email: email)
