# validators.py
# ------------------------------------------------------------
# Format checks for CNPJ identifiers and email addresses.
# - No network calls; no deliverability claims.
# - CNPJ: 14 digits after stripping punctuation, not all the same digit.
#   The modulus-11 check digits are NOT verified.
# - Email: minimal local@domain.tld shape only.
# ------------------------------------------------------------

from __future__ import annotations
import re

CNPJ_LENGTH = 14

NON_DIGIT_RE = re.compile(r"[^\d]", re.ASCII)
REPEATED_DIGIT_RE = re.compile(r"^(\d)\1+$", re.ASCII)
CNPJ_PARTS_RE = re.compile(r"^(\d{2})(\d{3})(\d{3})(\d{4})(\d{2})$", re.ASCII)
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def digits_only(value: str) -> str:
    """Strip every non-digit character."""
    return NON_DIGIT_RE.sub("", value)


def is_valid_identifier(value: str) -> bool:
    """
    True when `value` holds exactly 14 digits (punctuation ignored)
    and those digits are not a single repeated digit.
    """
    cnpj = digits_only(value)

    if len(cnpj) != CNPJ_LENGTH:
        return False

    # 00000000000000, 11111111111111, ...
    if REPEATED_DIGIT_RE.match(cnpj):
        return False

    return True


def is_valid_email(value: str) -> bool:
    return EMAIL_RE.fullmatch(value) is not None


def format_identifier(value: str) -> str:
    """
    Render a 14-digit CNPJ as DD.DDD.DDD/DDDD-DD.
    Anything that does not resolve to 14 digits is returned unchanged.
    """
    cnpj = digits_only(value.strip())
    if len(cnpj) != CNPJ_LENGTH:
        return value
    return CNPJ_PARTS_RE.sub(r"\1.\2.\3/\4-\5", cnpj)


def format_identifier_lines(text: str) -> str:
    """
    Reformat every line of a multi-line CNPJ input in place.
    Lines that do not resolve to 14 digits (blank lines included) are left as typed.
    """
    return "\n".join(format_identifier(line) for line in text.split("\n"))
