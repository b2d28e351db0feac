"""Canonical form of email addresses for storage and lookup."""


def normalize_email(raw: str | None) -> str:
    """
    Trim surrounding whitespace and lowercase. No syntax validation.

    Idempotent: normalize_email(normalize_email(e)) == normalize_email(e).
    """
    if raw is None:
        return ""
    return raw.strip().lower()
