"""Security helpers: PII masking for console logs."""
import re

# NIN is 11 digits, phone numbers 11+, PVC/VIN numbers are alphanumeric with long digit runs
_DIGIT_RUN = re.compile(r"\b\d{10,}\b")
_VIN = re.compile(r"\b[0-9A-Z]{19}\b")


def mask_pii(text: str) -> str:
    if not text:
        return text
    masked = _VIN.sub("[REDACTED]", text)
    masked = _DIGIT_RUN.sub("[REDACTED]", masked)
    return masked
