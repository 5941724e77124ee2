"""Regex field extraction over raw OCR text of a product label.

Every extractor takes the whole text and returns either a value or
``NOT_FOUND``; none of them raise.
"""
import re

from .schemas import NOT_FOUND, ExtractedRecord

MFG_RE = re.compile(
    r"(?:MFG|Manufacturing\s*Date|Mfg\.?\s*Date)[:\-\s]*([0-9]{1,2}[/\-][0-9]{1,2}[/\-][0-9]{2,4})",
    re.I,
)
# "Batch Number" is tried before "Batch No" so the label is not cut at "No"
BATCH_RE = re.compile(
    r"\b(?:Batch\s*Number|Batch\s*No\.?|Batch)[:\-\s]*([A-Z0-9\-]+)\b",
    re.I,
)
EXPIRY_RE = re.compile(
    r"\b(?:EXP|Expiry\s*Date|Exp\.?\s*Date)[:\-\s]*([0-9]{2}[/\-][0-9]{2}[/\-][0-9]{4})\b",
    re.I,
)
MRP_RE = re.compile(r"\b(?:MRP|Price)[:\-\s]*[₹$€£]?\s*([0-9]+\.[0-9]{2})\b", re.I)


def extract_manufacturing_date(text):
    """Return the labelled manufacturing date as ``YYYY/MM/DD``.

    Date parts are read as month, day, year. Two digit years become 20YY.
    """
    m = MFG_RE.search(text or "")
    if not m:
        return NOT_FOUND
    month, day, year = re.split(r"[/\-]", m.group(1))
    if len(year) == 2:
        year = f"20{year}"
    return f"{year}/{month.zfill(2)}/{day.zfill(2)}"


def extract_batch_number(text):
    m = BATCH_RE.search(text or "")
    return m.group(1) if m else NOT_FOUND


def extract_expiry_date(text):
    # returned as printed, no reformatting
    m = EXPIRY_RE.search(text or "")
    return m.group(1) if m else NOT_FOUND


def extract_mrp(text):
    m = MRP_RE.search(text or "")
    return m.group(1) if m else NOT_FOUND


def extract_fields(text) -> ExtractedRecord:
    return ExtractedRecord(
        manufacturingDate=extract_manufacturing_date(text),
        batchNumber=extract_batch_number(text),
        expiryDate=extract_expiry_date(text),
        mrp=extract_mrp(text),
    )
