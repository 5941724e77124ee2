import pathlib
import sys

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

from labelscan.extract import (  # noqa: E402
    extract_batch_number,
    extract_expiry_date,
    extract_fields,
    extract_manufacturing_date,
    extract_mrp,
)
from labelscan.schemas import NOT_FOUND  # noqa: E402

LABEL = """ACME FOODS
Batch No. AB12-34
MFG: 03/07/24
EXP: 09/11/2025
MRP: ₹199.50 (incl. of all taxes)
"""


def test_manufacturing_date_normalized():
    assert extract_manufacturing_date("MFG: 03/07/24") == "2024/03/07"
    assert extract_manufacturing_date("Mfg. Date - 3-7-2023") == "2023/03/07"
    assert extract_manufacturing_date("manufacturing date 12/1/2022") == "2022/12/01"


def test_manufacturing_date_missing():
    assert extract_manufacturing_date("EXP: 09/11/2025") == NOT_FOUND
    assert extract_manufacturing_date("MFG: soon") == NOT_FOUND
    assert extract_manufacturing_date("") == NOT_FOUND


def test_batch_number_labels():
    assert extract_batch_number("Batch No. AB12-34") == "AB12-34"
    assert extract_batch_number("Batch Number: X9Y8") == "X9Y8"
    assert extract_batch_number("batch: 55Q") == "55Q"


def test_batch_number_missing():
    assert extract_batch_number("Lot 123 only") == NOT_FOUND


def test_expiry_date_verbatim():
    assert extract_expiry_date("EXP: 09/11/2025") == "09/11/2025"
    assert extract_expiry_date("Expiry Date 01-02-2026") == "01-02-2026"
    assert extract_expiry_date("Exp. Date: 31/12/2027") == "31/12/2027"
    # short years are not accepted for expiry
    assert extract_expiry_date("EXP: 09/11/25") == NOT_FOUND


def test_mrp():
    assert extract_mrp("MRP: ₹199.50") == "199.50"
    assert extract_mrp("Price 45.00") == "45.00"
    assert extract_mrp("MRP: 45") == NOT_FOUND


def test_extract_fields_independent_and_deterministic():
    rec = extract_fields(LABEL)
    assert rec.model_dump() == {
        "manufacturingDate": "2024/03/07",
        "batchNumber": "AB12-34",
        "expiryDate": "09/11/2025",
        "mrp": "199.50",
    }
    assert extract_fields(LABEL) == rec

    partial = extract_fields("MRP 12.30 and nothing else")
    assert partial.mrp == "12.30"
    assert partial.to_row()[:3] == [NOT_FOUND, NOT_FOUND, NOT_FOUND]


def test_extract_fields_handles_none():
    assert extract_fields(None).to_row() == [NOT_FOUND] * 4
