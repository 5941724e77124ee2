from typing import List

from pydantic import BaseModel

NOT_FOUND = "Not Found"

HEADER = ["Manufacturing Date", "Batch Number", "Expiry Date", "MRP"]


class ExtractedRecord(BaseModel):
    """Fields pulled out of one label's OCR text.

    Values stay strings; anything the extractor could not find is ``NOT_FOUND``.
    """

    manufacturingDate: str = NOT_FOUND
    batchNumber: str = NOT_FOUND
    expiryDate: str = NOT_FOUND
    mrp: str = NOT_FOUND

    def to_row(self) -> List[str]:
        # column order matches HEADER
        return [self.manufacturingDate, self.batchNumber, self.expiryDate, self.mrp]
