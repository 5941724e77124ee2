"""Append-only persistence of extracted records to an ``.xlsx`` workbook."""
import logging
import os
import re
import tempfile
import threading
import weakref

from openpyxl import Workbook, load_workbook

from .schemas import HEADER, NOT_FOUND

logger = logging.getLogger(__name__)

DATE_LIKE_RE = re.compile(r"(\d{1,2}/\d{1,2}/\d{4})")

# entries drop out once no append holds the lock
_locks = weakref.WeakValueDictionary()
_locks_guard = threading.Lock()

_UMASK = os.umask(0)
os.umask(_UMASK)


def _lock_for(path):
    key = os.path.abspath(path)
    with _locks_guard:
        return _locks.setdefault(key, threading.Lock())


def is_date_like(value) -> bool:
    return DATE_LIKE_RE.search(str(value)) is not None


def find_manufacturing_date(row):
    """First value of ``row`` that looks like ``D/M/YYYY``, else NOT_FOUND."""
    for value in row:
        if is_date_like(value):
            return value
    return NOT_FOUND


def _target_mode(path):
    if os.path.exists(path):
        return os.stat(path).st_mode & 0o777
    return 0o666 & ~_UMASK


def _save_atomic(wb, path):
    directory = os.path.dirname(os.path.abspath(path))
    mode = _target_mode(path)
    fd, tmp = tempfile.mkstemp(suffix=".xlsx", prefix=".tmp-", dir=directory)
    os.close(fd)
    try:
        wb.save(tmp)
        # mkstemp creates 0600 files
        os.chmod(tmp, mode)
        os.replace(tmp, path)
    except BaseException:
        if os.path.exists(tmp):
            os.remove(tmp)
        raise


def _new_workbook(row, sheet_name):
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name
    ws.append(HEADER)
    ws.append(list(row))
    return wb


def _append_existing(path, row, rederive_date):
    wb = load_workbook(path)
    ws = wb.worksheets[0]

    if ws.max_row == 1 and all(c.value is None for c in ws[1]):
        for col, title in enumerate(HEADER, start=1):
            ws.cell(row=1, column=col, value=title)

    next_row = ws.max_row + 1
    first = find_manufacturing_date(row) if rederive_date else row[0]
    ws.cell(row=next_row, column=1, value=first)
    for col, value in enumerate(row[1:], start=2):
        ws.cell(row=next_row, column=col, value=value)
    return wb


def append_row(path, row, sheet_name="Sheet1", rederive_date=True) -> bool:
    """Append ``row`` to the workbook at ``path``, creating it when missing.

    On an existing workbook column A is re-derived from the first date-like
    value in ``row`` unless ``rederive_date`` is false. Failures are logged
    and reported by returning False; they never raise.
    """
    with _lock_for(path):
        try:
            os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
            if os.path.exists(path):
                wb = _append_existing(path, row, rederive_date)
            else:
                wb = _new_workbook(row, sheet_name)
            _save_atomic(wb, path)
        except Exception:
            logger.exception("Error appending data to workbook %s", path)
            return False

    logger.info("Row appended to %s", path)
    return True


def read_rows(path):
    """All rows of the first sheet, header included, as tuples of cell values."""
    wb = load_workbook(path, read_only=True)
    try:
        return [tuple(r) for r in wb.worksheets[0].iter_rows(values_only=True)]
    finally:
        wb.close()
