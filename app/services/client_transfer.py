import csv
import io
import json
import logging
from datetime import date, datetime
from typing import Any, Dict, Iterator, List, Tuple

from openpyxl import load_workbook
from pydantic import ValidationError as SchemaValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFoundError, ValidationError
from app.crud import client as crud_client
from app.crud.base import commit_or_raise
from app.models import Client
from app.schemas.client import ClientCreate, ClientRead

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = list(ClientRead.model_fields)
JSON_COLUMNS = {"additional_details"}


# --- Parsing ---
def _cell_to_value(column: str, value: Any) -> Any:
    """Spreadsheet cells arrive typed (numbers, dates); the Client schema wants text."""
    if value is None:
        return None
    if column in JSON_COLUMNS:
        if isinstance(value, str):
            if not value.strip():
                return None
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                return value
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def _rows_from_xlsx(content: bytes) -> Iterator[Tuple[int, List[Any]]]:
    workbook = load_workbook(io.BytesIO(content), read_only=True, data_only=True)
    try:
        sheet = workbook.worksheets[0]
        for row_number, row in enumerate(sheet.iter_rows(values_only=True), start=1):
            yield row_number, list(row)
    finally:
        workbook.close()


def _rows_from_csv(content: bytes) -> Iterator[Tuple[int, List[Any]]]:
    text = content.decode("utf-8-sig")
    for row_number, row in enumerate(csv.reader(io.StringIO(text)), start=1):
        yield row_number, row


def parse_spreadsheet(filename: str, content: bytes) -> List[Tuple[int, Dict[str, Any]]]:
    """
    Read the first sheet of an .xlsx/.csv upload into (row number, row dict) pairs.

    The first row is the header. Blank rows are skipped; row numbers are the
    sheet's own, so error messages point at the right line.
    """
    name = (filename or "").lower()
    if name.endswith(".xlsx"):
        rows = _rows_from_xlsx(content)
    elif name.endswith(".csv"):
        rows = _rows_from_csv(content)
    else:
        raise ValidationError("Unsupported file type; upload a .xlsx or .csv file")

    try:
        header: List[str] = []
        parsed = []
        for row_number, cells in rows:
            if not header:
                header = [str(c).strip() if c is not None else "" for c in cells]
                continue
            if all(c is None or (isinstance(c, str) and not c.strip()) for c in cells):
                continue
            record = {
                column: _cell_to_value(column, cell)
                for column, cell in zip(header, cells)
                if column
            }
            parsed.append((row_number, record))
    except (UnicodeDecodeError, csv.Error) as e:
        raise ValidationError(f"Could not read spreadsheet: {e}")
    except Exception as e:
        # openpyxl raises zipfile/xml errors for corrupt workbooks
        logger.error("Spreadsheet parse failed for %s: %s", filename, e)
        raise ValidationError(f"Could not read spreadsheet: {e}")

    if not header:
        raise ValidationError("Spreadsheet is empty")
    return parsed


class ClientTransferService:
    """
        Bulk import/export of Client rows.

        Import is all-or-nothing: every row is validated against the Client create
        schema first, then all rows are inserted in one transaction.
        Export writes standard CSV (quoted fields), so commas and newlines inside
        values survive a round trip.
    """

    @staticmethod
    async def import_clients(filename: str, content: bytes, db: AsyncSession) -> List[Client]:
        rows = parse_spreadsheet(filename, content)

        validated = []
        for row_number, record in rows:
            try:
                validated.append(ClientCreate.model_validate(record))
            except SchemaValidationError as e:
                error = e.errors()[0]
                field = ".".join(str(p) for p in error["loc"])
                raise ValidationError(f"Row {row_number}: {field}: {error['msg']}")

        created = []
        for client_in in validated:
            created.append(await crud_client.repository.create(db, client_in.model_dump(), commit=False))
        await commit_or_raise(db)

        logger.info("Imported %d clients from %s", len(created), filename)
        return created

    @staticmethod
    async def export_clients_csv(db: AsyncSession) -> str:
        clients = await crud_client.repository.all(db)
        if not clients:
            raise NotFoundError("No clients found for export")

        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(EXPORT_COLUMNS)
        for client in clients:
            row = ClientRead.model_validate(client).model_dump(mode="json")
            writer.writerow([
                json.dumps(row[column]) if column in JSON_COLUMNS and row[column] is not None
                else ("" if row[column] is None else row[column])
                for column in EXPORT_COLUMNS
            ])

        logger.info("Exported %d clients", len(clients))
        return buffer.getvalue()
