# sheet_writer.py
# -------------------------------------------------------------------
# Append-only sink: one Google Sheet tab holds every posting the bot
# has ever seen. A posting is new when its application link is not in
# the tab yet; existing rows are never touched.
# -------------------------------------------------------------------

import datetime as dt
from typing import Callable, Dict, Iterable, List, Optional, Set, Tuple

import gspread
import requests
from google.auth.exceptions import GoogleAuthError
from google.oauth2.service_account import Credentials
from gspread.exceptions import APIError, SpreadsheetNotFound, WorksheetNotFound

from bot_config import configured_worksheet_index, sheet_settings
from job_models import (
    SHEET_COLUMNS,
    JobRecord,
    SheetAuthError,
    SheetConnectionError,
    SheetWriteError,
)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
# header names older sheets used for the link column, checked in order
LINK_ALIASES = ("Application Link", "Link", "link", "URL", "url")


def _utc_today() -> str:
    return dt.datetime.now(dt.timezone.utc).date().isoformat()


def _status(e: Exception) -> Optional[int]:
    return getattr(getattr(e, "response", None), "status_code", None)


def _read_failure(e: APIError, what: str) -> SheetConnectionError:
    if _status(e) in (401, 403):
        return SheetAuthError(f"not allowed to {what}: {e}")
    return SheetConnectionError(f"could not {what}: {e}")


# ----------------------------- connect --------------------------------- #
def connect(
    spreadsheet_id: str, credentials_file: str, worksheet_index: int = 0
) -> "SheetWriter":
    """Authenticate with the service account and open one tab of the spreadsheet."""
    if not spreadsheet_id:
        raise SheetConnectionError("no spreadsheet id configured")
    if not credentials_file:
        raise SheetConnectionError("no service account file configured")

    try:
        creds = Credentials.from_service_account_file(credentials_file, scopes=SCOPES)
    except OSError as e:
        raise SheetConnectionError(
            f"cannot read service account file {credentials_file}: {e}"
        ) from e
    except ValueError as e:
        raise SheetConnectionError(
            f"service account file {credentials_file} is malformed: {e}"
        ) from e

    client = gspread.authorize(creds)
    try:
        sh = client.open_by_key(spreadsheet_id)
        ws = sh.get_worksheet(worksheet_index)
        title = sh.title
    except SpreadsheetNotFound as e:
        raise SheetConnectionError(f"spreadsheet {spreadsheet_id} not found") from e
    except WorksheetNotFound as e:
        raise SheetConnectionError(f"worksheet #{worksheet_index} not found") from e
    except GoogleAuthError as e:
        raise SheetAuthError(f"service account token exchange failed: {e}") from e
    except APIError as e:
        raise _read_failure(e, "open the spreadsheet") from e
    except requests.RequestException as e:
        raise SheetConnectionError(f"could not reach Google Sheets: {e}") from e

    if ws is None:
        raise SheetConnectionError(f"worksheet #{worksheet_index} not found")

    print(f'[sheet] Connected to spreadsheet: "{title}"')
    print(f'[sheet] Using sheet: "{ws.title}"')
    return SheetWriter(ws)


# ----------------------------- writer ---------------------------------- #
class SheetWriter:
    """Insert-if-absent writer keyed on the application link."""

    def __init__(self, worksheet, today: Optional[Callable[[], str]] = None):
        self.ws = worksheet
        self._today = today or _utc_today

    def _read_existing(self) -> Tuple[List[str], Set[str]]:
        """(header row, set of links already in the tab)."""
        try:
            values = self.ws.get_all_values()
        except GoogleAuthError as e:
            raise SheetAuthError(f"service account token exchange failed: {e}") from e
        except APIError as e:
            raise _read_failure(e, "read existing rows") from e
        except requests.RequestException as e:
            raise SheetConnectionError(f"could not read existing rows: {e}") from e

        header = [str(h).strip() for h in values[0]] if values else []
        if not any(header):
            return [], set()

        columns = [header.index(a) for a in LINK_ALIASES if a in header]
        links: Set[str] = set()
        for raw in values[1:]:
            for i in columns:
                link = str(raw[i]).strip() if i < len(raw) else ""
                if link:
                    links.add(link)
                    break
        print(f"[sheet] Found {len(values) - 1} existing rows")
        return header, links

    def _row_values(self, job: JobRecord, header: List[str], added_on: str) -> List[str]:
        row = job.as_row()
        row["Date Added"] = added_on
        out = []
        for col in header:
            if col in row:
                out.append(row[col])
            elif col in LINK_ALIASES:
                out.append(job.link)
            else:
                out.append("")
        return out

    def add_jobs(self, jobs: Iterable[JobRecord]) -> Dict[str, int]:
        jobs = list(jobs)
        if not jobs:
            print("No jobs to add.")
            return {"added": 0, "duplicates": 0}

        header, seen = self._read_existing()

        new_jobs: List[JobRecord] = []
        for job in jobs:
            if job.link in seen:
                continue
            seen.add(job.link)
            new_jobs.append(job)
        duplicates = len(jobs) - len(new_jobs)

        if not new_jobs:
            print(f"[sheet] All {len(jobs)} jobs already exist in the sheet.")
            return {"added": 0, "duplicates": duplicates}

        print(f"[sheet] Adding {len(new_jobs)} new jobs ({duplicates} duplicates skipped)")

        values: List[List[str]] = []
        if not header:
            header = list(SHEET_COLUMNS)
            values.append(header)
        added_on = self._today()
        values += [self._row_values(j, header, added_on) for j in new_jobs]

        try:
            self.ws.append_rows(values, value_input_option="USER_ENTERED")
        except (APIError, GoogleAuthError, requests.RequestException) as e:
            raise SheetWriteError(f"appending {len(new_jobs)} rows failed: {e}") from e

        print(f"[sheet] Successfully added {len(new_jobs)} new jobs!")
        return {"added": len(new_jobs), "duplicates": duplicates}


def add_to_sheet(
    jobs: Iterable[JobRecord],
    spreadsheet_id: str = None,
    credentials_file: str = None,
    worksheet_index: int = None,
) -> Dict[str, int]:
    """Connect with the configured settings and append the unseen jobs."""
    jobs = list(jobs)
    if not jobs:
        print("No jobs to add.")
        return {"added": 0, "duplicates": 0}
    sid, creds = sheet_settings(spreadsheet_id, credentials_file)
    index = configured_worksheet_index() if worksheet_index is None else worksheet_index
    return connect(sid, creds, index).add_jobs(jobs)
