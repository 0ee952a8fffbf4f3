# job_models.py
from dataclasses import dataclass
from typing import Dict

SHEET_COLUMNS = [
    "Company",
    "Role",
    "Location",
    "Application Link",
    "Date Posted",
    "Source",
    "Date Added",
]


# ---------- errors ----------
class JobBotError(Exception):
    """Base for every failure the bot reports before exiting."""


class FetchError(JobBotError):
    pass


class ConfigError(JobBotError):
    """A configured value that cannot be used as given."""


class SheetConnectionError(JobBotError, ConnectionError):
    pass


class SheetAuthError(SheetConnectionError):
    pass


class SheetWriteError(JobBotError):
    pass


# ---------- records ----------
@dataclass(frozen=True)
class JobRecord:
    company: str
    role: str
    location: str
    link: str
    date_posted: str = ""
    source: str = "GitHub"

    def as_row(self) -> Dict[str, str]:
        return {
            "Company": self.company,
            "Role": self.role,
            "Location": self.location,
            "Application Link": self.link,
            "Date Posted": self.date_posted or "",
            "Source": self.source,
        }
