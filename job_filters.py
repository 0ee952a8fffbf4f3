# job_filters.py
from typing import Iterable, List, Optional

from bot_config import load_filters
from job_models import JobRecord


def matches(job: JobRecord, keywords: Iterable[str], locations: Iterable[str]) -> bool:
    role = job.role.lower()
    where = job.location.lower()
    role_ok = any(k.lower() in role for k in keywords)
    location_ok = any(loc.lower() in where for loc in locations)
    return role_ok and location_ok


def filter_jobs(
    jobs: Iterable[JobRecord],
    keywords: Optional[List[str]] = None,
    locations: Optional[List[str]] = None,
) -> List[JobRecord]:
    """Keep jobs whose role hits any keyword AND whose location hits any allowed place."""
    if keywords is None or locations is None:
        F = load_filters()
        keywords = F["include_keywords"] if keywords is None else keywords
        locations = F["locations_any"] if locations is None else locations
    return [j for j in jobs if matches(j, keywords, locations)]
