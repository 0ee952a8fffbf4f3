# job_bot.py
import sys
from typing import Callable, Dict, List

from bot_config import FEED_URL, configured_worksheet_index, sheet_settings
from feed_fetch import fetch_feed
from job_filters import filter_jobs
from job_models import JobBotError, JobRecord
from sheet_writer import connect
from table_parser import parse_table


def scrape_internships(
    fetch: Callable[[str], str] = fetch_feed, url: str = FEED_URL
) -> List[JobRecord]:
    """Fetch the README, parse its table, keep the listings that pass the filters."""
    md = fetch(url)
    jobs = parse_table(md)
    print(f"[feed] Parsed {len(jobs)} listings from {url}")
    return filter_jobs(jobs)


def run(
    fetch: Callable[[str], str] = fetch_feed,
    writer_factory=connect,
    spreadsheet_id: str = None,
    credentials_file: str = None,
) -> Dict[str, int]:
    print("Job Bot starting...\n")
    # missing sheet settings are fatal before any network call
    sid, creds = sheet_settings(spreadsheet_id, credentials_file)
    index = configured_worksheet_index()

    print("Scraping internships from GitHub...")
    jobs = scrape_internships(fetch)
    print(f"Found {len(jobs)} jobs.\n")

    print("Sending jobs to Google Sheets...")
    if jobs:
        result = writer_factory(sid, creds, index).add_jobs(jobs)
    else:
        print("No jobs to add.")
        result = {"added": 0, "duplicates": 0}

    print(f"\nSuccess: Added {result['added']} new jobs to the spreadsheet.")
    if result["duplicates"] > 0:
        print(f"   ({result['duplicates']} duplicates were skipped)")
    return result


def main() -> None:
    try:
        run()
    except Exception as e:
        print(f"Job Bot failed: {e}", file=sys.stderr)
        sys.exit(1)


def preview(fetch: Callable[[str], str] = fetch_feed) -> None:
    """Dry run: print the matching listings, write nothing."""
    print("Fetching internships from GitHub...\n")
    try:
        jobs = scrape_internships(fetch)
    except JobBotError as e:
        print(f"Failed to scrape internships: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Found {len(jobs)} matching internships:\n")
    for i, job in enumerate(jobs, start=1):
        print(f"{i}. {job.company}")
        print(f"   Role: {job.role}")
        print(f"   Location: {job.location}")
        print(f"   Link: {job.link}")
        print("")


if __name__ == "__main__":
    main()
