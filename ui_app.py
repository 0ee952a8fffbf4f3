# ui_app.py
import os

from flask import Flask, flash, redirect, render_template_string, request, url_for

from job_bot import run, scrape_internships
from job_models import JobBotError

app = Flask(__name__)
app.secret_key = os.getenv("FLASK_SECRET_KEY", "dev")  # for flash messages

INDEX_HTML = """<!doctype html>
<title>Internship Job Bot</title>
<h1>Matching internships</h1>
{% for message in get_flashed_messages() %}<p class="flash">{{ message }}</p>{% endfor %}
<form method="post" action="{{ url_for('run_now') }}"><button>Run now</button></form>
{% if error %}<p class="error">{{ error }}</p>{% endif %}
<p>Showing {{ jobs|length }} of {{ total }}</p>
<table>
  <tr><th>Company</th><th>Role</th><th>Location</th><th>Date Posted</th></tr>
  {% for job in jobs %}
  <tr>
    <td>{{ job.company }}</td>
    <td><a href="{{ job.link }}">{{ job.role }}</a></td>
    <td>{{ job.location }}</td>
    <td>{{ job.date_posted }}</td>
  </tr>
  {% endfor %}
</table>
"""


@app.get("/")
def index():
    # How many rows to show (default 25). You can change via /?n=50 etc.
    try:
        limit = max(1, min(int(request.args.get("n", "25")), 200))
    except ValueError:
        limit = 25
    error = ""
    try:
        jobs = scrape_internships()
    except JobBotError as e:
        jobs, error = [], str(e)
    return render_template_string(
        INDEX_HTML, jobs=jobs[:limit], total=len(jobs), error=error
    )


@app.post("/run-now")
def run_now():
    try:
        result = run()
    except (JobBotError, ConnectionError) as e:
        flash(f"Run failed: {e}")
        return redirect(url_for("index"))
    if result["added"]:
        flash(
            f"Added {result['added']} new internship(s); "
            f"{result['duplicates']} already in the sheet."
        )
    else:
        flash(f"You're all caught up: {result['duplicates']} already in the sheet.")
    return redirect(url_for("index"))


@app.get("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    app.run(host="127.0.0.1", port=5000, debug=False)
