"""README snippets in the two table layouts the feed has used."""

HTML_README = """
# Summer 2026 Tech Internships by Pitt CSC & Simplify

<table>
<thead>
<tr>
<th>Company</th>
<th>Role</th>
<th>Location</th>
<th>Application/Link</th>
<th>Date Posted</th>
</tr>
</thead>
<tbody>
<tr>
<td><strong><a href="https://simplify.jobs/c/Acme?utm_source=GHList">Acme &amp; Co</a></strong></td>
<td>Software Engineer Intern 🛂</td>
<td>New York, NY</br>Remote</td>
<td><div align="center"><a href="https://acme.co/jobs/1?utm_source=Simplify&ref=Simplify"><img src="https://i.imgur.com/apply.png" width="118" alt="Apply"></a> <a href="https://simplify.jobs/p/111?utm_source=GHList"><img src="https://i.imgur.com/simplify.png" width="84" alt="Simplify"></a></div></td>
<td>Oct 01</td>
</tr>
<tr>
<td>↳</td>
<td>Data Engineer Intern</td>
<td><details><summary><strong>3 locations</strong></summary>Boston, MA</br>Houston, TX</br>Austin, TX</details></td>
<td><div align="center"><a href="https://simplify.jobs/p/222?utm_source=GHList"><img src="https://i.imgur.com/simplify.png" alt="Simplify"></a></div></td>
<td>Oct 02</td>
</tr>
<tr>
<td><strong><a href="https://simplify.jobs/c/Globex">Globex</a></strong></td>
<td>Hardware Intern</td>
<td>San Francisco, CA</td>
<td>🔒</td>
<td>Sep 20</td>
</tr>
<tr>
<td>↳</td>
<td>Software Intern</td>
<td>Remote</td>
<td><a href="https://globex.com/apply/9">Apply</a></td>
<td>Sep 21</td>
</tr>
<tr>
<td>Broken row</td>
<td>only two cells</td>
</tr>
<tr>
<td>Initech</td>
<td>Marketing Intern</td>
<td>Chicago, IL</td>
<td><a href="https://initech.com/careers/5">Apply</a></td>
</tr>
</tbody>
</table>
"""

MD_README = """# Summer 2026 Internships

Listings below are updated daily.

| Company | Role | Location | Application/Link | Date Posted |
| ------- | ---- | -------- | ---------------- | ----------- |
| **[Acme](https://acme.co)** | Software Engineer Intern | San Francisco, CA<br>Remote | [![Apply](https://i.imgur.com/apply.png)](https://acme.co/apply?utm_source=x) | Jun 1 |
| ↳ | Backend Engineer Intern | Boston, MA | [Apply](https://simplify.jobs/p/1?utm_source=GHList) | Jun 2 |
| Hooli | Product Intern | Remote | 🔒 | Jun 3 |
| too | short |
| Umbrella | SWE Intern 🇺🇸 | Houston, TX | <a href="https://umbrella.com/jobs/7">Apply</a> | Jun 4 |

## Archived
| Company | Role | Location | Application/Link | Date Posted |
| Ignored | Software Engineer | Remote | [Apply](https://ignored.example/1) | Jan 1 |
"""
