"""
Pytest configuration and fixtures for salary scraper tests.
"""

import sys
from pathlib import Path

import pytest
import structlog
from bs4 import BeautifulSoup

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

BASE_URL = "http://www.payscale.com"


INDEX_HTML = """
<html><body>
<div class="rcindex">
  <h2>Browse by job title</h2>
  <div class="rcIndexBrowse">
    <a href="/research/US/Job/A">A</a> |
    <a href="/research/US/Job/B">B</a> |
    <a href="/research/US/Job/C">C</a>
  </div>
</div>
<div class="footer"><a href="/about">About</a></div>
</body></html>
"""

LETTER_HTML = """
<html><body>
<div class="rcindex">
  <table>
    <tr><th>Job Title</th><th>Profiles</th></tr>
    <tr>
      <td><a href="/research/US/Job=Accountant/Salary">Accountant </a></td>
      <td> 12,345 </td>
    </tr>
    <tr>
      <td><a href="/research/US/Job=Actuary/Salary">Actuary</a></td>
      <td>2,170</td>
    </tr>
    <tr>
      <td><a href="/research/US/Job=Air_Traffic_Controller/Salary">Air Traffic Controller</a></td>
      <td>389</td>
    </tr>
  </table>
</div>
</body></html>
"""

JOB_HTML = """
<html><body>
<div id="m_summaryReport">
  <table>
    <tr><th></th><th>10%</th><th>Median</th><th>90%</th></tr>
    <tr><th><strong>Salary</strong></th><td>$23,966 - $60,278</td><td></td></tr>
    <tr><th><strong>Bonus</strong></th><td>$1,750</td><td></td></tr>
    <tr><th><strong>Total Pay <a class="help">(?)</a></strong></th><td>$24,416 - $61,905</td><td></td></tr>
    <tr><td colspan="4">Country: United States | Currency: USD | Updated: 1 Jan 2016 | Individuals Reporting: 180</td></tr>
  </table>
</div>
<div id="m_summaryReport_hourly">
  <table>
    <tr><th></th><th>10%</th><th>90%</th></tr>
    <tr><th><strong>Hourly Rate</strong></th><td>$10.09 - $24.95</td></tr>
    <tr><th><strong>Overtime</strong></th><td>$15.00 - $36.40</td></tr>
  </table>
</div>
</body></html>
"""

HOURLY_ONLY_JOB_HTML = """
<html><body>
<div id="m_summaryReport_hourly">
  <table>
    <tr><th></th><th>10%</th><th>90%</th></tr>
    <tr><th><strong>Hourly Rate</strong></th><td>$8.05 - $12.69</td></tr>
  </table>
  <table>
    <tr><th></th><th>10%</th><th>90%</th></tr>
    <tr><th><strong>Bonus</strong></th><td>$0.00 - $1,021</td></tr>
    <tr><th><strong>Total Pay <a class="help">(?)</a></strong></th><td>$16,878 - $28,170</td></tr>
    <tr><td colspan="3">Country: United States | Currency: USD | Updated: 14 Feb 2016 | Individuals Reporting: 2,406</td></tr>
  </table>
</div>
</body></html>
"""


@pytest.fixture
def parser_config():
    """Parser configuration pointing at the production site, no limits."""
    from salary_scraper.parsers.config import ParserConfig

    return ParserConfig(base_url=BASE_URL)


@pytest.fixture
def index_html():
    return INDEX_HTML


@pytest.fixture
def letter_html():
    return LETTER_HTML


@pytest.fixture
def job_html():
    return JOB_HTML


@pytest.fixture
def hourly_only_job_html():
    return HOURLY_ONLY_JOB_HTML


@pytest.fixture
def table_rows():
    """Build ``<tr>`` elements from a table body snippet."""

    def build(rows_html: str):
        soup = BeautifulSoup(f"<table>{rows_html}</table>", "lxml")
        return soup.find_all("tr")

    return build


@pytest.fixture
def reset_structlog():
    """Restore structlog defaults after a test reconfigures it."""
    yield
    structlog.reset_defaults()


# Markers for test categories
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "fixture_pages: tests driven by full page fixtures")
