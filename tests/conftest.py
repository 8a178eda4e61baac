"""Pytest configuration and shared fixtures."""

from datetime import date

import pytest

from teetimes.config.env import EnvConfig
from teetimes.config.settings import RunConfig


HOME_PAGE_HTML = b"""
<html>
  <body>
    <form name="search" action="/search.asp"><input name="q"></form>
    <form name="login" action=""><input name="_name"></form>
    <form name="login" method="post" action="/asparagi/ikgagolfen/login.asp?sid=123&amp;q=456">
      <input name="_name"><input type="password" name="_ww">
    </form>
  </body>
</html>
"""

SCHEDULE_HTML = b"""
<html>
  <body>
    <div id="crltitle0">  Course A  </div>
    <table id="ts0">
      <tr><td class="tt_av">08:00</td><td class="tt_na">08:10</td></tr>
      <tr><td class="tt_avh"> 08:20 </td><td class="tt_av extra">08:30</td><td class="tt_a">08:40</td></tr>
    </table>
    <table id="ts1">
      <tr><td class="tt_av">09:00</td><td>09:10</td></tr>
    </table>
    <div id="crltitle2">Course C</div>
    <table id="ts2">
      <tr><td class="tt_avh">10:00</td></tr>
    </table>
  </body>
</html>
"""

EXPIRED_SCHEDULE_HTML = b"""
<html><body><p>Uw sessie is verlopen</p></body></html>
"""

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep TEETIMES_* variables of the developer's shell out of the tests."""
    for env_var in EnvConfig.ENV_MAPPING:
        monkeypatch.delenv(env_var, raising=False)

@pytest.fixture
def home_page_html():
    return HOME_PAGE_HTML

@pytest.fixture
def schedule_html():
    return SCHEDULE_HTML

@pytest.fixture
def expired_schedule_html():
    return EXPIRED_SCHEDULE_HTML

@pytest.fixture
def run_config(tmp_path):
    """Run configuration with a cache file in a temporary directory."""
    return RunConfig(
        login="jansen",
        password="geheim",
        date=date(2024, 6, 5),
        cache=str(tmp_path / "session.json"),
    )
