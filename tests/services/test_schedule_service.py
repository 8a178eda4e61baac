"""Tests for the schedule service."""

from unittest.mock import Mock

import pytest

from teetimes.api.ikga import IkgaAPI
from teetimes.api.markup import parse_document
from teetimes.exceptions import AuthenticationError, LogicError, NotFoundError
from teetimes.models.session import IdPairSession
from teetimes.models.tee_time import TimeSlot
from teetimes.services.auth_service import AuthService
from teetimes.services.schedule_service import ScheduleService


SCHEDULE_URL = "https://www.ikgagolfen.nl/asparagi/ikgagolfen/site2/teetimes/teetimes.asp?sid=1&q=2"

@pytest.fixture
def api():
    api = IkgaAPI()
    api.fetch = Mock()
    return api

@pytest.fixture
def auth_service():
    return Mock(spec=AuthService)

@pytest.fixture
def schedule_service(api, auth_service):
    return ScheduleService(api, auth_service)

@pytest.fixture
def session():
    return IdPairSession(sid="1", q="2")

def test_fetch_schedule_document(schedule_service, api, session, schedule_html):
    """Test the schedule page is posted to with the session in the URL."""
    api.fetch.return_value = schedule_html

    document = schedule_service.fetch_schedule_document(session, "playdate=05/06/2024&_comnr1=7")

    assert document is not None
    api.fetch.assert_called_once_with(SCHEDULE_URL, "playdate=05/06/2024&_comnr1=7")

def test_fetch_schedule_document_expired(schedule_service, api, session, expired_schedule_html):
    """Test a page without first column means the session is invalid."""
    api.fetch.return_value = expired_schedule_html

    assert schedule_service.fetch_schedule_document(session, "playdate=05/06/2024") is None

def test_extract_column_labels(schedule_service, schedule_html):
    """Test column titles are trimmed and absent titles get a default label."""
    document = parse_document(schedule_html)

    assert schedule_service.extract_column(document, 0)[0].label == "Course A"
    assert schedule_service.extract_column(document, 1) == [TimeSlot(label="Column 2", text="09:00")]

def test_extract_column_available_cells_only(schedule_service, schedule_html):
    """Test only cells marked exactly as available are read."""
    document = parse_document(schedule_html)

    slots = schedule_service.extract_column(document, 0)

    assert slots == [
        TimeSlot(label="Course A", text="08:00"),
        TimeSlot(label="Course A", text="08:20"),
    ]

def test_extract_column_empty(schedule_service):
    """Test a column without available cells yields nothing."""
    document = parse_document(b'<table id="ts0"><tr><td class="tt_na">08:00</td></tr></table>')

    assert schedule_service.extract_column(document, 0) == []

def test_extract_column_missing(schedule_service, schedule_html):
    """Test a missing column raises NotFoundError."""
    document = parse_document(schedule_html)

    with pytest.raises(NotFoundError) as exc_info:
        schedule_service.extract_column(document, 3)

    assert str(exc_info.value) == "Column 3 not found"

def test_iter_slots_stops_at_missing_column(schedule_service, schedule_html):
    """Test slots of earlier columns are produced before a missing column raises."""
    document = parse_document(schedule_html)
    slots = []

    with pytest.raises(NotFoundError):
        for slot in schedule_service.iter_slots(document, 4):
            slots.append(slot)

    assert [(slot.label, slot.text) for slot in slots] == [
        ("Course A", "08:00"),
        ("Course A", "08:20"),
        ("Column 2", "09:00"),
        ("Course C", "10:00"),
    ]

def test_iter_slots_limited_columns(schedule_service, schedule_html):
    """Test only the requested number of columns is read."""
    document = parse_document(schedule_html)

    assert [slot.text for slot in schedule_service.iter_slots(document, 1)] == ["08:00", "08:20"]

def test_get_valid_session_from_cache(schedule_service, api, auth_service, session, run_config, schedule_html):
    """Test a working cached session is used without logging in."""
    auth_service.load_session_from_cache.return_value = session
    api.fetch.return_value = schedule_html

    valid_session = schedule_service.get_valid_session(run_config)

    assert valid_session.session == session
    assert valid_session.document is not None
    auth_service.load_session_from_cache.assert_called_once_with(run_config.cache)
    auth_service.login.assert_not_called()
    api.fetch.assert_called_once_with(SCHEDULE_URL, "playdate=05/06/2024")

def test_get_valid_session_expired_cache(
    schedule_service, api, auth_service, session, run_config, schedule_html, expired_schedule_html
):
    """Test an expired cached session leads to exactly one login."""
    new_session = IdPairSession(sid="3", q="4")
    auth_service.load_session_from_cache.return_value = session
    auth_service.login.return_value = new_session
    api.fetch.side_effect = [expired_schedule_html, schedule_html]

    valid_session = schedule_service.get_valid_session(run_config)

    assert valid_session.session == new_session
    auth_service.login.assert_called_once_with(run_config.credentials, run_config.cache)
    assert api.fetch.call_args_list[1].args[0].endswith("teetimes.asp?sid=3&q=4")

def test_get_valid_session_without_cache(schedule_service, api, auth_service, session, run_config, schedule_html):
    """Test a login happens when no session is cached."""
    auth_service.load_session_from_cache.return_value = None
    auth_service.login.return_value = session
    api.fetch.return_value = schedule_html

    assert schedule_service.get_valid_session(run_config).session == session
    auth_service.login.assert_called_once()
    api.fetch.assert_called_once()

def test_get_valid_session_fails_after_login(
    schedule_service, api, auth_service, session, run_config, expired_schedule_html
):
    """Test a schedule page still missing after login raises LogicError."""
    auth_service.load_session_from_cache.return_value = None
    auth_service.login.return_value = session
    api.fetch.return_value = expired_schedule_html

    with pytest.raises(LogicError) as exc_info:
        schedule_service.get_valid_session(run_config)

    assert str(exc_info.value) == "Could not load teetimes page"
    auth_service.login.assert_called_once()

def test_get_valid_session_propagates_login_errors(schedule_service, api, auth_service, run_config):
    """Test login failures are not retried."""
    auth_service.load_session_from_cache.return_value = None
    auth_service.login.side_effect = AuthenticationError("Could not login")

    with pytest.raises(AuthenticationError):
        schedule_service.get_valid_session(run_config)

    api.fetch.assert_not_called()
