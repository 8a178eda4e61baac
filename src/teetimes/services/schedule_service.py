"""
Schedule service for the tee times application.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from bs4 import BeautifulSoup

from teetimes.api.ikga import IkgaAPI
from teetimes.api.markup import element_text
from teetimes.api.markup import find_children_by_tag_and_class
from teetimes.api.markup import find_element_by_id
from teetimes.config.settings import RunConfig
from teetimes.exceptions import LogicError
from teetimes.exceptions import NotFoundError
from teetimes.models.session import Session
from teetimes.models.tee_time import Column
from teetimes.models.tee_time import TimeSlot
from teetimes.services.auth_service import AuthService
from teetimes.utils.logging_utils import LoggerMixin
from teetimes.utils.logging_utils import log_execution


@dataclass
class ValidSession:
    """Session proven usable, with the schedule page fetched while probing it."""
    session: Session
    document: BeautifulSoup

class ScheduleService(LoggerMixin):
    """Service for fetching the tee time schedule and reading its columns."""

    def __init__(self, api: IkgaAPI, auth_service: AuthService):
        """Initialize service.

        Args:
            api: Site client used for all requests
            auth_service: Service used when a fresh login is needed
        """
        super().__init__()
        self.api = api
        self.auth_service = auth_service

    @log_execution(level='DEBUG')
    def fetch_schedule_document(self, session: Session, post_data: str) -> BeautifulSoup | None:
        """Fetch the schedule page and probe its first column.

        Returns:
            The parsed page, or None when the first column is missing,
            which means the session is no longer valid
        """
        url = self.api.tee_times_url(session)
        document = self.api.download_page(url, post_data)

        if find_element_by_id(document, Column(0).element_id) is None:
            self.debug("Schedule page has no first column", url=url)
            return None

        self.logger.info(f"Schedule page: {url}")
        return document

    def extract_column(self, document: BeautifulSoup, column_index: int) -> list[TimeSlot]:
        """Read the available tee times of a column.

        Raises:
            NotFoundError: If the page has no such column
        """
        column = Column(column_index)
        element = find_element_by_id(document, column.element_id)
        if element is None:
            raise NotFoundError(f"Column {column_index} not found", column_index)

        label = column.default_label
        title = find_element_by_id(document, column.title_id)
        if title is not None:
            label = element_text(title)

        cells = find_children_by_tag_and_class(element, "td", self.api.AVAILABLE_CLASSNAMES)
        return [TimeSlot(label=label, text=element_text(cell)) for cell in cells]

    def iter_slots(self, document: BeautifulSoup, columns: int) -> Iterator[TimeSlot]:
        """Yield the available tee times of the first ``columns`` columns in order.

        A missing column raises once the slots of the columns before it
        have been yielded.
        """
        for column_index in range(columns):
            yield from self.extract_column(document, column_index)

    def get_valid_session(self, config: RunConfig) -> ValidSession:
        """Get a working session, logging in only if the cached one fails.

        Raises:
            LogicError: If the schedule page cannot be loaded after logging in
        """
        self.set_log_context(playdate=config.playdate)
        post_data = config.post_data

        session = self.auth_service.load_session_from_cache(config.cache)
        if session is not None:
            document = self.fetch_schedule_document(session, post_data)
            if document is not None:
                self.debug("Using cached session")
                return ValidSession(session=session, document=document)
            self.info("Cached session expired, logging in again")

        session = self.auth_service.login(config.credentials, config.cache)
        document = self.fetch_schedule_document(session, post_data)
        if document is None:
            raise LogicError("Could not load teetimes page")

        return ValidSession(session=session, document=document)
