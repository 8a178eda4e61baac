"""
IKGA golf reservation site client for the tee times application.
"""

from bs4 import BeautifulSoup

from teetimes.api.base_api import BaseAPI
from teetimes.api.markup import parse_document
from teetimes.models.session import Session


class IkgaAPI(BaseAPI):
    """Page level access to the IKGA tee time site."""

    DOMAIN_NAME = 'https://www.ikgagolfen.nl/'
    TEE_TIMES_URL = 'https://www.ikgagolfen.nl/asparagi/ikgagolfen/site2/teetimes/teetimes.asp?{query}'
    FORM_LOGIN_NAME = 'login'
    LOGIN_FAILURE_MARKER = 'Inloggen mislukt'
    POST_FIELDS_FORMAT = '_name={login}&_ww={password}'

    # Cell classes marking a tee time that can still be booked
    AVAILABLE_CLASSNAMES = ('tt_av', 'tt_avh')

    def __init__(self, domain: str | None = None, timeout: float | None = None):
        """Initialize site client.

        Args:
            domain: Site root, with trailing slash
            timeout: Request timeout in seconds
        """
        super().__init__(timeout=timeout)
        self.domain = domain or self.DOMAIN_NAME

    def download_page(self, url: str, post_body: str | None = None) -> BeautifulSoup:
        """Fetch and parse a page."""
        return parse_document(self.fetch(url, post_body))

    def tee_times_url(self, session: Session) -> str:
        """Build the schedule page URL for a session."""
        return self.TEE_TIMES_URL.format(query=session.query_string)

    def login_post_body(self, login: str, password: str) -> str:
        """Build the login form body.

        Values are inserted as given, without escaping.
        """
        return self.POST_FIELDS_FORMAT.format(login=login, password=password)
