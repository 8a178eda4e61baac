"""
Authentication service for the tee times application.
"""

import os
from pathlib import Path

from teetimes.api.ikga import IkgaAPI
from teetimes.api.markup import find_form_by_name
from teetimes.exceptions import AuthenticationError
from teetimes.exceptions import CacheWriteError
from teetimes.exceptions import DataError
from teetimes.exceptions import LogicError
from teetimes.models.session import Credentials
from teetimes.models.session import Session
from teetimes.models.session import SessionFormat
from teetimes.models.session import get_session_type
from teetimes.utils.logging_utils import LoggerMixin
from teetimes.utils.logging_utils import log_execution


class AuthService(LoggerMixin):
    """Service for logging in and keeping the session cache."""

    def __init__(
        self,
        api: IkgaAPI,
        session_format: SessionFormat = SessionFormat.ID_PAIR,
        failure_marker: str = IkgaAPI.LOGIN_FAILURE_MARKER
    ):
        """Initialize service.

        Args:
            api: Site client used for all requests
            session_format: Representation used for sessions and the cache file
            failure_marker: Text the site shows when credentials are rejected
        """
        super().__init__()
        self.api = api
        self.session_format = session_format
        self.failure_marker = failure_marker

    @property
    def session_type(self) -> type[Session]:
        """Session class for the configured format."""
        return get_session_type(self.session_format)

    def resolve_login_target_url(self, domain: str) -> str:
        """Find the URL the login form posts to.

        Args:
            domain: Site root, with trailing slash

        Returns:
            Absolute login URL

        Raises:
            LogicError: If the page has no login form
        """
        document = self.api.download_page(domain)
        login_form = find_form_by_name(document, self.api.FORM_LOGIN_NAME)

        if login_form is None:
            raise LogicError("Could not determine login target URL")

        action = str(login_form.get("action"))
        if not action.startswith(domain):
            return domain + action.lstrip('/')

        return action

    @log_execution(level='DEBUG')
    def login(self, credentials: Credentials, cache_path: str = '') -> Session:
        """Log in and extract the session from the login URL.

        Args:
            credentials: Login name and decoded password
            cache_path: File to store the session in, skipped when empty

        Returns:
            New session

        Raises:
            AuthenticationError: If the site rejects the credentials
            LogicError: If the login URL carries no session
            CacheWriteError: If the cache file cannot be written
        """
        post_body = self.api.login_post_body(credentials.login, credentials.password)
        login_url = self.resolve_login_target_url(self.api.domain)

        self.info(f"Logging in as {credentials.login}")
        content = self.api.fetch(login_url, post_body)

        if self.failure_marker.encode('utf-8') in content:
            raise AuthenticationError("Could not login", {"login": credentials.login})

        try:
            session = self.session_type.from_url(login_url)
        except ValueError as e:
            raise LogicError(f"Could not extract session variables: {e}", {"url": login_url}) from e

        if cache_path:
            self.save_session_to_cache(session, cache_path)

        return session

    def save_session_to_cache(self, session: Session, cache_path: str) -> None:
        """Write a session to the cache file, replacing its content.

        Raises:
            CacheWriteError: If the file cannot be written
        """
        try:
            Path(cache_path).write_text(session.serialize(), encoding='utf-8')
        except OSError as e:
            raise CacheWriteError(f"Could not write to cache file '{cache_path}'", cache_path) from e

        self.debug("Session written to cache", cache=cache_path)

    def load_session_from_cache(self, cache_path: str) -> Session | None:
        """Load a previously stored session.

        Args:
            cache_path: Cache file location

        Returns:
            Stored session, or None when there is no readable cache file

        Raises:
            DataError: If the file content is not a valid session
        """
        if not cache_path:
            return None

        path = Path(cache_path)
        if not path.is_file() or not os.access(path, os.R_OK):
            self.debug("No readable session cache", cache=cache_path)
            return None

        try:
            content = path.read_text(encoding='utf-8')
        except OSError as e:
            self.warning(f"Could not read session cache: {e}", cache=cache_path)
            return None
        except UnicodeDecodeError as e:
            raise DataError(f"Invalid data structure found in cache file '{cache_path}'", cache_path) from e

        try:
            session = self.session_type.deserialize(content)
        except ValueError as e:
            raise DataError(f"Invalid data structure found in cache file '{cache_path}': {e}", cache_path) from e

        self.debug("Session loaded from cache", cache=cache_path)
        return session
