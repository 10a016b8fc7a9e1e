"""
Twitter Search Client
Application-only (OAuth2 client credentials) access to the v1.1 search API.
"""
from typing import Any, List, Optional, Tuple, Union

import requests

from .auth import Credentials
from .config import Config, DEFAULT_API_BASE
from .errors import AuthError, TransportError, UnauthenticatedError, UpstreamError
from .logger import logger
from .outcome import Err, Ok, Outcome
from .utils import bearer_token_from, error_message, upstream_errors

TOKEN_PATH = 'oauth2/token'
SEARCH_PATH = '1.1/search/tweets.json'
TOKEN_CONTENT_TYPE = 'application/x-www-form-urlencoded;charset=UTF-8'


class SearchClient:
    """Search tweets with a bearer token obtained from a key/secret pair.

    The token is requested once, during construction, and never refreshed.
    A client whose authorization failed, or whose token the server later
    rejects, should be discarded and a new one built.

    Every request overwrites a single outcome slot, readable through
    ``status_code``, ``response`` and ``outcome``. Instances are not
    thread-safe: serialize calls or keep one client per thread.
    """

    def __init__(self, session, credentials: Union[Credentials, Tuple[str, str]],
                 api_base: str = DEFAULT_API_BASE, authenticate: bool = True,
                 timeout: Optional[float] = None):
        """
        Initialize the client and obtain a bearer token.

        Args:
            session: HTTP transport, usually a ``requests.Session``
            credentials: Credentials or a ``(key, secret)`` pair
            api_base: API root, with trailing slash
            authenticate: Request the token now (default). When False the
                client stays unauthenticated until ``acquire_token`` is called.
            timeout: Seconds passed to every request; None leaves it to the session
        """
        self.credentials = Credentials.coerce(credentials)
        self.session = session
        self.timeout = timeout
        self._owns_session = False
        self.api_base = api_base if api_base.endswith('/') else api_base + '/'
        self._bearer_token: Optional[str] = None
        self._outcome: Optional[Outcome] = None

        if authenticate:
            self.acquire_token()

    def close(self):
        """Close the session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @property
    def is_authenticated(self) -> bool:
        return self._bearer_token is not None

    @property
    def outcome(self) -> Optional[Outcome]:
        return self._outcome

    @property
    def status_code(self) -> Optional[int]:
        """Status code of the last request (0 if it never reached the server)."""
        return self._outcome.status_code if self._outcome else None

    @property
    def response(self):
        """Results of the last search, or the error message of the last failure."""
        return self._outcome.body if self._outcome else None

    def acquire_token(self) -> None:
        """Exchange the key/secret pair for a bearer token."""
        if self.is_authenticated:
            return

        url = self.api_base + TOKEN_PATH
        logger.debug('Requesting bearer token from %s', url)
        resp = self._send(
            self.session.post,
            url,
            params={'grant_type': 'client_credentials'},
            headers={
                'Authorization': self.credentials.basic_authorization(),
                'Content-Type': TOKEN_CONTENT_TYPE,
            },
        )

        payload, decoded = _decode(resp)
        if not _is_success(resp.status_code):
            message = error_message(payload, f'Token request failed with status {resp.status_code}')
            self._fail_auth(message, resp.status_code, upstream_errors(payload))
        if not decoded:
            self._fail_auth('Token response is not valid JSON', resp.status_code)

        token = bearer_token_from(payload)
        if token is None:
            token_type = payload.get('token_type') if isinstance(payload, dict) else None
            self._fail_auth(f'Unexpected token type: {token_type!r}', resp.status_code)

        self._bearer_token = token
        self._outcome = Ok(resp.status_code)
        logger.info('Obtained bearer token (status=%s)', resp.status_code)

    def search(self, query: str, count: int = 10) -> List[dict]:
        """
        Search for tweets.

        Args:
            query: Search query
            count: Number of results

        Returns:
            List of statuses as returned by the API
        """
        if not self.is_authenticated:
            raise UnauthenticatedError('Client has no bearer token; build a new client')

        url = self.api_base + SEARCH_PATH
        logger.debug('Searching %r (count=%s)', query, count)
        resp = self._send(
            self.session.get,
            url,
            params={'q': query, 'count': count},
            headers={'Authorization': f'Bearer {self._bearer_token}'},
        )

        payload, decoded = _decode(resp)
        if not _is_success(resp.status_code):
            message = error_message(payload, f'Search failed with status {resp.status_code}')
            self._fail_upstream(message, resp.status_code, upstream_errors(payload))
        if not decoded or not isinstance(payload, dict) or not isinstance(payload.get('statuses'), list):
            self._fail_upstream('Search response has no statuses', resp.status_code)

        statuses = payload['statuses']
        self._outcome = Ok(resp.status_code, statuses)
        logger.debug('Search %r returned %d statuses', query, len(statuses))
        return statuses

    def _send(self, method, url: str, **kwargs):
        if self.timeout is not None:
            kwargs['timeout'] = self.timeout
        try:
            return method(url, **kwargs)
        except requests.RequestException as e:
            response = getattr(e, 'response', None)
            status = response.status_code if response is not None else 0
            self._outcome = Err('transport', str(e), status)
            logger.warning('Request to %s failed: %s', url, e)
            raise TransportError(str(e), status) from e

    def _fail_auth(self, message: str, status_code: int, errors: Optional[List[dict]] = None):
        self._outcome = Err('auth', message, status_code)
        logger.warning('Authorization failed (status=%s): %s', status_code, message)
        raise AuthError(message, status_code, errors)

    def _fail_upstream(self, message: str, status_code: int, errors: Optional[List[dict]] = None):
        self._outcome = Err('upstream', message, status_code)
        logger.warning('Search failed (status=%s): %s', status_code, message)
        raise UpstreamError(message, status_code, errors)


def _is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def _decode(resp) -> Tuple[Any, bool]:
    try:
        return resp.json(), True
    except ValueError:
        return None, False


def create_client(key: Optional[str] = None, secret: Optional[str] = None,
                  api_base: Optional[str] = None, session=None) -> SearchClient:
    """Build an authenticated client, filling gaps from the environment."""
    credentials = Credentials.from_env(key, secret)
    client = SearchClient(
        session or requests.Session(),
        credentials,
        api_base=api_base or Config.TWITTER_API_BASE,
        authenticate=False,
        timeout=Config.REQUEST_TIMEOUT,
    )
    client._owns_session = session is None
    try:
        client.acquire_token()
    except Exception:
        client.close()
        raise
    return client
