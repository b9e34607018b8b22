from dataclasses import dataclass, field
from typing import ClassVar
import logging

import requests
import google.auth.credentials
from google.auth.transport.requests import AuthorizedSession

from .exceptions import TransportError

logger = logging.getLogger(__name__)

@dataclass
class Request():
    """
    The pieces of a single call to the feeds API.  Resources fill this in
    on the ServiceRequest and then call execute().
    """
    GET: ClassVar[str] = "GET"
    POST: ClassVar[str] = "POST"

    full_url: str = field(default="")
    method: str = field(default="GET")
    post: str|bytes|None = field(default=None)
    headers: dict[str,str] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return bool(self.full_url)

class ServiceRequest():
    """
    Executes requests against the legacy Google Spreadsheets feeds.
    Holds the one pending Request and the HTTP session.  When credentials are
    set the session is a google-auth AuthorizedSession so the access token is
    attached (and refreshed) for us, otherwise it's a plain requests Session,
    which is fine for published/public feeds.

    Getting credentials is the caller's problem, anything that is a
    google.auth.credentials.Credentials will do.

    Most applications only need the one so there is a module level instance,
    service_request, that everything uses unless told otherwise.  Pass another
    instance as service= to any resource or op to override it (tests do this
    with a fake).
    """
    __DEFAULT_TIMEOUT = 30
    __DEFAULT_GDATA_VERSION = "3.0"
    __DEFAULT_USER_AGENT = "gwsfeeds"

    def __init__(self, credentials: google.auth.credentials.Credentials|None = None) -> None:
        self.reset()
        self.__credentials = credentials

    def __bool__(self) -> bool:
        """True if there are credentials to sign requests with"""
        return self.__credentials is not None

    def __str__(self) -> str:
        if self.__credentials is not None:
            return f"Authorized:{self.__request.method} {self.__request.full_url}"
        return f"Anonymous:{self.__request.method} {self.__request.full_url}"

    def __repr__(self) -> str:
        return f"{str(self.__class__)}:{str(self)}"

    @property
    def request(self) -> Request:
        """
        The pending request.  Set full_url etc on it and then execute().
        """
        return self.__request

    @property
    def credentials(self) -> google.auth.credentials.Credentials|None:
        return self.__credentials

    @credentials.setter
    def credentials(self, value: google.auth.credentials.Credentials|None) -> None:
        """
        Changing credentials invalidates the session.
        """
        if value is not self.__credentials:
            self.__credentials = value
            self.__session = None

    @property
    def session(self) -> requests.Session:
        """
        The HTTP session, built on first use.
        """
        if self.__session is None:
            if self.__credentials is not None:
                self.__session = AuthorizedSession(self.__credentials)
            else:
                self.__session = requests.Session()
        return self.__session

    @session.setter
    def session(self, value: requests.Session|None) -> None:
        self.__session = value

    @property
    def config(self) -> dict:
        """
        Get all configuration state as a dict.
        Convenience for pushing it into a json, toml, ini, etc, file.
        """
        config = {
            'timeout': self.timeout,
            'gdata_version': self.gdata_version,
            'user_agent': self.user_agent
        }
        return config

    @config.setter
    def config(self, config: dict) -> None:
        """
        Set configuration state from a dict, only the keys present are changed.
        """
        v = config.get('timeout', None)
        if v is not None:
            self.timeout = float(v)
        v = config.get('gdata_version', None)
        if v is not None:
            self.gdata_version = str(v)
        v = config.get('user_agent', None)
        if v is not None:
            self.user_agent = str(v)

    def reset(self) -> None:
        """
        Reset all state to defaults.  Credentials are dropped.
        """
        self.__credentials = None
        self.__session = None
        self.__request = Request()
        self.timeout = self.__DEFAULT_TIMEOUT
        self.gdata_version = self.__DEFAULT_GDATA_VERSION
        self.user_agent = self.__DEFAULT_USER_AGENT

    def _headers(self, req: Request) -> dict[str,str]:
        headers = {
            'GData-Version': self.gdata_version,
            'User-Agent': self.user_agent
        }
        headers.update(req.headers)
        return headers

    def execute(self) -> bytes:
        """
        Send the pending request and return the raw response body.  Bytes, so
        the xml parser goes by the document's own encoding declaration.
        The pending request is replaced with a fresh one whatever happens so
        a POST body or headers never carry over to the next call.
        """
        req, self.__request = self.__request, Request()
        if not req:
            raise ValueError("ServiceRequest.execute() needs a full_url")
        method = str(req.method).upper()
        logger.debug(f"{method} {req.full_url}")
        try:
            response = self.session.request(method, req.full_url,
                                            data=req.post,
                                            headers=self._headers(req),
                                            timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.warning(f"{method} {req.full_url} failed: {e}")
            raise TransportError(f"{method} {req.full_url} failed: {e}") from e

        if not response.ok:
            logger.warning(f"{method} {req.full_url} returned {response.status_code}")
            raise TransportError(f"{method} {req.full_url} returned {response.status_code} {response.reason}",
                                 status_code=response.status_code,
                                 body=response.text)
        return response.content

service_request = ServiceRequest()
