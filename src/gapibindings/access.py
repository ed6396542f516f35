"""
Authenticated access to the Google APIs the bundled bindings cover.
"""
from collections.abc import Iterable
from functools import wraps
from pathlib import Path
import copy
import importlib
import json
import logging

import google.auth
import google.auth.exceptions
from google.auth.transport.requests import AuthorizedSession, Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow

from .calls import ApiService

log = logging.getLogger(__name__)

# api:version -> bundled binding package
BINDINGS = {
    "blogger:v3": "blogger",
    "coordinate:v1": "coordinate",
    "storage:v1beta2": "storage",
}


class __GAPIAccess():
    """
    Authenticated access to Google APIs.
    Create an OAuth client in the Cloud console and point client_secrets at the downloaded file,
    the first connect() runs the consent screens in a browser and the tokens are cached so
    that only has to happen once.  Without a secrets file the application default credentials
    are tried (GOOGLE_APPLICATION_CREDENTIALS, gcloud, metadata server).
    Scopes are added by clients as they need them, which may trigger a reconnect.

    There is one authenticated identity per application, hence the module singleton `gapi`
    and the service() decorator handing out the bindings built on its session.
    """

    __SCOPES = {
        "blogger": "https://www.googleapis.com/auth/blogger",
        "blogger-ro": "https://www.googleapis.com/auth/blogger.readonly",
        "coordinate": "https://www.googleapis.com/auth/coordinate",
        "coordinate-ro": "https://www.googleapis.com/auth/coordinate.readonly",
        "storage-full": "https://www.googleapis.com/auth/devstorage.full_control",
        "storage-ro": "https://www.googleapis.com/auth/devstorage.read_only",
        "storage-rw": "https://www.googleapis.com/auth/devstorage.read_write",
        "openid": "openid",
        "email": "email",
        "profile": "profile",
        "userinfo-email": "https://www.googleapis.com/auth/userinfo.email",
        "userinfo-profile": "https://www.googleapis.com/auth/userinfo.profile"
    }
    __SCOPE_URL_PREFIX = "https://www.googleapis.com/"

    __DEFAULT_AUTH_PROMPT_MSG = "Please visit this URL to authorize this application: {url}"
    __DEFAULT_AUTH_FLOW_SUCCESS_MSG = "Authorization complete, you may close this window."
    __DEFAULT_SECRETS = (Path.home() / "gapi_client_secrets.json").absolute()
    __DEFAULT_CACHE = (Path.home() / "gapi_tokens.json").absolute()

    def __init__(self) -> None:
        self.reset()

    def __bool__(self) -> bool:
        """True if connected and authenticated"""
        return self.connected

    def __str__(self) -> str:
        if self.connected:
            return f"Connected:{str(self.session_scopes)}"
        return f"Disconnected:{str(self.__scopes)}"

    def __repr__(self) -> str:
        return f"{str(self.__class__)}:{str(self)}"

    @classmethod
    def get_scope(cls, scope: str) -> str:
        """
        Scope URL for a short label such as "storage-rw".
        A raw scope URL is passed through, anything else maps to "".
        """
        s = str(scope)
        sc = cls.__SCOPES.get(s, "")
        if not sc and s.startswith(cls.__SCOPE_URL_PREFIX):
            sc = s
        return sc

    @classmethod
    def scope_labels(cls) -> list[str]:
        return list(cls.__SCOPES.keys())

    def _scope_list(self, value) -> list[str]:
        if value is None:
            return []
        vals = [value] if isinstance(value, str) or not isinstance(value, Iterable) else value
        out = []
        for v in vals:
            s = self.get_scope(str(v))
            if not s:
                log.warning(f"ignoring unknown scope: {v}")
            elif s not in out:
                out.append(s)
        return out

    @property
    def client_secrets(self) -> Path:
        """
        Path to the OAuth client secrets file downloaded from the Cloud console.
        """
        return self.__secrets

    @client_secrets.setter
    def client_secrets(self, value: Path|str) -> None:
        val = value if isinstance(value, Path) else Path(str(value))
        if val != self.__secrets:
            self.__secrets = val
            if self.connected:
                self.connect()

    @property
    def cred_cache(self) -> Path:
        """
        Path to the token cache so the consent flow isn't repeated on every run.
        """
        return self.__cache

    @cred_cache.setter
    def cred_cache(self, value: Path|str) -> None:
        val = value if isinstance(value, Path) else Path(str(value))
        if val != self.__cache:
            self.__cache = val
            if self.connected:
                self.connect()

    def clear(self) -> None:
        """Drop the credentials, scopes and services."""
        self.__creds = None
        self.__scopes = []
        self.__services = {}
        self.__session = None

    @property
    def connected(self) -> bool:
        return bool(self.__creds) and bool(self.__creds.valid)

    @property
    def session_scopes(self) -> list[str]:
        """
        Scopes granted to the current session, as opposed to self.scopes which
        are the ones requested.
        """
        if self.connected:
            return list(self.__creds.scopes or [])
        return []

    @property
    def scopes(self) -> list[str]:
        """
        The scopes requested or to be requested on the next connect.
        """
        return self.__scopes

    @scopes.setter
    def scopes(self, value: None|list[str]|str) -> None:
        """
        Replace the requested scopes.  Reconnects if any of them aren't granted already.
        """
        self.__scopes = self._scope_list(value)
        if self.__scopes and self.connected:
            self.refresh()
        else:
            self.__creds = None
            self.__services = {}
            self.__session = None

    def append_scopes(self, *args) -> bool:
        """
        Add to the requested scopes, typically called by client modules on import
        with what they need.
        """
        for s in self._scope_list([i for a in args
                                   for i in ([a] if isinstance(a, str) or not isinstance(a, Iterable) else a)]):
            if s not in self.__scopes:
                self.__scopes.append(s)
        return self.refresh()

    def scope_in_session(self, scope: str) -> bool:
        s = self.get_scope(scope)
        return bool(s) and self.connected and (s in self.session_scopes)

    @property
    def creds(self) -> Credentials|None:
        return self.__creds

    @property
    def services(self) -> dict[str, ApiService]:
        """
        Services built so far, keyed api:version.
        """
        return self.__services

    @property
    def config(self) -> dict:
        """
        All configuration as a dict, for saving to a json, toml, ini, etc, file.
        """
        config = {
            'secrets': str(self.__secrets),
            'cache': str(self.__cache),
            'scopes': list(self.__scopes),
            'server': self.auth_server,
            'port': self.auth_port,
            'auth_prompt_msg': self.auth_prompt_msg,
            'flow_success_msg': self.auth_flow_success_msg,
            'developer_key': self.__developer_key,
            'user_agent': self.__user_agent
        }
        return config

    @config.setter
    def config(self, config: dict) -> None:
        """
        Set configuration from a dict, keys missing from it are left as they are.
        """
        reconnect = False
        v = config.get('port', None)
        if v is not None:
            self.auth_port = int(v)
        v = config.get('server', None)
        if v is not None:
            self.auth_server = str(v)
        v = config.get('scopes', [])
        if v:
            self.__scopes = self._scope_list(v)
            reconnect = True
        v = config.get('cache', None)
        if v is not None:
            self.__cache = Path(v)
            reconnect = True
        v = config.get('secrets', None)
        if v is not None:
            self.__secrets = Path(v)
            reconnect = True
        v = config.get('auth_prompt_msg', None)
        if v is not None:
            self.auth_prompt_msg = str(v)
        v = config.get('flow_success_msg', None)
        if v is not None:
            self.auth_flow_success_msg = str(v)
        if 'developer_key' in config:
            self.developer_key = config['developer_key']
        v = config.get('user_agent', None)
        if v is not None:
            self.user_agent = v
        if reconnect and self.connected:
            self.connect()

    @property
    def developer_key(self) -> str|None:
        """API key sent with every call, for APIs that need one besides OAuth."""
        return self.__developer_key

    @developer_key.setter
    def developer_key(self, value: str|None) -> None:
        v = value if value is None else str(value)
        if v != self.__developer_key:
            self.__services = {}
            self.__developer_key = v

    @property
    def user_agent(self) -> str:
        """Appended to the library User-Agent on every request."""
        return self.__user_agent

    @user_agent.setter
    def user_agent(self, value: str) -> None:
        v = str(value)
        if v != self.__user_agent:
            self.__services = {}
            self.__user_agent = v

    def reset(self) -> None:
        """
        Reset all connection state to defaults.
        """
        self.__secrets = self.__DEFAULT_SECRETS
        self.__cache = self.__DEFAULT_CACHE
        self.__creds = None
        self.__session = None
        self.__scopes = []
        self.__services = {}
        self.__developer_key = None
        self.__user_agent = ""
        self.auth_server = 'localhost'
        self.auth_port = 0
        self.auth_prompt_msg = self.__DEFAULT_AUTH_PROMPT_MSG
        self.auth_flow_success_msg = self.__DEFAULT_AUTH_FLOW_SUCCESS_MSG

    def refresh(self) -> bool:
        """
        Reconnect if any requested scope is missing from the session.
        """
        scopes_accounted = all(s in self.session_scopes for s in self.__scopes)
        if self.connected and not scopes_accounted:
            return self.connect()
        return True

    def _load_cache(self, requested_scopes: list[str]) -> None:
        if not (self.__cache.exists() and self.__cache.is_file()):
            return
        cf = self.__cache.resolve()
        with open(cf, 'r', encoding='utf-8') as f:
            j = json.load(f)
        # the cached refresh token is only good for the scopes it was granted with
        if not all(s in j.get('scopes', []) for s in requested_scopes):
            log.info(f"token cache {cf} lacks requested scopes, discarding")
            self.__cache.unlink()
            return
        self.__creds = Credentials.from_authorized_user_file(str(cf), requested_scopes)

    def _save_cache(self, requested_scopes: list[str]) -> None:
        refresh_token = getattr(self.__creds, 'refresh_token', None)
        if not refresh_token:
            return
        user_info = {'refresh_token': refresh_token, 'client_id': self.__creds.client_id,
                     'client_secret': self.__creds.client_secret, 'scopes': requested_scopes}
        with open(self.__cache.resolve(), 'w', encoding='utf-8') as f:
            json.dump(user_info, f, ensure_ascii=False, indent=2)

    def connect(self) -> bool:
        """
        Establish a new authenticated session, caching the tokens for next time.
        Returns False if there are no scopes to ask for or nothing worked.
        """
        self.__creds = None
        self.__services = {}
        self.__session = None
        if not self.__scopes:
            log.warning("connect() with no scopes requested")
            return False
        requested_scopes = copy.copy(self.__scopes)
        self._load_cache(requested_scopes)
        if not self.connected and self.__creds and self.__creds.refresh_token:
            try:
                self.__creds.refresh(Request())
            except google.auth.exceptions.RefreshError as e:
                log.warning(f"failed to refresh stored creds: {str(e)}, re-authorizing")
            if not self.connected and self.__cache.exists():
                self.__cache.unlink()

        if not self.connected:
            if self.__secrets.exists() and self.__secrets.is_file():
                log.info(f"running the installed app flow with {self.__secrets}")
                flow = InstalledAppFlow.from_client_secrets_file(str(self.__secrets), requested_scopes)
                self.__creds = flow.run_local_server(host=self.auth_server, port=self.auth_port,
                                                     authorization_prompt_message=self.auth_prompt_msg,
                                                     success_message=self.auth_flow_success_msg)
            else:
                try:
                    self.__creds, _ = google.auth.default(scopes=requested_scopes)
                    if not self.__creds.valid:
                        self.__creds.refresh(Request())
                except google.auth.exceptions.DefaultCredentialsError as e:
                    log.warning(f"no client secrets at {self.__secrets} and no default credentials: {str(e)}")
                    self.__creds = None

            if self.connected:
                self._save_cache(requested_scopes)
        if self.connected:
            log.info(f"connected with scopes {requested_scopes}")
        return self.connected

    def session(self) -> AuthorizedSession|None:
        """
        requests session that adds the credentials to every request, connecting if required.
        None if no connection could be made.
        """
        if not self.connected:
            self.connect()
        if not self.connected:
            return None
        if self.__session is None:
            self.__session = AuthorizedSession(self.__creds)
        return self.__session

    def get_service(self, name: str, version: str) -> ApiService|None:
        """
        Service of a bundled binding, built on first use.
        Can return None if no connection present, raises ValueError for unknown APIs.
        """
        id = f'{name}:{version}'
        pkg = BINDINGS.get(id, None)
        if pkg is None:
            raise ValueError(f"No bindings for {id}, available: {', '.join(BINDINGS)}")
        s = self.__services.get(id, None)
        if s is not None:
            return s
        session = self.session()
        if session is None:
            return None
        module = importlib.import_module(f".{pkg}", __package__)
        s = module.Service(session, user_agent=self.__user_agent, api_key=self.__developer_key)
        self.__services[id] = s
        return s


gapi = __GAPIAccess()


def service(name: str, version: str):
    """
    Decorator handing the named bundled Service to the function as the service kwarg.
    param: name: API name, e.g. storage
    param: version: API version, e.g. v1beta2
    """
    def _inner_decorator(f):
        @wraps(f)
        def wrapped(*args, **kwargs):
            kwargs['service'] = gapi.get_service(name, version)
            return f(*args, **kwargs)
        return wrapped
    return _inner_decorator
