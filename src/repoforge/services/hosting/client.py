""" GitHub compatible hosting api client.
"""

import logging
import re
from urllib.parse import urlsplit

import httpx

from repoforge.config import get_api_url, get_http_timeout, get_verify_tls
from repoforge.exceptions import HostingError
from repoforge.models import CreatedRepository, Organisation, UserDetails

logger = logging.getLogger(__name__)

REPOSITORY_NAME_PATTERN = re.compile(r"[A-Za-z0-9._-]+")
PAGE_SIZE = 100


class HostingClient:
    """ Blocking HTTP client for a GitHub compatible API.
    """

    def __init__(self, account, api_url=None, transport=None):
        self.account = account
        self.base_url = (api_url or get_api_url(account.provider)).rstrip("/")
        self.verify_tls = get_verify_tls()
        self.timeout = get_http_timeout()
        self._transport = transport

    def _get_headers(self):
        """ Get headers for API requests.
        """
        return {
            "Authorization": f"token {self.account.token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def _request(self, method, path, **kwargs):
        """ Make a request, raising HostingError on transport or status errors.
        """
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url}")
        try:
            with httpx.Client(
                verify=self.verify_tls, timeout=self.timeout, transport=self._transport
            ) as client:
                response = client.request(method, url, headers=self._get_headers(), **kwargs)
                response.raise_for_status()
                if not response.content:
                    return None
                try:
                    return response.json()
                except ValueError as e:
                    raise HostingError(f"{method} {path} returned invalid JSON") from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise HostingError(f"{method} {path} returned HTTP {status}", status_code=status) from e
        except httpx.HTTPError as e:
            raise HostingError(f"{method} {path} failed: {e}") from e

    def get(self, path, params=None):
        return self._request("GET", path, params=params)

    def post(self, path, data):
        return self._request("POST", path, json=data)

    def get_username(self):
        """ Get the login of the user owning the token.
        """
        user = self.get("/user") or {}
        return user.get("login") or user.get("username") or ""

    def list_organisations(self):
        """ List the organisations the account can create repositories in.

        The user's own login comes first, followed by its organisations in
        the order the API returns them.
        """
        organisations = []
        seen = set()

        def add(name, display_name=None, avatar_url=None):
            if name and name not in seen:
                seen.add(name)
                organisations.append(
                    Organisation(name=name, display_name=display_name, avatar_url=avatar_url)
                )

        add(self.account.username)
        page = 1
        while True:
            batch = self.get("/user/orgs", params={"per_page": PAGE_SIZE, "page": page}) or []
            for org in batch:
                add(
                    org.get("login") or org.get("username"),
                    org.get("full_name") or org.get("name"),
                    org.get("avatar_url"),
                )
            if len(batch) < PAGE_SIZE:
                break
            page += 1

        logger.info(f"Loaded {len(organisations)} organisations for {self.account.username}")
        return organisations

    def repository_exists(self, org_name, repo_name):
        try:
            self.get(f"/repos/{org_name}/{repo_name}")
            return True
        except HostingError as e:
            if e.status_code == 404:
                return False
            raise

    def validate_repository_name(self, org_name, repo_name):
        """ Check a repository name, returning the first problem found or None.
        """
        if not REPOSITORY_NAME_PATTERN.fullmatch(repo_name) or repo_name in (".", ".."):
            return (
                f"The repository name '{repo_name}' may only contain letters, "
                "digits, '-', '_' and '.'"
            )
        if self.repository_exists(org_name, repo_name):
            return f"The repository {org_name}/{repo_name} already exists!"
        return None

    def create_repository(self, org_name, repo_name, description=""):
        """ Create a repository under the user or one of its organisations.
        """
        payload = {
            "name": repo_name,
            "description": description or "",
            "private": False,
            "auto_init": False,
        }
        if org_name.casefold() == self.account.username.casefold():
            repo = self.post("/user/repos", payload) or {}
        else:
            repo = self.post(f"/orgs/{org_name}/repos", payload) or {}
        logger.info(f"Created repository {org_name}/{repo_name}")
        return CreatedRepository(
            full_name=repo.get("full_name") or f"{org_name}/{repo_name}",
            html_url=repo.get("html_url"),
            clone_url=repo.get("clone_url"),
        )

    def build_user_details(self, clone_url):
        """ Build the credentials used to push to clone_url.
        """
        parts = urlsplit(clone_url)
        return UserDetails(
            address=f"{parts.scheme}://{parts.netloc}",
            user=self.account.username,
            password=self.account.token,
            email=self.account.email,
        )


def get_hosting_client(account):
    """ Get a new hosting client for an account.
    """
    return HostingClient(account)
