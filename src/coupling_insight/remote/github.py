"""GitHub REST source for commit and pull request history.

Endpoints used:
- GET /repos/{owner}/{repo}/commits          - list commits (paginated)
- GET /repos/{owner}/{repo}/commits/{sha}    - commit detail with files
- GET /repos/{owner}/{repo}/pulls            - list closed pull requests

Renamed files appear under their new path only, so a rename starts a new
history for that path.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional

import httpx

from ..config import MAX_PER_PAGE, AnalysisConfig
from ..exceptions import RepositoryUnavailableError
from ..history.models import ChangeSet, ChangeSetRef
from ..logging_config import get_logger
from .base import RepositorySource

logger = get_logger(__name__)

API_VERSION = "2022-11-28"


class GitHubSource(RepositorySource):
    """RepositorySource backed by the GitHub REST API.

    Example usage:
        with GitHubSource(token="ghp_...") as source:
            refs = source.list_change_sets("octocat", "hello-world", limit=50)
            detail = source.get_change_set_detail("octocat", "hello-world", refs[0].id)
    """

    def __init__(
        self,
        api_url: str = "https://api.github.com",
        token: Optional[str] = None,
        per_page: int = MAX_PER_PAGE,
        timeout: float = 30.0,
        client: Optional[httpx.Client] = None,
    ):
        """Initialize the source.

        Args:
            api_url: Base URL of the REST API
            token: Optional API token sent as a bearer token
            per_page: Page size for list endpoints (capped at 100)
            timeout: Per-request timeout in seconds
            client: Pre-built client (e.g. with a mock transport). It is not
                closed by this source.
        """
        self.api_url = api_url.rstrip("/")
        self.per_page = max(1, min(per_page, MAX_PER_PAGE))
        self.timeout = timeout

        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": API_VERSION,
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"

        if client is None:
            self._client = httpx.Client(headers=headers, timeout=timeout)
            self._owns_client = True
        else:
            client.headers.update(headers)
            self._client = client
            self._owns_client = False

    @classmethod
    def from_config(
        cls, config: AnalysisConfig, client: Optional[httpx.Client] = None
    ) -> "GitHubSource":
        return cls(
            api_url=config.api_url,
            token=config.token,
            per_page=config.per_page,
            timeout=config.timeout_seconds,
            client=client,
        )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    # ------------------------------------------------------------------
    # RepositorySource
    # ------------------------------------------------------------------

    def list_change_sets(self, owner: str, repo: str, limit: int = -1) -> list[ChangeSetRef]:
        refs: list[ChangeSetRef] = []
        per_page = self.per_page if limit <= 0 else min(limit, self.per_page)

        path = f"/repos/{owner}/{repo}/commits"
        for item in self._paginate(owner, repo, path, {"per_page": per_page}, required=("sha",)):
            refs.append(ChangeSetRef(id=item["sha"], author=_login(item)))
            if 0 < limit <= len(refs):
                break

        logger.debug("Listed %d commits for %s/%s", len(refs), owner, repo)
        return refs

    def get_change_set_detail(self, owner: str, repo: str, change_set_id: str) -> ChangeSet:
        response = self._get(
            owner, repo, f"{self.api_url}/repos/{owner}/{repo}/commits/{change_set_id}"
        )
        data = self._json(owner, repo, response, dict)
        files = data.get("files") or []
        if not isinstance(files, list) or not all(_has_keys(f, ("filename",)) for f in files):
            raise self._unexpected_body(owner, repo, response)

        return ChangeSet(
            id=data.get("sha", change_set_id),
            author=_login(data),
            files=[f["filename"] for f in files],
        )

    def list_merged_pull_requests(self, owner: str, repo: str) -> list[str]:
        params = {"state": "closed", "per_page": self.per_page}
        shas = [
            pull["merge_commit_sha"]
            for pull in self._paginate(owner, repo, f"/repos/{owner}/{repo}/pulls", params)
            if pull.get("merged_at") and pull.get("merge_commit_sha")
        ]
        logger.debug("Found %d merged pull requests for %s/%s", len(shas), owner, repo)
        return shas

    # ------------------------------------------------------------------
    # HTTP helpers
    # ------------------------------------------------------------------

    def _paginate(
        self,
        owner: str,
        repo: str,
        path: str,
        params: dict[str, Any],
        required: tuple[str, ...] = (),
    ) -> Iterator[dict[str, Any]]:
        """Yield items from every page, following Link: rel="next".

        Every item must be a JSON object holding the ``required`` keys.
        """
        url: Optional[str] = f"{self.api_url}{path}"
        page_params: Optional[dict[str, Any]] = params
        page = 0

        while url:
            response = self._get(owner, repo, url, params=page_params)
            page += 1
            items = self._json(owner, repo, response, list)
            if not all(_has_keys(item, required) for item in items):
                raise self._unexpected_body(owner, repo, response)
            logger.debug("Fetched page %d of %s (%d items)", page, path, len(items))
            yield from items

            # The next link already carries the query string
            url = response.links.get("next", {}).get("url")
            page_params = None

    def _json(self, owner: str, repo: str, response: httpx.Response, expected: type) -> Any:
        """Decode a success body, which must be a JSON value of type ``expected``."""
        try:
            body = response.json()
        except ValueError as e:
            raise self._unexpected_body(owner, repo, response) from e
        if not isinstance(body, expected):
            raise self._unexpected_body(owner, repo, response)
        return body

    @staticmethod
    def _unexpected_body(
        owner: str, repo: str, response: httpx.Response
    ) -> RepositoryUnavailableError:
        return RepositoryUnavailableError(
            owner, repo, "unexpected response body", response.status_code
        )

    def _get(
        self, owner: str, repo: str, url: str, params: Optional[dict[str, Any]] = None
    ) -> httpx.Response:
        try:
            response = self._client.get(url, params=params)
        except httpx.HTTPError as e:
            raise RepositoryUnavailableError(owner, repo, f"request failed: {e}") from e

        if response.is_success:
            return response

        raise RepositoryUnavailableError(
            owner, repo, self._failure_reason(response), response.status_code
        )

    @staticmethod
    def _failure_reason(response: httpx.Response) -> str:
        rate_limited = response.headers.get("X-RateLimit-Remaining") == "0"
        if response.status_code in (403, 429) and rate_limited:
            return "API rate limit exceeded"
        if response.status_code == 404:
            return "not found"
        if response.status_code == 401:
            return "bad credentials"
        try:
            body = response.json()
        except ValueError:
            body = None
        message = body.get("message") if isinstance(body, dict) else None
        return message or f"HTTP {response.status_code}"


def _has_keys(item: Any, keys: tuple[str, ...]) -> bool:
    return isinstance(item, dict) and all(key in item for key in keys)


def _login(item: dict[str, Any]) -> Optional[str]:
    """Account login of a commit's author; None when GitHub could not link one."""
    author = item.get("author")
    return author.get("login") if isinstance(author, dict) else None
