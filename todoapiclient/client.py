"""Client for a remote todo API exposing /todos.

Every operation returns an Either: Right(payload) on success, Left(error) otherwise.
Transport and decoding failures never escape as exceptions.
"""

from urllib.parse import quote

import requests
from pydantic import ValidationError

from todoapiclient.config import get_settings
from todoapiclient.either import Either, Left, Right
from todoapiclient.exceptions import ItemNotFoundError, NetworkError, TodoApiError, UnknownApiError
from todoapiclient.http_client import get_session
from todoapiclient.logging_config import get_logger
from todoapiclient.models.task import Task, TaskList

TODOS_PATH = "/todos"

GET_HEADERS = {
    "Accept": "application/json",
    "Content-type": "application/json",
}

POST_HEADERS = {
    "Accept": "application/json",
    "Content-type": "application/json; charset=UTF-8",
}


class TodoApiClient:
    def __init__(self, base_endpoint: str):
        self._base_endpoint = base_endpoint.rstrip("/")
        self._log = get_logger(__name__).bind(endpoint=self._base_endpoint)

    @classmethod
    def from_settings(cls) -> "TodoApiClient":
        return cls(get_settings().todo_api_endpoint)

    @property
    def base_endpoint(self) -> str:
        return self._base_endpoint

    def all_tasks(self) -> Either[TodoApiError, list[Task]]:
        """Fetch every task, in the order the server returns them."""
        resp = self._get(TODOS_PATH)
        if isinstance(resp, Left):
            return resp
        return self._decode(resp.right, TaskList.validate_json)

    def get_task_by_id(self, task_id: str) -> Either[TodoApiError, Task]:
        resp = self._get(f"{TODOS_PATH}/{quote(task_id, safe='')}", not_found=ItemNotFoundError())
        if isinstance(resp, Left):
            return resp
        return self._decode(resp.right, Task.model_validate_json)

    def add_task(self, task: Task) -> Either[TodoApiError, Task]:
        """Create a task. On success the server's copy is returned, not the input."""
        url = self._url(TODOS_PATH)
        self._log.debug("todo_api.request", method="POST", url=url)
        try:
            resp = get_session().post(url, headers=dict(POST_HEADERS), data=task.to_json())
        except requests.RequestException as e:
            return self._network_failure(url, e)
        checked = self._check_status(resp)
        if isinstance(checked, Left):
            return checked
        return self._decode(resp, Task.model_validate_json)

    # --- helpers ---

    def _url(self, path: str) -> str:
        return f"{self._base_endpoint}{path}"

    def _get(
        self, path: str, not_found: TodoApiError | None = None
    ) -> Either[TodoApiError, requests.Response]:
        url = self._url(path)
        self._log.debug("todo_api.request", method="GET", url=url)
        try:
            resp = get_session().get(url, headers=dict(GET_HEADERS))
        except requests.RequestException as e:
            return self._network_failure(url, e)
        return self._check_status(resp, not_found)

    def _check_status(
        self, resp: requests.Response, not_found: TodoApiError | None = None
    ) -> Either[TodoApiError, requests.Response]:
        if resp.status_code == 200:
            return Right(resp)
        self._log.debug("todo_api.error_status", url=resp.url, status=resp.status_code)
        if resp.status_code == 404 and not_found is not None:
            return Left(not_found)
        return Left(UnknownApiError(resp.status_code))

    def _decode(self, resp: requests.Response, parse):
        try:
            return Right(parse(resp.content))
        except ValidationError as e:
            self._log.debug("todo_api.unparseable_body", url=resp.url, errors=e.error_count())
            return Left(NetworkError())

    def _network_failure(self, url: str, e: requests.RequestException) -> Left[NetworkError]:
        self._log.debug("todo_api.network_error", url=url, error=str(e))
        return Left(NetworkError())
