"""Status fetchers for TaskPoller."""

from typing import TYPE_CHECKING, Any

import httpx

from ..errors import TaskNotFoundError, TranslationServiceError
from ..messages import TaskStatusResponse

if TYPE_CHECKING:
    from ..service import TranslationService


class LocalStatusFetcher:
    """Reads task status from an in-process TranslationService."""

    def __init__(self, service: "TranslationService"):
        self._service = service

    async def fetch(self, task_id: str) -> TaskStatusResponse:
        return self._service.get_task_status(task_id)


class HttpStatusFetcher:
    """Reads task status from the HTTP Poll route.

    Args:
        client: httpx.AsyncClient configured with the service base_url
        path_template: Poll path with a ``{task_id}`` placeholder
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        path_template: str = "/api/translation/tasks/{task_id}",
    ):
        self._client = client
        self._path_template = path_template

    async def fetch(self, task_id: str) -> TaskStatusResponse:
        response = await self._client.get(self._path_template.format(task_id=task_id))

        if response.status_code == 404:
            raise TaskNotFoundError(task_id)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TranslationServiceError(
                f"Status request failed ({e.response.status_code}): {_error_message(e.response)}",
                {"task_id": task_id, "status_code": e.response.status_code},
            ) from e

        body = response.json()
        if not body.get("success", False):
            raise TranslationServiceError(
                _error_message(response) or "Status request failed", {"task_id": task_id}
            )
        return TaskStatusResponse.model_validate(body["data"])


def _error_message(response: httpx.Response) -> str:
    try:
        body: Any = response.json()
    except ValueError:
        return response.text[:500]
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict):
            return str(error.get("message", error))
        if error:
            return str(error)
    return response.text[:500]
