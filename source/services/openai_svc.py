"""
Сервис для работы с OpenAI Assistants API поверх HTTP.
"""
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import urljoin

import requests

import config
from schemas import (
    Assistant, CreateRun, CreateThreadMessage, CreateThreadResult,
    ListResult, Message, Run,
)

logger = logging.getLogger(__name__)

class OpenAIService:
    """Класс для работы с OpenAI API."""
    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = (base_url or config.OPENAI_BASE_URL).rstrip("/") + "/"
        self.timeout = timeout or config.REQUEST_TIMEOUT
        self.session = session if session is not None else requests.Session()
        # ключ не проверяется: без него сервер ответит 401
        key = api_key if api_key is not None else config.OPENAI_API_KEY
        self.session.headers.update({
            "Authorization": f"Bearer {key}",
            "OpenAI-Beta": config.OPENAI_BETA,
            "Accept": "application/json",
        })
    def _url(self, path: str) -> str:
        return urljoin(self.base_url, path)
    def _request(self, method: str, path: str, check: bool = True, **kwargs) -> requests.Response:
        response = self.session.request(method, self._url(path), timeout=self.timeout, **kwargs)
        if check:
            response.raise_for_status()
        return response
    def _get_json(self, path: str) -> Dict[str, Any]:
        return self._request("GET", path).json()
    def _post_json(self, path: str, body: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", path, json=body).json()
    @staticmethod
    def _unpage(result: ListResult, what: str) -> List:
        if result.has_more:
            logger.warning(f"Список {what} неполный: постраничная загрузка не выполняется")
        return result.data
    def list_assistants(self) -> List[Assistant]:
        try:
            result = ListResult[Assistant].model_validate(self._get_json("v1/assistants"))
            return self._unpage(result, "ассистентов")
        except requests.RequestException as e:
            logger.error(f"Ошибка при получении списка ассистентов: {e}")
            raise
    def create_assistant(self, assistant: Assistant) -> Assistant:
        try:
            data = self._post_json("v1/assistants", assistant.to_payload())
            return Assistant.model_validate(data)
        except requests.RequestException as e:
            logger.error(f"Ошибка при создании ассистента {assistant.name}: {e}")
            raise
    def update_assistant(self, assistant_id: str, assistant: Assistant) -> Assistant:
        try:
            data = self._post_json(f"v1/assistants/{assistant_id}", assistant.to_payload())
            return Assistant.model_validate(data)
        except requests.RequestException as e:
            logger.error(f"Ошибка при обновлении ассистента {assistant_id}: {e}")
            raise
    def create_thread(self) -> CreateThreadResult:
        try:
            response = self._request(
                "POST", "v1/threads",
                data="", headers={"Content-Type": "application/json"},
            )
            return CreateThreadResult.model_validate(response.json())
        except requests.RequestException as e:
            logger.error(f"Ошибка при создании треда: {e}")
            raise
    def add_message(self, thread_id: str, content: str) -> Message:
        try:
            body = CreateThreadMessage(content=content).model_dump()
            data = self._post_json(f"v1/threads/{thread_id}/messages", body)
            return Message.model_validate(data)
        except requests.RequestException as e:
            logger.error(f"Ошибка при добавлении сообщения в тред {thread_id}: {e}")
            raise
    def create_run(self, thread_id: str, assistant_id: str) -> Run:
        try:
            body = CreateRun(assistant_id=assistant_id).model_dump()
            data = self._post_json(f"v1/threads/{thread_id}/runs", body)
            return Run.model_validate(data)
        except requests.RequestException as e:
            logger.error(f"Ошибка при создании запуска для треда {thread_id}: {e}")
            raise
    def get_run(self, thread_id: str, run_id: str) -> Run:
        try:
            return Run.model_validate(self._get_json(f"v1/threads/{thread_id}/runs/{run_id}"))
        except requests.RequestException as e:
            logger.error(f"Ошибка при получении информации о запуске {run_id} для треда {thread_id}: {e}")
            raise
    def list_messages(self, thread_id: str) -> List[Message]:
        try:
            result = ListResult[Message].model_validate(
                self._get_json(f"v1/threads/{thread_id}/messages")
            )
            return self._unpage(result, "сообщений")
        except requests.RequestException as e:
            logger.error(f"Ошибка при получении сообщений из треда {thread_id}: {e}")
            raise
    def delete_thread(self, thread_id: str) -> bool:
        """Удаление треда. Статус ответа не проверяется, только логируется."""
        try:
            response = self._request("DELETE", f"v1/threads/{thread_id}", check=False)
        except requests.RequestException as e:
            logger.warning(f"Тред {thread_id} не удалён: {e}")
            return False
        if not response.ok:
            logger.warning(f"Тред {thread_id} не удалён: HTTP {response.status_code}")
        return response.ok
