"""
Менеджер трейдов: создаёт тред, отправляет сообщение, запускает ассистента,
дожидается результата и удаляет тред.
"""
import logging
import time
from typing import Any, Callable, Dict, List

import config
from schemas import (
    FAILURE_STATUSES, RUN_COMPLETED, RUN_REQUIRES_ACTION,
    Message, Run, ToolCall,
)
from services.openai_svc import OpenAIService
from services.run_poller import wait_for_run

logger = logging.getLogger(__name__)

def render_messages(messages: List[Message]) -> List[str]:
    """Строки вида `role: text` в порядке, в котором их вернул сервер."""
    lines = []
    for message in messages:
        for content in message.content:
            if content.text is None:
                continue
            lines.append(f"\t\t{message.role}: {content.text.value}")
    return lines

def pending_tool_calls(run: Run) -> List[ToolCall]:
    if run.status != RUN_REQUIRES_ACTION or run.required_action is None:
        return []
    if run.required_action.submit_tool_outputs is None:
        return []
    return list(run.required_action.submit_tool_outputs.tool_calls)

class ThreadManager:
    """Класс для управления жизненным циклом треда."""
    def __init__(
        self,
        openai_service: OpenAIService,
        poll_interval: float = None,
        max_attempts: int = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.openai_service = openai_service
        self.poll_interval = config.POLL_INTERVAL if poll_interval is None else poll_interval
        self.max_attempts = config.POLL_MAX_ATTEMPTS if max_attempts is None else max_attempts
        self.sleep = sleep
    def run_conversation(self, assistant_id: str, text: str) -> Dict[str, Any]:
        logger.info("Создание треда...")
        thread_id = self.openai_service.create_thread().id
        try:
            logger.info("Добавление сообщения...")
            self.openai_service.add_message(thread_id, text)
            logger.info("Создание запуска...")
            run = self.openai_service.create_run(thread_id, assistant_id)
            logger.info(f"\tRun ID: {run.id}")
            run = wait_for_run(
                self.openai_service, thread_id, run.id,
                interval=self.poll_interval,
                max_attempts=self.max_attempts,
                sleep=self.sleep,
            )
            lines = self._handle_run(thread_id, run)
            return {"thread_id": thread_id, "run_id": run.id, "status": run.status, "lines": lines}
        finally:
            logger.info("Удаление треда...")
            self.openai_service.delete_thread(thread_id)
    def _handle_run(self, thread_id: str, run: Run) -> List[str]:
        if run.status == RUN_COMPLETED:
            logger.info("Получение сообщений треда...")
            return render_messages(self.openai_service.list_messages(thread_id))
        if run.status == RUN_REQUIRES_ACTION:
            # вызов инструментов не выполняется и результаты не отправляются
            for call in pending_tool_calls(run):
                logger.info(
                    f"Ассистент запросил {call.function.name} ({call.id}): {call.function.arguments}"
                )
            return []
        if run.status in FAILURE_STATUSES:
            logger.error(f"Запуск {run.id} завершился со статусом {run.status}: {run.last_error}")
        return []
