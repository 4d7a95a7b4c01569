"""
Ожидание завершения запуска ассистента.
"""
import logging
import time
from typing import Callable

from schemas import Run
from services.openai_svc import OpenAIService

logger = logging.getLogger(__name__)

class RunTimeoutError(Exception):
    """Запуск не пришёл в конечный статус за отведённое число проверок."""
    def __init__(self, thread_id: str, run_id: str, status: str, attempts: int):
        super().__init__(
            f"Запуск {run_id} в треде {thread_id} не завершился за {attempts} проверок "
            f"(последний статус: {status})"
        )
        self.thread_id = thread_id
        self.run_id = run_id
        self.status = status
        self.attempts = attempts

def wait_for_run(
    openai_service: OpenAIService,
    thread_id: str,
    run_id: str,
    interval: float = 1.0,
    max_attempts: int = 120,
    sleep: Callable[[float], None] = time.sleep,
) -> Run:
    """
    Опрашивает статус запуска, пока он не станет конечным
    (completed, requires_action, failed, cancelled, expired).
    """
    logger.info("Ожидание завершения запуска...")
    status = None
    for attempt in range(1, max_attempts + 1):
        logger.info("\tПроверка статуса...")
        run = openai_service.get_run(thread_id, run_id)
        status = run.status
        logger.info(f"\tСтатус: {status}")
        if run.is_terminal:
            return run
        if attempt < max_attempts:
            sleep(interval)
    raise RunTimeoutError(thread_id, run_id, status, max_attempts)
