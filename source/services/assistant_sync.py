"""
Синхронизация описания ассистента с OpenAI.
Ассистент ищется по имени, затем создаётся, обновляется или остаётся как есть.
"""
import logging
from typing import Iterable, Optional

from schemas import Assistant
from services.openai_svc import OpenAIService

logger = logging.getLogger(__name__)

def find_assistant(assistants: Iterable[Assistant], name: str) -> Optional[Assistant]:
    return next((a for a in assistants if a.name == name), None)

def reconcile_assistant(openai_service: OpenAIService, desired: Assistant) -> Assistant:
    """
    Возвращает удалённого ассистента, соответствующего `desired`.
    Результат всегда содержит id, присвоенный сервером.
    """
    existing = find_assistant(openai_service.list_assistants(), desired.name)
    if existing is None:
        logger.info(f"Создание ассистента {desired.name}...")
        return openai_service.create_assistant(desired)
    if desired.differs_from(existing):
        logger.info(f"Обновление ассистента {existing.id}...")
        return openai_service.update_assistant(existing.id, desired)
    logger.info("Ассистент в актуальном состоянии")
    return existing
