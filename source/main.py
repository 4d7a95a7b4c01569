"""
Демо OpenAI Assistants: настраивает ассистента, создаёт тред, отправляет
сообщение, дожидается запуска, печатает ответ и удаляет тред.
"""
import logging
import sys

import requests

import config
from profiles import get_profile
from services.assistant_sync import reconcile_assistant
from services.openai_svc import OpenAIService
from services.run_poller import RunTimeoutError
from services.thread_manager import ThreadManager
from schemas import FAILURE_STATUSES

logger = logging.getLogger(__name__)

def main() -> int:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    profile = get_profile(config.ASSISTANT_PROFILE)
    openai_service = OpenAIService()
    thread_manager = ThreadManager(openai_service)
    try:
        assistant = reconcile_assistant(openai_service, profile.assistant)
        logger.info(f"Assistant ID: {assistant.id}")
        result = thread_manager.run_conversation(assistant.id, profile.message)
    except RunTimeoutError as e:
        logger.error(str(e))
        return 1
    except requests.RequestException as e:
        logger.error(f"Запрос к OpenAI завершился ошибкой: {e}")
        return 1
    for line in result["lines"]:
        print(line)
    return 1 if result["status"] in FAILURE_STATUSES else 0

if __name__ == "__main__":
    sys.exit(main())
