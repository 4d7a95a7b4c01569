"""
Конфигурационный файл демо-скрипта OpenAI Assistants.
"""
import os

from dotenv import load_dotenv

load_dotenv()

# OpenAI API
OPENAI_API_KEY = os.environ.get("OPENAI_API_KEY", "")
OPENAI_BASE_URL = os.environ.get("OPENAI_BASE_URL", "https://api.openai.com/")
OPENAI_BETA = os.environ.get("OPENAI_BETA", "assistants=v1")
REQUEST_TIMEOUT = int(os.environ.get("REQUEST_TIMEOUT", "30"))  # секунды на один HTTP-запрос

# Ожидание завершения запуска
POLL_INTERVAL = float(os.environ.get("POLL_INTERVAL", "1.0"))  # пауза между проверками статуса
POLL_MAX_ATTEMPTS = int(os.environ.get("POLL_MAX_ATTEMPTS", "120"))

# Вариант ассистента: fundraiser или plain
ASSISTANT_PROFILE = os.environ.get("ASSISTANT_PROFILE", "fundraiser")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
