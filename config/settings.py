# config/settings.py
from __future__ import annotations
import os
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("CALC_LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("CALC_LOG_DIR", "")           # vazio = sem arquivo de log
TABELAS_PATH = os.getenv("CALC_TABELAS_PATH", "")  # JSON com tabelas do ano (opcional)
HTTP_TIMEOUT = float(os.getenv("CALC_HTTP_TIMEOUT", "10"))
