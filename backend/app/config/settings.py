"""
Configurações da API de usuários, lidas do ambiente (ou de um arquivo .env).
"""

import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# Banco de dados
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./example.db")

# O schema é pré-requisito externo; só criamos as tabelas se pedido explicitamente
AUTO_CREATE_TABLES = _env_flag("AUTO_CREATE_TABLES")

# Servidor
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8080))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Comportamento dos handlers
# Desligados por padrão: mantém o contrato observado (criação sem validação,
# erros de parse como 500)
VALIDATE_ON_CREATE = _env_flag("VALIDATE_ON_CREATE")
STRICT_INPUT_ERRORS = _env_flag("STRICT_INPUT_ERRORS")

# CORS
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "ALLOWED_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173"
    ).split(",")
    if origin.strip()
]
