# mottu_api/config.py

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Carrega o .env da raiz do projeto (se existir)
dotenv_path = Path(__file__).resolve().parents[2] / ".env"
load_dotenv(dotenv_path=dotenv_path)

logger = logging.getLogger(__name__)

# Chave conhecida, aceita apenas em desenvolvimento/teste
CHAVE_JWT_PADRAO = "MottuApiSecretKeyForDevelopment12345678!@#$%"
AMBIENTES_COM_FALLBACK = ("desenvolvimento", "teste")


class ConfiguracaoInvalida(RuntimeError):
    pass


class Settings(BaseSettings):
    AMBIENTE: Literal["desenvolvimento", "teste", "producao"] = "desenvolvimento"

    DB_HOST: str = "localhost"
    DB_PORT: str = "5432"
    DB_DATABASE: str = "mottu_db"
    DB_USER: str = "postgres"
    DB_PASS: str = "postgres"

    JWT_SECRET_KEY: str | None = None
    JWT_ALGORITHM: str = "HS256"
    JWT_ISSUER: str = "MottuApi"
    JWT_AUDIENCE: str = "MottuApiUsers"
    JWT_EXPIRACAO_HORAS: int = 8

    # 'sha256' mantém compatibilidade com os hashes já gravados
    SENHA_ALGORITMO: Literal["sha256", "bcrypt"] = "sha256"

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()


def obter_chave_jwt(settings: Settings | None = None) -> str:
    """
    Retorna a chave de assinatura dos tokens.
    Sem JWT_SECRET_KEY configurada, só usa a chave padrão em
    desenvolvimento/teste; nos demais ambientes falha na hora.
    """
    settings = settings or get_settings()
    if settings.JWT_SECRET_KEY:
        return settings.JWT_SECRET_KEY

    if settings.AMBIENTE in AMBIENTES_COM_FALLBACK:
        return CHAVE_JWT_PADRAO

    raise ConfiguracaoInvalida(
        f"JWT_SECRET_KEY é obrigatória no ambiente '{settings.AMBIENTE}'"
    )


def verificar_configuracao(settings: Settings | None = None) -> None:
    """Checagem de inicialização: avisa uma vez sobre a chave padrão ou levanta ConfiguracaoInvalida."""
    settings = settings or get_settings()
    obter_chave_jwt(settings)
    if not settings.JWT_SECRET_KEY:
        logger.warning(
            f"⚠️ JWT_SECRET_KEY ausente, usando chave padrão conhecida (AMBIENTE={settings.AMBIENTE})"
        )
