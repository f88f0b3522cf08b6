# mottu_api/database_connection.py

import logging

import psycopg2

from mottu_api.config import get_settings

logger = logging.getLogger(__name__)


def conectar_banco():
    settings = get_settings()
    try:
        conn = psycopg2.connect(
            dbname=settings.DB_DATABASE,
            user=settings.DB_USER,
            password=settings.DB_PASS,
            host=settings.DB_HOST,
            port=settings.DB_PORT,
        )
        logger.info("✅ Conexão com o banco de dados estabelecida com sucesso.")
        return conn
    except psycopg2.Error as e:
        logger.error(f"❌ Erro ao conectar ao banco de dados: {e}")
        return None


def fechar_conexao(conn):
    if conn:
        conn.close()


def obter_conexao():
    """Dependency do FastAPI: abre uma conexão por requisição e fecha no fim."""
    conn = conectar_banco()
    try:
        yield conn
    finally:
        fechar_conexao(conn)
