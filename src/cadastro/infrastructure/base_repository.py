# cadastro/infrastructure/base_repository.py

import logging
from contextlib import contextmanager

import psycopg2

from cadastro.domain.exceptions import ConflitoDeIntegridade

logger = logging.getLogger(__name__)


class BaseRepository:
    def __init__(self, conn):
        if conn is None:
            raise ValueError("❌ Conexão com o banco de dados falhou e é None.")
        self.conn = conn

    @contextmanager
    def transacao(self):
        """Cursor com commit no fim; rollback e ConflitoDeIntegridade em violação de constraint."""
        cur = self.conn.cursor()
        try:
            yield cur
            self.conn.commit()
        except psycopg2.IntegrityError as e:
            self.conn.rollback()
            logger.warning(f"⚠️ Violação de integridade: {e}")
            raise ConflitoDeIntegridade(str(e).strip()) from e
        except Exception:
            self.conn.rollback()
            raise
        finally:
            cur.close()

    def _contar(self, tabela: str) -> int:
        with self.conn.cursor() as cur:
            cur.execute(f"SELECT COUNT(*) FROM {tabela}")
            return cur.fetchone()[0]
