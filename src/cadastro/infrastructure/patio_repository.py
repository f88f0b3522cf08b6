# cadastro/infrastructure/patio_repository.py

from typing import List, Optional, Tuple

from cadastro.domain.entities import Patio
from cadastro.domain.exceptions import RegistroNaoEncontrado
from cadastro.infrastructure.base_repository import BaseRepository


class PatioRepository(BaseRepository):

    def listar(self, offset: int, limite: int) -> Tuple[List[Patio], int]:
        with self.conn.cursor() as cur:
            cur.execute(
                "SELECT id, nome, endereco FROM patios ORDER BY id LIMIT %s OFFSET %s",
                (limite, offset),
            )
            patios = [Patio(*row) for row in cur.fetchall()]
        return patios, self._contar("patios")

    def buscar_por_id(self, patio_id: int) -> Optional[Patio]:
        with self.conn.cursor() as cur:
            cur.execute("SELECT id, nome, endereco FROM patios WHERE id = %s", (patio_id,))
            row = cur.fetchone()
            return Patio(*row) if row else None

    def criar(self, patio: Patio) -> Patio:
        with self.transacao() as cur:
            cur.execute(
                "INSERT INTO patios (nome, endereco) VALUES (%s, %s) RETURNING id",
                (patio.nome, patio.endereco),
            )
            patio.id = cur.fetchone()[0]
        return patio

    def atualizar(self, patio: Patio) -> None:
        with self.transacao() as cur:
            cur.execute(
                "UPDATE patios SET nome = %s, endereco = %s WHERE id = %s",
                (patio.nome, patio.endereco, patio.id),
            )
            if cur.rowcount == 0:
                raise RegistroNaoEncontrado(f"Patio {patio.id} not found")

    def remover(self, patio_id: int) -> None:
        with self.transacao() as cur:
            cur.execute("DELETE FROM patios WHERE id = %s", (patio_id,))
            if cur.rowcount == 0:
                raise RegistroNaoEncontrado(f"Patio {patio_id} not found")
