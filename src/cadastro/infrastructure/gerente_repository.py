# cadastro/infrastructure/gerente_repository.py

from typing import List, Optional, Tuple

from cadastro.domain.entities import Funcionario, Gerente, Patio
from cadastro.domain.exceptions import RegistroNaoEncontrado
from cadastro.infrastructure.base_repository import BaseRepository

SELECT_COMPLETO = """
SELECT g.id, g.funcionario_id, g.patio_id,
       f.id, f.nome, f.email, f.senha, f.patio_id,
       p.id, p.nome, p.endereco
FROM gerentes g
JOIN funcionarios f ON f.id = g.funcionario_id
JOIN patios p ON p.id = g.patio_id
"""


def _from_row(row) -> Gerente:
    return Gerente(
        *row[:3],
        funcionario=Funcionario(*row[3:8]),
        patio=Patio(*row[8:11]),
    )


class GerenteRepository(BaseRepository):

    def listar(self, offset: int, limite: int) -> Tuple[List[Gerente], int]:
        with self.conn.cursor() as cur:
            cur.execute(
                f"{SELECT_COMPLETO} ORDER BY g.id LIMIT %s OFFSET %s",
                (limite, offset),
            )
            gerentes = [_from_row(row) for row in cur.fetchall()]
        return gerentes, self._contar("gerentes")

    def buscar_por_id(self, gerente_id: int) -> Optional[Gerente]:
        with self.conn.cursor() as cur:
            cur.execute(f"{SELECT_COMPLETO} WHERE g.id = %s", (gerente_id,))
            row = cur.fetchone()
            return _from_row(row) if row else None

    def criar(self, gerente: Gerente) -> Gerente:
        with self.transacao() as cur:
            cur.execute(
                "INSERT INTO gerentes (funcionario_id, patio_id) VALUES (%s, %s) RETURNING id",
                (gerente.funcionario_id, gerente.patio_id),
            )
            gerente.id = cur.fetchone()[0]
        return gerente

    def atualizar(self, gerente: Gerente) -> None:
        with self.transacao() as cur:
            cur.execute(
                "UPDATE gerentes SET funcionario_id = %s, patio_id = %s WHERE id = %s",
                (gerente.funcionario_id, gerente.patio_id, gerente.id),
            )
            if cur.rowcount == 0:
                raise RegistroNaoEncontrado(f"Gerente {gerente.id} not found")

    def remover(self, gerente_id: int) -> None:
        with self.transacao() as cur:
            cur.execute("DELETE FROM gerentes WHERE id = %s", (gerente_id,))
            if cur.rowcount == 0:
                raise RegistroNaoEncontrado(f"Gerente {gerente_id} not found")
