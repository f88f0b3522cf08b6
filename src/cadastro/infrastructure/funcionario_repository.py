# cadastro/infrastructure/funcionario_repository.py

from typing import List, Optional, Tuple

from cadastro.domain.entities import Funcionario, Patio
from cadastro.domain.exceptions import RegistroNaoEncontrado
from cadastro.infrastructure.base_repository import BaseRepository

SELECT_COM_PATIO = """
SELECT f.id, f.nome, f.email, f.senha, f.patio_id,
       p.id, p.nome, p.endereco
FROM funcionarios f
JOIN patios p ON p.id = f.patio_id
"""


def _from_row(row) -> Funcionario:
    return Funcionario(*row[:5], patio=Patio(*row[5:8]))


class FuncionarioRepository(BaseRepository):

    def listar(self, offset: int, limite: int) -> Tuple[List[Funcionario], int]:
        with self.conn.cursor() as cur:
            cur.execute(
                f"{SELECT_COM_PATIO} ORDER BY f.id LIMIT %s OFFSET %s",
                (limite, offset),
            )
            funcionarios = [_from_row(row) for row in cur.fetchall()]
        return funcionarios, self._contar("funcionarios")

    def buscar_por_id(self, funcionario_id: int) -> Optional[Funcionario]:
        with self.conn.cursor() as cur:
            cur.execute(f"{SELECT_COM_PATIO} WHERE f.id = %s", (funcionario_id,))
            row = cur.fetchone()
            return _from_row(row) if row else None

    def criar(self, funcionario: Funcionario) -> Funcionario:
        with self.transacao() as cur:
            cur.execute(
                """
                INSERT INTO funcionarios (nome, email, senha, patio_id)
                VALUES (%s, %s, %s, %s)
                RETURNING id
                """,
                (funcionario.nome, funcionario.email, funcionario.senha_hash, funcionario.patio_id),
            )
            funcionario.id = cur.fetchone()[0]
        return funcionario

    def atualizar(self, funcionario: Funcionario) -> None:
        with self.transacao() as cur:
            cur.execute(
                """
                UPDATE funcionarios
                SET nome = %s, email = %s, senha = %s, patio_id = %s
                WHERE id = %s
                """,
                (funcionario.nome, funcionario.email, funcionario.senha_hash,
                 funcionario.patio_id, funcionario.id),
            )
            if cur.rowcount == 0:
                raise RegistroNaoEncontrado(f"Funcionario {funcionario.id} not found")

    def remover(self, funcionario_id: int) -> None:
        with self.transacao() as cur:
            cur.execute("DELETE FROM funcionarios WHERE id = %s", (funcionario_id,))
            if cur.rowcount == 0:
                raise RegistroNaoEncontrado(f"Funcionario {funcionario_id} not found")
