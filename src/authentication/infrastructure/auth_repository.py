# authentication/infrastructure/auth_repository.py

from typing import Optional

from authentication.domain.entities import CredencialFuncionario


class AuthRepository:
    def __init__(self, conn):
        if conn is None:
            raise ValueError("❌ Conexão com o banco de dados falhou e é None.")
        self.conn = conn

    def buscar_credencial_por_email(self, email: str) -> Optional[CredencialFuncionario]:
        query = """
        SELECT id, nome, email, senha, patio_id
        FROM funcionarios
        WHERE email = %s
        LIMIT 1
        """
        with self.conn.cursor() as cur:
            cur.execute(query, (email,))
            row = cur.fetchone()
            if not row:
                return None
            return CredencialFuncionario(*row)
