# mottu_api/seed_data.py

import argparse
import sys

from authentication.utils.password_utils import gerar_hash_senha
from mottu_api.database_connection import conectar_banco, fechar_conexao
from mottu_api.logging_factory import get_logger
from mottu_api.schema import criar_tabelas

logger = get_logger("seed_data")

SENHA_PADRAO = "123456"

PATIOS = [
    ("Pátio Central", "Rua das Flores, 123 - Centro"),
    ("Pátio Norte", "Av. Norte, 456 - Zona Norte"),
    ("Pátio Sul", "Rua Sul, 789 - Zona Sul"),
]

# (nome, email, índice do pátio)
FUNCIONARIOS = [
    ("João Silva", "joao.silva@mottu.com", 0),
    ("Maria Santos", "maria.santos@mottu.com", 1),
    ("Pedro Costa", "pedro.costa@mottu.com", 2),
]

# (índice do funcionário, índice do pátio)
GERENTES = [(0, 0), (1, 1)]


def popular(conn) -> bool:
    """Insere os dados iniciais. Retorna False se o banco já tinha pátios."""
    with conn.cursor() as cur:
        cur.execute("SELECT 1 FROM patios LIMIT 1")
        if cur.fetchone():
            logger.info("ℹ️ Banco já populado, nada a fazer.")
            return False

    try:
        with conn.cursor() as cur:
            patio_ids = []
            for nome, endereco in PATIOS:
                cur.execute(
                    "INSERT INTO patios (nome, endereco) VALUES (%s, %s) RETURNING id",
                    (nome, endereco),
                )
                patio_ids.append(cur.fetchone()[0])

            senha_hash = gerar_hash_senha(SENHA_PADRAO)
            funcionario_ids = []
            for nome, email, idx_patio in FUNCIONARIOS:
                cur.execute(
                    """
                    INSERT INTO funcionarios (nome, email, senha, patio_id)
                    VALUES (%s, %s, %s, %s)
                    RETURNING id
                    """,
                    (nome, email, senha_hash, patio_ids[idx_patio]),
                )
                funcionario_ids.append(cur.fetchone()[0])

            for idx_funcionario, idx_patio in GERENTES:
                cur.execute(
                    "INSERT INTO gerentes (funcionario_id, patio_id) VALUES (%s, %s)",
                    (funcionario_ids[idx_funcionario], patio_ids[idx_patio]),
                )
        conn.commit()
    except Exception:
        conn.rollback()
        raise

    logger.info(
        f"✅ Seed concluído: {len(PATIOS)} pátios, {len(FUNCIONARIOS)} funcionários, {len(GERENTES)} gerentes"
    )
    return True


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Cria as tabelas e popula dados iniciais")
    parser.add_argument("--apenas-schema", action="store_true", help="Só cria as tabelas")
    args = parser.parse_args(argv)

    conn = conectar_banco()
    if conn is None:
        return 1
    try:
        criar_tabelas(conn)
        if not args.apenas_schema:
            popular(conn)
    finally:
        fechar_conexao(conn)
    return 0


if __name__ == "__main__":
    sys.exit(main())
