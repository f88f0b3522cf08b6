# mottu_api/schema.py

import logging

logger = logging.getLogger(__name__)

DDL = [
    """
    CREATE TABLE IF NOT EXISTS patios (
        id SERIAL PRIMARY KEY,
        nome VARCHAR(100) NOT NULL,
        endereco VARCHAR(200) NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS funcionarios (
        id SERIAL PRIMARY KEY,
        nome VARCHAR(100) NOT NULL,
        email VARCHAR(100) NOT NULL UNIQUE,
        senha VARCHAR(256) NOT NULL,
        patio_id INTEGER NOT NULL REFERENCES patios (id) ON DELETE CASCADE
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS gerentes (
        id SERIAL PRIMARY KEY,
        funcionario_id INTEGER NOT NULL UNIQUE REFERENCES funcionarios (id) ON DELETE CASCADE,
        patio_id INTEGER NOT NULL UNIQUE REFERENCES patios (id) ON DELETE RESTRICT
    )
    """,
]


def criar_tabelas(conn) -> None:
    with conn.cursor() as cur:
        for comando in DDL:
            cur.execute(comando)
    conn.commit()
    logger.info("🗄️ Tabelas patios/funcionarios/gerentes verificadas.")
