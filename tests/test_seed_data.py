from unittest.mock import MagicMock

from authentication.utils.password_utils import verificar_senha
from mottu_api.schema import DDL, criar_tabelas
from mottu_api.seed_data import FUNCIONARIOS, GERENTES, PATIOS, popular


def _conn(fetchone):
    conn = MagicMock()
    cursor = MagicMock()
    cursor.__enter__.return_value = cursor
    cursor.fetchone.side_effect = fetchone
    conn.cursor.return_value = cursor
    return conn, cursor


def test_popular_banco_vazio():
    ids = [(i,) for i in range(1, len(PATIOS) + len(FUNCIONARIOS) + 1)]
    conn, cursor = _conn([None] + ids)

    assert popular(conn) is True

    # 1 verificação + inserts de pátios, funcionários e gerentes
    assert cursor.execute.call_count == 1 + len(PATIOS) + len(FUNCIONARIOS) + len(GERENTES)
    conn.commit.assert_called_once()

    inserts_funcionarios = [c for c in cursor.execute.call_args_list if "INSERT INTO funcionarios" in c[0][0]]
    for chamada in inserts_funcionarios:
        senha_hash = chamada[0][1][2]
        assert verificar_senha("123456", senha_hash)


def test_popular_e_idempotente():
    conn, cursor = _conn([(1,)])

    assert popular(conn) is False
    assert cursor.execute.call_count == 1
    conn.commit.assert_not_called()


def test_criar_tabelas():
    conn, cursor = _conn([])
    criar_tabelas(conn)
    assert cursor.execute.call_count == len(DDL)
    conn.commit.assert_called_once()
