from unittest.mock import MagicMock

import psycopg2
import pytest

from authentication.infrastructure.auth_repository import AuthRepository
from cadastro.domain.entities import Funcionario, Patio
from cadastro.domain.exceptions import ConflitoDeIntegridade, RegistroNaoEncontrado
from cadastro.infrastructure.funcionario_repository import FuncionarioRepository
from cadastro.infrastructure.gerente_repository import GerenteRepository
from cadastro.infrastructure.patio_repository import PatioRepository


@pytest.fixture
def conn():
    conn = MagicMock()
    cursor = MagicMock()
    cursor.__enter__.return_value = cursor
    conn.cursor.return_value = cursor
    return conn


def test_repositorio_exige_conexao():
    with pytest.raises(ValueError):
        AuthRepository(None)
    with pytest.raises(ValueError):
        PatioRepository(None)


def test_busca_credencial_por_email_exato(conn):
    cursor = conn.cursor.return_value
    cursor.fetchone.return_value = (1, "João Silva", "joao.silva@mottu.com", "hash", 2)

    credencial = AuthRepository(conn).buscar_credencial_por_email("joao.silva@mottu.com")

    sql, params = cursor.execute.call_args[0]
    assert "WHERE email = %s" in sql
    assert params == ("joao.silva@mottu.com",)
    assert credencial.id == 1
    assert credencial.senha_hash == "hash"
    assert credencial.patio_id == 2


def test_credencial_inexistente(conn):
    conn.cursor.return_value.fetchone.return_value = None
    assert AuthRepository(conn).buscar_credencial_por_email("nope@mottu.com") is None


def test_criar_patio_retorna_id_e_faz_commit(conn):
    cursor = conn.cursor.return_value
    cursor.fetchone.return_value = (42,)

    patio = PatioRepository(conn).criar(Patio(None, "Pátio Sul", "Rua Sul, 789"))

    assert patio.id == 42
    assert cursor.execute.call_args[0][1] == ("Pátio Sul", "Rua Sul, 789")
    conn.commit.assert_called_once()
    cursor.close.assert_called_once()


def test_listar_patios_com_total(conn):
    cursor = conn.cursor.return_value
    cursor.fetchall.return_value = [(1, "A", "Rua A"), (2, "B", "Rua B")]
    cursor.fetchone.return_value = (5,)

    patios, total = PatioRepository(conn).listar(offset=10, limite=2)

    assert [p.nome for p in patios] == ["A", "B"]
    assert total == 5
    assert cursor.execute.call_args_list[0][0][1] == (2, 10)


def test_remover_inexistente_faz_rollback(conn):
    cursor = conn.cursor.return_value
    cursor.rowcount = 0

    with pytest.raises(RegistroNaoEncontrado):
        GerenteRepository(conn).remover(9)
    conn.rollback.assert_called_once()
    conn.commit.assert_not_called()


def test_violacao_de_integridade_vira_conflito(conn):
    cursor = conn.cursor.return_value
    cursor.execute.side_effect = psycopg2.IntegrityError("duplicate key value violates unique constraint")

    with pytest.raises(ConflitoDeIntegridade):
        FuncionarioRepository(conn).criar(Funcionario(None, "Maria", "maria@mottu.com", "hash", 1))
    conn.rollback.assert_called_once()


def test_atualizar_funcionario_grava_hash(conn):
    cursor = conn.cursor.return_value
    cursor.rowcount = 1

    FuncionarioRepository(conn).atualizar(Funcionario(3, "Pedro", "pedro@mottu.com", "novo-hash", 2))

    assert cursor.execute.call_args[0][1] == ("Pedro", "pedro@mottu.com", "novo-hash", 2, 3)
    conn.commit.assert_called_once()


def test_buscar_funcionario_traz_patio(conn):
    cursor = conn.cursor.return_value
    cursor.fetchone.return_value = (2, "Maria", "maria@mottu.com", "hash", 1, 1, "Pátio Central", "Rua A")

    funcionario = FuncionarioRepository(conn).buscar_por_id(2)

    sql = cursor.execute.call_args[0][0]
    assert "JOIN patios p ON p.id = f.patio_id" in sql
    assert funcionario.senha_hash == "hash"
    assert funcionario.patio == Patio(1, "Pátio Central", "Rua A")


def test_listar_gerentes_traz_funcionario_e_patio(conn):
    cursor = conn.cursor.return_value
    cursor.fetchall.return_value = [
        (1, 2, 1, 2, "Maria", "maria@mottu.com", "hash", 3, 1, "Pátio Central", "Rua A"),
    ]
    cursor.fetchone.return_value = (1,)

    gerentes, total = GerenteRepository(conn).listar(0, 10)

    assert total == 1
    gerente = gerentes[0]
    assert (gerente.id, gerente.funcionario_id, gerente.patio_id) == (1, 2, 1)
    assert gerente.funcionario == Funcionario(2, "Maria", "maria@mottu.com", "hash", 3)
    assert gerente.patio == Patio(1, "Pátio Central", "Rua A")
    sql = cursor.execute.call_args_list[0][0][0]
    assert "JOIN funcionarios f ON f.id = g.funcionario_id" in sql
    assert "JOIN patios p ON p.id = g.patio_id" in sql
