# cadastro/api/dependencies.py

from fastapi import Depends

from cadastro.infrastructure.funcionario_repository import FuncionarioRepository
from cadastro.infrastructure.gerente_repository import GerenteRepository
from cadastro.infrastructure.patio_repository import PatioRepository
from mottu_api.database_connection import obter_conexao


def get_patio_repository(conn=Depends(obter_conexao)) -> PatioRepository:
    return PatioRepository(conn)


def get_funcionario_repository(conn=Depends(obter_conexao)) -> FuncionarioRepository:
    return FuncionarioRepository(conn)


def get_gerente_repository(conn=Depends(obter_conexao)) -> GerenteRepository:
    return GerenteRepository(conn)
