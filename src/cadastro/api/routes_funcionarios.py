# cadastro/api/routes_funcionarios.py

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from authentication.domain.exceptions import SenhaInvalida
from authentication.utils.password_utils import gerar_hash_senha
from cadastro.api.dependencies import get_funcionario_repository
from cadastro.api.paginacao import ParametrosPaginacao
from cadastro.api.routes_patios import patio_para_response
from cadastro.api.schemas import (
    FuncionarioCreateRequest,
    FuncionarioResponse,
    FuncionarioUpdateRequest,
    PaginaResponse,
)
from cadastro.domain.entities import Funcionario
from cadastro.domain.exceptions import ConflitoDeIntegridade, RegistroNaoEncontrado
from cadastro.infrastructure.funcionario_repository import FuncionarioRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/funcionarios", tags=["Funcionários"])


def funcionario_para_response(funcionario: Funcionario) -> FuncionarioResponse:
    # o hash da senha nunca sai na resposta
    return FuncionarioResponse(
        id=funcionario.id,
        nome=funcionario.nome,
        email=funcionario.email,
        patio_id=funcionario.patio_id,
        patio=patio_para_response(funcionario.patio) if funcionario.patio else None,
    )


def _hash_ou_422(senha: str) -> str:
    try:
        return gerar_hash_senha(senha)
    except SenhaInvalida as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("", response_model=PaginaResponse[FuncionarioResponse], summary="Listar funcionários")
def listar_funcionarios(
    paginacao: ParametrosPaginacao = Depends(),
    repo: FuncionarioRepository = Depends(get_funcionario_repository),
):
    funcionarios, total = repo.listar(paginacao.offset, paginacao.tamanho)
    return PaginaResponse[FuncionarioResponse](
        data=[funcionario_para_response(f) for f in funcionarios],
        paginacao=paginacao.montar(total),
    )


@router.get("/{funcionario_id}", response_model=FuncionarioResponse, summary="Obter funcionário")
def obter_funcionario(
    funcionario_id: int,
    repo: FuncionarioRepository = Depends(get_funcionario_repository),
):
    funcionario = repo.buscar_por_id(funcionario_id)
    if funcionario is None:
        raise HTTPException(status_code=404, detail="Employee not found")
    return funcionario_para_response(funcionario)


@router.post("", response_model=FuncionarioResponse, status_code=201, summary="Cadastrar funcionário")
def criar_funcionario(
    request: FuncionarioCreateRequest,
    repo: FuncionarioRepository = Depends(get_funcionario_repository),
):
    novo = Funcionario(
        id=None,
        nome=request.nome,
        email=request.email,
        senha_hash=_hash_ou_422(request.senha),
        patio_id=request.patio_id,
    )
    try:
        criado = repo.criar(novo)
    except ConflitoDeIntegridade:
        raise HTTPException(status_code=409, detail="Email already registered or yard does not exist")

    funcionario = repo.buscar_por_id(criado.id) or criado
    logger.info(f"👤 Funcionário criado: id={criado.id}")
    return funcionario_para_response(funcionario)


@router.put("/{funcionario_id}", status_code=204, summary="Atualizar funcionário")
def atualizar_funcionario(
    funcionario_id: int,
    request: FuncionarioUpdateRequest,
    repo: FuncionarioRepository = Depends(get_funcionario_repository),
):
    if request.id is not None and request.id != funcionario_id:
        raise HTTPException(status_code=400, detail="Body id does not match path id")

    atual = repo.buscar_por_id(funcionario_id)
    if atual is None:
        raise HTTPException(status_code=404, detail="Employee not found")

    senha_hash = _hash_ou_422(request.senha) if request.senha else atual.senha_hash
    try:
        repo.atualizar(Funcionario(
            id=funcionario_id,
            nome=request.nome,
            email=request.email,
            senha_hash=senha_hash,
            patio_id=request.patio_id,
        ))
    except RegistroNaoEncontrado:
        raise HTTPException(status_code=404, detail="Employee not found")
    except ConflitoDeIntegridade:
        raise HTTPException(status_code=409, detail="Email already registered or yard does not exist")
    return Response(status_code=204)


@router.delete("/{funcionario_id}", status_code=204, summary="Remover funcionário")
def remover_funcionario(
    funcionario_id: int,
    repo: FuncionarioRepository = Depends(get_funcionario_repository),
):
    try:
        repo.remover(funcionario_id)
    except RegistroNaoEncontrado:
        raise HTTPException(status_code=404, detail="Employee not found")
    logger.info(f"🗑️ Funcionário removido: id={funcionario_id}")
    return Response(status_code=204)
