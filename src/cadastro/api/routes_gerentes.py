# cadastro/api/routes_gerentes.py

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from cadastro.api.dependencies import get_gerente_repository
from cadastro.api.paginacao import ParametrosPaginacao
from cadastro.api.routes_funcionarios import funcionario_para_response
from cadastro.api.routes_patios import patio_para_response
from cadastro.api.schemas import GerenteRequest, GerenteResponse, PaginaResponse
from cadastro.domain.entities import Gerente
from cadastro.domain.exceptions import ConflitoDeIntegridade, RegistroNaoEncontrado
from cadastro.infrastructure.gerente_repository import GerenteRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/gerentes", tags=["Gerentes"])

DETALHE_CONFLITO = "Employee or yard already has a manager, or does not exist"


def _to_response(gerente: Gerente) -> GerenteResponse:
    return GerenteResponse(
        id=gerente.id,
        funcionario_id=gerente.funcionario_id,
        patio_id=gerente.patio_id,
        funcionario=funcionario_para_response(gerente.funcionario) if gerente.funcionario else None,
        patio=patio_para_response(gerente.patio) if gerente.patio else None,
    )


@router.get("", response_model=PaginaResponse[GerenteResponse], summary="Listar gerentes")
def listar_gerentes(
    paginacao: ParametrosPaginacao = Depends(),
    repo: GerenteRepository = Depends(get_gerente_repository),
):
    gerentes, total = repo.listar(paginacao.offset, paginacao.tamanho)
    return PaginaResponse[GerenteResponse](
        data=[_to_response(g) for g in gerentes],
        paginacao=paginacao.montar(total),
    )


@router.get("/{gerente_id}", response_model=GerenteResponse, summary="Obter gerente")
def obter_gerente(gerente_id: int, repo: GerenteRepository = Depends(get_gerente_repository)):
    gerente = repo.buscar_por_id(gerente_id)
    if gerente is None:
        raise HTTPException(status_code=404, detail="Manager not found")
    return _to_response(gerente)


@router.post("", response_model=GerenteResponse, status_code=201, summary="Cadastrar gerente")
def criar_gerente(request: GerenteRequest, repo: GerenteRepository = Depends(get_gerente_repository)):
    try:
        criado = repo.criar(Gerente(id=None, funcionario_id=request.funcionario_id, patio_id=request.patio_id))
    except ConflitoDeIntegridade:
        raise HTTPException(status_code=409, detail=DETALHE_CONFLITO)
    logger.info(f"🧑‍💼 Gerente criado: id={criado.id}")
    return _to_response(repo.buscar_por_id(criado.id) or criado)


@router.put("/{gerente_id}", status_code=204, summary="Atualizar gerente")
def atualizar_gerente(
    gerente_id: int,
    request: GerenteRequest,
    repo: GerenteRepository = Depends(get_gerente_repository),
):
    if request.id is not None and request.id != gerente_id:
        raise HTTPException(status_code=400, detail="Body id does not match path id")

    try:
        repo.atualizar(Gerente(id=gerente_id, funcionario_id=request.funcionario_id, patio_id=request.patio_id))
    except RegistroNaoEncontrado:
        raise HTTPException(status_code=404, detail="Manager not found")
    except ConflitoDeIntegridade:
        raise HTTPException(status_code=409, detail=DETALHE_CONFLITO)
    return Response(status_code=204)


@router.delete("/{gerente_id}", status_code=204, summary="Remover gerente")
def remover_gerente(gerente_id: int, repo: GerenteRepository = Depends(get_gerente_repository)):
    try:
        repo.remover(gerente_id)
    except RegistroNaoEncontrado:
        raise HTTPException(status_code=404, detail="Manager not found")
    logger.info(f"🗑️ Gerente removido: id={gerente_id}")
    return Response(status_code=204)
