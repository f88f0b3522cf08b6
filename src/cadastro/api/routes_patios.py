# cadastro/api/routes_patios.py

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from cadastro.api.dependencies import get_patio_repository
from cadastro.api.paginacao import ParametrosPaginacao
from cadastro.api.schemas import PaginaResponse, PatioRequest, PatioResponse
from cadastro.domain.entities import Patio
from cadastro.domain.exceptions import ConflitoDeIntegridade, RegistroNaoEncontrado
from cadastro.infrastructure.patio_repository import PatioRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/patios", tags=["Pátios"])


def patio_para_response(patio: Patio) -> PatioResponse:
    return PatioResponse(id=patio.id, nome=patio.nome, endereco=patio.endereco)


@router.get("", response_model=PaginaResponse[PatioResponse], summary="Listar pátios")
def listar_patios(
    paginacao: ParametrosPaginacao = Depends(),
    repo: PatioRepository = Depends(get_patio_repository),
):
    patios, total = repo.listar(paginacao.offset, paginacao.tamanho)
    return PaginaResponse[PatioResponse](
        data=[patio_para_response(p) for p in patios],
        paginacao=paginacao.montar(total),
    )


@router.get("/{patio_id}", response_model=PatioResponse, summary="Obter pátio")
def obter_patio(patio_id: int, repo: PatioRepository = Depends(get_patio_repository)):
    patio = repo.buscar_por_id(patio_id)
    if patio is None:
        raise HTTPException(status_code=404, detail="Yard not found")
    return patio_para_response(patio)


@router.post("", response_model=PatioResponse, status_code=201, summary="Criar pátio")
def criar_patio(request: PatioRequest, repo: PatioRepository = Depends(get_patio_repository)):
    patio = repo.criar(Patio(id=None, nome=request.nome, endereco=request.endereco))
    logger.info(f"🏗️ Pátio criado: id={patio.id}")
    return patio_para_response(patio)


@router.put("/{patio_id}", status_code=204, summary="Atualizar pátio")
def atualizar_patio(
    patio_id: int,
    request: PatioRequest,
    repo: PatioRepository = Depends(get_patio_repository),
):
    if request.id is not None and request.id != patio_id:
        raise HTTPException(status_code=400, detail="Body id does not match path id")

    try:
        repo.atualizar(Patio(id=patio_id, nome=request.nome, endereco=request.endereco))
    except RegistroNaoEncontrado:
        raise HTTPException(status_code=404, detail="Yard not found")
    return Response(status_code=204)


@router.delete("/{patio_id}", status_code=204, summary="Remover pátio")
def remover_patio(patio_id: int, repo: PatioRepository = Depends(get_patio_repository)):
    try:
        repo.remover(patio_id)
    except RegistroNaoEncontrado:
        raise HTTPException(status_code=404, detail="Yard not found")
    except ConflitoDeIntegridade:
        raise HTTPException(status_code=409, detail="Yard still has a manager assigned")
    logger.info(f"🗑️ Pátio removido: id={patio_id}")
    return Response(status_code=204)
