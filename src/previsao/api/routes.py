# previsao/api/routes.py

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from authentication.utils.dependencies import get_current_user
from previsao.api.schemas import PrevisaoOcupacaoRequest, PrevisaoOcupacaoResponse
from previsao.application.previsao_service import PatioPrevisaoService
from previsao.domain.exceptions import PrevisaoIndisponivel

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/previsao", tags=["Previsão"])


def get_previsao_service(request: Request) -> PatioPrevisaoService:
    # criado uma única vez no lifespan da aplicação
    return request.app.state.previsao_service


def validar_faixas(request: PrevisaoOcupacaoRequest) -> None:
    if not 0 <= request.dia_da_semana <= 6:
        raise HTTPException(status_code=400, detail="dayOfWeek must be between 0 (Sunday) and 6 (Saturday)")
    if not 0 <= request.hora <= 23:
        raise HTTPException(status_code=400, detail="hour must be between 0 and 23")
    if not 1 <= request.mes_do_ano <= 12:
        raise HTTPException(status_code=400, detail="month must be between 1 and 12")


@router.post(
    "/ocupacao-patio",
    response_model=PrevisaoOcupacaoResponse,
    summary="Prever quantos funcionários o pátio precisa",
    dependencies=[Depends(get_current_user)],
)
def prever_ocupacao_patio(
    request: PrevisaoOcupacaoRequest,
    service: PatioPrevisaoService = Depends(get_previsao_service),
):
    validar_faixas(request)

    try:
        previsao = service.prever_ocupacao(request.dia_da_semana, request.hora, request.mes_do_ano)
    except PrevisaoIndisponivel as e:
        raise HTTPException(status_code=503, detail=str(e))

    return PrevisaoOcupacaoResponse(
        numero_funcionarios_previsto=previsao.numero_funcionarios_previsto,
        periodo=previsao.periodo,
        recomendacao=previsao.recomendacao,
    )


@router.get("/info", summary="Informações sobre o modelo de previsão")
def info_modelo(service: PatioPrevisaoService = Depends(get_previsao_service)):
    return service.info_modelo()
