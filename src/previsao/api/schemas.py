# previsao/api/schemas.py
from pydantic import BaseModel, ConfigDict, Field


class PrevisaoOcupacaoRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    dia_da_semana: int = Field(..., alias="dayOfWeek", description="0-6 (Domingo-Sábado)")
    hora: int = Field(..., alias="hour", description="0-23")
    mes_do_ano: int = Field(..., alias="month", description="1-12")


class PrevisaoOcupacaoResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    numero_funcionarios_previsto: int = Field(..., alias="predictedHeadcount")
    periodo: str = Field(..., alias="period")
    recomendacao: str = Field(..., alias="recommendation")
