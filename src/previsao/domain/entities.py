#previsao/domain/entities.py

from dataclasses import dataclass


@dataclass(frozen=True)
class AmostraTreino:
    dia_da_semana: int  # 0-6 (Domingo-Sábado)
    hora: int  # 0-23
    mes_do_ano: int  # 1-12
    numero_funcionarios: int


@dataclass(frozen=True)
class PrevisaoOcupacao:
    numero_funcionarios_previsto: int
    periodo: str
    recomendacao: str
