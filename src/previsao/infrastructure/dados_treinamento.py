#previsao/infrastructure/dados_treinamento.py

from typing import List

from previsao.domain.entities import AmostraTreino

# (dia_da_semana, hora, mes_do_ano, numero_funcionarios)
_OCUPACAO_HISTORICA = [
    # Segunda-feira
    (1, 8, 1, 25), (1, 12, 1, 40), (1, 18, 1, 30),
    # Terça-feira
    (2, 8, 1, 28), (2, 12, 1, 42), (2, 18, 1, 32),
    # Quarta-feira
    (3, 8, 1, 30), (3, 12, 1, 45), (3, 18, 1, 35),
    # Quinta-feira
    (4, 8, 1, 27), (4, 12, 1, 43), (4, 18, 1, 33),
    # Sexta-feira
    (5, 8, 1, 32), (5, 12, 1, 48), (5, 18, 1, 38),
    # Sábado
    (6, 8, 1, 15), (6, 12, 1, 25), (6, 18, 1, 18),
    # Domingo
    (0, 8, 1, 10), (0, 12, 1, 15), (0, 18, 1, 12),
]


def carregar_amostras() -> List[AmostraTreino]:
    return [AmostraTreino(*linha) for linha in _OCUPACAO_HISTORICA]
