# previsao/application/previsao_service.py

import logging
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd
from sklearn.linear_model import Ridge
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import StandardScaler

from previsao.domain.entities import AmostraTreino, PrevisaoOcupacao
from previsao.domain.exceptions import ModeloNaoTreinado, PrevisaoIndisponivel
from previsao.domain.regras import aplicar_piso, determinar_periodo, gerar_recomendacao
from previsao.infrastructure.dados_treinamento import carregar_amostras

FEATURES = ["dia_da_semana", "hora", "mes_do_ano"]
TARGET = "numero_funcionarios"


class PatioPrevisaoService:
    """
    Previsão de ocupação (funcionários necessários) de um pátio.

    O modelo é treinado uma única vez no construtor e depois só é lido,
    então a mesma instância pode atender requisições concorrentes.
    """

    def __init__(self, amostras: Optional[List[AmostraTreino]] = None, logger=None):
        self.logger = logger or logging.getLogger(__name__)
        self.amostras = list(amostras) if amostras is not None else carregar_amostras()
        self._modelo: Optional[Pipeline] = None
        self._treinar_modelo()

    def _treinar_modelo(self) -> None:
        if not self.amostras:
            raise ValueError("Nenhuma amostra de treino informada")

        df = pd.DataFrame([vars(a) for a in self.amostras])
        X = df[FEATURES].astype(float)
        y = df[TARGET].astype(float)

        modelo = Pipeline([
            ("scaler", StandardScaler()),
            ("regressor", Ridge(alpha=1.0)),
        ])
        modelo.fit(X, y)

        regressor = modelo.named_steps["regressor"]
        self.logger.info(
            f"🧠 Modelo treinado com {len(df)} amostras | "
            f"coef={dict(zip(FEATURES, regressor.coef_.round(4)))} | intercept={regressor.intercept_:.4f}"
        )
        self._modelo = modelo

    def prever_ocupacao(self, dia_da_semana: int, hora: int, mes_do_ano: int) -> PrevisaoOcupacao:
        """
        Faixas (dia 0-6, hora 0-23, mês 1-12) já devem vir validadas pela camada HTTP.
        """
        if self._modelo is None:
            raise ModeloNaoTreinado("Modelo não treinado")

        X = pd.DataFrame([[dia_da_semana, hora, mes_do_ano]], columns=FEATURES, dtype=float)
        score = float(np.asarray(self._modelo.predict(X), dtype=float)[0])

        if not np.isfinite(score):
            self.logger.error(f"🚨 Score inválido ({score}) para dia={dia_da_semana} hora={hora} mes={mes_do_ano}")
            raise PrevisaoIndisponivel("Previsão indisponível: o modelo retornou um valor inválido")

        numero_funcionarios = aplicar_piso(int(round(score)))

        self.logger.info(
            f"📌 Previsão | dia={dia_da_semana} hora={hora} mes={mes_do_ano} "
            f"| score={score:.2f} | funcionarios={numero_funcionarios}"
        )

        return PrevisaoOcupacao(
            numero_funcionarios_previsto=numero_funcionarios,
            periodo=determinar_periodo(hora),
            recomendacao=gerar_recomendacao(numero_funcionarios, dia_da_semana),
        )

    def info_modelo(self) -> Dict[str, Any]:
        return {
            "name": "Yard occupancy prediction model",
            "version": "1.0",
            "algorithm": "Ridge regression (L2-regularized least squares)",
            "framework": "scikit-learn",
            "description": (
                "Regression model that predicts how many employees a yard needs "
                "for a given day of week, hour and month"
            ),
            "parameters": {
                "dayOfWeek": "0-6 (Sunday-Saturday)",
                "hour": "0-23",
                "month": "1-12",
            },
            "trainingSamples": len(self.amostras),
        }
