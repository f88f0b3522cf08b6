# mottu_api/main.py

import argparse
import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from authentication.api.routes import router as auth_router
from cadastro.api.routes_funcionarios import router as funcionarios_router
from cadastro.api.routes_gerentes import router as gerentes_router
from cadastro.api.routes_patios import router as patios_router
from mottu_api.config import get_settings, verificar_configuracao
from mottu_api.logging_factory import configurar_logging
from previsao.api.routes import router as previsao_router
from previsao.application.previsao_service import PatioPrevisaoService

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    configurar_logging(settings.LOG_LEVEL)

    # falha antes de aceitar tráfego se a chave JWT não estiver configurada
    verificar_configuracao(settings)

    # treino único, antes de qualquer previsão
    app.state.previsao_service = PatioPrevisaoService()
    logger.info(f"🚀 Mottu API pronta (AMBIENTE={settings.AMBIENTE})")
    yield


def criar_app() -> FastAPI:
    app = FastAPI(
        title="API Mottu - Gestão de Funcionários e Pátios",
        description="API para cadastro e login de funcionários, gestão de pátios e gerentes e previsão de ocupação.",
        version="1.0.0",
        docs_url="/swagger",
        redoc_url="/redoc",
        lifespan=lifespan,
        swagger_ui_parameters={"persistAuthorization": True},
    )

    app.include_router(auth_router, prefix=API_PREFIX)
    app.include_router(patios_router, prefix=API_PREFIX)
    app.include_router(funcionarios_router, prefix=API_PREFIX)
    app.include_router(gerentes_router, prefix=API_PREFIX)
    app.include_router(previsao_router, prefix=API_PREFIX)

    @app.get("/health", tags=["Health"])
    def healthcheck():
        return {"status": "ok", "service": "mottu_api"}

    return app


app = criar_app()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Mottu API")
    parser.add_argument("--host", type=str, default="0.0.0.0", help="Host para servir API")
    parser.add_argument("--port", type=int, default=int(os.getenv("SERVICE_PORT", 8000)), help="Porta do serviço")
    parser.add_argument("--reload", action="store_true", help="Ativar reload automático (dev only)")
    args = parser.parse_args()

    uvicorn.run(
        "mottu_api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )
