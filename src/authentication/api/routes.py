# authentication/api/routes.py

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from authentication.application.auth_service import AuthService
from authentication.domain.entities import UsuarioToken
from authentication.domain.exceptions import CredenciaisInvalidas
from authentication.infrastructure.auth_repository import AuthRepository
from authentication.utils.dependencies import get_current_user
from mottu_api.database_connection import obter_conexao

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


# --------
# Models
# --------
class LoginRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(..., min_length=1)
    senha: str = Field(..., alias="password", min_length=1)


class PerfilResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    nome: str = Field(..., alias="name")
    email: str


class LoginResponse(BaseModel):
    token: str
    perfil: PerfilResponse = Field(..., alias="profile")

    model_config = ConfigDict(populate_by_name=True)


def get_auth_service(conn=Depends(obter_conexao)) -> AuthService:
    return AuthService(AuthRepository(conn))


# --------
# Endpoints
# --------
@router.post("/login", response_model=LoginResponse, summary="Realizar login e obter token JWT")
def login(request: LoginRequest, service: AuthService = Depends(get_auth_service)):
    try:
        resultado = service.login(request.email, request.senha)
    except CredenciaisInvalidas as e:
        raise HTTPException(status_code=401, detail=str(e))

    return LoginResponse(
        token=resultado.token,
        perfil=PerfilResponse(
            id=resultado.perfil.id,
            nome=resultado.perfil.nome,
            email=resultado.perfil.email,
        ),
    )


@router.get("/me", summary="Obter informações do funcionário autenticado")
def me(user: UsuarioToken = Depends(get_current_user)):
    return {"id": user.funcionario_id, "name": user.nome, "email": user.email}
