# authentication/utils/dependencies.py

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from authentication.domain.entities import UsuarioToken
from authentication.domain.exceptions import TokenInvalido
from authentication.infrastructure.token_service import verificar_token

# Instância global de HTTPBearer para uso em toda a aplicação
bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme)
) -> UsuarioToken:
    """
    Valida o token JWT e retorna o funcionário autenticado.
    Levanta HTTP 401 se o token estiver ausente, inválido ou expirado.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token ausente",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = verificar_token(credentials.credentials)
    except TokenInvalido as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )

    return UsuarioToken(
        funcionario_id=payload["funcionario_id"],
        nome=payload["nome"],
        email=payload["email"],
    )
