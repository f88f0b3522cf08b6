# authentication/infrastructure/token_service.py
import uuid
from datetime import datetime, timedelta, timezone

import jwt

from authentication.domain.entities import PerfilFuncionario
from authentication.domain.exceptions import TokenInvalido
from mottu_api.config import Settings, get_settings, obter_chave_jwt


def gerar_token(perfil: PerfilFuncionario, settings: Settings | None = None) -> str:
    settings = settings or get_settings()
    agora = datetime.now(timezone.utc)
    payload = {
        "sub": perfil.email,
        "jti": str(uuid.uuid4()),
        "funcionario_id": perfil.id,
        "nome": perfil.nome,
        "email": perfil.email,
        "iat": agora,
        "exp": agora + timedelta(hours=settings.JWT_EXPIRACAO_HORAS),
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
    }
    return jwt.encode(payload, obter_chave_jwt(settings), algorithm=settings.JWT_ALGORITHM)


def verificar_token(token: str, settings: Settings | None = None) -> dict:
    settings = settings or get_settings()
    try:
        return jwt.decode(
            token,
            obter_chave_jwt(settings),
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
        )
    except jwt.ExpiredSignatureError as e:
        raise TokenInvalido("Token expirado") from e
    except jwt.InvalidTokenError as e:
        raise TokenInvalido("Token inválido") from e
