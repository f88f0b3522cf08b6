from datetime import timedelta

import jwt
import pytest

from authentication.domain.entities import PerfilFuncionario
from authentication.domain.exceptions import TokenInvalido
from authentication.infrastructure.token_service import gerar_token, verificar_token
from mottu_api.config import Settings, get_settings, obter_chave_jwt

PERFIL = PerfilFuncionario(id=7, nome="João Silva", email="joao.silva@mottu.com")


def test_token_contem_claims_do_funcionario():
    payload = verificar_token(gerar_token(PERFIL))

    assert payload["sub"] == "joao.silva@mottu.com"
    assert payload["email"] == "joao.silva@mottu.com"
    assert payload["nome"] == "João Silva"
    assert payload["funcionario_id"] == 7
    assert payload["jti"]


def test_token_expira_em_8_horas():
    payload = verificar_token(gerar_token(PERFIL))
    assert payload["exp"] - payload["iat"] == int(timedelta(hours=8).total_seconds())


def test_cada_token_tem_jti_unico():
    a = verificar_token(gerar_token(PERFIL))
    b = verificar_token(gerar_token(PERFIL))
    assert a["jti"] != b["jti"]


def test_token_assinado_com_hmac_da_chave_compartilhada():
    token = gerar_token(PERFIL)
    settings = get_settings()
    payload = jwt.decode(
        token,
        obter_chave_jwt(settings),
        algorithms=["HS256"],
        audience=settings.JWT_AUDIENCE,
        issuer=settings.JWT_ISSUER,
    )
    assert payload["funcionario_id"] == 7


def test_token_expirado_e_rejeitado():
    settings = Settings(JWT_SECRET_KEY="chave-de-teste-mottu-api-0123456789abcdef", JWT_EXPIRACAO_HORAS=-1)
    token = gerar_token(PERFIL, settings)
    with pytest.raises(TokenInvalido, match="expirado"):
        verificar_token(token, settings)


def test_token_com_outra_chave_e_rejeitado():
    outra = Settings(JWT_SECRET_KEY="outra-chave-completamente-diferente-0123456789")
    token = gerar_token(PERFIL, outra)
    with pytest.raises(TokenInvalido):
        verificar_token(token)


def test_token_malformado_e_rejeitado():
    with pytest.raises(TokenInvalido):
        verificar_token("isto-nao-e-um-jwt")
