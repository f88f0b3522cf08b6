import pytest

from authentication.application.auth_service import AuthService
from authentication.domain.exceptions import MENSAGEM_CREDENCIAIS_INVALIDAS, CredenciaisInvalidas
from authentication.infrastructure.token_service import verificar_token


def test_login_com_credenciais_validas(auth_repo):
    resultado = AuthService(auth_repo).login("teste@mottu.com", "senha123")

    assert resultado.token
    assert resultado.perfil.id == 1
    assert resultado.perfil.email == "teste@mottu.com"
    assert verificar_token(resultado.token)["funcionario_id"] == 1


def test_login_com_senha_errada(auth_repo):
    with pytest.raises(CredenciaisInvalidas) as exc:
        AuthService(auth_repo).login("teste@mottu.com", "senhaerrada")
    assert str(exc.value) == "invalid email or password"


def test_login_com_email_desconhecido(auth_repo):
    with pytest.raises(CredenciaisInvalidas) as exc:
        AuthService(auth_repo).login("nope@mottu.com", "anything")
    assert str(exc.value) == MENSAGEM_CREDENCIAIS_INVALIDAS


def test_mensagem_igual_para_email_e_senha(auth_repo):
    service = AuthService(auth_repo)
    mensagens = []
    for email, senha in [("teste@mottu.com", "errada"), ("nope@mottu.com", "senha123")]:
        with pytest.raises(CredenciaisInvalidas) as exc:
            service.login(email, senha)
        mensagens.append(str(exc.value))
    assert mensagens[0] == mensagens[1]


def test_email_precisa_ser_exato(auth_repo):
    with pytest.raises(CredenciaisInvalidas):
        AuthService(auth_repo).login("TESTE@mottu.com", "senha123")
