#authentication/domain/exceptions.py

MENSAGEM_CREDENCIAIS_INVALIDAS = "invalid email or password"


class CredenciaisInvalidas(Exception):
    """Email desconhecido ou senha errada; a mensagem é a mesma nos dois casos."""

    def __init__(self):
        super().__init__(MENSAGEM_CREDENCIAIS_INVALIDAS)


class TokenInvalido(Exception):
    pass


class SenhaInvalida(ValueError):
    pass
