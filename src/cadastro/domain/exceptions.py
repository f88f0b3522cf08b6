#cadastro/domain/exceptions.py


class RegistroNaoEncontrado(Exception):
    pass


class ConflitoDeIntegridade(Exception):
    """Violação de chave única ou estrangeira no banco."""
