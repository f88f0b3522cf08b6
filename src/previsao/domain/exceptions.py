#previsao/domain/exceptions.py


class PrevisaoIndisponivel(Exception):
    """O modelo devolveu um valor não numérico (NaN/Inf)."""


class ModeloNaoTreinado(RuntimeError):
    pass
