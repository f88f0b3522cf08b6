#cadastro/domain/entities.py

from dataclasses import dataclass
from typing import Optional


@dataclass
class Patio:
    id: Optional[int]
    nome: str
    endereco: str


@dataclass
class Funcionario:
    id: Optional[int]
    nome: str
    email: str
    senha_hash: str
    patio_id: int
    # preenchido nas consultas com JOIN
    patio: Optional[Patio] = None


@dataclass
class Gerente:
    id: Optional[int]
    funcionario_id: int
    patio_id: int
    funcionario: Optional[Funcionario] = None
    patio: Optional[Patio] = None
