#authentication/domain/entities.py

from dataclasses import dataclass


@dataclass
class CredencialFuncionario:
    id: int
    nome: str
    email: str
    senha_hash: str  # SHA-256 em base64 ou hash bcrypt
    patio_id: int


@dataclass
class PerfilFuncionario:
    id: int
    nome: str
    email: str


@dataclass
class ResultadoLogin:
    token: str
    perfil: PerfilFuncionario


@dataclass
class UsuarioToken:
    funcionario_id: int
    nome: str
    email: str
