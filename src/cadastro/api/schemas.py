# cadastro/api/schemas.py
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class _Schema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# ----------------------
# PÁTIOS
# ----------------------

class PatioRequest(_Schema):
    id: Optional[int] = None
    nome: str = Field(..., alias="name", min_length=1, max_length=100)
    endereco: str = Field(..., alias="address", min_length=1, max_length=200)


class PatioResponse(_Schema):
    id: int
    nome: str = Field(..., alias="name")
    endereco: str = Field(..., alias="address")


# ----------------------
# FUNCIONÁRIOS
# ----------------------

class FuncionarioCreateRequest(_Schema):
    nome: str = Field(..., alias="name", min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=100, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    senha: str = Field(..., alias="password", min_length=6, max_length=100)
    patio_id: int = Field(..., alias="yardId")


class FuncionarioUpdateRequest(_Schema):
    id: Optional[int] = None
    nome: str = Field(..., alias="name", min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=100, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    # sem senha, o hash atual é mantido
    senha: Optional[str] = Field(default=None, alias="password", min_length=6, max_length=100)
    patio_id: int = Field(..., alias="yardId")


class FuncionarioResponse(_Schema):
    id: int
    nome: str = Field(..., alias="name")
    email: str
    patio_id: int = Field(..., alias="yardId")
    patio: Optional[PatioResponse] = Field(default=None, alias="yard")


# ----------------------
# GERENTES
# ----------------------

class GerenteRequest(_Schema):
    id: Optional[int] = None
    funcionario_id: int = Field(..., alias="employeeId")
    patio_id: int = Field(..., alias="yardId")


class GerenteResponse(_Schema):
    id: int
    funcionario_id: int = Field(..., alias="employeeId")
    patio_id: int = Field(..., alias="yardId")
    funcionario: Optional[FuncionarioResponse] = Field(default=None, alias="employee")
    patio: Optional[PatioResponse] = Field(default=None, alias="yard")


# ----------------------
# PAGINAÇÃO
# ----------------------

class Paginacao(_Schema):
    pagina_atual: int = Field(..., alias="currentPage")
    tamanho_pagina: int = Field(..., alias="pageSize")
    total_itens: int = Field(..., alias="totalItems")
    total_paginas: int = Field(..., alias="totalPages")


class PaginaResponse(_Schema, Generic[T]):
    data: List[T]
    paginacao: Paginacao = Field(..., alias="pagination")
