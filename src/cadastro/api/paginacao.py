# cadastro/api/paginacao.py

import math

from fastapi import Query

from cadastro.api.schemas import Paginacao


class ParametrosPaginacao:
    def __init__(
        self,
        page: int = Query(1, ge=1, description="Número da página"),
        page_size: int = Query(10, ge=1, le=100, alias="pageSize", description="Itens por página"),
    ):
        self.pagina = page
        self.tamanho = page_size

    @property
    def offset(self) -> int:
        return (self.pagina - 1) * self.tamanho

    def montar(self, total_itens: int) -> Paginacao:
        return Paginacao(
            pagina_atual=self.pagina,
            tamanho_pagina=self.tamanho,
            total_itens=total_itens,
            total_paginas=math.ceil(total_itens / self.tamanho),
        )
