import os

# precisa vir antes de importar a aplicação (get_settings é cacheado)
os.environ["AMBIENTE"] = "teste"
os.environ["JWT_SECRET_KEY"] = "chave-de-teste-mottu-api-0123456789abcdef"
os.environ["SENHA_ALGORITMO"] = "sha256"

import pytest
from fastapi.testclient import TestClient

from authentication.api.routes import get_auth_service
from authentication.application.auth_service import AuthService
from authentication.domain.entities import CredencialFuncionario, PerfilFuncionario
from authentication.infrastructure.token_service import gerar_token
from authentication.utils.password_utils import gerar_hash_senha
from cadastro.api.dependencies import (
    get_funcionario_repository,
    get_gerente_repository,
    get_patio_repository,
)
from cadastro.domain.exceptions import ConflitoDeIntegridade, RegistroNaoEncontrado
from mottu_api.main import app


class FakeAuthRepository:
    def __init__(self, credenciais):
        self._por_email = {c.email: c for c in credenciais}

    def buscar_credencial_por_email(self, email):
        return self._por_email.get(email)


class FakeRepository:
    """Repositório em memória com a mesma interface dos repositórios psycopg2."""

    def __init__(self, unicos=()):
        self.registros = {}
        self.proximo_id = 1
        self.unicos = unicos
        self.bloqueados = set()

    def _checar_unicos(self, entidade):
        for campo in self.unicos:
            for outro in self.registros.values():
                if outro.id != entidade.id and getattr(outro, campo) == getattr(entidade, campo):
                    raise ConflitoDeIntegridade(f"duplicate {campo}")

    def listar(self, offset, limite):
        todos = [self.registros[k] for k in sorted(self.registros)]
        return todos[offset:offset + limite], len(todos)

    def buscar_por_id(self, registro_id):
        return self.registros.get(registro_id)

    def criar(self, entidade):
        self._checar_unicos(entidade)
        entidade.id = self.proximo_id
        self.proximo_id += 1
        self.registros[entidade.id] = entidade
        return entidade

    def atualizar(self, entidade):
        if entidade.id not in self.registros:
            raise RegistroNaoEncontrado(str(entidade.id))
        self._checar_unicos(entidade)
        self.registros[entidade.id] = entidade

    def remover(self, registro_id):
        if registro_id not in self.registros:
            raise RegistroNaoEncontrado(str(registro_id))
        if registro_id in self.bloqueados:
            raise ConflitoDeIntegridade("restrict")
        del self.registros[registro_id]


@pytest.fixture
def credencial():
    return CredencialFuncionario(
        id=1,
        nome="Teste User",
        email="teste@mottu.com",
        senha_hash=gerar_hash_senha("senha123"),
        patio_id=1,
    )


@pytest.fixture
def auth_repo(credencial):
    return FakeAuthRepository([credencial])


@pytest.fixture
def repos():
    return {
        "patios": FakeRepository(),
        "funcionarios": FakeRepository(unicos=("email",)),
        "gerentes": FakeRepository(unicos=("funcionario_id", "patio_id")),
    }


@pytest.fixture
def client(auth_repo, repos):
    app.dependency_overrides[get_auth_service] = lambda: AuthService(auth_repo)
    app.dependency_overrides[get_patio_repository] = lambda: repos["patios"]
    app.dependency_overrides[get_funcionario_repository] = lambda: repos["funcionarios"]
    app.dependency_overrides[get_gerente_repository] = lambda: repos["gerentes"]
    # o "with" dispara o lifespan (treino do modelo)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def token_header(credencial):
    perfil = PerfilFuncionario(id=credencial.id, nome=credencial.nome, email=credencial.email)
    return {"Authorization": f"Bearer {gerar_token(perfil)}"}
