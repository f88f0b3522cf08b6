# authentication/application/auth_service.py

import logging

from authentication.domain.entities import PerfilFuncionario, ResultadoLogin
from authentication.domain.exceptions import CredenciaisInvalidas
from authentication.infrastructure.auth_repository import AuthRepository
from authentication.infrastructure.token_service import gerar_token
from authentication.utils.password_utils import verificar_senha

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, repo: AuthRepository):
        self.repo = repo

    def login(self, email: str, senha: str) -> ResultadoLogin:
        credencial = self.repo.buscar_credencial_por_email(email)

        # email desconhecido e senha errada caem no mesmo erro
        if credencial is None or not verificar_senha(senha, credencial.senha_hash):
            logger.info(f"🔒 Login recusado para {email}")
            raise CredenciaisInvalidas()

        perfil = PerfilFuncionario(
            id=credencial.id,
            nome=credencial.nome,
            email=credencial.email,
        )
        token = gerar_token(perfil)
        logger.info(f"✅ Login realizado: funcionario_id={perfil.id}")
        return ResultadoLogin(token=token, perfil=perfil)
