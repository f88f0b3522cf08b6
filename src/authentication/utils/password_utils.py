# authentication/utils/password_utils.py

import base64
import hashlib
import hmac

import bcrypt

from authentication.domain.exceptions import SenhaInvalida
from mottu_api.config import get_settings

# bcrypt só considera os primeiros 72 bytes e recusa senhas maiores
LIMITE_BYTES_BCRYPT = 72


def hash_sha256(senha: str) -> str:
    # Sem salt: mesma senha, mesmo hash. Mantido por compatibilidade com a base existente.
    digest = hashlib.sha256(senha.encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii")


def hash_bcrypt(senha: str) -> str:
    senha_bytes = senha.encode("utf-8")
    if len(senha_bytes) > LIMITE_BYTES_BCRYPT:
        raise SenhaInvalida(f"password must be at most {LIMITE_BYTES_BCRYPT} bytes")
    return bcrypt.hashpw(senha_bytes, bcrypt.gensalt()).decode("utf-8")


def gerar_hash_senha(senha: str) -> str:
    if get_settings().SENHA_ALGORITMO == "bcrypt":
        return hash_bcrypt(senha)
    return hash_sha256(senha)


def verificar_senha(senha: str, senha_hash: str) -> bool:
    if senha_hash.startswith("$2"):
        senha_bytes = senha.encode("utf-8")
        # nenhuma senha gravada com bcrypt passa de 72 bytes
        if len(senha_bytes) > LIMITE_BYTES_BCRYPT:
            return False
        return bcrypt.checkpw(senha_bytes, senha_hash.encode("utf-8"))
    return hmac.compare_digest(hash_sha256(senha), senha_hash)
