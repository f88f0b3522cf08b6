# authentication/manage_users.py

import argparse
import sys

import psycopg2

from authentication.domain.exceptions import SenhaInvalida
from authentication.utils.password_utils import gerar_hash_senha
from mottu_api.database_connection import conectar_banco, fechar_conexao
from mottu_api.logging_factory import get_logger

logger = get_logger("manage_users")


def criar_funcionario(nome: str, email: str, senha: str, patio_id: int) -> int | None:
    senha_hash = gerar_hash_senha(senha)

    conn = conectar_banco()
    if conn is None:
        return None

    cur = conn.cursor()
    try:
        cur.execute(
            """
            INSERT INTO funcionarios (nome, email, senha, patio_id)
            VALUES (%s, %s, %s, %s)
            RETURNING id
            """,
            (nome, email, senha_hash, patio_id),
        )
        funcionario_id = cur.fetchone()[0]
        conn.commit()
        logger.info(f"✅ Funcionário {nome} criado com sucesso. ID={funcionario_id}")
        return funcionario_id
    except psycopg2.Error as e:
        conn.rollback()
        logger.error(f"❌ Erro ao criar funcionário: {e}")
        return None
    finally:
        cur.close()
        fechar_conexao(conn)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Gerenciamento de credenciais de funcionários Mottu")
    subparsers = parser.add_subparsers(dest="command")

    hash_parser = subparsers.add_parser("hash-password", help="Gerar hash de uma senha")
    hash_parser.add_argument("--senha", required=True, help="Senha em texto puro")

    user_parser = subparsers.add_parser("create-user", help="Criar novo funcionário")
    user_parser.add_argument("--nome", required=True, help="Nome do funcionário")
    user_parser.add_argument("--email", required=True, help="Email do funcionário")
    user_parser.add_argument("--senha", required=True, help="Senha do funcionário")
    user_parser.add_argument("--patio_id", required=True, type=int, help="ID do pátio")

    args = parser.parse_args(argv)

    try:
        if args.command == "hash-password":
            print(gerar_hash_senha(args.senha))
            return 0

        if args.command == "create-user":
            if len(args.senha) < 6:
                logger.error("❌ A senha deve ter pelo menos 6 caracteres")
                return 1
            return 0 if criar_funcionario(args.nome, args.email, args.senha, args.patio_id) else 1
    except SenhaInvalida as e:
        logger.error(f"❌ Senha inválida: {e}")
        return 1

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
