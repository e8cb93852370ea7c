"""Utility script to create an initial user, optionally with a post and a realm."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from realmhub.application.use_cases.users.create_user import create_user
from realmhub.domain.entities import Post, Realm
from realmhub.infrastructure.database import SessionLocal, initialize_database
from realmhub.infrastructure.repositories import PostRepository, RealmRepository


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Create an initial user for the RealmHub API application.",
    )
    parser.add_argument(
        "--username",
        default="admin",
        help="Nombre de usuario (por defecto: admin)",
    )
    parser.add_argument(
        "--email",
        default="admin@example.com",
        help="Correo electrónico del usuario (por defecto: admin@example.com)",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Contraseña del usuario. Si no se proporciona se solicitará interactivamente.",
    )
    parser.add_argument(
        "--post-title",
        default=None,
        help="Crea además una publicación con este título (opcional)",
    )
    parser.add_argument(
        "--realm-name",
        default=None,
        help="Crea además un reino con este nombre (opcional)",
    )
    return parser.parse_args()


def main() -> None:
    """Create a user using the provided command line arguments."""

    args = parse_args()

    password = args.password or getpass("Ingrese la contraseña del usuario: ")
    if not password:
        raise SystemExit("No se proporcionó una contraseña válida.")

    initialize_database()

    session = SessionLocal()
    try:
        user = create_user(
            session,
            username=args.username,
            email=args.email,
            password=password,
        )
        post = None
        if args.post_title:
            post = PostRepository(session).create(
                Post(id=None, author_id=user.id, title=args.post_title, content="")
            )
        realm = None
        if args.realm_name:
            realm = RealmRepository(session).create(
                Realm(id=None, name=args.realm_name, creator_id=user.id)
            )
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"No se pudo crear el usuario: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Error al guardar en la base de datos: {exc}") from exc
    else:
        print(
            "Usuario creado exitosamente:\n"
            f"  ID: {user.id}\n"
            f"  Usuario: {user.username}\n"
            f"  Email: {user.email}"
        )
        if post is not None:
            print(f"  Publicación: {post.id} ({post.title})")
        if realm is not None:
            print(f"  Reino: {realm.id} ({realm.name})")
    finally:
        session.close()


if __name__ == "__main__":
    main()
