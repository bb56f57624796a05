# -*- coding: utf-8 -*-
"""
init_db.py: утилита для инициализации таблиц сервиса бронирования.

Режимы:
- python init_db.py --create    → создать НЕДОСТАЮЩИЕ таблицы (без потери данных)
- python init_db.py --reset     → удалить таблицы и создать заново (ВНИМАНИЕ: пользователи, токены и брони будут удалены)

Работает как с SQLite, так и с PostgreSQL.
"""

import argparse
from sqlalchemy import text

from app import create_app           # фабрика приложения
from extensions import db

# Импорт моделей, чтобы SQLAlchemy «знал» о таблицах
import models  # noqa: F401
import modules.locations.models  # noqa: F401
import modules.reservations.models  # noqa: F401

TABLES = ["records", "tokens", "locations", "users"]


def drop_tables():
    """Удаляем таблицы сервиса. Внешних ключей нет, порядок не важен."""
    for name in TABLES:
        db.session.execute(text(f"DROP TABLE IF EXISTS {name}"))
    db.session.commit()


def create_missing_tables():
    """Создаёт недостающие таблицы по текущим моделям (без ALTER уже существующих)."""
    db.create_all()
    db.session.commit()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Init booking DB tables")
    grp = parser.add_mutually_exclusive_group(required=True)
    grp.add_argument("--create", action="store_true", help="создать недостающие таблицы (без удаления)")
    grp.add_argument("--reset", action="store_true", help="удалить таблицы и создать заново (данные будут потеряны)")

    args = parser.parse_args(argv)

    app = create_app()
    with app.app_context():
        if args.reset:
            print("→ Dropping tables …")
            drop_tables()
            print("→ Creating tables …")
            create_missing_tables()
            print("✔ Готово: таблицы пересозданы с нуля.")
        elif args.create:
            print("→ Creating missing tables …")
            create_missing_tables()
            print("✔ Готово: недостающие таблицы созданы (существующие не трогались).")


if __name__ == "__main__":
    main()
