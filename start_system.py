#!/usr/bin/env python3
"""
Скрипт для запуска Selaski API
"""

import sys
import argparse
from utils.startup_checks import check_env_file, check_database


def run_migration():
    """Создание таблиц базы данных"""
    print("🔄 Инициализация базы данных...")
    if check_database():
        print("✅ База данных инициализирована")
        return True
    return False

def run_main_app():
    """Запуск основного приложения"""
    from selaski.main import run

    print("🚀 Запуск основного приложения...")
    try:
        run()
    except KeyboardInterrupt:
        print("\n⏹️ Приложение остановлено")

def main(argv=None):
    parser = argparse.ArgumentParser(description="Selaski API - Управление сервисом")
    parser.add_argument("command", choices=["init", "start"],
                       help="Команда для выполнения")

    args = parser.parse_args(argv)

    print("🤖 Selaski API - пользователи и сообщения")
    print("=" * 50)

    check_env_file()

    if args.command == "init":
        if not run_migration():
            return 1
        print("\n✅ Система готова к работе!")
        print("\n📝 Следующий шаг:")
        print("python start_system.py start  # Запустить сервис")
        return 0

    elif args.command == "start":
        if not run_migration():
            return 1
        run_main_app()
        return 0

if __name__ == "__main__":
    sys.exit(main())
