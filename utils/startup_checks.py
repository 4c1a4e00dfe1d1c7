from pathlib import Path


def check_env_file() -> bool:
    """Report whether a .env file exists; every setting has a default, so it is optional."""
    env_path = Path(".env")
    if not env_path.exists():
        print("ℹ️ Файл .env не найден, используются значения по умолчанию.")
        print("\n📝 Переменные, которые можно задать в .env:")
        print("PORT=3000")
        print("HOST=0.0.0.0")
        print("DATABASE_URL=sqlite:///./data/selaski.sqlite")
        print("LOG_LEVEL=INFO")
        return False
    return True


def check_database() -> bool:
    """Ensure tables exist, create them if needed."""
    from selaski.core.database import init_db

    try:
        init_db()
    except Exception as e:
        print(f"❌ Ошибка инициализации базы данных: {e}")
        return False
    return True
