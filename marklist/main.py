# marklist/main.py
# Console-script entry point

from .cli.app import app


def main() -> None:
    app()


if __name__ == "__main__":
    main()
