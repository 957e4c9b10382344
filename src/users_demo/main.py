"""Command-line entry point running the users demo sequence."""

from users_demo.app_logging import configure_logging
from users_demo.config import Settings
from users_demo.containers import build_container


def main() -> None:
    """Run the demo sequence once and print the combined response text."""
    settings = Settings()
    configure_logging(settings.log_level)
    container = build_container(settings)
    try:
        print(container.user_client.run_demo_sequence())
    finally:
        container.close_resources()


if __name__ == "__main__":
    main()
