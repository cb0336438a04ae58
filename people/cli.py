from people.config import config
from people.logging_config import configure_logging


def main():
    """Entry point for api command for production use case."""
    import uvicorn

    configure_logging()
    uvicorn.run(
        "people.api.app:app",
        host=config.get_host(),
        port=config.get_port(),
        log_level=config.get_log_level().lower(),
    )


def dev():
    import subprocess

    configure_logging()
    subprocess.run(
        [
            "fastapi",
            "run",
            "--host",
            config.get_host(),
            "--port",
            str(config.get_port()),
            "people/api/app.py",
            "--reload",
        ]
    )


if __name__ == "__main__":
    main()
