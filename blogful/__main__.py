import uvicorn

from blogful import config


def main() -> None:
    uvicorn.run(
        "blogful.main:app",
        host=config.HOST,
        port=config.PORT,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
