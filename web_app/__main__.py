import uvicorn # type: ignore

from marshians_fn import config


def main() -> None:
    uvicorn.run("web_app.app:app", host=config.HOST, port=config.PORT)


if __name__ == "__main__":  # pragma: no cover
    main()
