import uvicorn

from agriwaste.core.settings import settings


def main() -> None:
    uvicorn.run("agriwaste.main:app", host=settings.HOST, port=settings.PORT, reload=False)


if __name__ == "__main__":
    main()
