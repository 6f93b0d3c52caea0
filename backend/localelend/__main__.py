import uvicorn

from localelend.settings import settings


def main() -> None:
	uvicorn.run(
		"localelend.main:app",
		host=settings.api_host,
		port=settings.api_port,
		reload=settings.is_dev(),
		log_config=None,
	)


if __name__ == "__main__":
	main()
