"""Start the daemon registry API under uvicorn.

Host and port come from the `HOST` / `PORT` environment variables
(see `daemon_registry.config`).
"""


def main() -> None:
    """Run the FastAPI app with uvicorn."""
    import uvicorn
    from daemon_registry.config import settings

    uvicorn.run(
        "daemon_registry.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == '__main__':
    main()
