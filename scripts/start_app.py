#!/usr/bin/env python3
"""Serve the API with uvicorn; startup crashes are reported to logfire."""

import logfire
import uvicorn

from ranker.util.observability import bootstrap_process, reported_failure


def main() -> None:
    settings = bootstrap_process()
    with reported_failure("API server crashed during startup"):
        logfire.info("Serving ranker API", port=settings.port, debug=settings.debug)
        uvicorn.run(
            "ranker.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )


if __name__ == "__main__":
    main()
