"""
Entry point for running the services as a module.

    python -m clinicdesk          # booking service
    python -m clinicdesk queue    # walk-in queue service
"""
import sys

import uvicorn

from .core.config import settings


def main(argv=None) -> None:
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] == "queue":
        uvicorn.run("clinicdesk.queue_main:app", host=settings.HOST, port=settings.QUEUE_PORT)
    else:
        uvicorn.run("clinicdesk.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
