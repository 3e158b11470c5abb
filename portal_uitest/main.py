# main.py
import logging
import os
import sys

from portal_uitest.config.settings import Config
from portal_uitest.services.test_service import TestService
from portal_uitest.utils.logger import setup_logging

# --- FastAPI imports ---
from fastapi import FastAPI
from portal_uitest.routes.api import router as api_router
import uvicorn

MODES = ('run', 'rerun', 'api')


def create_app() -> FastAPI:
    app = FastAPI(title='Portal UI Test Runner')
    from fastapi.middleware.cors import CORSMiddleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=os.getenv('CORS_ORIGINS', '*').split(','),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(api_router)
    return app


def run_cli(mode: str) -> int:
    service = TestService(Config)
    try:
        if mode == 'rerun':
            return service.rerun_failed()
        return service.run_tests()
    except KeyboardInterrupt:
        logging.warning('Test run interrupted by user.')
        return 130


def run_api():
    uvicorn.run(create_app(), host=os.getenv('HOST', '0.0.0.0'), port=int(os.getenv('PORT', 8000)))


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    setup_logging()
    mode = os.getenv('MODE', 'run').lower()
    if argv:
        mode = argv[0].lower()
    if mode not in MODES:
        logging.error(f"Unknown mode '{mode}', expected one of {', '.join(MODES)}")
        return 2
    if mode == 'api':
        run_api()
        return 0
    return run_cli(mode)


if __name__ == '__main__':
    sys.exit(main())

# Usage:
#   python -m portal_uitest.main          # run the suite, then generate the report
#   python -m portal_uitest.main rerun    # re-run only the tests that failed last time
#   python -m portal_uitest.main api      # API server mode
#   MODE=rerun python -m portal_uitest.main
