# routes/api.py
from fastapi import APIRouter, Depends, HTTPException

from portal_uitest.config.settings import Config
from portal_uitest.services.test_service import TestService

router = APIRouter()


def get_test_service():
    return TestService(Config)


@router.post('/run-tests')
def run_tests(service: TestService = Depends(get_test_service)):
    try:
        exit_code = service.run_tests()
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"status": "passed" if exit_code == 0 else "failed", "exit_code": exit_code,
            "failed_tests": service.failed_tests()}


@router.post('/rerun-failed')
def rerun_failed(service: TestService = Depends(get_test_service)):
    titles = service.failed_tests()
    try:
        exit_code = service.rerun_failed()
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"status": "passed" if exit_code == 0 else "failed", "exit_code": exit_code,
            "rerun": titles, "failed_tests": service.failed_tests()}


@router.get('/failed-tests')
def get_failed_tests(service: TestService = Depends(get_test_service)):
    return {"failed_tests": service.failed_tests()}


@router.delete('/failed-tests')
def clear_failed_tests(service: TestService = Depends(get_test_service)):
    service.clear_failed_tests()
    return {"failed_tests": []}


@router.get('/status')
def status():
    return {"status": "ok"}
