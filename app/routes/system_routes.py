from fastapi import APIRouter, Depends
from sqlalchemy import inspect
from sqlalchemy.orm import Session

from config import APP_NAME, APP_VERSION
from database.init import get_db
from responses.success import data_response
from responses.error import internal_server_error
from utils.logging import get_logger

router = APIRouter(tags=["System"])
logger = get_logger(__name__)


@router.get("/")
def read_root():
    return data_response({"name": APP_NAME, "version": APP_VERSION})


@router.get("/health")
def health():
    return data_response({"status": "ok"})


@router.get("/test-db")
def test_db(db: Session = Depends(get_db)):
    """Lists the tables visible through the pool, proving the connection works."""
    try:
        tables = inspect(db.get_bind()).get_table_names()
        return data_response(tables)
    except Exception as e:
        logger.exception("test_db_failed")
        return internal_server_error(str(e))
