from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.init import get_db
from schemas.property_schema import RoomCreate, RoomResponse, RoomUpdate
from services.room_service import RoomService
from responses.success import created_response, data_response, success_response
from responses.error import error_response, internal_server_error
from utils.exceptions import AppError
from utils.logging import get_logger

router = APIRouter(prefix="/Room", tags=["Room"])
logger = get_logger(__name__)

room_service = RoomService()


@router.get("")
def get_rooms(db: Session = Depends(get_db)):
    try:
        rooms = room_service.get_all(db)
        return data_response([RoomResponse.model_validate(r) for r in rooms])
    except Exception:
        logger.exception("fetch_rooms_failed")
        return internal_server_error("Failed to fetch rooms")


@router.get("/property/{property_id}")
def get_rooms_by_property(property_id: int, db: Session = Depends(get_db)):
    try:
        rooms = room_service.get_rooms_by_property(db, property_id)
        return data_response([RoomResponse.model_validate(r) for r in rooms])
    except Exception:
        logger.exception("fetch_rooms_failed", property_id=property_id)
        return internal_server_error("Failed to fetch rooms")


@router.post("")
def create_room(payload: RoomCreate, db: Session = Depends(get_db)):
    try:
        room = room_service.create_room(db, payload)
        return created_response("Room added", RoomID=room.RoomID)
    except AppError as e:
        return error_response(e)
    except Exception:
        logger.exception("create_room_failed")
        return internal_server_error("Failed to add room")


@router.put("/{room_id}")
def update_room(room_id: int, payload: RoomUpdate, db: Session = Depends(get_db)):
    try:
        room_service.update_room(db, room_id, payload)
        return success_response("Room updated successfully")
    except AppError as e:
        return error_response(e)
    except Exception:
        logger.exception("update_room_failed", room_id=room_id)
        return internal_server_error("Failed to update room")


@router.delete("/{room_id}")
def delete_room(room_id: int, db: Session = Depends(get_db)):
    try:
        room_service.delete_room(db, room_id)
        return success_response("Room deleted successfully")
    except AppError as e:
        return error_response(e)
    except Exception:
        logger.exception("delete_room_failed", room_id=room_id)
        return internal_server_error("Failed to delete room")
