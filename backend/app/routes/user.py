import logging
from typing import List
from fastapi import APIRouter, Depends, Form, HTTPException, Response
from sqlalchemy.exc import NoResultFound, SQLAlchemyError
from sqlalchemy.orm import Session
from app.config import settings
from app.data.database import get_db
from app.repository import repository_user
from app.schema.user import UserResponse
from app.services.user_validation import validate_user
from app.utils.params import parse_int

logger = logging.getLogger(__name__)

router = APIRouter()


def _input_error(e: ValueError) -> HTTPException:
    # por padrão um parse inválido responde 500
    status = 400 if settings.STRICT_INPUT_ERRORS else 500
    return HTTPException(status_code=status, detail=str(e))


def _store_error(db: Session, e: SQLAlchemyError) -> HTTPException:
    db.rollback()
    logger.error("Erro no banco: %s", e)
    return HTTPException(status_code=500, detail=str(e))


@router.post("", response_model=UserResponse)
def create_user(
    name: str = Form(""),
    age: str = Form(""),
    db: Session = Depends(get_db)
):
    # idade inválida vira 0, sem erro
    try:
        age_value = parse_int(age)
    except ValueError:
        age_value = 0

    if settings.VALIDATE_ON_CREATE:
        message = validate_user(name, age_value)
        if message:
            raise HTTPException(status_code=400, detail=message)

    try:
        return repository_user.create_user(db, name, age_value)
    except SQLAlchemyError as e:
        raise _store_error(db, e)


@router.get("", response_model=List[UserResponse])
def read_users(db: Session = Depends(get_db)):
    try:
        return repository_user.list_users(db)
    except SQLAlchemyError as e:
        raise _store_error(db, e)


@router.get("/{user_id}", response_model=UserResponse)
def read_user(user_id: str, db: Session = Depends(get_db)):
    try:
        user_id_value = parse_int(user_id)
    except ValueError as e:
        raise _input_error(e)

    try:
        return repository_user.get_user(db, user_id_value)
    except NoResultFound as e:
        if settings.STRICT_INPUT_ERRORS:
            raise HTTPException(status_code=404, detail="Not Found")
        raise _store_error(db, e)
    except SQLAlchemyError as e:
        raise _store_error(db, e)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: str,
    name: str = Form(""),
    age: str = Form(""),
    db: Session = Depends(get_db)
):
    try:
        user_id_value = parse_int(user_id)
        age_value = parse_int(age)
    except ValueError as e:
        raise _input_error(e)

    message = validate_user(name, age_value)
    if message:
        raise HTTPException(status_code=400, detail=message)

    try:
        rows = repository_user.update_user(db, user_id_value, name, age_value)
    except SQLAlchemyError as e:
        raise _store_error(db, e)

    if rows == 0:
        raise HTTPException(status_code=404, detail="Not Found")

    # resposta montada com os próprios valores da requisição
    return UserResponse(id=user_id_value, name=name, age=age_value)


@router.delete("/{user_id}", status_code=204, response_class=Response)
def delete_user(user_id: str, db: Session = Depends(get_db)):
    try:
        user_id_value = parse_int(user_id)
    except ValueError as e:
        raise _input_error(e)

    try:
        rows = repository_user.delete_user(db, user_id_value)
    except SQLAlchemyError as e:
        raise _store_error(db, e)

    if rows == 0:
        raise HTTPException(status_code=404, detail="Not Found")

    return Response(status_code=204)
