from sqlalchemy.orm import Session
from app.model.user import User

# Cada função executa um único statement parametrizado.


def create_user(db: Session, name: str, age: int) -> User:
    db_user = User(name=name, age=age)
    db.add(db_user)
    db.flush()
    # o id vem do INSERT; após o commit o objeto expira, então guardamos antes
    user_id = db_user.id
    db.commit()
    return User(id=user_id, name=name, age=age)


def list_users(db: Session):
    return db.query(User).order_by(User.id).all()


def get_user(db: Session, user_id: int) -> User:
    # .one() levanta NoResultFound quando o id não existe
    return db.query(User).filter(User.id == user_id).one()


def update_user(db: Session, user_id: int, name: str, age: int) -> int:
    """Atualiza name/age do usuário e retorna o número de linhas afetadas."""
    rows = (
        db.query(User)
        .filter(User.id == user_id)
        .update({User.name: name, User.age: age}, synchronize_session=False)
    )
    db.commit()
    return rows


def delete_user(db: Session, user_id: int) -> int:
    """Remove o usuário e retorna o número de linhas afetadas."""
    rows = (
        db.query(User)
        .filter(User.id == user_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return rows
