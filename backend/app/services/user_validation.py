from typing import Optional

NAME_MAX_LENGTH = 100
AGE_MIN = 0
AGE_MAX = 200  # exclusivo


def validate_user(name: str, age: int) -> Optional[str]:
    """
    Valida os campos de um usuário.
    Retorna a mensagem da primeira regra violada, ou None se for válido.
    """
    if name == "":
        return "name is empty"
    if len(name) > NAME_MAX_LENGTH:
        return "name is too long"
    if age < AGE_MIN or age >= AGE_MAX:
        return "age must be between 0 and 200"
    return None
