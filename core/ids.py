import random
from typing import Tuple

# Двухзначные коды сущностей. Таблицы без кода (swipes, matches) берут id из автоинкремента БД
TYPE_POSTFIX = {
    "profiles": 1,
}


def generate_random_id(entity: str, rng: random.Random = random) -> int:
    """Возвращает id до 9 знаков: 7 случайных цифр + 2-значный постфикс (влезает в Integer)."""
    try:
        postfix = TYPE_POSTFIX[entity]
    except KeyError:
        raise ValueError(f"Unknown entity for ID generation: {entity}") from None
    return rng.randint(0, 9_999_999) * 100 + postfix


def canonical_pair(user_a: int, user_b: int) -> Tuple[int, int]:
    """Пара пользователей в каноническом порядке: меньший id первым."""
    if user_a == user_b:
        raise ValueError("A pair needs two different users")
    return (user_a, user_b) if user_a < user_b else (user_b, user_a)
