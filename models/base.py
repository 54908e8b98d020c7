from sqlalchemy.orm import declarative_base
from sqlalchemy import event
from core.ids import TYPE_POSTFIX, generate_random_id

# Общий Base для всех моделей
Base = declarative_base()


@event.listens_for(Base, "before_insert", propagate=True)
def assign_random_id(mapper, connection, target):
    # Растущие таблицы (swipes, matches) получают id от БД
    if target.__tablename__ not in TYPE_POSTFIX:
        return
    if getattr(target, "id", None) is None:
        target.id = generate_random_id(target.__tablename__)
