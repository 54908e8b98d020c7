# models/swipe.py
from sqlalchemy import Column, Integer, DateTime, ForeignKey, Enum, Index
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from .base import Base


class Swipe(Base):
    __tablename__ = "swipes"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    actor_id = Column(Integer, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    target_id = Column(Integer, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    action = Column(Enum("like", "pass", name="swipe_action"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # История свайпов не дедуплицируется: по одной паре может быть несколько строк
    __table_args__ = (
        Index("ix_swipes_actor_target_action", "actor_id", "target_id", "action"),
    )

    actor = relationship("Profile", foreign_keys=[actor_id])
    target = relationship("Profile", foreign_keys=[target_id])

    def __repr__(self):
        return f"<Swipe {self.actor_id}→{self.target_id} {self.action}>"
