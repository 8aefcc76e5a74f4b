from sqlalchemy import Column, Integer, String, Numeric, Date, DateTime
from datetime import datetime
from app.core.database import Base


class Deal(Base):
    __tablename__ = "deals"

    id = Column(Integer, primary_key=True, index=True)
    store = Column(String, nullable=False, index=True)
    product_name = Column(String, nullable=False)
    category = Column(String, index=True)

    sale_price = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    regular_price = Column(Numeric(10, 2, asdecimal=False))
    unit = Column(String)

    valid_from = Column(Date, nullable=False, index=True)
    valid_to = Column(Date, nullable=False, index=True)

    created_at = Column(DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f"<Deal(id={self.id}, store={self.store}, product={self.product_name})>"
