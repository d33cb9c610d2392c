from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Numeric, Enum, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from overseas.core.database import Base
from overseas.core.constants import PaymentGatewayEnum, PaymentStatusEnum

class CoursePayment(Base):
    __tablename__ = "course_payments"

    id = Column(String, primary_key=True) # pay_<timestamp>_<random>
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False, index=True)
    amount = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    currency = Column(String(3), nullable=False)
    gateway = Column(Enum(PaymentGatewayEnum), nullable=False)
    status = Column(Enum(PaymentStatusEnum), nullable=False, default=PaymentStatusEnum.PENDING)
    gateway_order_id = Column(String, index=True, nullable=True)
    gateway_payment_id = Column(String, index=True, nullable=True)
    gateway_response = Column(JSON, nullable=True)
    failure_reason = Column(Text, nullable=True)
    paid_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    user = relationship("User", back_populates="payments")
    course = relationship("Course", back_populates="payments")
