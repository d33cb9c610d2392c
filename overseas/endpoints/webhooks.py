from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from overseas.core.constants import PaymentGatewayEnum
from overseas.schemas.payment import WebhookAck
from overseas.services.payments.registry import GatewayRegistry, get_gateway_registry
from overseas.services.purchase import purchase_service
from overseas.utils import deps

router = APIRouter()


async def _handle(request: Request, db: Session, registry: GatewayRegistry, gateway: PaymentGatewayEnum, header: str):
    payload = await request.body()
    return await purchase_service.handle_webhook(
        db,
        gateway_name=gateway,
        payload=payload,
        signature=request.headers.get(header),
        registry=registry,
    )


@router.post("/stripe", response_model=WebhookAck)
async def stripe_webhook(
    request: Request,
    db: Session = Depends(deps.get_db),
    registry: GatewayRegistry = Depends(get_gateway_registry)
):
    return await _handle(request, db, registry, PaymentGatewayEnum.STRIPE, "stripe-signature")


@router.post("/razorpay", response_model=WebhookAck)
async def razorpay_webhook(
    request: Request,
    db: Session = Depends(deps.get_db),
    registry: GatewayRegistry = Depends(get_gateway_registry)
):
    return await _handle(request, db, registry, PaymentGatewayEnum.RAZORPAY, "X-Razorpay-Signature")
