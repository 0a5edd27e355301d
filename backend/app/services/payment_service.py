"""
Payment service with business logic.
A completed payment linked to a purchase order settles that order.
"""

import logging
from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.services.base_service import BaseService
from app.services.activity_service import ActivityService
from app.db.repositories.payment_repository import PaymentRepository
from app.db.repositories.purchase_order_repository import PurchaseOrderRepository
from app.db.repositories.project_repository import ProjectRepository
from app.db.repositories.staff_repository import StaffRepository
from app.db.repositories.subcontractor_repository import SubcontractorRepository
from app.db.repositories.supplier_repository import SupplierRepository
from app.models.payment import Payment, PaymentStatus, RecipientType
from app.models.purchase_order import PurchaseOrderStatus
from app.schemas.payment import PaymentCreate, PaymentUpdate, PaymentResponse

logger = logging.getLogger(__name__)


class PaymentService(BaseService):
    """Service for payment operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.payment_repo = PaymentRepository(session)
        self.purchase_order_repo = PurchaseOrderRepository(session)
        self.project_repo = ProjectRepository(session)
        self.activities = ActivityService(session)
        self.recipient_repos = {
            RecipientType.STAFF: StaffRepository(session),
            RecipientType.SUBCONTRACTOR: SubcontractorRepository(session),
            RecipientType.SUPPLIER: SupplierRepository(session),
        }

    async def _validate(self, values: dict) -> None:
        """Reject dangling references."""
        recipient_type = values.get("recipient_type")
        if recipient_type is not None:
            if not await self.recipient_repos[recipient_type].exists(values["recipient_id"]):
                raise ValueError(f"{recipient_type.value.capitalize()} recipient not found")
        if values.get("project_id") is not None and not await self.project_repo.exists(values["project_id"]):
            raise ValueError("Project not found")
        if values.get("purchase_order_id") is not None and not await self.purchase_order_repo.exists(
            values["purchase_order_id"]
        ):
            raise ValueError("Purchase order not found")

    async def _settle_purchase_order(self, payment: Payment) -> None:
        """Flip the linked purchase order to paid once the payment completes."""
        if payment.status != PaymentStatus.COMPLETED or payment.purchase_order_id is None:
            return
        order = await self.purchase_order_repo.get(payment.purchase_order_id)
        if order and order.status != PurchaseOrderStatus.PAID:
            await self.purchase_order_repo.update(order.id, status=PurchaseOrderStatus.PAID)
            logger.info(f"Purchase order {order.order_number} settled by payment {payment.id}")

    async def create_payment(self, payment_data: PaymentCreate) -> PaymentResponse:
        """
        Record a payment.

        Raises:
            ValueError: unknown recipient, project or purchase order
        """
        payment_dict = payment_data.model_dump()
        await self._validate(payment_dict)

        payment = await self.payment_repo.create(**payment_dict)
        await self._settle_purchase_order(payment)
        await self.activities.record(
            "payment_created",
            f"Payment of ${payment.amount:,.2f} to {payment.recipient_type.value} recorded",
            project_id=payment.project_id,
        )
        await self.commit_and_refresh(payment)
        return PaymentResponse.model_validate(payment)

    async def get_payment(self, payment_id: UUID) -> Optional[PaymentResponse]:
        """Get payment by ID."""
        payment = await self.payment_repo.get(payment_id)
        if not payment:
            return None
        return PaymentResponse.model_validate(payment)

    async def list_payments(
        self,
        skip: int = 0,
        limit: int = 100,
        recipient_type: Optional[RecipientType] = None,
        recipient_id: Optional[UUID] = None,
        status: Optional[PaymentStatus] = None,
        project_id: Optional[UUID] = None,
    ) -> tuple[List[PaymentResponse], int]:
        """List payments with optional filters."""
        filters = {
            "recipient_type": recipient_type,
            "recipient_id": recipient_id,
            "status": status,
            "project_id": project_id,
        }
        payments = await self.payment_repo.list(skip=skip, limit=limit, **filters)
        total = await self.payment_repo.count(**filters)
        return [PaymentResponse.model_validate(p) for p in payments], total

    async def update_payment(
        self,
        payment_id: UUID,
        payment_data: PaymentUpdate,
    ) -> Optional[PaymentResponse]:
        """Update a payment."""
        payment = await self.payment_repo.get(payment_id)
        if not payment:
            return None

        update_dict = payment_data.model_dump(exclude_unset=True)
        await self._validate(update_dict)
        updated = await self.payment_repo.update(payment_id, **update_dict)
        await self._settle_purchase_order(updated)
        await self.activities.record(
            "payment_updated",
            f"Payment to {updated.recipient_type.value} updated ({updated.status.value})",
            project_id=updated.project_id,
        )
        await self.commit_and_refresh(updated)
        return PaymentResponse.model_validate(updated)

    async def delete_payment(self, payment_id: UUID) -> bool:
        """Delete a payment."""
        payment = await self.payment_repo.get(payment_id)
        if not payment:
            return False

        project_id = payment.project_id
        deleted = await self.payment_repo.delete(payment_id)
        await self.activities.record("payment_deleted", "Payment deleted", project_id=project_id)
        await self.session.commit()
        return deleted
