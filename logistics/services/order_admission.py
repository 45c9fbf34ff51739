"""
Order-Item Admission - checks a requested quantity against cross-warehouse availability

The check is advisory. Nothing is reserved and no lock is held between
admission and the later EXIT adjustment, so two concurrent requests can both
be admitted against the same stock. The loser finds out when consumption
raises InsufficientStock, and order intake treats that as a normal rejection.
"""
from sqlalchemy.orm import Session
from uuid import UUID
import logging

from logistics.core.exceptions import InvalidArgument, InsufficientStock
from logistics.models import OrderItem
from .availability import AvailabilityAggregator
from .reference_service import ReferenceService

logger = logging.getLogger(__name__)

class OrderItemAdmissionService:
    """Fast rejection of order lines that cannot be fulfilled from current stock"""

    @staticmethod
    def validate(db: Session, resource_id: UUID, requested_quantity: int) -> int:
        """Return the observed availability, or raise if the request exceeds it"""
        if requested_quantity is None or requested_quantity <= 0:
            raise InvalidArgument(
                f"Requested quantity must be positive. Provided: {requested_quantity}"
            )
        
        available = AvailabilityAggregator.total_available(db, resource_id)
        if requested_quantity > available:
            logger.warning(
                f"Order item rejected for resource {resource_id}: "
                f"requested {requested_quantity}, available {available}"
            )
            raise InsufficientStock(
                f"Not enough stock available for the requested quantity. "
                f"Available: {available}, requested: {requested_quantity}",
                available=available,
                requested=requested_quantity
            )
        return available

    @staticmethod
    def admit(db: Session, order_id: UUID, resource_id: UUID, requested_quantity: int) -> OrderItem:
        """Validate, then create the order item"""
        ReferenceService.get_order(db, order_id)
        ReferenceService.get_resource(db, resource_id)
        OrderItemAdmissionService.validate(db, resource_id, requested_quantity)
        
        item = OrderItem(
            order_id=order_id,
            resource_id=resource_id,
            quantity=requested_quantity
        )
        db.add(item)
        db.commit()
        db.refresh(item)
        
        logger.info(f"Order item {item.id} admitted: {requested_quantity} of resource {resource_id}")
        return item
