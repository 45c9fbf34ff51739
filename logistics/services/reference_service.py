"""
Reference Lookups - Warehouse, Resource and Order by id
"""
from sqlalchemy.orm import Session
from uuid import UUID

from logistics.core.exceptions import NotFound
from logistics.models import Warehouse, Resource, Order

class ReferenceService:
    """Lookup-by-id for the entities the stock ledger points at"""

    @staticmethod
    def get_warehouse(db: Session, warehouse_id: UUID) -> Warehouse:
        warehouse = db.get(Warehouse, warehouse_id)
        if not warehouse:
            raise NotFound("Warehouse", "id", warehouse_id)
        return warehouse

    @staticmethod
    def get_resource(db: Session, resource_id: UUID) -> Resource:
        resource = db.get(Resource, resource_id)
        if not resource:
            raise NotFound("Resource", "id", resource_id)
        return resource

    @staticmethod
    def get_order(db: Session, order_id: UUID) -> Order:
        order = db.get(Order, order_id)
        if not order:
            raise NotFound("Order", "id", order_id)
        return order
