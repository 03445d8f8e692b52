"""Domain entity → DTO conversions shared by the application services."""

from typing import List, Optional

from ordering.application.dtos import (
    OrderDTO,
    OrderItemDTO,
    OrderRevisionDTO,
    OrderSummaryDTO,
    PartyDTO,
    ProductDTO,
    StockReportDTO,
    StockReportItemDTO,
)
from ordering.domain.entities import (
    OrderDetail,
    OrderHeader,
    OrderItem,
    OrderRevision,
    Product,
    StoreStockReport,
)


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        weight=product.weight,
        price=product.price,
    )


def party_to_dto(party) -> PartyDTO:
    return PartyDTO(id=party.id, name=party.name, email=party.email)


def item_to_dto(item: OrderItem) -> OrderItemDTO:
    return OrderItemDTO(
        product=product_to_dto(item.product),
        quantity=item.quantity,
        unit_price=item.unit_price,
        line_total=item.line_total,
    )


def revision_to_dto(revision: OrderRevision) -> OrderRevisionDTO:
    return OrderRevisionDTO(
        id=revision.id,
        order_id=revision.order_id,
        date=revision.date,
        status=revision.status,
        note=revision.note,
    )


def summary_to_dto(order: OrderHeader) -> OrderSummaryDTO:
    return OrderSummaryDTO(
        id=order.id,
        date=order.date,
        status=order.status,
        warehouse=party_to_dto(order.warehouse),
        provider=party_to_dto(order.provider),
    )


def order_to_dto(
    order: OrderDetail,
    revisions: Optional[List[OrderRevision]] = None,
) -> OrderDTO:
    """Transform an order detail (and optionally its history) to OrderDTO."""
    return OrderDTO(
        id=order.id,
        date=order.date,
        status=order.status,
        warehouse=party_to_dto(order.warehouse),
        provider=party_to_dto(order.provider),
        items=[item_to_dto(item) for item in order.items],
        total_price=order.calculate_total_price(),
        revisions=(
            [revision_to_dto(revision) for revision in revisions]
            if revisions is not None
            else None
        ),
    )


def stock_report_to_dto(report: StoreStockReport) -> StockReportDTO:
    return StockReportDTO(
        id=report.id,
        store_id=report.store.id,
        date=report.date,
        items=[
            StockReportItemDTO(product=product_to_dto(item.product), quantity=item.quantity)
            for item in report.items
        ],
    )
