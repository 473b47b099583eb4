"""
Custom exceptions for the Storefront services
"""


class StorefrontException(Exception):
    """Base exception for all Storefront errors"""
    def __init__(self, message: str, code: str = "STOREFRONT_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class NotFoundError(StorefrontException):
    """Raised (or returned) when an entity with the given id does not exist"""
    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(
            message=f"{entity} not found with id: {entity_id}",
            code="NOT_FOUND"
        )


class InvalidTransitionError(StorefrontException):
    """Raised when an order cannot move out of its current status"""
    def __init__(self, current_status: str, target_status: str = "CANCELLED"):
        self.current_status = current_status
        self.target_status = target_status
        super().__init__(
            message=f"Cannot move order that is already {current_status} to {target_status}",
            code="INVALID_TRANSITION"
        )


class InsufficientStockError(StorefrontException):
    """Raised when a stock adjustment would drive stock below zero"""
    def __init__(self, product_id, available: int = None, requested: int = None):
        self.product_id = product_id
        self.available = available
        self.requested = requested
        super().__init__(
            message=f"Insufficient stock for product: {product_id}",
            code="INSUFFICIENT_STOCK"
        )


class StockLimitError(StorefrontException):
    """Raised when a stock adjustment would overflow the stock column"""
    def __init__(self, product_id, available: int = None, requested: int = None):
        self.product_id = product_id
        self.available = available
        self.requested = requested
        super().__init__(
            message=f"Stock limit exceeded for product: {product_id}",
            code="STOCK_LIMIT_EXCEEDED"
        )
