"""
Custom Application Exceptions
"""


class RackPickException(Exception):
    """Base exception for the pick list report"""
    pass


class InputParseError(RackPickException):
    """Raised when the order ID list cannot be parsed"""
    pass


class RepositoryError(RackPickException):
    """Raised when a lookup fails at the storage boundary"""
    pass


class RackNotFoundError(RackPickException):
    """Raised when a product has no main rack"""

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Main rack not found for product {product_id}")
