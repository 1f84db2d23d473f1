from .picking import LineItem, PickEntry, Product, Rack

__all__ = ["LineItem", "PickEntry", "Product", "Rack"]
