"""Services Layer: the interaction controller."""
