"""
Fallback payloads returned by the gateway when a downstream service is
unavailable.
"""
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Fallback:
    service: str
    display_name: str

    def payload(self) -> Dict[str, str]:
        return {
            "status": "error",
            "message": f"{self.display_name} is temporarily unavailable. Please try again later.",
            "service": self.service,
        }


FALLBACKS = {
    "products": Fallback(service="product-service", display_name="Product Service"),
    "orders": Fallback(service="order-service", display_name="Order Service"),
}
