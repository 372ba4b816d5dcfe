"""
End-to-end walkthrough of the order API:
health, create, list, delete, list again.

Usage: python -m src.client.run_scenario [base_url]
"""

import asyncio
import json
import logging
import sys
from typing import List, Optional, Tuple

from src.client.orders_client import ApiResponse, DEFAULT_BASE_URL, OrdersApiClient

logger = logging.getLogger(__name__)


def print_response(title: str, response: ApiResponse) -> None:
    print(f"\n=== {title} ===")
    if response.status_code is None:
        print(f"Request failed: {response.error}")
        return
    print(f"Status: {response.status_code}")
    body = response.body if isinstance(response.body, str) else json.dumps(response.body, indent=2)
    print(f"Body:\n{body}")


def extract_id(response: ApiResponse) -> Optional[int]:
    if not response.ok or not isinstance(response.body, dict):
        return None
    order_id = response.body.get("id")
    if isinstance(order_id, int) and not isinstance(order_id, bool):
        return order_id
    return None


async def run_scenario(
    base_url: str = DEFAULT_BASE_URL,
    client: Optional[OrdersApiClient] = None,
) -> List[Tuple[str, ApiResponse]]:
    """Run the walkthrough and return every step with its response."""
    steps: List[Tuple[str, ApiResponse]] = []

    def record(title: str, response: ApiResponse) -> ApiResponse:
        print_response(title, response)
        steps.append((title, response))
        return response

    async with (client or OrdersApiClient(base_url)) as api:
        record("GET /health", await api.health())

        created = record(
            "POST /orders",
            await api.create_order("AAPL", "BUY", quantity=15.2, price=120.5),
        )
        created_id = extract_id(created)

        record("GET /orders?limit=10", await api.list_orders(limit=10))

        if created_id is not None:
            record("DELETE /orders/{id}", await api.cancel_order(created_id))
        else:
            print("\nNo 'id' extracted from create response; skipping delete")

        record("GET /orders?limit=10 (after delete)", await api.list_orders(limit=10))

    return steps


def main(argv: List[str]) -> int:
    logging.basicConfig(level=logging.INFO)
    base_url = argv[1] if len(argv) > 1 else DEFAULT_BASE_URL
    asyncio.run(run_scenario(base_url))
    return 0


def cli() -> int:
    return main(sys.argv)


if __name__ == "__main__":
    sys.exit(cli())
