"""Fetch the product list from dummyjson.com and print the outcome."""

import asyncio

from http_api_helper import APIHelper, RequestConfig
from http_api_helper.utils import setup_logging


async def main() -> None:
    setup_logging()
    helper = APIHelper(
        RequestConfig(
            base_url="https://dummyjson.com",
            end_point="/products",
            is_release_mode=False,
            print_request=True,
            print_headers=True,
            print_response=False,
            timeout_duration_in_seconds=10,
            service_name="Get Products",
        )
    )
    outcome = await helper.get_api()
    outcome.fold(
        on_failure=lambda error: print(error.to_json()),
        on_success=lambda payload: print(f"{len(payload.get('products', []))} products"),
    )


if __name__ == "__main__":
    asyncio.run(main())
