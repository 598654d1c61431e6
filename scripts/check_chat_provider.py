"""Send a single prompt to the configured chat provider and print the reply."""

import asyncio
import sys

from components.chat.client import ChatCompletionClient
from components.core.config import get_settings
from components.core.errors import KodBankError


async def check_provider() -> bool:
    client = ChatCompletionClient(get_settings())
    try:
        reply = await client.complete(
            [{"role": "user", "content": "Respond with the word SUCCESS"}]
        )
    except KodBankError as e:
        print(f"FAIL! {e.message}")
        return False
    print(f"SUCCESS! Response: {reply}")
    return True


if __name__ == "__main__":
    sys.exit(0 if asyncio.run(check_provider()) else 1)
